# lambda_function.py  (handler: lambda_function.lambda_handler)
"""
DELETE /game/{cohort}/{id}

Deletes one of the caller's games. `id` arrives base64 encoded because game
ids contain slashes. The deleted game is returned as the response body.
"""
import base64
from functools import lru_cache

from dojo_common.errors import ApiError, wrap
from dojo_common.games import GameRepository
from dojo_common.utils import log, success, failure, get_user_info, get_path_param, get_request_id


def _decode_id(raw: str) -> str:
    try:
        b = base64.b64decode(raw, validate=True)
    except ValueError as e:
        raise wrap(400, "Invalid request: id is not base64 encoded", "", e) from e
    try:
        return b.decode("utf-8")
    except UnicodeDecodeError as e:
        raise wrap(400, "Invalid request: id is not valid UTF-8", "", e) from e


def handle_delete(event, repository):
    log("delete_game:start", {"requestId": get_request_id(event), "event": event})

    info = get_user_info(event)

    cohort = get_path_param(event, "cohort")
    if not cohort:
        return failure(ApiError(400, "Invalid request: cohort is required"))

    raw_id = get_path_param(event, "id")
    if not raw_id:
        return failure(ApiError(400, "Invalid request: id is required"))

    try:
        game_id = _decode_id(raw_id)
    except ApiError as e:
        return failure(e)

    try:
        game = repository.delete_game(info["username"], cohort, game_id)
    except ApiError as e:
        return failure(e)

    return success(game)


@lru_cache(maxsize=1)
def _default_repository():
    return GameRepository.from_env()


def lambda_handler(event, context):
    try:
        return handle_delete(event, _default_repository())
    except Exception as e:
        log("UnhandledError", {"error": repr(e)})
        return failure(e)
