"""
dojo_common.utils — shared utilities for the Dojo game Lambda functions.

Import from handlers:
    from dojo_common.utils import log, success, failure, get_user_info, \
        get_path_param, get_request_id
"""
import base64
import json
from decimal import Decimal

from boto3.dynamodb.types import Binary

from dojo_common.errors import ApiError

HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


def log(msg, obj=None):
    """Structured JSON logger. Sanitizes obj so DynamoDB Decimals never crash json.dumps."""
    if obj is not None:
        print(json.dumps({"msg": msg, "data": _json_sanitize(obj)}, ensure_ascii=False, default=str))
    else:
        print(json.dumps({"msg": msg}, ensure_ascii=False))


def _json_sanitize(obj):
    """
    Convert DynamoDB Decimals to int/float and Binary values to base64 strings,
    recursively, so json.dumps never raises.
    """
    if isinstance(obj, Decimal):
        return int(obj) if obj % 1 == 0 else float(obj)
    if isinstance(obj, Binary):
        obj = obj.value
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, dict):
        return {k: _json_sanitize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [_json_sanitize(v) for v in obj]
    return obj


def _resp(status: int, body):
    """Build an API Gateway proxy response. Sanitizes body if it is not already a string."""
    if not isinstance(body, str):
        body = json.dumps(_json_sanitize(body), ensure_ascii=False)
    return {
        "statusCode": int(status),
        "headers": dict(HEADERS),
        "body": body,
        "isBase64Encoded": False,
    }


def success(body, status: int = 200):
    """200-class response carrying body unchanged."""
    return _resp(status, body)


def failure(err: Exception):
    """
    Render an error as an API Gateway response.
    ApiError keeps its code and public message; anything else becomes a 500.
    The private message and the cause chain only go to the logs.
    """
    if not isinstance(err, ApiError):
        err = ApiError(500, "Temporary server error", "Unhandled error", cause=err)
    log("request failed", {
        "code": err.code,
        "publicMessage": err.public_message,
        "privateMessage": err.private_message,
        "causes": err.cause_messages(),
    })
    return _resp(err.code, {"message": err.public_message, "code": err.code})


def _get_claims(event: dict) -> dict:
    """Extract Cognito JWT claims from an API Gateway authorizer context."""
    rc = (event or {}).get("requestContext") or {}
    auth = rc.get("authorizer") or {}
    jwt = auth.get("jwt") or {}
    return jwt.get("claims") or auth.get("claims") or {}


def get_user_info(event: dict) -> dict:
    """
    Caller identity from the authorizer claims. Never read from the body or
    path, so clients cannot choose whose records they touch.
    """
    claims = _get_claims(event)
    return {
        "username": claims.get("cognito:username") or claims.get("username") or "",
        "email": claims.get("email") or "",
    }


def get_path_param(event: dict, name: str) -> str:
    """Return a path parameter, or "" when it is missing."""
    params = (event or {}).get("pathParameters") or {}
    return params.get(name) or ""


def get_request_id(event: dict) -> str:
    rc = (event or {}).get("requestContext") or {}
    return rc.get("requestId") or ""
