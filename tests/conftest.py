"""
Shared pytest fixtures and path setup for backend tests.

Lambda modules import dojo_common from the layer, so the layer's python/
dir goes on sys.path before any test module is imported.
"""
import base64
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

BACKEND_ROOT = Path(__file__).parent.parent
LAYER_PATH = BACKEND_ROOT / "layers" / "dojo_common" / "python"
if str(LAYER_PATH) not in sys.path:
    sys.path.insert(0, str(LAYER_PATH))


def b64(s: str) -> str:
    return base64.b64encode(s.encode()).decode()


def api_event(cohort=None, game_id=None, username="alice", jwt=False):
    """API Gateway proxy event for DELETE /game/{cohort}/{id}."""
    params = {}
    if cohort is not None:
        params["cohort"] = cohort
    if game_id is not None:
        params["id"] = game_id
    claims = {"cognito:username": username, "email": f"{username}@example.com"}
    authorizer = {"jwt": {"claims": claims}} if jwt else {"claims": claims}
    return {
        "httpMethod": "DELETE",
        "pathParameters": params or None,
        "requestContext": {"requestId": "req-1", "authorizer": authorizer},
    }


@pytest.fixture
def repository():
    repo = MagicMock()
    repo.delete_game.return_value = {"cohort": "1500-1600", "id": "game42", "owner": "alice"}
    return repo
