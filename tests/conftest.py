import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from github_org.api_client import ApiClient, ApiResponse
from github_org.errors import HttpStatusError


def json_response(payload=None, status=200, headers=None):
    body = json.dumps(payload) if payload is not None else ""
    return ApiResponse(status, headers or {}, body)


class FakeApiClient(ApiClient):
    """ApiClient that answers from a queue of canned responses and records every request."""

    def __init__(self, responses, per_page=100, max_pages=None):
        super().__init__("https://api.github.com", "access-token")
        self.responses = list(responses)
        self.history = []
        self.per_page = per_page
        self.max_pages = max_pages

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def request(self, method, path, params=None, json_body=None):
        self.history.append({"method": method, "path": path, "params": params, "json": json_body})
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {path}")
        response = self.responses.pop(0)
        if response.status >= 400:
            raise HttpStatusError(method, self.build_url(path), response.status, response.body)
        return response


@pytest.fixture
def fake_api():
    return FakeApiClient
