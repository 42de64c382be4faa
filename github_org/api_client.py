"""Async API client for the GitHub REST and GraphQL endpoints."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from .auth import GitHubAuthenticator, redact_headers
from .errors import HttpStatusError, UnexpectedResponseError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"


class ApiResponse:
    """Decoded HTTP response detached from the aiohttp connection."""

    def __init__(self, status: int, headers: Dict[str, str], body: str, url: str = ""):
        self.status = status
        self.headers = headers
        self.body = body
        self.url = url
        self._json: Any = None

    def json(self) -> Any:
        """Parse and cache the response body as JSON."""
        if self._json is None:
            try:
                self._json = json.loads(self.body) if self.body else None
            except json.JSONDecodeError as exc:
                raise UnexpectedResponseError(f"Response body from {self.url or 'request'} is not valid JSON") from exc
        return self._json

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        lower = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lower:
                return value
        return None


class ApiClient:
    def __init__(self, base_url: str, api_token: str, config_loader=None):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.api_token = api_token
        self.config_loader = config_loader

        api_config = config_loader.get("api", {}) if config_loader else {}
        self.graphql_url = config_loader.get_graphql_url() if config_loader else self.base_url + "/graphql"
        self.per_page = api_config.get("per_page", 100)
        self.max_pages = api_config.get("max_pages", 1000)

        timeouts = api_config.get("timeouts", {})
        self.connection_timeout = timeouts.get("connect", 10)
        self.read_timeout = timeouts.get("read", 30)

        self.session: Optional[aiohttp.ClientSession] = None
        self.authenticator: Optional[GitHubAuthenticator] = None

    async def __aenter__(self):
        timeout = aiohttp.ClientTimeout(total=None, connect=self.connection_timeout, sock_read=self.read_timeout)
        self.authenticator = GitHubAuthenticator(self.base_url)
        self.authenticator.set_api_token(self.api_token)
        headers = self.authenticator.get_headers()
        logger.debug("Opening session to %s with headers %s", self.base_url, redact_headers(headers))
        self.session = aiohttp.ClientSession(timeout=timeout, headers=headers)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()
            self.session = None

    def build_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Any] = None,
    ) -> ApiResponse:
        """
        Send one request and return the decoded response.

        Args:
            method: HTTP method
            path: Path relative to the base URL, or an absolute URL (e.g. from a Link header)
            params: Query parameters
            json_body: JSON request body

        Raises:
            HttpStatusError: The response status is 400 or above
            aiohttp.ClientError: The transport failed
        """
        if not self.session:
            raise RuntimeError("ApiClient not initialized; use async context manager")

        url = self.build_url(path)
        async with self.session.request(method, url, params=params, json=json_body) as response:
            body = await response.text()
            result = ApiResponse(response.status, dict(response.headers), body, url=str(response.url))

        logger.debug("%s %s -> %s", method, url, result.status)
        if result.status >= 400:
            raise HttpStatusError(method, url, result.status, body)
        return result

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json_body: Optional[Any] = None) -> ApiResponse:
        return await self.request("POST", path, json_body=json_body)

    async def patch(self, path: str, json_body: Optional[Any] = None) -> ApiResponse:
        return await self.request("PATCH", path, json_body=json_body)

    async def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST a query document and return its ``data`` object."""
        response = await self.post(self.graphql_url, {"query": query, "variables": variables or {}})
        payload = response.json()
        if not isinstance(payload, dict):
            raise UnexpectedResponseError.missing("response")
        if payload.get("errors"):
            raise UnexpectedResponseError(f"GraphQL errors: {payload['errors']}")
        data = payload.get("data")
        if not isinstance(data, dict):
            raise UnexpectedResponseError.missing("data")
        return data
