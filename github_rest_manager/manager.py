"""Base manager: credentials, HTTP dispatch and response formatting."""

import logging
from enum import Enum

import httpx

from .config import ManagerConfig, resolve_config
from .models import GITHUB_API_VERSION, GITHUB_MEDIA_TYPE, ApiResponse, ReturnFormat
from .settings import get_settings

logger = logging.getLogger(__name__)


class GitHubRequestError(httpx.HTTPError):
    """Transport failure reported with the manager's default error message."""


def _plain(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    return value


def _clean_params(params):
    if not params:
        return None
    return {key: _plain(value) for key, value in params.items() if value is not None}


def _decode_body(resp: httpx.Response):
    if not resp.content:
        return {}
    if "json" in resp.headers.get("content-type", ""):
        return resp.json()
    return resp.text


class GitHubManager:
    """Shared base of every endpoint-group manager.

    A manager is built from an access token, optionally with a default error
    message and a request timeout in seconds. Built without a token, it
    reuses the configuration of the last manager that was given one (see
    ``config.resolve_config``).

    Example:
        >>> first = EmailsManager("ghp_xxx", request_timeout=10)
        >>> second = UsersManager()  # same token and timeout
    """

    def __init__(
        self,
        access_token: str | None = None,
        default_error_message: str | None = None,
        request_timeout: float | None = None,
        *,
        config: ManagerConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.config = resolve_config(access_token, default_error_message, request_timeout, config)
        settings = get_settings()
        timeout = self.config.request_timeout
        if timeout is None:
            timeout = settings.github_request_timeout
        self._client = httpx.Client(
            base_url=self.config.api_url or settings.github_api_url,
            headers={
                "Authorization": f"bearer {self.config.access_token}",
                "Accept": GITHUB_MEDIA_TYPE,
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            },
            timeout=timeout,
            transport=transport,
        )
        self._last_response: httpx.Response | None = None

    @property
    def access_token(self) -> str:
        return self.config.access_token

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        payload=None,
        content: str | None = None,
        headers: dict | None = None,
        missing_ok: bool = False,
    ) -> ApiResponse:
        ep = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        logger.debug("%s %s", method, ep)
        kwargs = {"params": _clean_params(params), "headers": headers}
        if content is not None:
            kwargs["content"] = content
        elif method in ("POST", "PUT", "PATCH"):
            kwargs["json"] = _plain(payload) if payload is not None else {}
        elif payload is not None:
            kwargs["json"] = _plain(payload)

        try:
            resp = self._client.request(method, ep, **kwargs)
        except httpx.TransportError as e:
            logger.debug("%s %s failed: %s", method, ep, e)
            if self.config.default_error_message:
                raise GitHubRequestError(self.config.default_error_message) from e
            raise

        self._last_response = resp
        logger.debug("%s %s -> %s", method, ep, resp.status_code)

        if resp.status_code == 404 and missing_ok:
            return ApiResponse(status=404, body={}, text=resp.text)

        if resp.status_code >= 400:
            raise httpx.HTTPStatusError(
                self._error_message(resp),
                request=resp.request,
                response=resp,
            )

        return ApiResponse(
            status=resp.status_code,
            body=_decode_body(resp),
            text=resp.text,
            etag=resp.headers.get("etag"),
            link=resp.headers.get("link"),
        )

    def _error_message(self, resp: httpx.Response) -> str:
        message = None
        try:
            error = resp.json()
        except ValueError:
            error = None
        if isinstance(error, dict):
            message = error.get("message")
        if message:
            return f"GitHub API error {resp.status_code}: {message}"
        if self.config.default_error_message:
            return self.config.default_error_message
        return f"GitHub API error {resp.status_code}"

    def send_request(
        self, method: str, endpoint: str, params: dict | None = None, payload=None
    ) -> ApiResponse:
        """Call any endpoint; the other send_* methods are shortcuts of this one."""
        return self._request(method.upper(), endpoint, params=params, payload=payload)

    def send_get_request(self, endpoint: str, params: dict | None = None) -> ApiResponse:
        return self._request("GET", endpoint, params=params)

    def send_post_request(self, endpoint: str, payload=None) -> ApiResponse:
        return self._request("POST", endpoint, payload=payload)

    def send_put_request(self, endpoint: str, payload=None) -> ApiResponse:
        return self._request("PUT", endpoint, payload=payload)

    def send_patch_request(self, endpoint: str, payload=None) -> ApiResponse:
        return self._request("PATCH", endpoint, payload=payload)

    def send_delete_request(self, endpoint: str, payload=None) -> ApiResponse:
        return self._request("DELETE", endpoint, payload=payload)

    def send_check_request(self, endpoint: str) -> bool:
        """Ask a yes/no endpoint: 204 means yes, 404 means no."""
        return self._request("GET", endpoint, missing_ok=True).status == 204

    @staticmethod
    def _returner(response: ApiResponse, format: ReturnFormat, build):
        if format == ReturnFormat.JSON:
            return response.body
        if format == ReturnFormat.LIBRARY_OBJECT:
            return build(response.body)
        return response.text

    @property
    def status_code(self) -> int | None:
        """Status of the last response, None before any request."""
        if self._last_response is None:
            return None
        return self._last_response.status_code

    @property
    def error_response(self) -> str | None:
        """Body of the last response if it was an error."""
        if self._last_response is None or self._last_response.status_code < 400:
            return None
        return self._last_response.text

    @property
    def json_error_response(self):
        """Last error body decoded as JSON, or as plain text when it is not JSON."""
        text = self.error_response
        if text is None:
            return None
        try:
            return self._last_response.json()
        except ValueError:
            return text

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
