"""Internal HTTP transport and envelope decoding for cfapi."""

from __future__ import annotations

from typing import Any, Optional

import httpx
import pydantic
import structlog

from .config import Settings
from .exceptions import (
    ApiError,
    AuthenticationError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from .types.common import Envelope

log = structlog.get_logger(__name__)

_ERROR_MAP: dict[int, type[ApiError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def decode_envelope(raw: bytes, result_type: Any, operation: Optional[str] = None) -> Envelope[Any]:
    """Parse ``raw`` as a ``{success, errors, messages, result}`` envelope.

    ``result`` is validated against ``result_type``. Raises ``DecodeError`` if
    the body is not JSON or does not have the expected shape.
    """
    try:
        return Envelope[result_type].model_validate_json(raw)
    except pydantic.ValidationError as e:
        log.warning("response.decode_failed", operation=operation, errors=e.error_count())
        raise DecodeError(f"Invalid JSON response: {e}", operation) from e


def _messages(items: list[Any]) -> list[str]:
    out = []
    for item in items:
        if isinstance(item, dict):
            out.append(str(item.get("message", item)))
        else:
            out.append(str(item))
    return out


class HttpClient:
    """Low-level HTTP client wrapping httpx."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self._settings = settings
        self._base_url = settings.base_url.rstrip("/")
        # An injected client belongs to the caller, who closes it.
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=settings.timeout)

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "Content-Type": "application/json",
            "User-Agent": self._settings.user_agent,
        }
        headers.update(self._settings.auth_headers())
        return headers

    def _raise_for_status(self, resp: httpx.Response, path: str, operation: Optional[str]) -> None:
        if 200 <= resp.status_code < 300:
            return
        errors: list[Any] = []
        messages: list[Any] = []
        try:
            body = resp.json()
            errors = body.get("errors") or []
            messages = body.get("messages") or []
            message = "; ".join(_messages(errors)) or resp.reason_phrase
        except (ValueError, AttributeError):
            message = resp.text or resp.reason_phrase

        log.warning(
            "request.failed",
            operation=operation,
            status_code=resp.status_code,
            path=path,
        )
        cls = _ERROR_MAP.get(resp.status_code)
        if cls is None:
            raise ApiError(resp.status_code, message, errors=errors, messages=messages, operation=operation)
        raise cls(message, errors=errors, messages=messages, operation=operation)

    def request(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        operation: Optional[str] = None,
    ) -> bytes:
        """Send one request and return the raw 2xx response body."""
        url = f"{self._base_url}{path}"
        log.debug("request.sent", method=method, path=path, operation=operation)
        try:
            resp = self._client.request(method, url, headers=self._headers(), json=json)
        except httpx.HTTPError as e:
            log.warning("request.failed", operation=operation, method=method, path=path, error=str(e))
            raise TransportError(f"Request failed: {e}", operation) from e
        self._raise_for_status(resp, path, operation)
        return resp.content

    def _call(
        self,
        method: str,
        path: str,
        result_type: Any,
        operation: str,
        json: Optional[Any] = None,
    ) -> Any:
        raw = self.request(method, path, json=json, operation=operation)
        envelope = decode_envelope(raw, result_type, operation)
        if not envelope.success or envelope.errors:
            # The result is still handed back; callers decide what a failed envelope means.
            log.warning(
                "envelope.unsuccessful",
                operation=operation,
                success=envelope.success,
                errors=[str(e) for e in envelope.errors],
                messages=[str(m) for m in envelope.messages],
            )
        return envelope.result

    def get(self, path: str, result_type: Any, operation: str) -> Any:
        return self._call("GET", path, result_type, operation)

    def post(self, path: str, result_type: Any, operation: str, json: Optional[Any] = None) -> Any:
        return self._call("POST", path, result_type, operation, json=json)

    def put(self, path: str, result_type: Any, operation: str, json: Optional[Any] = None) -> Any:
        return self._call("PUT", path, result_type, operation, json=json)

    def delete(self, path: str, result_type: Any, operation: str) -> Any:
        return self._call("DELETE", path, result_type, operation)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
