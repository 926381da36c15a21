"""SDK exception hierarchy."""

from __future__ import annotations

import httpx

from gifscroll.models.errors import Meta


class GiphyError(Exception):
    """Base class for every failure talking to GIPHY."""


class GiphyHTTPError(GiphyError):
    """Raised when the GIPHY API returns a non-2xx response."""

    def __init__(
        self,
        status: int,
        meta: Meta | None = None,
        response: httpx.Response | None = None,
        message: str | None = None,
    ) -> None:
        self.status = status
        self.meta = meta
        self.response = response
        if message is None:
            message = meta.msg if meta and meta.msg else f"HTTP {status}"
        self.message = message
        super().__init__(f"[{status}] {message}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> GiphyHTTPError:
        """Build from an httpx response, attempting to parse the error body.

        GIPHY answers most errors with a ``meta`` block, but an invalid or
        missing key gets a bare ``{"message": ...}`` from its gateway.
        """
        meta: Meta | None = None
        message: str | None = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            if isinstance(body.get("meta"), dict):
                try:
                    meta = Meta.model_validate(body["meta"])
                except ValueError:
                    meta = None
            if meta is None and isinstance(body.get("message"), str):
                message = body["message"]
        return cls(status=response.status_code, meta=meta, response=response, message=message)


class GiphyNetworkError(GiphyError):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GiphyDecodeError(GiphyError):
    """Raised when a response body is not JSON or does not match the expected shape."""

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        self.response = response
        super().__init__(message)
