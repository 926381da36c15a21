"""Unit tests for error classes."""

from __future__ import annotations

import httpx

from gifscroll.errors import (
    GiphyDecodeError,
    GiphyError,
    GiphyHTTPError,
    GiphyNetworkError,
)


class TestGiphyHTTPError:
    def test_from_response_meta(self):
        response = httpx.Response(
            429,
            json={"meta": {"status": 429, "msg": "Too Many Requests"}},
        )
        err = GiphyHTTPError.from_response(response)
        assert err.status == 429
        assert err.message == "Too Many Requests"
        assert err.meta is not None
        assert err.response is response

    def test_from_response_no_body(self):
        """Handle non-JSON error body gracefully."""
        response = httpx.Response(500, text="Internal Server Error")
        err = GiphyHTTPError.from_response(response)
        assert err.status == 500
        assert err.meta is None
        assert err.message == "HTTP 500"

    def test_from_response_malformed_meta(self):
        response = httpx.Response(400, json={"meta": {"msg": "missing status"}})
        err = GiphyHTTPError.from_response(response)
        assert err.meta is None
        assert err.message == "HTTP 400"

    def test_str(self):
        err = GiphyHTTPError(404)
        assert str(err) == "[404] HTTP 404"


class TestHierarchy:
    def test_all_errors_share_base(self):
        assert issubclass(GiphyHTTPError, GiphyError)
        assert issubclass(GiphyNetworkError, GiphyError)
        assert issubclass(GiphyDecodeError, GiphyError)

    def test_network_error_message(self):
        err = GiphyNetworkError("timed out")
        assert str(err) == "timed out"

    def test_decode_error_keeps_response(self):
        response = httpx.Response(200, text="<html>")
        err = GiphyDecodeError("bad body", response)
        assert err.response is response
