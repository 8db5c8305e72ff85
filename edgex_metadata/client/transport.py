"""HTTP transport primitives for the metadata client.

Each verb performs a single request and converts the outcome into an
HttpReply. httpx exceptions never escape: a request that produces no
response is reported with status 0 and a verb-specific error code, and a
non-2xx response is reported with the HTTP status as its error code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from edgex_metadata.errors import (
    HTTP_DELETE_ERROR_CODE,
    HTTP_GET_ERROR_CODE,
    HTTP_POST_ERROR_CODE,
    HTTP_POSTFILE_ERROR_CODE,
    HTTP_PUT_ERROR_CODE,
    OK,
    ErrorSignal,
    http_status_error,
    transport_error,
)

logger = logging.getLogger(__name__)

# Timeout for requests (seconds)
DEFAULT_TIMEOUT = 30.0

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class HttpReply:
    """Outcome of a single HTTP exchange.

    Attributes:
        status: HTTP status code, or 0 if no response was received.
        body: Raw response body.
        error: OK for 2xx responses, a transport error otherwise.
    """

    status: int
    body: bytes
    error: ErrorSignal

    @property
    def text(self) -> str:
        """Response body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")


class HttpTransport:
    """Blocking HTTP transport backed by an httpx.Client.

    The client is thread-safe, so a transport may be shared between
    threads. A transport created without a client owns the one it creates
    and closes it in close().
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self.timeout = timeout

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, url: str) -> HttpReply:
        """Issue a GET request."""
        return self._request("GET", url, HTTP_GET_ERROR_CODE)

    def put(self, url: str, body: bytes | None = None) -> HttpReply:
        """Issue a PUT request, with a JSON body if one is given."""
        return self._request("PUT", url, HTTP_PUT_ERROR_CODE, body)

    def post(self, url: str, body: bytes) -> HttpReply:
        """Issue a POST request with a JSON body."""
        return self._request("POST", url, HTTP_POST_ERROR_CODE, body)

    def delete(self, url: str) -> HttpReply:
        """Issue a DELETE request."""
        return self._request("DELETE", url, HTTP_DELETE_ERROR_CODE)

    def post_file(self, url: str, path: Path) -> HttpReply:
        """Upload a file as the "file" part of a multipart POST.

        Args:
            url: Target URL.
            path: File to upload.

        Returns:
            HttpReply; an unreadable file is reported like a network failure.
        """
        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error("Unable to read %s for upload: %s", path, e)
            return HttpReply(
                status=0,
                body=b"",
                error=transport_error(
                    HTTP_POSTFILE_ERROR_CODE, f"Unable to read {path}: {e}"
                ),
            )
        files = {"file": (path.name, content)}
        return self._request("POST", url, HTTP_POSTFILE_ERROR_CODE, files=files)

    def _request(
        self,
        method: str,
        url: str,
        failure_code: int,
        body: bytes | None = None,
        files: dict[str, object] | None = None,
    ) -> HttpReply:
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(
                method,
                url,
                content=body,
                files=files,  # type: ignore[arg-type]
                headers=JSON_HEADERS if body is not None else None,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            logger.error("Timeout on %s %s", method, url)
            return HttpReply(
                0, b"", transport_error(failure_code, f"Timeout on {method} {url}: {e}")
            )
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", method, url, e)
            return HttpReply(
                0,
                b"",
                transport_error(failure_code, f"Network error on {method} {url}: {e}"),
            )
        except httpx.InvalidURL as e:
            logger.error("Invalid URL for %s %r: %s", method, url, e)
            return HttpReply(
                0,
                b"",
                transport_error(failure_code, f"Invalid URL for {method} {url!r}: {e}"),
            )

        body_bytes = response.content
        if response.is_success:
            return HttpReply(response.status_code, body_bytes, OK)

        message = response.text.strip()
        logger.debug(
            "%s %s returned %d %s", method, url, response.status_code, message
        )
        return HttpReply(
            response.status_code,
            body_bytes,
            http_status_error(response.status_code, response.reason_phrase, message),
        )


__all__ = ["DEFAULT_TIMEOUT", "HttpReply", "HttpTransport", "JSON_HEADERS"]
