"""
Page Fetcher - Single HTTP Retrieval

Downloads the health-activities page once with browser-like headers and a
bounded timeout, then decodes the body according to its Content-Encoding.

Decoding rules:
- gzip: decompressed here, since the raw body is read without client-side decoding
- anything else (none, br, deflate, unknown): bytes passed through verbatim

Usage:
    from apps.pollen.fetcher import FetchError, fetch_page

    try:
        html = fetch_page()
    except FetchError as e:
        print(e.operation, e.cause)
"""

import gzip
import logging
import zlib

import httpx

from utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


class PollenError(Exception):
    """Base error for the pollen report."""


class FetchError(PollenError):
    """Raised when the page cannot be retrieved or decoded.

    Attributes:
        operation: Failing step ('request', 'timeout', 'status', 'gzip', 'read')
        cause: Underlying exception or description
        status_code: HTTP status for 'status' failures, otherwise None
    """

    def __init__(self, operation: str, cause: object, status_code: int | None = None) -> None:
        self.operation = operation
        self.cause = cause
        self.status_code = status_code
        super().__init__(f"{operation}: {cause}")


def decode_body(raw: bytes, content_encoding: str | None) -> str:
    """Decode a raw response body.

    Args:
        raw: Body bytes exactly as received
        content_encoding: Value of the Content-Encoding header, if any

    Returns:
        Body text

    Raises:
        FetchError: If a gzip body cannot be decompressed
    """
    encoding = (content_encoding or "").strip().lower()

    if encoding == "gzip":
        try:
            raw = gzip.decompress(raw)
        except (OSError, EOFError, zlib.error) as e:
            raise FetchError("gzip", f"gzip decompression error: {e}") from e
    elif encoding:
        # br, deflate and unknown encodings are not decoded
        logger.warning(
            "Content-Encoding not decoded, passing body through",
            extra={"content_encoding": encoding, "body_bytes": len(raw)},
        )

    return raw.decode("utf-8", errors="replace")


def fetch_page(settings: Settings | None = None, client: httpx.Client | None = None) -> str:
    """
    Fetch the configured page and return its decoded markup.

    Args:
        settings: Settings to use, defaults to the cached global settings
        client: Optional httpx client (tests inject one with a MockTransport)

    Returns:
        Decoded page text

    Raises:
        FetchError: On network error, timeout, non-200 status,
            decompression error or body read error
    """
    cfg = settings or get_settings()
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=cfg.HTTP_TIMEOUT)

    logger.info("Fetching page", extra={"url": cfg.PAGE_URL, "timeout": cfg.HTTP_TIMEOUT})

    try:
        with client.stream(
            "GET",
            cfg.PAGE_URL,
            headers=cfg.request_headers(),
            timeout=cfg.HTTP_TIMEOUT,
        ) as response:
            if response.status_code != 200:
                logger.error(
                    "Unexpected status code",
                    extra={"url": cfg.PAGE_URL, "status_code": response.status_code},
                )
                raise FetchError(
                    "status",
                    f"status code error: {response.status_code} {response.reason_phrase}",
                    status_code=response.status_code,
                )

            content_encoding = response.headers.get("Content-Encoding")

            try:
                raw = b"".join(response.iter_raw())
            except httpx.TimeoutException as e:
                raise FetchError("timeout", f"timed out reading response body: {e}") from e
            except httpx.HTTPError as e:
                raise FetchError("read", f"error reading response body: {e}") from e

    except httpx.TimeoutException as e:
        raise FetchError("timeout", f"request timed out after {cfg.HTTP_TIMEOUT}s: {e}") from e
    except httpx.HTTPError as e:
        raise FetchError("request", f"request failed: {e}") from e
    finally:
        if owns_client:
            client.close()

    logger.info(
        "Page fetched",
        extra={
            "url": cfg.PAGE_URL,
            "content_encoding": content_encoding,
            "body_bytes": len(raw),
        },
    )

    return decode_body(raw, content_encoding)
