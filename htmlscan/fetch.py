"""Fetch markup over HTTP for the CLI. The scan engine itself never touches the network."""

import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
MAX_DOWNLOAD_BYTES = 5_000_000
CHUNK_SIZE = 64 * 1024


class FetchError(Exception):
    """Markup could not be retrieved from the given URL."""


def _read_limited(resp: requests.Response, url: str, limit: int) -> bytes:
    chunks: list[bytes] = []
    size = 0
    for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
        chunks.append(chunk)
        size += len(chunk)
        if size >= limit:
            if size > limit:
                logger.warning("Response from %s truncated to %d bytes", url, limit)
            break
    return b"".join(chunks)[:limit]


def fetch_markup(url: str, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download at most MAX_DOWNLOAD_BYTES of the response body and decode it."""
    session = session or requests.Session()
    logger.debug("Fetching %s", url)

    try:
        resp = session.get(url, timeout=timeout, allow_redirects=True, stream=True)
    except requests.RequestException as exc:
        raise FetchError(f"Could not connect to {url}: {exc}") from exc

    try:
        if not 200 <= resp.status_code < 300:
            raise FetchError(f"Fetching {url} failed with HTTP {resp.status_code}")

        content_type = resp.headers.get("Content-Type", "")
        if content_type and "html" not in content_type and "text" not in content_type:
            logger.warning("%s returned Content-Type %s; scanning it as text anyway", url, content_type)

        try:
            raw = _read_limited(resp, url, MAX_DOWNLOAD_BYTES)
        except requests.RequestException as exc:
            raise FetchError(f"Reading the response from {url} failed: {exc}") from exc
    finally:
        resp.close()

    return raw.decode(resp.encoding or "utf-8", errors="replace")
