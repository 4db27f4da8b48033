# src/services/image_loader.py

"""Fetch product images for the card, detail and cart views."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum, auto

from curl_cffi import requests as curl_requests

from src.config.settings import Settings

logger = logging.getLogger("storefront.images")


class ImageStatus(Enum):
    """Observable outcome of an image request."""

    PENDING = auto()
    LOADED = auto()
    FAILED = auto()


@dataclass
class ImageResult:
    """The state of one image, as rendered by an image view."""

    url: str
    status: ImageStatus
    content: bytes = b""
    content_type: str = ""
    error: str = ""

    def describe(self) -> str:
        """Short text summary shown in place of the picture."""
        if self.status is ImageStatus.LOADED:
            size_kb = len(self.content) / 1024
            kind = self.content_type or "image"
            return f"{kind} · {size_kb:.1f} KB"
        if self.status is ImageStatus.FAILED:
            return "Image unavailable"
        return "Loading…"


class ImageLoader:
    """Download images over HTTP, never raising to the caller.

    Successful downloads are kept for the process lifetime, and callers of
    :meth:`load` asking for a URL that is already being fetched wait on
    that request, so the card, the detail sheet and the cart rows share
    one request per URL.  Failures are not cached and not retried.
    """

    def __init__(self, enabled: bool | None = None) -> None:
        self.settings = Settings()
        self.enabled = (
            self.settings.IMAGE_FETCH_ENABLED if enabled is None else enabled
        )
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._cache: dict[str, ImageResult] = {}
        self._inflight: dict[str, asyncio.Future[ImageResult]] = {}

    def cached(self, url: str) -> ImageResult | None:
        return self._cache.get(url)

    def fetch(self, url: str) -> ImageResult:
        """Blocking fetch of *url*; returns LOADED or FAILED."""
        hit = self._cache.get(url)
        if hit is not None:
            return hit

        if not self.enabled:
            return self._failed(url, "image fetching disabled")
        if not url:
            return self._failed(url, "no image URL")

        try:
            resp = self.session.get(
                url,
                headers=self.settings.IMAGE_HEADERS,
                timeout=self.settings.IMAGE_FETCH_TIMEOUT,
            )
        except Exception as exc:
            logger.warning(
                "Image request failed for %s: %s",
                url,
                exc,
                exc_info=True,
            )
            return self._failed(url, str(exc)[:80])

        if resp.status_code != 200:
            logger.warning("HTTP %d for image %s", resp.status_code, url)
            return self._failed(url, f"HTTP {resp.status_code}")

        content_type = resp.headers.get("content-type", "").split(";")[0]
        if content_type and not content_type.startswith("image/"):
            logger.warning(
                "Unexpected content type '%s' for image %s",
                content_type,
                url,
            )
            return self._failed(url, f"not an image ({content_type})")
        if not resp.content:
            logger.warning("Empty body for image %s", url)
            return self._failed(url, "empty response")

        result = ImageResult(
            url=url,
            status=ImageStatus.LOADED,
            content=resp.content,
            content_type=content_type,
        )
        self._cache[url] = result
        logger.debug(
            "Loaded image %s (%d bytes)", url, len(resp.content)
        )
        return result

    async def load(self, url: str) -> ImageResult:
        """Run :meth:`fetch` in a worker thread, joining any pending fetch.

        Cancelling one waiter leaves the shared request running for the
        others.
        """
        hit = self._cache.get(url)
        if hit is not None:
            return hit
        pending = self._inflight.get(url)
        if pending is None:
            pending = asyncio.ensure_future(asyncio.to_thread(self.fetch, url))
            self._inflight[url] = pending
            pending.add_done_callback(
                lambda done: self._forget(url, done)
            )
        return await asyncio.shield(pending)

    def _forget(self, url: str, done: asyncio.Future[ImageResult]) -> None:
        if self._inflight.get(url) is done:
            del self._inflight[url]

    @staticmethod
    def _failed(url: str, reason: str) -> ImageResult:
        return ImageResult(
            url=url, status=ImageStatus.FAILED, error=reason
        )
