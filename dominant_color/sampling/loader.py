"""Async fetching of image bytes from urls, data uris and local files."""

from __future__ import annotations

import base64
import binascii
import logging
from pathlib import Path
from urllib.parse import unquote_to_bytes, urlparse
from urllib.request import url2pathname

import httpx

from dominant_color.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class ImageLoadError(RuntimeError):
    """Raised when an image source cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ImageLoader:
    """Loads raw image bytes for the sampling controller."""

    def __init__(self, settings: Settings | None = None, *, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings or get_settings()
        self._client = client or httpx.AsyncClient(
            timeout=self._settings.fetch_timeout,
            follow_redirects=True,
            headers={"User-Agent": self._settings.user_agent},
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def load(self, url: str) -> bytes:
        """Return the bytes behind ``url``."""

        scheme = urlparse(url).scheme.lower()
        if scheme in ("http", "https"):
            data = await self._fetch(url)
        elif scheme == "data":
            data = self._decode_data_uri(url)
        elif scheme == "file":
            data = self._read_file(Path(url2pathname(urlparse(url).path)))
        elif scheme == "" or len(scheme) == 1:
            # Bare paths, including Windows drive letters
            data = self._read_file(Path(url))
        else:
            raise ImageLoadError(f"Unsupported image source scheme: {scheme}")

        self._check_size(url, len(data))
        return data

    async def _fetch(self, url: str) -> bytes:
        chunks: list[bytes] = []
        received = 0
        try:
            async with self._client.stream("GET", url) as response:
                response.raise_for_status()
                declared = response.headers.get("Content-Length", "")
                if declared.isdigit():
                    self._check_size(url, int(declared))
                async for chunk in response.aiter_bytes():
                    received += len(chunk)
                    self._check_size(url, received)
                    chunks.append(chunk)
        except httpx.TimeoutException as exc:
            raise ImageLoadError(f"Timed out fetching {url}") from exc
        except httpx.HTTPStatusError as exc:
            raise ImageLoadError(
                f"Fetching {url} failed with status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ImageLoadError(f"Could not fetch {url}: {exc}") from exc

        logger.debug("Fetched %s (%d bytes)", url, received)
        return b"".join(chunks)

    def _decode_data_uri(self, url: str) -> bytes:
        header, sep, payload = url[len("data:") :].partition(",")
        if not sep:
            raise ImageLoadError("Malformed data uri: missing ','")
        if header.lower().endswith(";base64"):
            try:
                return base64.b64decode(payload, validate=False)
            except (binascii.Error, ValueError) as exc:
                raise ImageLoadError("Malformed base64 payload in data uri") from exc
        return unquote_to_bytes(payload)

    def _read_file(self, path: Path) -> bytes:
        path = path.expanduser()
        try:
            size = path.stat().st_size
            self._check_size(str(path), size)
            return path.read_bytes()
        except OSError as exc:
            raise ImageLoadError(f"Could not read {path}: {exc}") from exc

    def _check_size(self, source: str, size: int) -> None:
        limit = self._settings.max_image_bytes
        if limit and size > limit:
            raise ImageLoadError(f"{source} is {size} bytes, above the {limit} byte limit", status_code=413)
