"""Fetches the certificate typeface, directly or via a web-font stylesheet."""

import re
from urllib.parse import urljoin

import httpx

from app.logging.logger import Log
from app.rendering.exceptions import AssetUnavailableError
from app.rendering.models import FontAsset

_CSS_URL_PATTERN = re.compile(r"url\(\s*['\"]?(?P<url>[^'\")\s]+)['\"]?\s*\)")
_EXTENSION_FORMATS = {
    ".ttf": "truetype",
    ".otf": "opentype",
    ".woff": "woff",
    ".woff2": "woff2",
}


def extract_font_url(stylesheet: str, base_url: str = "") -> str | None:
    """Return the first url(...) referenced by a stylesheet, resolved against base_url."""
    match = _CSS_URL_PATTERN.search(stylesheet)
    if match is None:
        return None
    return urljoin(base_url, match.group("url"))


def guess_font_format(url: str) -> str:
    path = url.split("?", 1)[0].lower()
    for extension, font_format in _EXTENSION_FORMATS.items():
        if path.endswith(extension):
            return font_format
    return "truetype"


class FontLoader:
    """Loads a typeface over HTTP with a bounded timeout.

    When stylesheet_url is set, the font file location is resolved from the
    stylesheet's @font-face rule first; otherwise font_url is fetched directly.
    """

    def __init__(
        self,
        *,
        font_url: str,
        family: str,
        timeout_seconds: float,
        stylesheet_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._font_url = font_url
        self._family = family
        self._timeout_seconds = timeout_seconds
        self._stylesheet_url = stylesheet_url or None
        self._transport = transport

    def load(self) -> FontAsset:
        """Fetch the typeface.

        Raises:
            AssetUnavailableError: on transport failure, non-success status,
                an empty body, or a stylesheet without a font URL.
        """
        with httpx.Client(
            timeout=self._timeout_seconds,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            font_url = self._resolve_font_url(client)
            data = self._fetch(client, font_url).content
        if not data:
            raise AssetUnavailableError(f"Font file at {font_url} is empty")
        Log.debug(f"Loaded font '{self._family}' ({len(data)} bytes) from {font_url}")
        return FontAsset(family=self._family, data=data, format=guess_font_format(font_url))

    def _resolve_font_url(self, client: httpx.Client) -> str:
        if self._stylesheet_url is None:
            return self._font_url
        stylesheet = self._fetch(client, self._stylesheet_url).text
        font_url = extract_font_url(stylesheet, self._stylesheet_url)
        if font_url is None:
            raise AssetUnavailableError(
                f"No font URL found in stylesheet {self._stylesheet_url}"
            )
        return font_url

    @staticmethod
    def _fetch(client: httpx.Client, url: str) -> httpx.Response:
        try:
            response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            Log.error(f"Font fetch failed for {url}: {exc}")
            raise AssetUnavailableError(f"Font load failed: {exc}") from exc
        return response
