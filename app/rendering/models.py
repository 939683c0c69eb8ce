from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FontAsset:
    """Typeface binary to embed in rendered SVGs."""

    MIME_TYPES: ClassVar[dict[str, str]] = {
        "truetype": "font/ttf",
        "opentype": "font/otf",
        "woff": "font/woff",
        "woff2": "font/woff2",
    }

    family: str
    data: bytes
    format: str = "truetype"

    @property
    def mime_type(self) -> str:
        return self.MIME_TYPES.get(self.format, "application/octet-stream")
