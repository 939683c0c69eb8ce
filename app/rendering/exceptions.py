class RenderingError(Exception):
    """Base exception for certificate rendering errors."""


class AssetUnavailableError(RenderingError):
    """Raised when the typeface resource cannot be fetched."""
