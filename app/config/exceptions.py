class ConfigurationError(Exception):
    """Raised when a required setting (e.g. a provider API key) is missing."""
