"""
Domain error taxonomy for the social media loader.
Zero external dependencies.

Failures raised by the extraction client itself (network, auth, quota,
malformed responses) are not part of this hierarchy: they propagate to the
caller unchanged.
"""


class LoaderError(Exception):
    """Base class for every error raised by the loader itself."""


class ValidationError(LoaderError, ValueError):
    """The request was rejected before any remote call was attempted."""


class ConfigurationError(LoaderError):
    """No API key could be resolved from the loader config or the provider."""


class UnsupportedOperationError(LoaderError):
    """The extraction client cannot serve the requested operation for this URL."""
