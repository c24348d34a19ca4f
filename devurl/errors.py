"""Exceptions raised while resolving dev server URLs."""

NO_DEV_CLIENT_SCHEME_MESSAGE = "No scheme specified for development client"


class UrlResolutionError(RuntimeError):
    """Base class for failures surfaced to callers of the URL engine."""


class ConfigLoadError(UrlResolutionError):
    """Project configuration files are missing or could not be parsed."""


class NoSchemeError(UrlResolutionError):
    """No scheme could be resolved for a development client deep link."""

    def __init__(self, message: str = NO_DEV_CLIENT_SCHEME_MESSAGE) -> None:
        super().__init__(message)


class InvalidProxyUrlError(UrlResolutionError):
    """A proxy override value is not a usable http(s) URL."""
