"""Scheme lookups over a :class:`ProjectConfig` snapshot."""

from devurl.models import ProjectConfig


def resolve_scheme(config: ProjectConfig) -> str | None:
    """Return the project's own scheme, falling back to the detached-build scheme."""
    if config.scheme:
        return config.scheme
    if config.detach_scheme:
        return config.detach_scheme
    return None


def resolve_dev_client_scheme(config: ProjectConfig) -> str | None:
    """Return the scheme a development client registers, if any."""
    if not config.is_dev_client:
        return None
    return config.dev_client_scheme or config.scheme or None
