"""
Dev server address and URL resolution.

Resolves where a local development server can be reached and composes that
address into deep links, redirect URLs and bundle/source-map/log URLs.
"""

from devurl.errors import ConfigLoadError, InvalidProxyUrlError, NoSchemeError, UrlResolutionError
from devurl.models import BundleOptions, ProjectConfig, ProxyOverrides, UrlOptions
from devurl.resolver import UrlResolver

__all__ = [
    "BundleOptions",
    "ConfigLoadError",
    "InvalidProxyUrlError",
    "NoSchemeError",
    "ProjectConfig",
    "ProxyOverrides",
    "UrlOptions",
    "UrlResolutionError",
    "UrlResolver",
]
