"""Assemble URL strings from a resolved address."""

from urllib.parse import quote

from devurl.models import ResolvedAddress, UrlType

DEFAULT_SCHEME = "exp"
REDIRECT_BASE_URL = "https://exp.host/--/to-exp/"

# Characters encodeURIComponent leaves untouched in addition to quote()'s defaults.
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _format_host(host: str) -> str:
    # IPv6 literals need brackets to be followed by a port.
    if ":" in host and not host.startswith("["):
        return f"[{host}]"
    return host


def _with_suffix(url: str, path: str | None, query: str | None) -> str:
    if path:
        url = f"{url}/{path}"
    if query:
        url = f"{url}?{query}"
    return url


def compose_url(
    scheme: str | None,
    address: ResolvedAddress,
    url_type: UrlType | None = None,
    path: str | None = None,
    query: str | None = None,
) -> str:
    """
    Compose a URL for ``address`` in the requested format.

    Redirect URLs wrap the default deep link (path and query included) as a
    single percent-encoded path segment, so the suffix is applied to the inner
    link rather than to the ``exp.host`` wrapper.
    """
    host_port = f"{_format_host(address.host)}:{address.port}"

    if url_type is UrlType.HTTP:
        return _with_suffix(f"http://{host_port}", path, query)
    if url_type is UrlType.NO_PROTOCOL:
        return _with_suffix(host_port, path, query)
    if url_type is UrlType.REDIRECT:
        deep_link = compose_url(scheme, address, None, path, query)
        return REDIRECT_BASE_URL + encode_uri_component(deep_link)
    if url_type is None:
        return _with_suffix(f"{scheme or DEFAULT_SCHEME}://{host_port}", path, query)
    raise ValueError(f"Unsupported url type: {url_type!r}")
