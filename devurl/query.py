"""Bundle query string construction."""

from devurl.models import BundleOptions


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_bundle_query(options: BundleOptions | None = None) -> str:
    """
    Build the bundle query string in its fixed key order.

    ``dev`` and ``hot`` are always present; ``hot`` is always ``false`` because
    clients no longer read it, but older ones still expect the key. ``strict``
    and ``minify`` only appear when enabled.
    """
    options = options or BundleOptions()
    params = [f"dev={_flag(options.dev)}", "hot=false"]
    if options.strict:
        params.append("strict=true")
    if options.minify:
        params.append("minify=true")
    return "&".join(params)
