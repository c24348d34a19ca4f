from devurl.models import BundleOptions, ProjectConfig
from devurl.query import build_bundle_query
from devurl.resolver import UrlResolver


def test_basic_query_string() -> None:
    assert build_bundle_query(BundleOptions()) == "dev=false&hot=false"
    assert build_bundle_query(None) == "dev=false&hot=false"


def test_full_query_string_keeps_key_order() -> None:
    options = BundleOptions(dev=True, strict=True, minify=True)
    assert build_bundle_query(options) == "dev=true&hot=false&strict=true&minify=true"


def test_hot_flag_is_never_emitted_as_true() -> None:
    assert build_bundle_query(BundleOptions(hot=True)) == "dev=false&hot=false"


def test_minify_without_strict() -> None:
    assert build_bundle_query(BundleOptions(minify=True)) == "dev=false&hot=false&minify=true"


def test_construct_bundle_query_params_with_config(resolver: UrlResolver) -> None:
    config = ProjectConfig(sdk_version="33.0.0")
    assert (
        resolver.construct_bundle_query_params_with_config("/app", BundleOptions(), config)
        == "dev=false&hot=false"
    )
    assert (
        resolver.construct_bundle_query_params_with_config(
            "/app", BundleOptions(dev=True, strict=True, minify=True), config
        )
        == "dev=true&hot=false&strict=true&minify=true"
    )
