import pytest

from devurl.models import HostType, ProxyOverrides, UrlOptions, UrlType
from devurl.settings import Settings, read_proxy_overrides


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "EXPO_DEV_SERVER_PORT",
        "MCP_SSE_PORT",
        "EXPO_PACKAGER_PROXY_URL",
        "EXPO_MANIFEST_PROXY_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("devurl.settings.load_dotenv", lambda: False)


def test_settings_defaults() -> None:
    assert Settings.load() == Settings(dev_server_port=19000, mcp_sse_port=8000)


def test_settings_reads_ports(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPO_DEV_SERVER_PORT", "80")
    monkeypatch.setenv("MCP_SSE_PORT", "9100")
    assert Settings.load() == Settings(dev_server_port=80, mcp_sse_port=9100)


@pytest.mark.parametrize("value", ["abc", "0", "70000"])
def test_settings_rejects_bad_port(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("EXPO_DEV_SERVER_PORT", value)
    with pytest.raises(ValueError, match="EXPO_DEV_SERVER_PORT"):
        Settings.load()


def test_proxy_overrides_snapshot(monkeypatch: pytest.MonkeyPatch) -> None:
    assert read_proxy_overrides() == ProxyOverrides()
    monkeypatch.setenv("EXPO_PACKAGER_PROXY_URL", "http://localhost:9999")
    monkeypatch.setenv("EXPO_MANIFEST_PROXY_URL", "  ")
    assert read_proxy_overrides() == ProxyOverrides(packager_proxy_url="http://localhost:9999")


def test_url_options_from_mapping() -> None:
    assert UrlOptions.from_mapping(None) == UrlOptions()
    options = UrlOptions.from_mapping({"urlType": "redirect", "host_type": "localhost"})
    assert options == UrlOptions(url_type=UrlType.REDIRECT, host_type=HostType.LOCALHOST)
    with pytest.raises(ValueError, match="urlType"):
        UrlOptions.from_mapping({"urlType": "ftp"})
