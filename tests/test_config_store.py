import json
from pathlib import Path

import pytest

from devurl.config_store import FileConfigStore, read_project_config
from devurl.errors import ConfigLoadError
from devurl.models import ProjectConfig
from devurl.scheme import resolve_dev_client_scheme, resolve_scheme


def _write(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_reads_nested_expo_key_and_settings(tmp_path: Path) -> None:
    _write(tmp_path / "package.json", {"dependencies": {"expo": "^40.0.1"}})
    _write(tmp_path / "app.json", {"expo": {"scheme": ["first", "second"], "detach": {"scheme": "old"}}})
    _write(tmp_path / ".expo" / "settings.json", {"scheme": "client", "devClient": True})

    config = read_project_config(tmp_path)

    assert config == ProjectConfig(
        sdk_version="40.0.0",
        scheme="first",
        detach_scheme="old",
        dev_client_scheme="client",
        is_dev_client=True,
    )


def test_app_json_is_optional(tmp_path: Path) -> None:
    _write(tmp_path / "package.json", {"dependencies": {"expo": "~39.0.2"}})
    config = read_project_config(tmp_path)
    assert config.sdk_version == "39.0.0"
    assert config.scheme is None
    assert not config.is_dev_client


def test_missing_package_json(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError, match="package.json"):
        read_project_config(tmp_path)


def test_invalid_json(tmp_path: Path) -> None:
    _write(tmp_path / "package.json", {"dependencies": {"expo": "39.0.0"}})
    (tmp_path / "app.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="Failed to parse"):
        read_project_config(tmp_path)


def test_unknown_sdk_version(tmp_path: Path) -> None:
    _write(tmp_path / "package.json", {"dependencies": {}})
    with pytest.raises(ConfigLoadError, match="SDK version"):
        read_project_config(tmp_path)


@pytest.mark.anyio
async def test_file_config_store_loads_async(tmp_path: Path) -> None:
    _write(tmp_path / "package.json", {"dependencies": {"expo": "39.0.0"}})
    _write(tmp_path / "app.json", {"sdkVersion": "39.0.0", "scheme": "custom"})
    config = await FileConfigStore().load_project_config(str(tmp_path))
    assert config.scheme == "custom"


def test_resolve_scheme_precedence() -> None:
    assert resolve_scheme(ProjectConfig("39.0.0", scheme="top", detach_scheme="detached")) == "top"
    assert resolve_scheme(ProjectConfig("39.0.0", detach_scheme="detached")) == "detached"
    assert resolve_scheme(ProjectConfig("39.0.0")) is None


def test_resolve_dev_client_scheme() -> None:
    assert resolve_dev_client_scheme(ProjectConfig("39.0.0", scheme="app")) is None
    assert (
        resolve_dev_client_scheme(
            ProjectConfig("39.0.0", scheme="app", dev_client_scheme="client", is_dev_client=True)
        )
        == "client"
    )
    assert resolve_dev_client_scheme(ProjectConfig("39.0.0", scheme="app", is_dev_client=True)) == "app"
    assert resolve_dev_client_scheme(ProjectConfig("39.0.0", is_dev_client=True)) is None


def test_dev_client_flag_must_be_boolean_true(tmp_path: Path) -> None:
    _write(tmp_path / "package.json", {"dependencies": {"expo": "39.0.0"}})
    _write(tmp_path / ".expo" / "settings.json", {"scheme": "client", "devClient": "false"})
    config = read_project_config(tmp_path)
    assert not config.is_dev_client
    assert resolve_dev_client_scheme(config) is None
