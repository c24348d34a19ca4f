import json
from pathlib import Path
from typing import Any

import pytest

from devurl.resolver import UrlResolver

from tests.fakes import FakeNetwork


def _write_project(root: Path, files: dict[str, Any]) -> Path:
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content), encoding="utf-8")
    return root


PACKAGE_JSON = {"dependencies": {"expo": "39.0.0"}}


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    return _write_project(
        tmp_path / "app",
        {"package.json": PACKAGE_JSON, "app.json": {"sdkVersion": "39.0.0"}},
    )


@pytest.fixture
def detached_project_root(tmp_path: Path) -> Path:
    return _write_project(
        tmp_path / "detached",
        {
            "package.json": PACKAGE_JSON,
            "app.json": {"sdkVersion": "39.0.0", "detach": {"scheme": "detach-test"}},
        },
    )


@pytest.fixture
def detached_with_schemes_project_root(tmp_path: Path) -> Path:
    return _write_project(
        tmp_path / "detached-with-schemes",
        {
            "package.json": PACKAGE_JSON,
            "app.json": {
                "sdkVersion": "39.0.0",
                "scheme": "custom-scheme",
                "detach": {"scheme": "detach-test"},
            },
        },
    )


@pytest.fixture
def dev_client_project_root(tmp_path: Path) -> Path:
    return _write_project(
        tmp_path / "dev-client-with-schemes",
        {
            "package.json": PACKAGE_JSON,
            "app.json": {"sdkVersion": "39.0.0", "scheme": "custom-scheme"},
            ".expo/settings.json": {"scheme": "custom-scheme", "devClient": True},
        },
    )


@pytest.fixture
def network() -> FakeNetwork:
    return FakeNetwork()


@pytest.fixture
def resolver(network: FakeNetwork) -> UrlResolver:
    return UrlResolver(dev_server_port=80, network=network)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
