"""
Project configuration loading.

Reads ``package.json``, ``app.json`` and ``.expo/settings.json`` from a project
root and reduces them to the closed :class:`ProjectConfig` snapshot used by the
resolvers. Nothing is cached; every call reads the files again.
"""

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Any, Protocol

from devurl.errors import ConfigLoadError
from devurl.models import ProjectConfig

logger = logging.getLogger(__name__)

_VERSION_MAJOR = re.compile(r"(\d+)")


class ConfigStore(Protocol):
    async def load_project_config(self, project_root: str | Path) -> ProjectConfig: ...


def _read_json(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigLoadError(f"{path.name} not found in {path.parent}.")
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except OSError as exc:
        raise ConfigLoadError(f"Failed to read {path}: {exc!s}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"Failed to parse {path}: {exc!s}") from exc
    if not isinstance(data, dict):
        raise ConfigLoadError(f"{path} must contain a JSON object.")
    return data


def _optional_str(value: Any) -> str | None:
    # app.json allows a list of schemes; the first one is the primary scheme.
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _sdk_version_from_package(package: dict[str, Any], project_root: Path) -> str:
    dependencies = package.get("dependencies") or {}
    expo_version = dependencies.get("expo") if isinstance(dependencies, dict) else None
    match = _VERSION_MAJOR.search(expo_version) if isinstance(expo_version, str) else None
    if match is None:
        raise ConfigLoadError(
            f"Cannot determine the SDK version for {project_root}: "
            "no sdkVersion in app.json and no expo dependency in package.json."
        )
    return f"{match.group(1)}.0.0"


def read_project_config(project_root: str | Path) -> ProjectConfig:
    """Read the project files synchronously and build a snapshot."""
    root = Path(project_root)
    package = _read_json(root / "package.json", required=True)
    app_json = _read_json(root / "app.json", required=False)
    settings = _read_json(root / ".expo" / "settings.json", required=False)

    exp = app_json.get("expo", app_json)
    if not isinstance(exp, dict):
        raise ConfigLoadError(f"The expo key in {root / 'app.json'} must be an object.")

    detach = exp.get("detach")
    sdk_version = _optional_str(exp.get("sdkVersion")) or _sdk_version_from_package(package, root)

    config = ProjectConfig(
        sdk_version=sdk_version,
        scheme=_optional_str(exp.get("scheme")),
        detach_scheme=_optional_str(detach.get("scheme")) if isinstance(detach, dict) else None,
        dev_client_scheme=_optional_str(settings.get("scheme")),
        is_dev_client=settings.get("devClient") is True,
    )
    logger.debug(
        "Loaded project config",
        extra={"project_root": str(root), "sdk_version": config.sdk_version},
    )
    return config


class FileConfigStore:
    """Default ConfigStore reading from the local filesystem."""

    async def load_project_config(self, project_root: str | Path) -> ProjectConfig:
        return await asyncio.to_thread(read_project_config, project_root)
