"""Value types shared by the URL resolution components."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

AddressProtocol = Literal["http", "https"]


class UrlType(str, Enum):
    HTTP = "http"
    NO_PROTOCOL = "no-protocol"
    REDIRECT = "redirect"


class HostType(str, Enum):
    LAN = "lan"
    LOCALHOST = "localhost"


class LanType(str, Enum):
    IP = "ip"
    HOSTNAME = "hostname"


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Snapshot of the scheme-related facts of one project."""

    sdk_version: str
    scheme: str | None = None
    detach_scheme: str | None = None
    dev_client_scheme: str | None = None
    is_dev_client: bool = False


@dataclass(frozen=True, slots=True)
class ProxyOverrides:
    packager_proxy_url: str | None = None
    manifest_proxy_url: str | None = None

    def select(self, is_packager_request: bool) -> str | None:
        """Return the single override that applies to the given request intent."""
        if is_packager_request:
            return self.packager_proxy_url
        return self.manifest_proxy_url


def _enum_value(enum_cls: type[Enum], mapping: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        raw = mapping.get(key)
        if raw is None:
            continue
        try:
            return enum_cls(raw)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in enum_cls)
            raise ValueError(f"{keys[0]} must be one of: {allowed}.") from exc
    return None


@dataclass(frozen=True, slots=True)
class UrlOptions:
    """Caller preferences for URL shape; ``None`` fields use the default path."""

    url_type: UrlType | None = None
    host_type: HostType | None = None
    lan_type: LanType | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "UrlOptions":
        """Build options from either camelCase wire keys or snake_case keys."""
        if not data:
            return cls()
        return cls(
            url_type=_enum_value(UrlType, data, "urlType", "url_type"),
            host_type=_enum_value(HostType, data, "hostType", "host_type"),
            lan_type=_enum_value(LanType, data, "lanType", "lan_type"),
        )


@dataclass(frozen=True, slots=True)
class BundleOptions:
    dev: bool = False
    minify: bool = False
    hot: bool = False
    strict: bool = False


@dataclass(frozen=True, slots=True)
class ResolvedAddress:
    host: str
    port: int
    protocol: AddressProtocol = "http"
