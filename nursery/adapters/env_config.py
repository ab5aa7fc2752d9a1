"""Configuration providers feeding ``ApiConfig.from_provider``.

Environment variables:
    NURSERY_API_URL: explicit API base URL override.
    NURSERY_SITE_ORIGIN: origin the client acts for; its host decides the
        loopback rule and relative bases are resolved against it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from nursery.domain.api_config import host_from_origin
from nursery.domain.ports import ConfigProvider

API_URL_ENV = "NURSERY_API_URL"
SITE_ORIGIN_ENV = "NURSERY_SITE_ORIGIN"
DEFAULT_SITE_ORIGIN = "http://localhost:3000"


class EnvConfigProvider(ConfigProvider):
    """Read the override and site origin from process environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get_override(self) -> Optional[str]:
        value = self._environ.get(API_URL_ENV)
        return value.strip() if value and value.strip() else None

    def get_site_origin(self) -> str:
        value = (self._environ.get(SITE_ORIGIN_ENV) or "").strip()
        return value or DEFAULT_SITE_ORIGIN

    def get_current_host(self) -> str:
        return host_from_origin(self.get_site_origin())


@dataclass(frozen=True)
class StaticConfigProvider(ConfigProvider):
    """Fixed provider values, used by the CLI flags and in tests."""

    override: Optional[str] = None
    site_origin: str = DEFAULT_SITE_ORIGIN
    host: Optional[str] = None

    def get_override(self) -> Optional[str]:
        return self.override

    def get_site_origin(self) -> str:
        return self.site_origin

    def get_current_host(self) -> str:
        if self.host is not None:
            return self.host
        return host_from_origin(self.site_origin)
