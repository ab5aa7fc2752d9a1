"""Base-URL resolution and 404 fallback policy for the nursery REST API.

This module holds the pure decision logic of the request layer. Nothing here
performs network I/O, so every rule can be tested with fixed inputs.

Resolution precedence (evaluated once, when ``ApiConfig.from_provider`` runs):
    1. Explicit override from configuration, used verbatim.
    2. Loopback host (``localhost`` / ``127.0.0.1``): direct backend origin.
    3. Otherwise the relative proxy path ``/api``.

Call context:
    - ``nursery.adapters.http_client.ApiSession`` consumes ``ApiConfig`` and
      the ``build_url`` / ``should_fallback`` / ``fallback_target`` helpers.
    - ``nursery.app.main`` builds the config once at startup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin, urlsplit

from nursery.domain.ports import ConfigProvider


PROXY_BASE_PATH = "/api"
DIRECT_BACKEND_ORIGIN = "http://localhost:5000/api"
LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1"})

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def is_loopback_host(host: Optional[str]) -> bool:
    """Return True when ``host`` names the local development machine."""
    if not host:
        return False
    return host.strip().lower() in LOOPBACK_HOSTS


def has_scheme(endpoint: str) -> bool:
    """Return True for absolute URLs such as ``http://other.host/x``."""
    return bool(_SCHEME_RE.match(endpoint or ""))


def resolve_base_url(provider: ConfigProvider) -> str:
    """Pick the API base URL from an override, the host name, or the proxy path."""
    override = (provider.get_override() or "").strip()
    if override:
        return override
    if is_loopback_host(provider.get_current_host()):
        return DIRECT_BACKEND_ORIGIN
    return PROXY_BASE_PATH


def build_url(base_url: str, endpoint: str) -> str:
    """Join ``base_url`` and ``endpoint`` with exactly one slash between them.

    Absolute endpoints bypass the base entirely.
    """
    if has_scheme(endpoint):
        return endpoint
    base = base_url.rstrip("/")
    path = (endpoint or "").lstrip("/")
    return f"{base}/{path}"


@dataclass(frozen=True)
class ApiConfig:
    """Resolved request configuration shared by every API call.

    Attributes:
        base_url: Prefix prepended to relative endpoints.
        current_host: Host name the client runs on behalf of.
        site_origin: Origin a relative ``base_url`` is resolved against.
    """

    base_url: str
    current_host: str = ""
    site_origin: str = ""

    def __post_init__(self) -> None:
        if not (self.base_url or "").strip():
            raise ValueError("ApiConfig requires a non-empty base_url")

    @classmethod
    def from_provider(cls, provider: ConfigProvider) -> "ApiConfig":
        return cls(
            base_url=resolve_base_url(provider),
            current_host=(provider.get_current_host() or "").strip(),
            site_origin=(provider.get_site_origin() or "").strip(),
        )

    @property
    def uses_proxy(self) -> bool:
        return self.base_url == PROXY_BASE_PATH

    @property
    def is_loopback(self) -> bool:
        return is_loopback_host(self.current_host)

    def absolute_url(self, url: str) -> str:
        """Resolve a logical request URL against ``site_origin`` when needed."""
        if has_scheme(url):
            return url
        if not self.site_origin:
            raise ValueError(f"Cannot resolve relative URL '{url}' without a site origin")
        return urljoin(self.site_origin.rstrip("/") + "/", url)


def should_fallback(status: int, config: ApiConfig) -> bool:
    """Return True when a 404 from the proxy path should be retried directly."""
    return status == 404 and config.uses_proxy and config.is_loopback


def fallback_target(config: ApiConfig, endpoint: str) -> str:
    """Return the direct-backend URL used for the single fallback attempt."""
    _ = config
    return build_url(DIRECT_BACKEND_ORIGIN, endpoint)


def host_from_origin(origin: str) -> str:
    """Extract the lowercase host name from an origin like ``http://shop:8080``."""
    if not origin:
        return ""
    return (urlsplit(origin).hostname or "").lower()


__all__ = [
    "ApiConfig",
    "DIRECT_BACKEND_ORIGIN",
    "LOOPBACK_HOSTS",
    "PROXY_BASE_PATH",
    "build_url",
    "fallback_target",
    "has_scheme",
    "host_from_origin",
    "is_loopback_host",
    "resolve_base_url",
    "should_fallback",
]
