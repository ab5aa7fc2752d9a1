"""Request resolver for the nursery REST API.

This module wraps ``requests.Session`` so every adapter resolves endpoints the
same way: relative paths are joined onto the configured base URL, a default
JSON ``Content-Type`` is merged under the caller's headers, and a 404 seen
through the development proxy is retried once against the backend directly.

Dependencies:
    - ``requests`` for network I/O.
    - ``nursery.domain.api_config`` for URL building and the fallback rule.
    - ``nursery.adapters.api_errors`` for typed HTTP failures.

Call context:
    - Constructed once by ``nursery.app.main.build_services``.
    - Shared by the resource adapters in ``nursery/adapters/*_rest.py``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from nursery.adapters.api_errors import error_for_response
from nursery.domain.api_config import (
    ApiConfig,
    build_url,
    fallback_target,
    has_scheme,
    should_fallback,
)

DEFAULT_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}


@dataclass
class HttpConfig:
    """Transport settings for API calls.

    Attributes:
        request_timeout_s: Timeout in seconds, or ``None`` for the
            ``requests`` default (wait indefinitely).
    """

    request_timeout_s: Optional[float] = None


def merge_headers(headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Overlay caller headers on the defaults; caller values win on conflict."""
    merged: CaseInsensitiveDict = CaseInsensitiveDict(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    return dict(merged.items())


class ApiSession:
    """Shared requests wrapper that resolves endpoints against ``ApiConfig``.

    The session performs at most two requests per call: the initial one and,
    when ``should_fallback`` says so, one retry against the direct backend.
    Transport exceptions from ``requests`` propagate unchanged.
    """

    def __init__(self, config: ApiConfig, cfg: Optional[HttpConfig] = None) -> None:
        """Create a session bound to one resolved configuration.

        Args:
            config: Resolved base URL, host and site origin.
            cfg: Transport settings; defaults to ``HttpConfig()``.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self._log = logging.getLogger(__name__)
        self.session = requests.Session()
        self.config = config
        self.cfg = cfg or HttpConfig()

    def url_for(self, endpoint: str) -> str:
        """Return the logical request URL for ``endpoint`` (e.g. ``/api/orders``)."""
        return build_url(self.config.base_url, endpoint)

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        json_body: Any = None,
        data: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> requests.Response:
        """Send one API request, falling back to the direct backend on a proxy 404.

        Args:
            method: HTTP verb.
            endpoint: Absolute URL, or a path relative to the base URL.
            headers: Caller headers merged over ``Content-Type: application/json``.
            json_body: Object serialized to JSON text as the request body.
            data: Raw request body; mutually exclusive with ``json_body``.
            params: Optional query parameter mapping.

        Returns:
            ``requests.Response`` with a 2xx status.

        Raises:
            ApiClientError: Final response was 4xx.
            ApiServerError: Final response was 5xx.
            ApiError: Final response was otherwise outside 2xx.
            requests.exceptions.RequestException: Transport failure.
        """
        if json_body is not None and data is not None:
            raise ValueError("Pass either json_body or data, not both")

        verb = method.upper()
        url = self.url_for(endpoint)
        body = json.dumps(json_body) if json_body is not None else data
        send_kwargs = {
            "headers": merge_headers(headers),
            "data": body,
            "params": dict(params) if params else None,
        }

        resp = self._send(verb, self.config.absolute_url(url), send_kwargs)
        if not has_scheme(endpoint) and should_fallback(resp.status_code, self.config):
            target = fallback_target(self.config, endpoint)
            self._log.info("%s %s returned 404 through proxy; retrying %s", verb, url, target)
            resp = self._send(verb, target, send_kwargs)

        if not 200 <= resp.status_code < 300:
            self._log.debug("%s %s failed with HTTP %s", verb, url, resp.status_code)
            raise error_for_response(resp, context=f"{verb} {url}")
        return resp

    def get(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("POST", endpoint, **kwargs)

    def put(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("PUT", endpoint, **kwargs)

    def patch(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("PATCH", endpoint, **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("DELETE", endpoint, **kwargs)

    def _send(self, method: str, url: str, kwargs: Dict[str, Any]) -> requests.Response:
        self._log.debug("%s %s", method, url)
        return self.session.request(
            method,
            url,
            timeout=self.cfg.request_timeout_s,
            **kwargs,
        )


__all__ = ["ApiSession", "DEFAULT_HEADERS", "HttpConfig", "merge_headers"]
