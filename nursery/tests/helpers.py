from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from nursery.adapters.env_config import StaticConfigProvider
from nursery.adapters.http_client import ApiSession
from nursery.adapters.token_store import MemoryTokenStore
from nursery.domain.api_config import ApiConfig

_REASONS = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


class FakeResponse:
    """Minimal response double compatible with the session and adapters."""

    def __init__(self, status_code: int = 200, payload: Any = None, *, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self.reason = _REASONS.get(status_code, "")
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    """Replays queued responses and records every ``request`` call."""

    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    @property
    def urls(self) -> List[str]:
        return [call["url"] for call in self.calls]


def make_session(
    responses: Sequence[Any],
    *,
    override: Optional[str] = None,
    origin: str = "http://localhost:3000",
) -> tuple[ApiSession, FakeSession]:
    config = ApiConfig.from_provider(StaticConfigProvider(override=override, site_origin=origin))
    api = ApiSession(config)
    fake = FakeSession(responses)
    api.session = fake  # type: ignore[assignment]
    return api, fake


def make_adapter(adapter_cls, responses: Sequence[Any], *, token: Optional[str] = "tok-123", **kwargs):
    api, fake = make_session(responses, **kwargs)
    tokens = MemoryTokenStore(token=token)
    return adapter_cls(api, tokens), fake, tokens


__all__ = ["FakeResponse", "FakeSession", "make_adapter", "make_session"]
