"""Shared plumbing for resource adapters built on ``ApiSession``."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from nursery.adapters.http_client import ApiSession
from nursery.domain.ports import TokenStorePort


def bearer_headers(token: Optional[str]) -> Dict[str, str]:
    """Return the ``Authorization`` header for ``token``, or nothing."""
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


class RestAdapter:
    """Base class: bearer headers, JSON parsing and tolerant field coercion."""

    def __init__(self, session: ApiSession, tokens: TokenStorePort) -> None:
        self.api = session
        self.tokens = tokens

    def _headers(self) -> Dict[str, str]:
        return bearer_headers(self.tokens.load_token())

    # ------------------------------------------------------------------
    # Response parsing
    @staticmethod
    def _json_any(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError:
            snippet = (getattr(resp, "text", "") or "")[:400]
            raise RuntimeError(f"Invalid JSON response: {snippet}")

    @classmethod
    def _json_dict(cls, resp: requests.Response, ctx: str) -> Dict[str, Any]:
        payload = cls._json_any(resp)
        if not isinstance(payload, dict):
            raise RuntimeError(f"{ctx}: expected object response")
        return dict(payload)

    @classmethod
    def _json_list(cls, resp: requests.Response, ctx: str) -> List[Dict[str, Any]]:
        """Accept a bare list or the paginated ``{"data": [...]}`` envelope."""
        payload = cls._json_any(resp)
        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            payload = payload["data"]
        if not isinstance(payload, list):
            raise RuntimeError(f"{ctx}: expected list response")
        return [dict(entry) for entry in payload if isinstance(entry, dict)]

    # ------------------------------------------------------------------
    # Field coercion
    @staticmethod
    def _str(value: Any, default: str = "") -> str:
        if value is None:
            return default
        return str(value)

    @staticmethod
    def _int(value: Any, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _float(value: Any, default: float = 0.0) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _bool(value: Any, default: bool = False) -> bool:
        if value is None:
            return default
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on", "-1"}
        return bool(value)

    @staticmethod
    def _require_id(value: Any, name: str) -> str:
        text = str(value if value is not None else "").strip()
        if not text:
            raise ValueError(f"{name} is required")
        return text

    @staticmethod
    def _optional_params(**values: Optional[str]) -> Dict[str, str]:
        return {key: value for key, value in values.items() if value}
