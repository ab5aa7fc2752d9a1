from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Base class for HTTP failures reported by the nursery API."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        status_text: str = "",
        code: Optional[str] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.status_text = status_text
        self.code = code
        self.hint = hint
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the nursery API."""


class ApiServerError(ApiError):
    """HTTP 5xx from the nursery API."""


def error_for_response(resp: Any, *, context: Optional[str] = None) -> ApiError:
    """Build the typed error for a response outside the 2xx range."""
    status = int(resp.status_code)
    status_text = str(getattr(resp, "reason", "") or "")
    payload = parse_error_payload(resp)
    message = build_error_message(status, status_text)
    kwargs = dict(
        status=status,
        status_text=status_text,
        code=extract_error_code(payload),
        hint=extract_error_hint(payload),
        payload=payload,
        context=context,
    )
    if 400 <= status < 500:
        return ApiClientError(message, **kwargs)
    if 500 <= status < 600:
        return ApiServerError(message, **kwargs)
    return ApiError(message, **kwargs)


def parse_error_payload(resp: Any) -> Any:
    """Best-effort extraction of error payload without raising."""
    try:
        return resp.json()
    except Exception:
        snippet = getattr(resp, "text", "")
        if not snippet:
            return None
        return snippet[:400]


def build_error_message(status: int, status_text: str) -> str:
    return f"API call failed: {status} {status_text}".rstrip()


def extract_error_code(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for key in ("code", "error_code"):
            value = payload.get(key)
            if value is None:
                continue
            return value if isinstance(value, str) else str(value)
    return None


def extract_error_hint(payload: Any) -> Optional[str]:
    """Return the backend's human-readable reason, if any.

    The backend answers errors as ``{"error": "..."}`` and sometimes adds a
    ``message`` with details (development mode only).
    """
    if isinstance(payload, dict):
        for key in ("error", "message", "details"):
            text = stringify(payload.get(key))
            if text:
                return text
        return None
    if isinstance(payload, str):
        return payload.strip() or None
    return None


def stringify(data: Any, *, limit: int = 200) -> Optional[str]:
    if data is None:
        return None
    if isinstance(data, str):
        cleaned = data.strip()
        return cleaned[:limit] if cleaned else None
    if isinstance(data, list):
        parts = []
        for item in data:
            text = stringify(item, limit=limit)
            if text:
                parts.append(text)
            if len(parts) >= 3:
                break
        if not parts:
            return None
        return "; ".join(parts)[:limit]
    if isinstance(data, dict):
        pairs = []
        for key, value in list(data.items())[:4]:
            value_text = stringify(value, limit=limit)
            if value_text:
                pairs.append(f"{key}={value_text}")
        if not pairs:
            return None
        return ", ".join(pairs)[:limit]
    text = str(data).strip()
    return text[:limit] if text else None
