"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from requests import exceptions as req_exc

from nursery.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    extract_error_hint,
)
from nursery.domain.ports import UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter and transport exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by an adapter call.
        default_code: Code used for exceptions outside the API taxonomy.
        default_message: Message used for those exceptions; falls back to
            ``str(exc)``.

    Returns:
        UseCaseError carrying a stable ``code`` and a presentable message.
        HTTP failures keep their status in ``meta["status"]``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, req_exc.RequestException):
        return UseCaseError(
            "NETWORK_ERROR",
            "Could not reach the server. Check your connection.",
        )
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        meta = {"status": status}
        hint = exc.hint or extract_error_hint(exc.payload)
        if status in (401, 403):
            return UseCaseError(
                "AUTH_FAILED",
                _compose_error_message("Not authorized", hint),
                meta=meta,
            )
        if status == 404:
            return UseCaseError("NOT_FOUND", _compose_error_message("Not found", hint), meta=meta)
        if status in (400, 409, 422):
            return UseCaseError(
                "INVALID_REQUEST",
                _compose_error_message("Invalid request", hint),
                meta=meta,
            )
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, hint), meta=meta)
    if isinstance(exc, ApiServerError):
        return UseCaseError(
            "SERVER_ERROR",
            "Server error, try again.",
            meta={"status": exc.status},
        )
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc), meta={"status": exc.status})

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if not hint_text:
        return base
    return f"{base}: {hint_text}"
