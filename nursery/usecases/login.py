from __future__ import annotations

from dataclasses import dataclass

from nursery.domain.models import AuthSession
from nursery.domain.ports import AuthPort, UseCaseError
from nursery.usecases.error_mapping import map_api_error


@dataclass
class Login:
    auth_port: AuthPort

    def __call__(self, email: str, password: str) -> AuthSession:
        email_text = (email or "").strip().lower()
        if not email_text or not password:
            raise UseCaseError("LOGIN_INVALID", "Email and password are required.")
        try:
            return self.auth_port.login(email_text, password)
        except Exception as exc:
            raise map_api_error(exc, default_code="LOGIN_FAILED") from exc
