"""REST adapter for `/auth/*` endpoints."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from nursery.adapters.rest_base import RestAdapter
from nursery.domain.models import AuthSession
from nursery.domain.ports import AuthPort


class AuthRestAdapter(RestAdapter, AuthPort):
    """Sign in against the backend and keep the issued token in the store."""

    def login(self, email: str, password: str) -> AuthSession:
        resp = self.api.post(
            "/auth/login",
            json_body={"email": email, "password": password},
        )
        payload = self._json_dict(resp, "login")
        session = self._parse_session(payload)
        user = payload.get("user") if isinstance(payload.get("user"), dict) else {}
        self.tokens.save_session(session.token, user)
        return session

    def verify(self) -> Dict[str, Any]:
        resp = self.api.get("/auth/verify", headers=self._headers())
        return self._json_dict(resp, "verify")

    @classmethod
    def _parse_session(cls, payload: Mapping[str, Any]) -> AuthSession:
        token = cls._str(payload.get("token")).strip()
        if not token:
            raise RuntimeError("login: response carried no token")
        user = payload.get("user") if isinstance(payload.get("user"), Mapping) else {}
        role = cls._str(user.get("role"))
        raw_roles = user.get("roles")
        if isinstance(raw_roles, list):
            roles = tuple(str(r) for r in raw_roles if r)
        else:
            roles = (role,) if role else ()
        return AuthSession(
            token=token,
            user_id=cls._str(user.get("id")),
            email=cls._str(user.get("email")),
            full_name=cls._str(user.get("full_name")),
            role=role or (roles[0] if roles else ""),
            roles=roles,
        )
