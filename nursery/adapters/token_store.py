from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

from nursery.domain.ports import TokenStorePort


class LocalTokenStore(TokenStorePort):
    """Session token and user record kept in ``session.json`` (JSON)."""

    FILE_NAME = "session.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILE_NAME)

    def load_token(self) -> Optional[str]:
        token = self._load().get("authToken")
        return token if isinstance(token, str) and token else None

    def load_user(self) -> Optional[Dict[str, Any]]:
        user = self._load().get("user")
        return dict(user) if isinstance(user, dict) else None

    def save_session(self, token: str, user: Mapping[str, Any]) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"authToken": token, "user": dict(user)}, f, ensure_ascii=False, indent=2)

    def clear(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}


class MemoryTokenStore(TokenStorePort):
    """In-process token storage for embedding and tests."""

    def __init__(self, token: Optional[str] = None, user: Optional[Mapping[str, Any]] = None) -> None:
        self._token = token
        self._user = dict(user) if user else None

    def load_token(self) -> Optional[str]:
        return self._token

    def load_user(self) -> Optional[Dict[str, Any]]:
        return dict(self._user) if self._user else None

    def save_session(self, token: str, user: Mapping[str, Any]) -> None:
        self._token = token
        self._user = dict(user)

    def clear(self) -> None:
        self._token = None
        self._user = None
