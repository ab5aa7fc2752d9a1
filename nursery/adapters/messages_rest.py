"""REST adapter for `/messages*` and `/notifications*` endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from nursery.adapters.rest_base import RestAdapter
from nursery.domain.models import Message, Notification
from nursery.domain.ports import MessagesPort, RecordId


class MessagesRestAdapter(RestAdapter, MessagesPort):
    """HTTP adapter for the staff inbox and per-user notifications."""

    def list_messages(self) -> List[Message]:
        resp = self.api.get("/messages", headers=self._headers())
        return [self._parse_message(m) for m in self._json_list(resp, "messages")]

    def reply(self, message_id: RecordId, reply: str) -> Dict[str, Any]:
        mid = self._require_id(message_id, "message_id")
        resp = self.api.post(
            f"/messages/{mid}/reply",
            headers=self._headers(),
            json_body={"reply": reply},
        )
        return self._json_dict(resp, f"message_reply[{mid}]")

    def list_notifications(self) -> List[Notification]:
        resp = self.api.get("/notifications", headers=self._headers())
        return [self._parse_notification(n) for n in self._json_list(resp, "notifications")]

    def mark_read(self, notification_id: RecordId) -> None:
        nid = self._require_id(notification_id, "notification_id")
        self.api.patch(f"/notifications/{nid}/read", headers=self._headers())

    def mark_all_read(self) -> None:
        self.api.patch("/notifications/read-all", headers=self._headers())

    @classmethod
    def _parse_message(cls, raw: Mapping[str, Any]) -> Message:
        return Message(
            id=cls._str(raw.get("id")),
            sender=cls._str(raw.get("from") or raw.get("sender")),
            subject=cls._str(raw.get("subject")),
            body=cls._str(raw.get("message") or raw.get("body")),
            created_at=cls._str(raw.get("created_at")),
            is_read=cls._bool(raw.get("is_read")),
            kind=cls._str(raw.get("type"), default="general") or "general",
        )

    @classmethod
    def _parse_notification(cls, raw: Mapping[str, Any]) -> Notification:
        return Notification(
            id=cls._str(raw.get("id")),
            title=cls._str(raw.get("title")),
            body=cls._str(raw.get("body")),
            channel=cls._str(raw.get("channel")),
            is_read=cls._bool(raw.get("is_read")),
            created_at=cls._str(raw.get("created_at")),
        )
