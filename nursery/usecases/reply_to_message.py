from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from nursery.domain.ports import MessagesPort, RecordId, UseCaseError
from nursery.usecases.error_mapping import map_api_error


@dataclass
class ReplyToMessage:
    messages_port: MessagesPort

    def __call__(self, message_id: RecordId, reply: str) -> Dict[str, Any]:
        text = (reply or "").strip()
        if not text:
            raise UseCaseError("REPLY_EMPTY", "Reply text is required.")
        try:
            return self.messages_port.reply(message_id, text)
        except Exception as exc:
            raise map_api_error(exc, default_code="REPLY_FAILED") from exc
