from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal, Protocol

MessageRole = Literal["user", "assistant"]

DEFAULT_CHAT_TITLE = "New Chat"


class ChatNotFoundError(LookupError):
    def __init__(self, chat_id: str):
        super().__init__(f"Chat '{chat_id}' not found")
        self.chat_id = chat_id


@dataclass(frozen=True)
class Chat:
    id: str
    title: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Message:
    id: str
    chat_id: str
    content: str
    role: MessageRole
    timestamp: datetime


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ChatStore(Protocol):
    def create_chat(self, title: str = DEFAULT_CHAT_TITLE) -> Chat: ...

    def list_chats(self) -> list[Chat]:
        """Most recently updated first."""

    def get_chat(self, chat_id: str) -> Chat:
        """Raise ChatNotFoundError for unknown ids."""

    def rename_chat(self, chat_id: str, title: str) -> Chat: ...

    def delete_chat(self, chat_id: str) -> None: ...

    def add_message(self, chat_id: str, role: MessageRole, content: str) -> Message: ...

    def list_messages(self, chat_id: str) -> list[Message]:
        """Oldest first."""
