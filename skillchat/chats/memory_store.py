from __future__ import annotations

import threading
from dataclasses import replace

from .store import DEFAULT_CHAT_TITLE, Chat, ChatNotFoundError, Message, MessageRole, new_id, utc_now


class InMemoryChatStore:
    """Dict-backed store; contents live as long as the process."""

    def __init__(self) -> None:
        self._chats: dict[str, Chat] = {}
        self._messages: dict[str, list[Message]] = {}
        self._lock = threading.Lock()

    def _require(self, chat_id: str) -> Chat:
        chat = self._chats.get(chat_id)
        if chat is None:
            raise ChatNotFoundError(chat_id)
        return chat

    def create_chat(self, title: str = DEFAULT_CHAT_TITLE) -> Chat:
        now = utc_now()
        chat = Chat(id=new_id(), title=title, created_at=now, updated_at=now)
        with self._lock:
            self._chats[chat.id] = chat
            self._messages[chat.id] = []
        return chat

    def list_chats(self) -> list[Chat]:
        with self._lock:
            chats = list(enumerate(self._chats.values()))
        # Ties go to the most recently created chat.
        ordered = sorted(chats, key=lambda pair: (pair[1].updated_at, pair[0]), reverse=True)
        return [chat for _, chat in ordered]

    def get_chat(self, chat_id: str) -> Chat:
        with self._lock:
            return self._require(chat_id)

    def rename_chat(self, chat_id: str, title: str) -> Chat:
        with self._lock:
            chat = replace(self._require(chat_id), title=title, updated_at=utc_now())
            self._chats[chat_id] = chat
        return chat

    def delete_chat(self, chat_id: str) -> None:
        with self._lock:
            self._require(chat_id)
            del self._chats[chat_id]
            self._messages.pop(chat_id, None)

    def add_message(self, chat_id: str, role: MessageRole, content: str) -> Message:
        with self._lock:
            chat = self._require(chat_id)
            message = Message(id=new_id(), chat_id=chat_id, content=content, role=role, timestamp=utc_now())
            self._messages[chat_id].append(message)
            self._chats[chat_id] = replace(chat, updated_at=message.timestamp)
        return message

    def list_messages(self, chat_id: str) -> list[Message]:
        with self._lock:
            self._require(chat_id)
            messages = list(self._messages[chat_id])
        # sorted() is stable, so equal timestamps keep insertion order.
        return sorted(messages, key=lambda message: message.timestamp)
