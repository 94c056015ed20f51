from functools import lru_cache

from skillchat.core.config import settings

from .memory_store import InMemoryChatStore
from .sqlite_store import SqliteChatStore
from .store import DEFAULT_CHAT_TITLE, Chat, ChatNotFoundError, ChatStore, Message


@lru_cache(maxsize=1)
def get_chat_store() -> ChatStore:
    if settings.chat_store_backend == "memory":
        return InMemoryChatStore()
    return SqliteChatStore(settings.chat_db_path)


__all__ = [
    "DEFAULT_CHAT_TITLE",
    "Chat",
    "ChatNotFoundError",
    "ChatStore",
    "InMemoryChatStore",
    "Message",
    "SqliteChatStore",
    "get_chat_store",
]
