from typing import AsyncGenerator, Sequence
import hashlib
import json
import logging
import time

from skillchat.utils.sse import sse
from skillchat.core import events
from skillchat.core.config import settings

from skillchat.ai.factory import get_ai_client
from skillchat.ai.types import AIClient, ChatMessage
from skillchat.chats import DEFAULT_CHAT_TITLE, Chat, ChatStore, Message

logger = logging.getLogger("skillchat.chat")

SYSTEM_PROMPT = (
    "You are a friendly career assistant. "
    "Help the user plan their learning, understand job requirements and prepare for interviews. "
    "Answer clearly and concisely in plain text."
)
TITLE_MAX_CHARS = 50


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def title_from_message(content: str) -> str:
    if len(content) > TITLE_MAX_CHARS:
        return content[:TITLE_MAX_CHARS] + "..."
    return content


def build_chat_messages(history: Sequence[ChatMessage]) -> list[ChatMessage]:
    limit = max(1, settings.chat_history_limit)
    recent = [m for m in history if m.content.strip()][-limit:]
    return [ChatMessage(role="system", content=SYSTEM_PROMPT), *recent]


async def reply(history: Sequence[ChatMessage], *, ai: AIClient | None = None) -> str:
    started_at = time.perf_counter()
    client = ai or get_ai_client()
    text = await client.complete(build_chat_messages(history))
    logger.info(
        json.dumps(
            {
                "event": "chat_complete",
                "turns": len(history),
                "response_len": len(text),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return text.strip()


async def send_message(
    store: ChatStore,
    chat_id: str | None,
    content: str,
    *,
    ai: AIClient | None = None,
) -> tuple[Chat, Message, Message]:
    """Persist a user turn, ask the model, persist its answer.

    A chat is created when ``chat_id`` is None. Chats still carrying the
    default title are renamed after the first exchange.
    """
    chat = store.get_chat(chat_id) if chat_id else store.create_chat()
    user_message = store.add_message(chat.id, "user", content)

    logger.info(
        json.dumps(
            {
                "event": "chat_request",
                "chat_hash": _short_hash(chat.id),
                "message_len": len(content),
                "message_hash": _short_hash(content),
            }
        )
    )

    history = [ChatMessage(role=m.role, content=m.content) for m in store.list_messages(chat.id)]
    answer = await reply(history, ai=ai)
    assistant_message = store.add_message(chat.id, "assistant", answer)

    if chat.title == DEFAULT_CHAT_TITLE:
        chat = store.rename_chat(chat.id, title_from_message(content))
    else:
        chat = store.get_chat(chat.id)
    return chat, user_message, assistant_message


async def stream_reply(
    history: Sequence[ChatMessage],
    *,
    ai: AIClient | None = None,
) -> AsyncGenerator[str, None]:
    started_at = time.perf_counter()
    try:
        yield sse(events.TRACE, "Thinking...")

        if not history or not history[-1].content.strip():
            yield sse(events.CHUNK, "Please type a message.")
            yield sse(events.DONE, "[DONE]")
            return

        client = ai or get_ai_client()
        async for token in client.stream(build_chat_messages(history)):
            yield sse(events.CHUNK, token)

        yield sse(events.DONE, "[DONE]")

    except Exception as ex:
        logger.exception(
            json.dumps(
                {
                    "event": "chat_error",
                    "error": str(ex),
                    "duration_ms": int((time.perf_counter() - started_at) * 1000),
                }
            )
        )
        yield sse(events.ERROR, str(ex))
        yield sse(events.DONE, "[DONE]")
    else:
        logger.info(
            json.dumps(
                {
                    "event": "chat_stream_complete",
                    "duration_ms": int((time.perf_counter() - started_at) * 1000),
                }
            )
        )
