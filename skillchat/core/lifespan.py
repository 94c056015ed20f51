from contextlib import asynccontextmanager
import logging
import os

from skillchat.chats import SqliteChatStore, get_chat_store
from skillchat.core.config import settings
from skillchat.tutorials import get_default_catalog

logger = logging.getLogger(__name__)


def integration_status() -> dict[str, bool]:
    return {
        "openai": bool((os.getenv("OPENAI_API_KEY") or "").strip()),
        "groq": bool(settings.groq_api_key),
        "tavily": bool(settings.tavily_api_key),
        "youtube": bool(settings.youtube_api_key),
    }


@asynccontextmanager
async def lifespan(app):
    for name, configured in integration_status().items():
        logger.info("integration_configured name=%s configured=%s", name, configured)

    catalog = get_default_catalog()
    logger.info("curated_catalog_loaded entries=%s", len(catalog))

    store = get_chat_store()
    logger.info("chat_store_ready backend=%s", settings.chat_store_backend)

    yield

    if isinstance(store, SqliteChatStore):
        store.close()
        get_chat_store.cache_clear()
