from skillchat.ai.config import load_ai_config
from skillchat.ai.types import AIClient
from skillchat.core.config import settings

from skillchat.ai.providers.openai_provider import OpenAIProvider


def get_ai_client() -> AIClient:
    cfg = load_ai_config()

    if cfg.provider == "openai":
        return OpenAIProvider(model=cfg.model)

    if cfg.provider == "groq":
        return OpenAIProvider(
            model=cfg.model,
            api_key=settings.groq_api_key,
            base_url=settings.groq_base_url,
            key_name="GROQ_API_KEY",
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")


def get_skills_text_generator() -> AIClient | None:
    """Client used for skill gap analysis, or None when Groq is not configured."""
    if not settings.groq_api_key:
        return None
    return OpenAIProvider(
        model=settings.skills_ai_model,
        api_key=settings.groq_api_key,
        base_url=settings.groq_base_url,
        timeout_s=settings.skills_ai_timeout_s,
        max_retries=0,
        temperature=0.1,
        key_name="GROQ_API_KEY",
    )
