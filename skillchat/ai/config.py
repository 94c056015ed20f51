import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
    default_model = "llama-3.1-8b-instant" if provider == "groq" else "gpt-4o-mini"
    model = (os.getenv("AI_MODEL") or default_model).strip()
    return AIConfig(provider=provider, model=model)
