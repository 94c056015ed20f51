from __future__ import annotations

import os
from typing import AsyncGenerator, Optional, Sequence

from openai import AsyncOpenAI

from skillchat.ai.types import AIProviderError, ChatMessage


class OpenAIProvider:
    """OpenAI-compatible chat completions; also used for Groq via ``base_url``."""

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        max_retries: Optional[int] = None,
        temperature: float = 0.2,
        key_name: str = "OPENAI_API_KEY",
    ):
        self._model = model
        self._temperature = temperature
        key = (api_key or os.getenv(key_name) or "").strip()
        if not key:
            raise AIProviderError(f"{key_name} is missing")

        if timeout_s is None:
            timeout_s = float(os.getenv("OPENAI_TIMEOUT_S", "30"))
        if max_retries is None:
            max_retries = int(os.getenv("OPENAI_MAX_RETRIES", "2"))

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=timeout_s,
            max_retries=max_retries,
        )

    def _payload(self, messages: Sequence[ChatMessage]) -> list[dict[str, str]]:
        return [{"role": m.role, "content": m.content} for m in messages]

    async def stream(
        self, messages: Sequence[ChatMessage]
    ) -> AsyncGenerator[str, None]:
        stream = await self._client.chat.completions.create(
            model=self._model,
            messages=self._payload(messages),
            temperature=self._temperature,
            stream=True,
        )

        async for chunk in stream:
            if not chunk.choices:
                continue
            text = getattr(chunk.choices[0].delta, "content", None)
            if text:
                yield text

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        create_kwargs = {
            "model": self._model,
            "messages": self._payload(messages),
            "temperature": self._temperature if temperature is None else temperature,
        }
        if max_tokens is not None:
            create_kwargs["max_tokens"] = max_tokens

        response = await self._client.chat.completions.create(**create_kwargs)
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
