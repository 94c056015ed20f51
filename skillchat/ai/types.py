from dataclasses import dataclass
from typing import AsyncGenerator, Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


class AIProviderError(RuntimeError):
    pass


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class AIClient(Protocol):
    async def stream(
        self, messages: Sequence[ChatMessage]
    ) -> AsyncGenerator[str, None]: ...

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str: ...
