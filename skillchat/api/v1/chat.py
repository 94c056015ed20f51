from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import StreamingResponse

from skillchat.ai.factory import get_ai_client
from skillchat.ai.types import AIClient, AIProviderError, ChatMessage
from skillchat.core.rate_limit import rate_limit
from skillchat.schemas.chat import ChatReply, ChatRequest
from skillchat.services.chat_service import reply, stream_reply

router = APIRouter()


def chat_ai_client() -> AIClient:
    try:
        return get_ai_client()
    except AIProviderError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


def _history(payload: ChatRequest) -> list[ChatMessage]:
    return [ChatMessage(role=turn.role, content=turn.content) for turn in payload.messages]


@router.post("/chat", response_model=ChatReply)
@rate_limit()
async def chat(
    request: Request,
    payload: ChatRequest,
    ai: AIClient = Depends(chat_ai_client),
):
    _ = request
    if not payload.messages[-1].content.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please type a message.")
    text = await reply(_history(payload), ai=ai)
    return ChatReply(response=text)


@router.post("/chat/stream")
@rate_limit()
async def chat_stream(
    request: Request,
    payload: ChatRequest,
    ai: AIClient = Depends(chat_ai_client),
):
    _ = request
    gen = stream_reply(_history(payload), ai=ai)

    return StreamingResponse(
        gen,
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
