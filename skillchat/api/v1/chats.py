from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from skillchat.ai.types import AIClient
from skillchat.api.v1.chat import chat_ai_client
from skillchat.chats import DEFAULT_CHAT_TITLE, ChatNotFoundError, ChatStore, get_chat_store
from skillchat.core.rate_limit import rate_limit
from skillchat.schemas.chat import (
    ChatCreateRequest,
    ChatOut,
    ChatRenameRequest,
    MessageOut,
    SendMessageRequest,
    SendMessageResponse,
)
from skillchat.services.chat_service import send_message

router = APIRouter()


def _not_found(exc: ChatNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("/chats", response_model=list[ChatOut])
def list_chats(store: ChatStore = Depends(get_chat_store)):
    return [ChatOut(**asdict(chat)) for chat in store.list_chats()]


@router.post("/chats", response_model=ChatOut, status_code=status.HTTP_201_CREATED)
def create_chat(payload: ChatCreateRequest | None = None, store: ChatStore = Depends(get_chat_store)):
    title = ((payload.title if payload else None) or "").strip() or DEFAULT_CHAT_TITLE
    return ChatOut(**asdict(store.create_chat(title)))


@router.get("/chats/{chat_id}", response_model=ChatOut)
def get_chat(chat_id: str, store: ChatStore = Depends(get_chat_store)):
    try:
        return ChatOut(**asdict(store.get_chat(chat_id)))
    except ChatNotFoundError as exc:
        raise _not_found(exc) from exc


@router.patch("/chats/{chat_id}", response_model=ChatOut)
def rename_chat(chat_id: str, payload: ChatRenameRequest, store: ChatStore = Depends(get_chat_store)):
    title = payload.title.strip()
    if not title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Chat title cannot be blank.")
    try:
        return ChatOut(**asdict(store.rename_chat(chat_id, title)))
    except ChatNotFoundError as exc:
        raise _not_found(exc) from exc


@router.delete("/chats/{chat_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_chat(chat_id: str, store: ChatStore = Depends(get_chat_store)):
    try:
        store.delete_chat(chat_id)
    except ChatNotFoundError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/chats/{chat_id}/messages", response_model=list[MessageOut])
def list_messages(chat_id: str, store: ChatStore = Depends(get_chat_store)):
    try:
        return [MessageOut(**asdict(message)) for message in store.list_messages(chat_id)]
    except ChatNotFoundError as exc:
        raise _not_found(exc) from exc


async def _send(store: ChatStore, chat_id: str | None, payload: SendMessageRequest, ai: AIClient) -> SendMessageResponse:
    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please type a message.")
    try:
        chat, user_message, assistant_message = await send_message(store, chat_id, content, ai=ai)
    except ChatNotFoundError as exc:
        raise _not_found(exc) from exc
    return SendMessageResponse(
        chat=ChatOut(**asdict(chat)),
        user_message=MessageOut(**asdict(user_message)),
        assistant_message=MessageOut(**asdict(assistant_message)),
    )


@router.post("/chats/{chat_id}/messages", response_model=SendMessageResponse)
@rate_limit()
async def post_message(
    request: Request,
    chat_id: str,
    payload: SendMessageRequest,
    store: ChatStore = Depends(get_chat_store),
    ai: AIClient = Depends(chat_ai_client),
):
    _ = request
    return await _send(store, chat_id, payload, ai)


@router.post("/messages", response_model=SendMessageResponse)
@rate_limit()
async def post_first_message(
    request: Request,
    payload: SendMessageRequest,
    store: ChatStore = Depends(get_chat_store),
    ai: AIClient = Depends(chat_ai_client),
):
    """Start a new chat with its first message."""
    _ = request
    return await _send(store, None, payload, ai)
