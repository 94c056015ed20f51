from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

MessageRole = Literal["user", "assistant"]


class ChatTurn(BaseModel):
    role: MessageRole
    content: str = Field(max_length=20000)


class ChatRequest(BaseModel):
    messages: list[ChatTurn] = Field(min_length=1, max_length=200)


class ChatReply(BaseModel):
    response: str


class ChatCreateRequest(BaseModel):
    title: str | None = Field(default=None, max_length=200)


class ChatRenameRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)


class ChatOut(BaseModel):
    id: str
    title: str
    created_at: datetime
    updated_at: datetime


class MessageOut(BaseModel):
    id: str
    chat_id: str
    content: str
    role: MessageRole
    timestamp: datetime


class SendMessageRequest(BaseModel):
    content: str = Field(max_length=20000)


class SendMessageResponse(BaseModel):
    chat: ChatOut
    user_message: MessageOut
    assistant_message: MessageOut
