from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CHAT_TITLE = "New Chat"
PDF_CONTENT_TYPE = "application/pdf"

ChatId = int | str


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatSummary(BaseModel):
    """A conversation as listed in the chat directory.

    Attributes:
        id: Server-assigned chat identifier.
        title: Display title chosen when the chat was created.
        created_at: Creation timestamp.
    """

    model_config = ConfigDict(frozen=True)

    id: ChatId
    title: str
    created_at: datetime


class Message(BaseModel):
    """A single turn of a conversation.

    Attributes:
        role: Who produced the message (user or assistant).
        content: The message text.
        timestamp: When the server recorded the message, if it did.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    timestamp: datetime | None = None


class FileDescriptor(BaseModel):
    """A file stored in the bucket.

    Attributes:
        key: Object key (path and name) inside the bucket.
        size: Size in bytes.
        last_modified: Last modification timestamp.
        url: Retrieval URL for downloading the file.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    size: int = Field(ge=0)
    last_modified: datetime
    url: str


class ChatHistory(BaseModel):
    messages: list[Message] = Field(default_factory=list)


class ChatListEnvelope(BaseModel):
    data: list[ChatSummary]


class ChatHistoryEnvelope(BaseModel):
    data: ChatHistory


class FileListEnvelope(BaseModel):
    data: list[FileDescriptor]


class Acknowledgement(BaseModel):
    """Success body of a mutation; the payload is not relied upon."""

    data: Any = None


class CreateChatRequest(BaseModel):
    """Request payload for POST /chat/new.

    Attributes:
        title: Chat title, ``"New Chat"`` when left blank.
        messages: Initial transcript, always empty.
    """

    title: str = DEFAULT_CHAT_TITLE
    messages: list[Message] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def default_blank_title(cls, v: str | None) -> str:
        """Strip the title and fall back to the default when it is blank."""
        if v is None:
            return DEFAULT_CHAT_TITLE
        if isinstance(v, str):
            return v.strip() or DEFAULT_CHAT_TITLE
        return v


class SendMessageRequest(BaseModel):
    """Request payload for POST /chat/send-messages.

    Attributes:
        id: Chat receiving the message.
        message: The user's text.
    """

    id: ChatId
    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class UploadResult(BaseModel):
    """Outcome of an upload attempt.

    Attributes:
        filename: Name of the uploaded file.
        success: Whether the server accepted the file.
        http_status: Response status, None when no response was received.
        error: Error message if the upload failed.
    """

    filename: str
    success: bool
    http_status: int | None = None
    error: str | None = None
