"""Pydantic models for server payloads and client requests.

Server responses are validated into these types at the gateway boundary,
so UI state never holds undefined fields.

Models:
    - ChatSummary: Conversation entry in the chat directory
    - Message: Single user or assistant turn
    - FileDescriptor: File stored in the bucket
    - CreateChatRequest / SendMessageRequest: Outgoing payloads
    - UploadResult: Tagged outcome of a file upload
"""

from src.models.schemas import (
    DEFAULT_CHAT_TITLE,
    PDF_CONTENT_TYPE,
    Acknowledgement,
    ChatHistory,
    ChatHistoryEnvelope,
    ChatId,
    ChatListEnvelope,
    ChatSummary,
    CreateChatRequest,
    FileDescriptor,
    FileListEnvelope,
    Message,
    Role,
    SendMessageRequest,
    UploadResult,
)

__all__ = [
    "DEFAULT_CHAT_TITLE",
    "PDF_CONTENT_TYPE",
    "Acknowledgement",
    "ChatHistory",
    "ChatHistoryEnvelope",
    "ChatId",
    "ChatListEnvelope",
    "ChatSummary",
    "CreateChatRequest",
    "FileDescriptor",
    "FileListEnvelope",
    "Message",
    "Role",
    "SendMessageRequest",
    "UploadResult",
]
