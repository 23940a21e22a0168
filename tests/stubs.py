"""Test doubles shared by unit tests."""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from src.gateway.client import GatewayError
from src.models.schemas import (
    ChatId,
    ChatSummary,
    FileDescriptor,
    Message,
    Role,
    UploadResult,
)


class StubGateway:
    """Gateway double with the RemoteGateway interface.

    Records calls in order, can hold a call on an asyncio.Event gate, and
    raises one-shot errors registered by method name.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.chats: list[ChatSummary] = []
        self.histories: dict[ChatId, list[Message]] = {}
        self.files: list[FileDescriptor] = []
        self.errors: dict[str, GatewayError] = {}
        self.gates: dict[Any, asyncio.Event] = {}
        self.upload_result: UploadResult | None = None
        self.on_call: Callable[[str], None] | None = None
        self._next_id = 100

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def count(self, name: str) -> int:
        return self.call_names().count(name)

    async def _enter(self, name: str, *args: Any) -> None:
        self.calls.append((name, *args))
        if self.on_call is not None:
            self.on_call(name)
        gate = self.gates.get((name, *args)) or self.gates.get(name)
        if gate is not None:
            await gate.wait()
        if name in self.errors:
            raise self.errors.pop(name)

    async def list_chats(self) -> list[ChatSummary]:
        await self._enter("list_chats")
        return list(self.chats)

    async def create_chat(self, title: str) -> Any:
        await self._enter("create_chat", title)
        self._next_id += 1
        summary = ChatSummary(id=self._next_id, title=title, created_at=datetime.now(UTC))
        self.chats.insert(0, summary)
        return {"status": "created"}

    async def get_history(self, chat_id: ChatId) -> list[Message]:
        await self._enter("get_history", chat_id)
        return list(self.histories.get(chat_id, []))

    async def delete_chat(self, chat_id: ChatId) -> None:
        await self._enter("delete_chat", chat_id)
        self.chats = [chat for chat in self.chats if chat.id != chat_id]

    async def send_message(self, chat_id: ChatId, text: str) -> None:
        await self._enter("send_message", chat_id, text)
        history = self.histories.setdefault(chat_id, [])
        history.append(Message(role=Role.USER, content=text))
        history.append(Message(role=Role.ASSISTANT, content=f"Results for: {text}"))

    async def list_files(self) -> list[FileDescriptor]:
        await self._enter("list_files")
        return list(self.files)

    async def upload_file(self, content: bytes, filename: str, content_type: str) -> UploadResult:
        await self._enter("upload_file", filename, content_type)
        if self.upload_result is not None:
            return self.upload_result
        self.files.append(
            FileDescriptor(
                key=filename,
                size=len(content),
                last_modified=datetime.now(UTC),
                url=f"https://bucket.example.com/{filename}",
            )
        )
        return UploadResult(filename=filename, success=True, http_status=200)


def make_chat(chat_id: ChatId, title: str, minutes_ago: int = 0) -> ChatSummary:
    created = datetime(2026, 10, 19, 12, 0, tzinfo=UTC) - timedelta(minutes=minutes_ago)
    return ChatSummary(id=chat_id, title=title, created_at=created)


