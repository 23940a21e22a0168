"""Chat directory: the cached list of conversation summaries."""

import logging
from collections.abc import Iterator

from src.gateway.client import RemoteGateway, TransportError
from src.models.schemas import ChatId, ChatSummary

logger = logging.getLogger(__name__)


class ChatDirectory:
    """Ordered chat summaries, always replaced wholesale from the server.

    Summaries are never inserted or dropped locally. ``create`` refreshes
    itself; after ``remove`` the caller refreshes.
    """

    def __init__(self, gateway: RemoteGateway) -> None:
        self._gateway = gateway
        self._chats: tuple[ChatSummary, ...] = ()

    @property
    def chats(self) -> tuple[ChatSummary, ...]:
        return self._chats

    def __len__(self) -> int:
        return len(self._chats)

    def __iter__(self) -> Iterator[ChatSummary]:
        return iter(self._chats)

    def get(self, chat_id: ChatId) -> ChatSummary | None:
        return next((chat for chat in self._chats if chat.id == chat_id), None)

    async def refresh(self) -> tuple[ChatSummary, ...]:
        """Replace the collection with the server's current list."""
        chats = await self._gateway.list_chats()
        self._chats = tuple(chats)
        logger.debug(f"Chat directory refreshed: {len(self._chats)} chats")
        return self._chats

    async def create(self, title: str) -> ChatSummary | None:
        """Create a chat and resolve it from the refreshed list.

        The create endpoint does not return the new id, so the first summary
        of the refreshed list is taken as the new chat. This relies on the
        server listing chats newest first.

        Returns:
            The newest summary, or None if the refreshed list is empty.
        """
        await self._gateway.create_chat(title)
        chats = await self.refresh()
        if not chats:
            logger.warning(f"Chat '{title}' was created but the chat list is empty")
            return None
        return chats[0]

    async def remove(self, chat_id: ChatId) -> None:
        """Delete a chat on the server.

        A 404 means the chat is already gone and counts as deleted. The
        collection is left as is until the next ``refresh``.
        """
        try:
            await self._gateway.delete_chat(chat_id)
        except TransportError as e:
            if e.status_code != 404:
                raise
            logger.info(f"Chat {chat_id} was already deleted")
