"""Active session: the selected chat and its transcript.

Selection is a two-phase operation. ``issue`` stamps a token for the chat
being loaded; ``resolve`` installs a history response only if that token is
still the newest. Anything that changes the session bumps the generation,
including an install itself, so late responses for an earlier selection are
dropped instead of being shown under the wrong chat.

While a selection is pending, ``target_chat_id`` names the chat it will
install; otherwise it is the displayed chat.
"""

import logging
from typing import NamedTuple

from src.models.schemas import ChatId, Message

logger = logging.getLogger(__name__)


class SessionToken(NamedTuple):
    """Stamp identifying one selection of a chat."""

    generation: int
    chat_id: ChatId


class ActiveSession:
    """The single selected conversation.

    ``chat_id`` is None in the welcome state, and then ``messages`` is empty.
    Messages are only ever replaced as a whole.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._chat_id: ChatId | None = None
        self._messages: tuple[Message, ...] = ()
        self._pending: SessionToken | None = None

    @property
    def chat_id(self) -> ChatId | None:
        return self._chat_id

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._messages

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_welcome(self) -> bool:
        return self._chat_id is None

    @property
    def target_chat_id(self) -> ChatId | None:
        """Chat the user last asked for: the pending selection, else the shown chat."""
        if self._pending is not None:
            return self._pending.chat_id
        return self._chat_id

    def issue(self, chat_id: ChatId) -> SessionToken:
        """Start a new selection of ``chat_id``, superseding any pending one."""
        self._generation += 1
        self._pending = SessionToken(self._generation, chat_id)
        return self._pending

    def is_current(self, token: SessionToken) -> bool:
        return token.generation == self._generation

    def resolve(self, token: SessionToken, messages: list[Message]) -> bool:
        """Install a history response for ``token``.

        Returns:
            True if installed, False if the token was stale and the
            response was discarded.
        """
        if not self.is_current(token):
            logger.info(
                f"Discarding stale history for chat {token.chat_id} "
                f"(generation {token.generation}, current {self._generation})"
            )
            return False
        self._chat_id = token.chat_id
        self._messages = tuple(messages)
        self._pending = None
        # Tokens are single-use: anything captured before this install is stale
        self._generation += 1
        return True

    def abandon(self, token: SessionToken) -> None:
        """Give up on a selection whose history could not be loaded.

        The shown chat stays as it is. A token that was already superseded
        leaves the newer pending selection alone.
        """
        if self.is_current(token):
            self._pending = None
            self._generation += 1

    def activate_empty(self, chat_id: ChatId) -> SessionToken:
        """Select a chat known to have no messages yet (a just-created chat)."""
        token = self.issue(chat_id)
        self.resolve(token, [])
        return token

    def clear(self) -> None:
        """Return to the welcome state and cancel pending selections."""
        self._generation += 1
        self._chat_id = None
        self._messages = ()
        self._pending = None
