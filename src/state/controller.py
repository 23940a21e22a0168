"""Interaction controller: orchestrates user intents against the API.

Owns the chat directory, active session, file index and view state, and is
the only code that mutates them. Each intent is a coroutine that suspends
only at gateway calls.

Sequencing rules:

1. **Wholesale refresh** - Collections are replaced from server responses,
   never patched. Mutations (create, delete, send, upload) are followed by
   a re-fetch of the affected collection.

2. **Two-phase send** - The send endpoint does not echo the transcript, so
   a send is SEND (post the message) followed by SYNC (re-fetch history).
   The in-flight flag covers both phases; a second send is rejected, not
   queued.

3. **Generation tokens** - Every selection is stamped by the session. The
   SYNC of a send runs only if the chat the user last asked for is still
   the one the message went to, and then issues its own token. Switching
   to another chat mid-send drops the SYNC; reselecting the same chat
   does not.

4. **Failures leave state alone** - A GatewayError is logged at the call
   site; only in-flight flags and pending selections are reset. No
   retries. A delete the server accepted still clears the session even if
   the following list refresh fails.
"""

import logging
from collections.abc import Callable

from src.gateway.client import GatewayError, RemoteGateway
from src.models.schemas import DEFAULT_CHAT_TITLE, PDF_CONTENT_TYPE, ChatId, UploadResult
from src.state.directory import ChatDirectory
from src.state.file_index import FileIndex
from src.state.session import ActiveSession
from src.state.view import StagedFile, ViewState

logger = logging.getLogger(__name__)


class InteractionController:
    """Single owner of client state, exposing user intents as coroutines."""

    def __init__(
        self,
        gateway: RemoteGateway,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            gateway: Gateway used for every server call.
            on_change: Optional callback invoked after state changes that
                       happen inside an intent, so the view can redraw
                       while the intent is still awaiting the server.
        """
        self._gateway = gateway
        self.on_change = on_change
        self.directory = ChatDirectory(gateway)
        self.session = ActiveSession()
        self.files = FileIndex(gateway)
        self.view = ViewState()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    # Startup and refreshes

    async def start(self) -> None:
        """Load the chat list and the file index for a fresh page."""
        await self.refresh_chats()
        await self.refresh_files()

    async def refresh_chats(self) -> bool:
        try:
            await self.directory.refresh()
        except GatewayError as e:
            logger.error(f"Error fetching chat list: {e}")
            return False
        finally:
            self._changed()
        return True

    async def refresh_files(self) -> bool:
        try:
            await self.files.refresh()
        except GatewayError as e:
            logger.error(f"Error fetching file list: {e}")
            return False
        finally:
            self._changed()
        return True

    # Session

    async def select_chat(self, chat_id: ChatId) -> bool:
        """Load a chat's history and make it the active session.

        Returns:
            True if the history was installed; False on failure or when a
            newer selection superseded this one.
        """
        token = self.session.issue(chat_id)
        try:
            messages = await self._gateway.get_history(chat_id)
        except GatewayError as e:
            logger.error(f"Error loading chat history for {chat_id}: {e}")
            self.session.abandon(token)
            return False
        installed = self.session.resolve(token, messages)
        if installed:
            self._changed()
        return installed

    def set_message_draft(self, text: str) -> None:
        self.view.message_draft = text

    def can_send(self, text: str | None = None) -> bool:
        text = self.view.message_draft if text is None else text
        return bool(text.strip()) and not self.session.is_welcome and not self.view.is_sending

    async def send_message(self, text: str | None = None) -> bool:
        """Send a message to the active chat and re-sync its transcript.

        Args:
            text: Message to send; defaults to the current input draft.

        Returns:
            True if the message was sent and the new transcript installed.
        """
        text = self.view.message_draft if text is None else text
        if not self.can_send(text):
            logger.debug("Send rejected: no active chat, empty message or send in flight")
            return False

        chat_id = self.session.chat_id
        message = text.strip()
        self.view.begin_send(chat_id)
        self._changed()

        token = None
        try:
            # Phase SEND
            await self._gateway.send_message(chat_id, message)

            # Phase SYNC
            if self.session.target_chat_id != chat_id:
                logger.info(f"Chat switched during send to {chat_id}; skipping history sync")
                return False
            token = self.session.issue(chat_id)
            messages = await self._gateway.get_history(chat_id)
            return self.session.resolve(token, messages)
        except GatewayError as e:
            logger.error(f"Error sending message to chat {chat_id}: {e}")
            if token is not None:
                self.session.abandon(token)
            return False
        finally:
            self.view.end_send()
            self._changed()

    # Directory

    def open_title_modal(self) -> None:
        self.view.open_title_modal()

    def cancel_title_modal(self) -> None:
        self.view.close_title_modal()

    def set_title_draft(self, title: str) -> None:
        self.view.title_draft = title

    async def create_chat(self, title: str | None = None) -> bool:
        """Create a chat, resolve its id from the refreshed list and select it.

        Args:
            title: Chat title; defaults to the title modal draft, and to
                   ``"New Chat"`` when blank.

        Returns:
            True if the chat was created. The title modal stays open on
            failure.
        """
        title = self.view.title_draft if title is None else title
        title = title.strip() or DEFAULT_CHAT_TITLE
        try:
            created = await self.directory.create(title)
        except GatewayError as e:
            logger.error(f"Error creating chat '{title}': {e}")
            return False

        if created is not None:
            self.session.activate_empty(created.id)
            logger.info(f"Created chat {created.id} ('{created.title}')")
        self.view.close_title_modal()
        self._changed()
        return True

    async def delete_chat(self, chat_id: ChatId) -> bool:
        """Delete a chat; return to the welcome state if it was active.

        Returns:
            True once the server has deleted the chat (or reports it gone),
            even if the chat list could not be refreshed afterwards.
        """
        try:
            await self.directory.remove(chat_id)
        except GatewayError as e:
            logger.error(f"Error deleting chat {chat_id}: {e}")
            return False

        if chat_id in (self.session.chat_id, self.session.target_chat_id):
            self.session.clear()
        await self.refresh_chats()
        return True

    # File panel

    def toggle_file_panel(self) -> bool:
        return self.view.toggle_file_panel()

    def close_file_panel(self) -> None:
        self.view.close_file_panel()

    # Upload

    def open_upload_modal(self) -> None:
        self.view.open_upload_modal()

    def close_upload_modal(self) -> bool:
        return self.view.close_upload_modal()

    def stage_upload(self, filename: str, content: bytes, content_type: str | None) -> bool:
        """Offer a picked file to the upload modal.

        Returns:
            True if it is a PDF and is now staged.
        """
        return self.view.stage_upload(StagedFile(filename, content, content_type))

    def can_submit_upload(self) -> bool:
        pending = self.view.pending_upload
        return (
            pending is not None
            and pending.validated
            and pending.file is not None
            and not self.view.is_uploading
        )

    async def submit_upload(self) -> UploadResult | None:
        """Upload the staged PDF and refresh the file index on success.

        Returns:
            The upload outcome, or None if nothing could be submitted.
        """
        staged = self.view.begin_upload()
        if staged is None:
            logger.debug("Upload submit rejected: no validated file or upload in flight")
            return None
        self._changed()

        result = UploadResult(filename=staged.filename, success=False)
        try:
            result = await self._gateway.upload_file(
                staged.content, staged.filename, staged.content_type or PDF_CONTENT_TYPE
            )
            if result.success:
                await self.refresh_files()
        finally:
            self.view.finish_upload(result)
            self._changed()
        return result
