"""View state: panel, modal and in-flight flags of the page.

All flags live in one ViewState object and change only through its named
transition methods, which refuse transitions that are invalid in the
current mode.
"""

import logging
from enum import Enum

from src.models.schemas import PDF_CONTENT_TYPE, ChatId, UploadResult

logger = logging.getLogger(__name__)

PDF_ONLY_ERROR = "Only PDF files are allowed"


class UploadModalState(str, Enum):
    """Lifecycle of the upload modal."""

    CLOSED = "closed"
    OPEN = "open"
    UPLOADING = "uploading"


class StagedFile:
    """A file picked in the upload modal, held in memory until submitted."""

    def __init__(self, filename: str, content: bytes, content_type: str | None) -> None:
        self.filename = filename
        self.content = content
        self.content_type = content_type

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_pdf(self) -> bool:
        if not self.content_type:
            return False
        return self.content_type.split(";", 1)[0].strip().lower() == PDF_CONTENT_TYPE


class PendingUpload:
    """Selection state of the open upload modal.

    Attributes:
        file: The currently staged PDF, if any.
        validated: Whether the latest candidate passed validation.
        error_message: Validation or upload error to display.
    """

    def __init__(self) -> None:
        self.file: StagedFile | None = None
        self.validated: bool = False
        self.error_message: str | None = None

    def stage(self, candidate: StagedFile) -> bool:
        """Validate a picked file and stage it if it is a PDF.

        A rejected candidate leaves the previously staged file in place.

        Returns:
            True if the candidate was staged.
        """
        if not candidate.is_pdf:
            logger.info(
                f"Rejected {candidate.filename}: content type {candidate.content_type!r}"
            )
            self.validated = False
            self.error_message = PDF_ONLY_ERROR
            return False

        self.file = candidate
        self.validated = True
        self.error_message = None
        return True


class ViewState:
    """Every UI flag the controller owns.

    The file panel is independent of the modals. The title and upload
    modals are not forbidden from coexisting, but no intent opens one while
    the other is open.
    """

    def __init__(self) -> None:
        self.file_panel_visible: bool = False
        self.title_modal_open: bool = False
        self.title_draft: str = ""
        self.upload_state: UploadModalState = UploadModalState.CLOSED
        self.pending_upload: PendingUpload | None = None
        self.message_draft: str = ""
        self.sending_chat_id: ChatId | None = None

    # File panel

    def toggle_file_panel(self) -> bool:
        self.file_panel_visible = not self.file_panel_visible
        return self.file_panel_visible

    def close_file_panel(self) -> None:
        self.file_panel_visible = False

    # Title modal

    def open_title_modal(self) -> None:
        self.title_modal_open = True
        self.title_draft = ""

    def close_title_modal(self) -> None:
        self.title_modal_open = False
        self.title_draft = ""

    # Upload modal

    @property
    def upload_modal_open(self) -> bool:
        return self.upload_state is not UploadModalState.CLOSED

    @property
    def is_uploading(self) -> bool:
        return self.upload_state is UploadModalState.UPLOADING

    def open_upload_modal(self) -> None:
        if self.upload_modal_open:
            return
        self.upload_state = UploadModalState.OPEN
        self.pending_upload = PendingUpload()

    def close_upload_modal(self) -> bool:
        """Close the modal and discard the pending upload.

        Returns:
            False if an upload is in flight and the modal stays open.
        """
        if self.is_uploading:
            logger.debug("Upload modal close ignored while uploading")
            return False
        self.upload_state = UploadModalState.CLOSED
        self.pending_upload = None
        return True

    def stage_upload(self, candidate: StagedFile) -> bool:
        if self.upload_state is not UploadModalState.OPEN or self.pending_upload is None:
            return False
        return self.pending_upload.stage(candidate)

    def begin_upload(self) -> StagedFile | None:
        """Enter the uploading state if a validated PDF is staged.

        Returns:
            The file to upload, or None if submission is not possible.
        """
        pending = self.pending_upload
        if (
            self.upload_state is not UploadModalState.OPEN
            or pending is None
            or not pending.validated
            or pending.file is None
        ):
            return None
        self.upload_state = UploadModalState.UPLOADING
        pending.error_message = None
        return pending.file

    def finish_upload(self, result: UploadResult) -> None:
        if not self.is_uploading:
            return
        if result.success:
            self.upload_state = UploadModalState.CLOSED
            self.pending_upload = None
            return
        self.upload_state = UploadModalState.OPEN
        if self.pending_upload is not None:
            self.pending_upload.error_message = result.error or "Failed to upload file"

    # Sending

    @property
    def is_sending(self) -> bool:
        return self.sending_chat_id is not None

    def begin_send(self, chat_id: ChatId) -> None:
        self.sending_chat_id = chat_id
        self.message_draft = ""

    def end_send(self) -> None:
        self.sending_chat_id = None
