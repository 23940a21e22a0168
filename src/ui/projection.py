"""Render-only values derived from controller state.

Pure functions; nothing here holds or mutates state.
"""

from datetime import datetime

from src.state.controller import InteractionController

WELCOME_EXAMPLES = (
    "Find files related to John Smith",
    "Show me files from the Marketing department",
    "Get documents for Project Alpha",
)
EMPTY_CHAT_HINT = "Start a conversation by asking about files in your S3 bucket"
NO_FILES_HINT = "No files found in S3 bucket"
UPLOAD_SUCCESS_NOTICE = "File uploaded successfully!"


def _local(ts: datetime) -> datetime:
    # Naive timestamps are shown as received
    return ts.astimezone() if ts.tzinfo is not None else ts


def format_time(ts: datetime | None) -> str:
    """Format a message timestamp as ``02:30 PM``; empty when absent."""
    if ts is None:
        return ""
    return _local(ts).strftime("%I:%M %p")


def format_date(ts: datetime) -> str:
    """Format a date as ``10/5/2026``."""
    ts = _local(ts)
    return f"{ts.month}/{ts.day}/{ts.year}"


def format_size_kb(size: int) -> str:
    return f"{size / 1024:.2f} KB"


def files_toggle_label(controller: InteractionController) -> str:
    return f"S3 Files ({len(controller.files)})"


def is_active_chat(controller: InteractionController, chat_id: object) -> bool:
    return controller.session.chat_id == chat_id


def send_disabled(controller: InteractionController) -> bool:
    return not controller.can_send()


def input_disabled(controller: InteractionController) -> bool:
    return controller.view.is_sending


def send_button_icon(controller: InteractionController) -> str:
    return "hourglass_empty" if controller.view.is_sending else "send"


def show_typing_indicator(controller: InteractionController) -> bool:
    """Typing dots are shown under the chat the pending send belongs to."""
    view = controller.view
    return view.is_sending and view.sending_chat_id == controller.session.chat_id


def upload_submit_disabled(controller: InteractionController) -> bool:
    return not controller.can_submit_upload()


def upload_submit_label(controller: InteractionController) -> str:
    return "Uploading..." if controller.view.is_uploading else "Upload to S3"


def upload_error(controller: InteractionController) -> str | None:
    pending = controller.view.pending_upload
    return pending.error_message if pending is not None else None


def staged_file_caption(controller: InteractionController) -> str | None:
    """Name and size of the staged file, e.g. ``report.pdf (12.00 KB)``."""
    pending = controller.view.pending_upload
    if pending is None or pending.file is None:
        return None
    return f"{pending.file.filename} ({format_size_kb(pending.file.size)})"
