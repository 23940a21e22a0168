"""Client-side session and view state.

Responsibilities:
    - Chat directory and file index caches, refreshed wholesale
    - Active session with generation tokens against stale responses
    - Panel and modal flags behind named transitions
    - Interaction controller sequencing every user intent

Only the controller mutates these objects; the UI reads them.
"""

from src.state.controller import InteractionController
from src.state.directory import ChatDirectory
from src.state.file_index import FileIndex
from src.state.session import ActiveSession, SessionToken
from src.state.view import PendingUpload, StagedFile, UploadModalState, ViewState

__all__ = [
    "ActiveSession",
    "ChatDirectory",
    "FileIndex",
    "InteractionController",
    "PendingUpload",
    "SessionToken",
    "StagedFile",
    "UploadModalState",
    "ViewState",
]
