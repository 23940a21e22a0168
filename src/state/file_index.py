"""File index: cached descriptors of the files in the bucket."""

import logging

from src.gateway.client import RemoteGateway
from src.models.schemas import FileDescriptor

logger = logging.getLogger(__name__)


class FileIndex:
    """Bucket listing, replaced wholesale on every refresh.

    Files that appear on the server between refreshes stay invisible until
    the next refresh.
    """

    def __init__(self, gateway: RemoteGateway) -> None:
        self._gateway = gateway
        self._files: tuple[FileDescriptor, ...] = ()

    @property
    def files(self) -> tuple[FileDescriptor, ...]:
        return self._files

    def __len__(self) -> int:
        return len(self._files)

    async def refresh(self) -> tuple[FileDescriptor, ...]:
        files = await self._gateway.list_files()
        self._files = tuple(files)
        logger.debug(f"File index refreshed: {len(self._files)} files")
        return self._files
