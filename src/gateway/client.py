"""HTTP gateway to the chat and file API.

One coroutine per server resource. Responses are validated into pydantic
entities here, so callers only ever see typed data or a GatewayError.
No retries: callers decide whether to re-issue a request.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from src.config import ClientConfig, get_client_config
from src.models.schemas import (
    PDF_CONTENT_TYPE,
    Acknowledgement,
    ChatHistoryEnvelope,
    ChatId,
    ChatListEnvelope,
    ChatSummary,
    CreateChatRequest,
    FileDescriptor,
    FileListEnvelope,
    Message,
    SendMessageRequest,
    UploadResult,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class GatewayError(Exception):
    """Raised when an API call does not produce a usable response."""

    pass


class TransportError(GatewayError):
    """Network failure or non-2xx response.

    Attributes:
        status_code: HTTP status of the response, None if none was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(GatewayError):
    """Response body is not JSON or does not match the expected shape."""

    pass


def _error_text(response: httpx.Response) -> str | None:
    """Extract the server's ``error`` text from a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


class RemoteGateway:
    """Thin async client for the ``/api/v1`` chat and file resources.

    Owns an ``httpx.AsyncClient`` unless one is injected (tests pass a client
    bound to an ASGI transport).
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            client: Optional pre-built HTTP client. The gateway does not
                    close clients it did not create.
        """
        self._config = config or get_client_config()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=self._config.request_timeout,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "RemoteGateway":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request and fail on transport errors or non-2xx statuses.

        Raises:
            TransportError: If the server is unreachable or answers non-2xx.
        """
        try:
            response = await self._client.request(method, path.lstrip("/"), **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"Connection failed: {e}") from e

        if response.is_error:
            detail = _error_text(response)
            message = f"HTTP {response.status_code}"
            if detail:
                message = f"{message}: {detail}"
            raise TransportError(message, status_code=response.status_code)

        return response

    @staticmethod
    def _decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Validate a response body against an envelope model.

        Raises:
            DecodeError: If the body is not JSON or has the wrong shape.
        """
        try:
            return model.model_validate(response.json())
        except ValueError as e:
            # pydantic's ValidationError is a ValueError too
            kind = "Unexpected" if isinstance(e, ValidationError) else "Malformed"
            raise DecodeError(
                f"{kind} response from {response.request.method} "
                f"{response.request.url.path}: {e}"
            ) from e

    async def list_chats(self) -> list[ChatSummary]:
        """Fetch all chat summaries in server order."""
        response = await self._request("GET", "/chat/list")
        return self._decode(response, ChatListEnvelope).data

    async def create_chat(self, title: str) -> Any:
        """Create a chat.

        The acknowledgement payload is returned as-is; it is not expected
        to contain the new chat's id.
        """
        payload = CreateChatRequest(title=title)
        response = await self._request("POST", "/chat/new", json=payload.model_dump(mode="json"))
        return self._decode(response, Acknowledgement).data

    async def get_history(self, chat_id: ChatId) -> list[Message]:
        """Fetch the full transcript of a chat."""
        response = await self._request("GET", f"/chat/{chat_id}/history")
        return self._decode(response, ChatHistoryEnvelope).data.messages

    async def delete_chat(self, chat_id: ChatId) -> None:
        await self._request("DELETE", f"/chat/{chat_id}/delete")

    async def send_message(self, chat_id: ChatId, text: str) -> None:
        """Post a user message; the server appends it and the reply.

        Raises:
            ValidationError: If text is empty after stripping.
            GatewayError: If the request fails.
        """
        payload = SendMessageRequest(id=chat_id, message=text)
        response = await self._request(
            "POST", "/chat/send-messages", json=payload.model_dump(mode="json")
        )
        self._decode(response, Acknowledgement)

    async def list_files(self) -> list[FileDescriptor]:
        """Fetch descriptors for every file in the bucket."""
        response = await self._request("GET", "/files/list")
        return self._decode(response, FileListEnvelope).data

    async def upload_file(
        self,
        content: bytes,
        filename: str,
        content_type: str = PDF_CONTENT_TYPE,
    ) -> UploadResult:
        """Upload a file as multipart field ``file``.

        Never raises for transport problems; the outcome is reported in the
        returned UploadResult instead.

        Args:
            content: Raw file bytes.
            filename: Name sent with the multipart part.
            content_type: Declared MIME type of the part.

        Returns:
            UploadResult with success flag, HTTP status and error text.
        """
        try:
            response = await self._client.post(
                "upload-file",
                files={"file": (filename, content, content_type)},
            )
        except httpx.RequestError as e:
            logger.error(f"Upload of {filename} failed: {e}")
            return UploadResult(
                filename=filename,
                success=False,
                error=f"Error uploading file: {e}",
            )

        if response.is_error:
            error = _error_text(response) or "Failed to upload file"
            logger.warning(f"Upload of {filename} rejected with HTTP {response.status_code}: {error}")
            return UploadResult(
                filename=filename,
                success=False,
                http_status=response.status_code,
                error=error,
            )

        logger.info(f"Uploaded {filename} ({len(content)} bytes)")
        return UploadResult(filename=filename, success=True, http_status=response.status_code)
