"""Remote gateway to the chat and file API.

Wraps the ``/api/v1`` HTTP resources with httpx and turns JSON bodies into
typed entities. Holds no state of its own.

Resources:
    - /chat/list, /chat/new, /chat/{id}/history, /chat/{id}/delete
    - /chat/send-messages
    - /files/list, /upload-file
"""

from src.gateway.client import DecodeError, GatewayError, RemoteGateway, TransportError

__all__ = ["DecodeError", "GatewayError", "RemoteGateway", "TransportError"]
