"""Integration tests for the gateway and controller working as a system.

No stubs for core functionality: a real RemoteGateway sends HTTP requests
through httpx's ASGITransport to a FastAPI fake of the chat and file API.
"""
