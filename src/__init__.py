"""S3 File Retriever - chat client for finding and uploading bucket files.

Combines httpx for API access, Pydantic for payload validation and NiceGUI
for the single-page interface.

Components:
    - gateway: HTTP calls to the chat and file API
    - state: Chat directory, active session, file index and controller
    - ui: Web page and render-only projections
    - models: Server entities and request payloads
"""

__version__ = "0.1.0"
