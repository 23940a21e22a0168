"""Test package for the S3 file retriever client.

Structure:
    - unit/: Controller, state and projection tests against a stub gateway
    - integration/: Gateway and end-to-end flows against an in-process fake API

Leverages pytest with pytest-asyncio for coroutine tests and pytest-check
for soft assertions.
"""
