"""Unit tests for individual components in isolation.

Coverage:
    - models: Pydantic validation of entities and request payloads
    - state: Session tokens, view transitions, directory and file index
    - controller: Intent sequencing, in-flight locking and cancellation
    - ui.projection: Formatting and disabled predicates

Uses the recording StubGateway instead of HTTP.
"""
