"""Test suite for the Widgetsync ajax API.

Test structure:
- unit/: Unit tests - pipeline pieces, handlers and adapters in isolation
- api/: API endpoint tests - the HTTP surface through FastAPI's TestClient
- utils/: Shared test doubles (document, logger, context builders)
"""
