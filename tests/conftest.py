"""Pytest configuration shared by unit and API tests.

This configuration ensures:
1. Async tests are marked for pytest-asyncio
2. Container singletons (order store, command service) are fresh per test
3. Common test doubles are available as fixtures
"""

import inspect

import pytest

from src.application.errors import ErrorAggregator
from src.core.container import (
    get_ajax_command_service,
    get_fragment_renderer,
    get_order_service,
)
from src.infrastructure.persistence.in_memory_order_service import (
    InMemoryOrderService,
)
from tests.utils.fake_document import FakeDocument
from tests.utils.recording_logger import RecordingLogger


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture(autouse=True)
def reset_container_singletons():
    """Give every test a fresh order store and command service.

    The in-memory order store is process-wide, so edits made by one test
    would otherwise leak into the next.
    """
    get_order_service.cache_clear()
    get_ajax_command_service.cache_clear()
    get_fragment_renderer.cache_clear()
    yield
    get_order_service.cache_clear()
    get_ajax_command_service.cache_clear()
    get_fragment_renderer.cache_clear()


@pytest.fixture
def order_service() -> InMemoryOrderService:
    """In-memory order store seeded with the demo order."""
    return InMemoryOrderService()


@pytest.fixture
def errors() -> ErrorAggregator:
    return ErrorAggregator()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def document() -> FakeDocument:
    return FakeDocument()

