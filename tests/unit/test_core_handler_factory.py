"""Unit tests for handler_factory module.

Tests the automatic dependency injection used to build ajax command handlers.

Test Strategy:
- Unit tests with fake handler classes
- Container singletons patched where identity matters
- Cover error paths
"""

from typing import Optional
from unittest.mock import MagicMock, patch

import pytest

from src.application.commands.handlers.update_item_quantity_handler import (
    UpdateItemQuantityHandler,
)
from src.core.container.handler_factory import (
    analyze_handler_dependencies,
    create_handler,
    get_type_name,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.order_service_protocol import OrderServiceProtocol


# =============================================================================
# Test Fixtures - Fake Handler Classes
# =============================================================================


class SimpleHandler:
    """Handler with no dependencies."""

    def __init__(self) -> None:
        pass


class LoggingHandler:
    """Handler with two singleton dependencies."""

    def __init__(
        self, order_service: OrderServiceProtocol, logger: LoggerProtocol
    ) -> None:
        self.order_service = order_service
        self.logger = logger


class UnknownDependencyHandler:
    """Handler depending on something the container does not provide."""

    def __init__(self, mailer: "MailerProtocol") -> None:  # noqa: F821
        self.mailer = mailer


@pytest.mark.unit
class TestGetTypeName:
    """Test get_type_name()."""

    def test_class(self):
        assert get_type_name(OrderServiceProtocol) == "OrderServiceProtocol"

    def test_forward_reference_string(self):
        assert get_type_name("src.domain.protocols.LoggerProtocol") == "LoggerProtocol"

    def test_optional_uses_inner_type(self):
        assert get_type_name(Optional[LoggerProtocol]) == "LoggerProtocol"
        assert get_type_name(LoggerProtocol | None) == "LoggerProtocol"

    def test_none(self):
        assert get_type_name(None) == "None"


@pytest.mark.unit
class TestAnalyzeHandlerDependencies:
    """Test analyze_handler_dependencies()."""

    def test_no_dependencies(self):
        assert analyze_handler_dependencies(SimpleHandler) == {}

    def test_protocol_dependencies(self):
        assert analyze_handler_dependencies(LoggingHandler) == {
            "order_service": "OrderServiceProtocol",
            "logger": "LoggerProtocol",
        }

    def test_unresolvable_forward_reference_falls_back(self):
        assert analyze_handler_dependencies(UnknownDependencyHandler) == {
            "mailer": "MailerProtocol"
        }

    def test_shipped_handler(self):
        assert analyze_handler_dependencies(UpdateItemQuantityHandler) == {
            "order_service": "OrderServiceProtocol"
        }


@pytest.mark.unit
class TestCreateHandler:
    """Test create_handler()."""

    def test_wires_container_singletons(self):
        order_service = MagicMock()
        logger = MagicMock()
        with (
            patch(
                "src.core.container.infrastructure.get_order_service",
                return_value=order_service,
            ),
            patch("src.core.container.infrastructure.get_logger", return_value=logger),
        ):
            handler = create_handler(LoggingHandler)

        assert handler.order_service is order_service
        assert handler.logger is logger

    def test_overrides_win(self):
        fake = MagicMock()

        handler = create_handler(UpdateItemQuantityHandler, order_service=fake)

        assert handler._order_service is fake

    def test_unknown_dependency_raises(self):
        with pytest.raises(ValueError, match="MailerProtocol"):
            create_handler(UnknownDependencyHandler)

    def test_handler_without_dependencies(self):
        assert isinstance(create_handler(SimpleHandler), SimpleHandler)
