"""Update shipping address ajax handler.

Flow:
1. validate: orderId, names, street, city and postal code, then the order
2. execute: replace the order's shipping address
3. finalize: orderPrepare, then payment instruction sync (enabled here)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (order service is injected via protocol)
"""

from typing import Any

from src.application.ajax.context import RequestContext
from src.application.ajax.optional_operations import OptionalOperationConfig
from src.application.commands.checkout_commands import UpdateShippingAddress
from src.application.commands.handlers.checkout_support import (
    ORDER_ID,
    build_checkout_operations,
    check_editable_order,
    current_order_summary,
    record,
    required_value,
    unwrap,
)
from src.application.errors import ErrorAggregator
from src.core.constants import (
    ADDRESS_LINE_MAX_LENGTH,
    CITY_MAX_LENGTH,
    NAME_MAX_LENGTH,
    POSTAL_CODE_PATTERN,
    SYNC_PAYMENT_INSTRUCTION,
)
from src.core.validation import validate_max_length, validate_pattern, validate_required
from src.domain.entities.order import ShippingAddress
from src.domain.protocols.order_service_protocol import OrderServiceProtocol

# (parameter, label, max length)
_TEXT_FIELDS: tuple[tuple[str, str, int], ...] = (
    ("firstName", "first name", NAME_MAX_LENGTH),
    ("lastName", "last name", NAME_MAX_LENGTH),
    ("addressLine1", "street address", ADDRESS_LINE_MAX_LENGTH),
    ("city", "city", CITY_MAX_LENGTH),
)


class UpdateShippingAddressHandler:
    """Handler for the update_shipping_address ajax command."""

    name = "update_shipping_address"
    view_name = "ShippingAddressView"
    parameters = (ORDER_ID, "firstName", "lastName", "addressLine1", "city", "postalCode")
    operation_config = OptionalOperationConfig(
        enabled=frozenset({SYNC_PAYMENT_INSTRUCTION})
    )

    def __init__(self, order_service: OrderServiceProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            order_service: Order service for lookups and updates.
        """
        self._order_service = order_service
        self.operations = build_checkout_operations(order_service)

    async def validate(self, context: RequestContext, errors: ErrorAggregator) -> None:
        """Record one ApplicationError per invalid field, in field order."""
        order_id = record(
            errors, validate_required(context.get(ORDER_ID), ORDER_ID, "order number")
        )
        self._collect_address(context, errors)
        if order_id is not None:
            await check_editable_order(self._order_service, errors, order_id)

    async def execute(self, context: RequestContext) -> dict[str, Any]:
        """Replace the shipping address.

        Returns:
            Order summary after the update.

        Raises:
            CommandExecutionError: If the order service fails.
        """
        command = self._to_command(context)
        address = ShippingAddress(
            first_name=command.first_name,
            last_name=command.last_name,
            address_line1=command.address_line1,
            city=command.city,
            postal_code=command.postal_code,
        )
        order = unwrap(
            await self._order_service.update_shipping_address(command.order_id, address)
        )
        return order.to_summary()

    async def view_data(self, context: RequestContext, data: Any) -> dict[str, Any]:
        """Return the order as stored once the optional operations ran."""
        return await current_order_summary(self._order_service, context)

    # Helpers
    def _collect_address(
        self, context: RequestContext, errors: ErrorAggregator
    ) -> None:
        for field_name, label, max_length in _TEXT_FIELDS:
            value = record(
                errors, validate_required(context.get(field_name), field_name, label)
            )
            if value is not None:
                record(errors, validate_max_length(value, max_length, field_name, label))

        postal_code = record(
            errors,
            validate_required(context.get("postalCode"), "postalCode", "postal code"),
        )
        if postal_code is not None:
            record(
                errors,
                validate_pattern(
                    postal_code, POSTAL_CODE_PATTERN, "postalCode", "postal code"
                ),
            )

    def _to_command(self, context: RequestContext) -> UpdateShippingAddress:
        values = {name: required_value(context, name) for name in self.parameters}
        return UpdateShippingAddress(
            order_id=values[ORDER_ID],
            first_name=values["firstName"],
            last_name=values["lastName"],
            address_line1=values["addressLine1"],
            city=values["city"],
            postal_code=values["postalCode"],
        )
