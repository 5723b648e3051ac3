"""Update item quantity ajax handler.

Flow:
1. validate: orderId, orderItemId, quantity range, then the order and item
2. execute: change the item quantity
3. finalize: orderPrepare, then payment instruction sync (enabled here)
"""

from typing import Any

from src.application.ajax.context import RequestContext
from src.application.ajax.optional_operations import OptionalOperationConfig
from src.application.commands.checkout_commands import UpdateItemQuantity
from src.application.commands.handlers.checkout_support import (
    ORDER_ID,
    ORDER_ITEM_ID,
    build_checkout_operations,
    check_editable_order,
    current_order_summary,
    record,
    required_value,
    unwrap,
)
from src.application.errors import ErrorAggregator
from src.core.constants import (
    ITEM_QUANTITY_MAX,
    ITEM_QUANTITY_MIN,
    SYNC_PAYMENT_INSTRUCTION,
)
from src.core.validation import validate_int_range, validate_required
from src.domain.protocols.order_service_protocol import OrderServiceProtocol

QUANTITY = "quantity"


class UpdateItemQuantityHandler:
    """Handler for the update_item_quantity ajax command."""

    name = "update_item_quantity"
    view_name = "OrderItemsView"
    parameters = (ORDER_ID, ORDER_ITEM_ID, QUANTITY)
    operation_config = OptionalOperationConfig(
        enabled=frozenset({SYNC_PAYMENT_INSTRUCTION})
    )

    def __init__(self, order_service: OrderServiceProtocol) -> None:
        self._order_service = order_service
        self.operations = build_checkout_operations(order_service)

    async def validate(self, context: RequestContext, errors: ErrorAggregator) -> None:
        order_id = record(
            errors, validate_required(context.get(ORDER_ID), ORDER_ID, "order number")
        )
        item_id = record(
            errors,
            validate_required(context.get(ORDER_ITEM_ID), ORDER_ITEM_ID, "order item"),
        )
        quantity = record(
            errors, validate_required(context.get(QUANTITY), QUANTITY, "quantity")
        )
        if quantity is not None:
            record(
                errors,
                validate_int_range(
                    quantity, ITEM_QUANTITY_MIN, ITEM_QUANTITY_MAX, QUANTITY, "quantity"
                ),
            )
        if order_id is not None and item_id is not None:
            await check_editable_order(self._order_service, errors, order_id, item_id)

    async def execute(self, context: RequestContext) -> dict[str, Any]:
        """Change the item quantity.

        Returns:
            Order summary after the update.

        Raises:
            CommandExecutionError: If the order service fails.
        """
        command = UpdateItemQuantity(
            order_id=required_value(context, ORDER_ID),
            order_item_id=required_value(context, ORDER_ITEM_ID),
            quantity=int(required_value(context, QUANTITY)),
        )
        order = unwrap(
            await self._order_service.update_item_quantity(
                command.order_id, command.order_item_id, command.quantity
            )
        )
        return order.to_summary()

    async def view_data(self, context: RequestContext, data: Any) -> dict[str, Any]:
        """Return the order as stored once the optional operations ran."""
        return await current_order_summary(self._order_service, context)
