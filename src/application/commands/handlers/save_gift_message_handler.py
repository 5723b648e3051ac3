"""Save gift message ajax handler.

Flow:
1. validate: orderId, orderItemId, names and message length, then the order
2. execute: attach the gift message to the item
3. finalize: nothing; a gift message does not change the totals, so
   orderPrepare is disabled and the payment sync, though enabled, is
   skipped because its prerequisite did not run
"""

from typing import Any

from src.application.ajax.context import RequestContext
from src.application.ajax.optional_operations import OptionalOperationConfig
from src.application.commands.checkout_commands import SaveGiftMessage
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
    GIFT_MESSAGE_MAX_LENGTH,
    GIFT_NAME_MAX_LENGTH,
    ORDER_PREPARE,
    SYNC_PAYMENT_INSTRUCTION,
)
from src.core.validation import validate_max_length, validate_required
from src.domain.entities.order import GiftMessage
from src.domain.protocols.order_service_protocol import OrderServiceProtocol

# (parameter, label, max length)
_TEXT_FIELDS: tuple[tuple[str, str, int], ...] = (
    ("recipient", "gift recipient", GIFT_NAME_MAX_LENGTH),
    ("sender", "gift sender", GIFT_NAME_MAX_LENGTH),
    ("message", "gift message", GIFT_MESSAGE_MAX_LENGTH),
)


class SaveGiftMessageHandler:
    """Handler for the save_gift_message ajax command."""

    name = "save_gift_message"
    view_name = "GiftMessageView"
    parameters = (ORDER_ID, ORDER_ITEM_ID, "recipient", "sender", "message")
    operation_config = OptionalOperationConfig(
        enabled=frozenset({SYNC_PAYMENT_INSTRUCTION}),
        disabled=frozenset({ORDER_PREPARE}),
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
        for field_name, label, max_length in _TEXT_FIELDS:
            value = record(
                errors, validate_required(context.get(field_name), field_name, label)
            )
            if value is not None:
                record(errors, validate_max_length(value, max_length, field_name, label))
        if order_id is not None and item_id is not None:
            await check_editable_order(self._order_service, errors, order_id, item_id)

    async def execute(self, context: RequestContext) -> dict[str, Any]:
        command = SaveGiftMessage(
            order_id=required_value(context, ORDER_ID),
            order_item_id=required_value(context, ORDER_ITEM_ID),
            recipient=required_value(context, "recipient"),
            sender=required_value(context, "sender"),
            message=required_value(context, "message"),
        )
        order = unwrap(
            await self._order_service.save_gift_message(
                command.order_id,
                command.order_item_id,
                GiftMessage(
                    recipient=command.recipient,
                    sender=command.sender,
                    message=command.message,
                ),
            )
        )
        return order.to_summary()

    async def view_data(self, context: RequestContext, data: Any) -> dict[str, Any]:
        """Return the order as stored once the optional operations ran."""
        return await current_order_summary(self._order_service, context)
