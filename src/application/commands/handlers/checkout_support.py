"""Shared pieces of the checkout ajax handlers.

- record(): turn a validator Result into an ApplicationError
- check_editable_order(): order and item lookups reported as ApplicationErrors
- build_checkout_operations(): the orderPrepare → payment sync registry
- required_value(): read a parameter validation already checked
- unwrap(): service Result → value, raising CommandExecutionError on Failure
- current_order_summary(): the order as stored after the optional operations
"""

from typing import Any, TypeVar

from src.application.ajax.context import RequestContext
from src.application.ajax.optional_operations import (
    OptionalOperation,
    OptionalOperationRegistry,
)
from src.application.errors import (
    ApplicationError,
    CommandExecutionError,
    ErrorAggregator,
)
from src.core.constants import ORDER_PREPARE, SYNC_PAYMENT_INSTRUCTION
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.order import Order
from src.domain.protocols.order_service_protocol import OrderServiceProtocol

T = TypeVar("T")

ORDER_ID = "orderId"
ORDER_ITEM_ID = "orderItemId"


def record(errors: ErrorAggregator, result: Result[T, ValidationError]) -> T | None:
    """Return the validated value, or record the failure and return None."""
    match result:
        case Success(value=value):
            return value
        case Failure(error=error):
            errors.add_application_error(ApplicationError.from_validation(error))
            return None


def required_value(context: RequestContext, name: str) -> str:
    """Return a stripped parameter that validation already checked.

    Raises:
        KeyError: If the parameter is absent.
    """
    value = context.get(name)
    if value is None:
        raise KeyError(name)
    return value.strip()


def unwrap(result: Result[T, DomainError]) -> T:
    """Return the service value.

    Raises:
        CommandExecutionError: If the service returned a Failure.
    """
    match result:
        case Success(value=value):
            return value
        case Failure(error=error):
            raise CommandExecutionError(error)


async def current_order_summary(
    order_service: OrderServiceProtocol, context: RequestContext
) -> dict[str, Any]:
    """Re-read the request's order for fragment rendering.

    Raises:
        CommandExecutionError: If the order cannot be read.
    """
    order = unwrap(await order_service.get_order(required_value(context, ORDER_ID)))
    return order.to_summary()


async def check_editable_order(
    order_service: OrderServiceProtocol,
    errors: ErrorAggregator,
    order_id: str,
    item_id: str | None = None,
) -> Order | None:
    """Look up an order (and optionally one of its items) for editing.

    Missing orders, missing items and orders past checkout are user-facing
    problems, so they are recorded as ApplicationErrors.

    Returns:
        The order when every check passed, None otherwise.
    """
    result = await order_service.get_order(order_id)
    if isinstance(result, Failure):
        errors.add_application_error(
            ApplicationError(
                message=result.error.message,
                code=result.error.code.value,
                params=(ORDER_ID,),
            )
        )
        return None
    order = result.value

    if not order.is_editable():
        errors.add_application_error(
            ApplicationError(
                message="This order can no longer be changed.",
                code=ErrorCode.ORDER_NOT_EDITABLE.value,
                params=(ORDER_ID,),
            )
        )
        return None

    if item_id is not None and order.find_item(item_id) is None:
        errors.add_application_error(
            ApplicationError(
                message="The order item could not be found.",
                code=ErrorCode.ORDER_ITEM_NOT_FOUND.value,
                params=(ORDER_ITEM_ID,),
            )
        )
        return None

    return order


def build_checkout_operations(
    order_service: OrderServiceProtocol,
) -> OptionalOperationRegistry:
    """Build the optional operations shared by checkout commands.

    orderPrepare (on by default) recalculates totals;
    syncPaymentInstructionWithOrderTotal (off by default) depends on it.
    Both act on the order named by the orderId parameter and do nothing when
    the request names no order or an order past checkout, since validation
    reports those.
    """

    async def prepare_order(context: RequestContext, errors: ErrorAggregator) -> None:
        order_id = context.get(ORDER_ID)
        if not order_id:
            return
        result = await order_service.prepare_order(order_id)
        if _nothing_to_update(result):
            return
        unwrap(result)

    async def sync_payment_instruction(
        context: RequestContext, errors: ErrorAggregator
    ) -> None:
        order_id = context.get(ORDER_ID)
        if not order_id:
            return
        result = await order_service.sync_payment_instruction(order_id)
        if _nothing_to_update(result):
            return
        unwrap(result)

    return OptionalOperationRegistry(
        [
            OptionalOperation(
                name=ORDER_PREPARE,
                effect=prepare_order,
                enabled_by_default=True,
            ),
            OptionalOperation(
                name=SYNC_PAYMENT_INSTRUCTION,
                effect=sync_payment_instruction,
                depends_on=frozenset({ORDER_PREPARE}),
            ),
        ]
    )


def _nothing_to_update(result: Result[Order, DomainError]) -> bool:
    return isinstance(result, Failure) and result.error.code in (
        ErrorCode.ORDER_NOT_FOUND,
        ErrorCode.ORDER_NOT_EDITABLE,
    )
