"""InMemoryOrderService - process-local implementation of OrderServiceProtocol.

Adapter for hexagonal architecture. Orders live in a dict keyed by order ID
and are handed out as copies, so callers never mutate stored state without
going through the service.

Seeded with one pending demo order ("1001") for local development and tests.
"""

import copy
from decimal import Decimal

from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.order import (
    GiftMessage,
    Order,
    OrderItem,
    ShippingAddress,
)

DEMO_ORDER_ID = "1001"


def build_demo_order() -> Order:
    """Return the pending order the service is seeded with."""
    order = Order(
        id=DEMO_ORDER_ID,
        items=[
            OrderItem(
                id="1",
                sku="MUG-BLUE",
                description="Blue ceramic mug",
                unit_price=Decimal("12.50"),
                quantity=2,
            ),
            OrderItem(
                id="2",
                sku="TEA-EARLGREY",
                description="Earl Grey loose leaf tea",
                unit_price=Decimal("8.75"),
                quantity=1,
            ),
        ],
        shipping_address=ShippingAddress(
            first_name="Ada",
            last_name="Lovelace",
            address_line1="12 Analytical Way",
            city="London",
            postal_code="10001",
        ),
        shipping_charge=Decimal("5.00"),
        tax_rate=Decimal("0.0825"),
    )
    order.prepare()
    order.sync_payment_instruction()
    return order


class InMemoryOrderService:
    """In-memory implementation of OrderServiceProtocol.

    This class does NOT inherit from OrderServiceProtocol (Protocol uses
    structural typing).

    Example:
        >>> service = InMemoryOrderService()
        >>> result = await service.update_item_quantity("1001", "1", 3)
    """

    def __init__(self, orders: list[Order] | None = None) -> None:
        """Initialize the store.

        Args:
            orders: Initial orders. Defaults to the demo order.
        """
        seed = orders if orders is not None else [build_demo_order()]
        self._orders: dict[str, Order] = {order.id: copy.deepcopy(order) for order in seed}

    async def get_order(self, order_id: str) -> Result[Order, DomainError]:
        """Find an order by ID.

        Returns:
            Success(copy of Order), or Failure(NotFoundError).
        """
        order = self._orders.get(order_id)
        if order is None:
            return Failure(error=self._order_not_found(order_id))
        return Success(value=copy.deepcopy(order))

    async def update_shipping_address(
        self, order_id: str, address: ShippingAddress
    ) -> Result[Order, DomainError]:
        result = self._editable_order(order_id)
        if isinstance(result, Failure):
            return result
        order = result.value
        order.shipping_address = copy.deepcopy(address)
        order.mark_changed()
        return Success(value=copy.deepcopy(order))

    async def update_item_quantity(
        self, order_id: str, item_id: str, quantity: int
    ) -> Result[Order, DomainError]:
        result = self._editable_order(order_id)
        if isinstance(result, Failure):
            return result
        order = result.value
        item = order.find_item(item_id)
        if item is None:
            return Failure(error=self._item_not_found(item_id))
        item.quantity = quantity
        order.mark_changed()
        return Success(value=copy.deepcopy(order))

    async def save_gift_message(
        self, order_id: str, item_id: str, gift_message: GiftMessage
    ) -> Result[Order, DomainError]:
        result = self._editable_order(order_id)
        if isinstance(result, Failure):
            return result
        order = result.value
        item = order.find_item(item_id)
        if item is None:
            return Failure(error=self._item_not_found(item_id))
        item.gift_message = copy.deepcopy(gift_message)
        return Success(value=copy.deepcopy(order))

    async def prepare_order(self, order_id: str) -> Result[Order, DomainError]:
        result = self._editable_order(order_id)
        if isinstance(result, Failure):
            return result
        order = result.value
        order.prepare()
        return Success(value=copy.deepcopy(order))

    async def sync_payment_instruction(
        self, order_id: str
    ) -> Result[Order, DomainError]:
        """Align the payment amount with the prepared total.

        Returns:
            Failure(ORDER_NOT_PREPARED) when totals are stale.
        """
        result = self._editable_order(order_id)
        if isinstance(result, Failure):
            return result
        order = result.value
        if not order.sync_payment_instruction():
            return Failure(
                error=DomainError(
                    code=ErrorCode.ORDER_NOT_PREPARED,
                    message="Order totals must be prepared before syncing payment.",
                )
            )
        return Success(value=copy.deepcopy(order))

    # Helpers
    def _editable_order(self, order_id: str) -> Result[Order, DomainError]:
        order = self._orders.get(order_id)
        if order is None:
            return Failure(error=self._order_not_found(order_id))
        if not order.is_editable():
            return Failure(
                error=DomainError(
                    code=ErrorCode.ORDER_NOT_EDITABLE,
                    message="This order can no longer be changed.",
                )
            )
        return Success(value=order)

    @staticmethod
    def _order_not_found(order_id: str) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.ORDER_NOT_FOUND,
            message="The order could not be found.",
            resource_type="Order",
            resource_id=order_id,
        )

    @staticmethod
    def _item_not_found(item_id: str) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.ORDER_ITEM_NOT_FOUND,
            message="The order item could not be found.",
            resource_type="OrderItem",
            resource_id=item_id,
        )
