"""Order service protocol for checkout edits.

This module defines the port (interface) used by checkout ajax commands.
Infrastructure adapters implement it without inheritance. Every method
returns a Result; business failures are data, not exceptions.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.order import GiftMessage, Order, ShippingAddress


class OrderServiceProtocol(Protocol):
    """Read and edit orders during checkout."""

    async def get_order(self, order_id: str) -> Result[Order, DomainError]:
        """Find an order by ID.

        Returns:
            Success(Order) when found, Failure(NotFoundError) otherwise.
        """
        ...

    async def update_shipping_address(
        self, order_id: str, address: ShippingAddress
    ) -> Result[Order, DomainError]:
        """Replace the order's shipping address."""
        ...

    async def update_item_quantity(
        self, order_id: str, item_id: str, quantity: int
    ) -> Result[Order, DomainError]:
        """Change the quantity of one order item."""
        ...

    async def save_gift_message(
        self, order_id: str, item_id: str, gift_message: GiftMessage
    ) -> Result[Order, DomainError]:
        """Attach or replace the gift message of one order item."""
        ...

    async def prepare_order(self, order_id: str) -> Result[Order, DomainError]:
        """Recalculate the order totals."""
        ...

    async def sync_payment_instruction(
        self, order_id: str
    ) -> Result[Order, DomainError]:
        """Align the payment instruction with the prepared order total."""
        ...
