"""Checkout commands (CQRS write operations).

Commands represent user intent to change an order during checkout. They are
built from a validated RequestContext by the matching handler.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers validate, execute and declare their optional operations
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class UpdateShippingAddress:
    """Replace the shipping address of an order.

    Attributes:
        order_id: Order identifier.
        first_name: Recipient first name.
        last_name: Recipient last name.
        address_line1: Street address.
        city: City name.
        postal_code: ZIP or ZIP+4 postal code.
    """

    order_id: str
    first_name: str
    last_name: str
    address_line1: str
    city: str
    postal_code: str


@dataclass(frozen=True, kw_only=True)
class UpdateItemQuantity:
    """Change the quantity of one order item.

    Attributes:
        order_id: Order identifier.
        order_item_id: Order item identifier.
        quantity: New quantity.
    """

    order_id: str
    order_item_id: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class SaveGiftMessage:
    """Attach a gift message to one order item.

    Attributes:
        order_id: Order identifier.
        order_item_id: Order item identifier.
        recipient: Recipient name.
        sender: Sender name.
        message: Message body.
    """

    order_id: str
    order_item_id: str
    recipient: str
    sender: str
    message: str
