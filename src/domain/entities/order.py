"""Order domain entity for checkout.

Pure business logic, no framework dependencies.

An order is edited through ajax commands during checkout. Editing marks the
order as needing preparation; prepare() recalculates totals, and the payment
instruction can only be synced with a prepared total.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

_CENT = Decimal("0.01")


class OrderStatus(str, Enum):
    """Checkout status of an order."""

    PENDING = "pending"
    SUBMITTED = "submitted"


@dataclass(slots=True, kw_only=True)
class ShippingAddress:
    """Shipping address of an order."""

    first_name: str
    last_name: str
    address_line1: str
    city: str
    postal_code: str

    def to_dict(self) -> dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "addressLine1": self.address_line1,
            "city": self.city,
            "postalCode": self.postal_code,
        }


@dataclass(slots=True, kw_only=True)
class GiftMessage:
    """Gift message attached to an order item."""

    recipient: str
    sender: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "recipient": self.recipient,
            "sender": self.sender,
            "message": self.message,
        }


@dataclass(slots=True, kw_only=True)
class OrderItem:
    """Line item of an order.

    Attributes:
        id: Order item identifier.
        sku: Catalog SKU.
        description: Display name.
        unit_price: Price per unit.
        quantity: Units ordered.
        gift_message: Optional gift message.
    """

    id: str
    sku: str
    description: str
    unit_price: Decimal
    quantity: int = 1
    gift_message: GiftMessage | None = None

    @property
    def line_total(self) -> Decimal:
        return (self.unit_price * self.quantity).quantize(_CENT, ROUND_HALF_UP)


@dataclass(slots=True, kw_only=True)
class Order:
    """Order domain entity.

    Business Rules:
        - Only PENDING orders are editable
        - Any edit invalidates the prepared totals
        - prepare() recalculates subtotal, tax and total
        - The payment instruction is synced only from prepared totals

    Example:
        >>> order = Order(id="1001", items=[...], tax_rate=Decimal("0.0825"))
        >>> order.prepare()
        >>> order.sync_payment_instruction()
        True
    """

    id: str
    items: list[OrderItem] = field(default_factory=list)
    shipping_address: ShippingAddress | None = None
    status: OrderStatus = OrderStatus.PENDING
    shipping_charge: Decimal = Decimal("0.00")
    tax_rate: Decimal = Decimal("0.00")
    subtotal: Decimal = Decimal("0.00")
    tax: Decimal = Decimal("0.00")
    total: Decimal = Decimal("0.00")
    payment_amount: Decimal | None = None
    is_prepared: bool = False

    def is_editable(self) -> bool:
        return self.status == OrderStatus.PENDING

    def find_item(self, item_id: str) -> OrderItem | None:
        return next((item for item in self.items if item.id == item_id), None)

    def mark_changed(self) -> None:
        """Invalidate prepared totals after an edit."""
        self.is_prepared = False

    def prepare(self) -> None:
        """Recalculate subtotal, tax and total from the current items."""
        self.subtotal = sum(
            (item.line_total for item in self.items), Decimal("0.00")
        ).quantize(_CENT, ROUND_HALF_UP)
        self.tax = (self.subtotal * self.tax_rate).quantize(_CENT, ROUND_HALF_UP)
        self.total = self.subtotal + self.tax + self.shipping_charge
        self.is_prepared = True

    def sync_payment_instruction(self) -> bool:
        """Align the payment amount with the prepared total.

        Returns:
            True when synced, False when the order is not prepared.
        """
        if not self.is_prepared:
            return False
        self.payment_amount = self.total
        return True

    def to_summary(self) -> dict[str, Any]:
        """JSON-compatible snapshot used as envelope data and template context."""
        return {
            "orderId": self.id,
            "status": self.status.value,
            "shippingAddress": (
                self.shipping_address.to_dict() if self.shipping_address else None
            ),
            "items": [
                {
                    "orderItemId": item.id,
                    "sku": item.sku,
                    "description": item.description,
                    "unitPrice": str(item.unit_price),
                    "quantity": item.quantity,
                    "lineTotal": str(item.line_total),
                    "giftMessage": (
                        item.gift_message.to_dict() if item.gift_message else None
                    ),
                }
                for item in self.items
            ],
            "totals": {
                "subtotal": str(self.subtotal),
                "tax": str(self.tax),
                "shipping": str(self.shipping_charge),
                "total": str(self.total),
                "paymentAmount": (
                    str(self.payment_amount) if self.payment_amount is not None else None
                ),
                "prepared": self.is_prepared,
            },
        }
