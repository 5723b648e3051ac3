"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.order import (
    GiftMessage,
    Order,
    OrderItem,
    OrderStatus,
    ShippingAddress,
)

__all__ = [
    "GiftMessage",
    "Order",
    "OrderItem",
    "OrderStatus",
    "ShippingAddress",
]
