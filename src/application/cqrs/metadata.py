"""CQRS Metadata Types.

Dataclasses and enums for ajax command registry metadata.
These types define the structure of command registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Self-documenting - clear field names and docstrings
"""

from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Categories for ajax commands.

    Categories match the domain boundaries and help organize
    commands by their functional area.
    """

    CHECKOUT = "checkout"  # Checkout edits: shipping address, quantities
    GIFTING = "gifting"  # Gift options: gift messages


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for an ajax command in the CQRS registry.

    Attributes:
        name: Route name of the command (/ajax/{name}).
        command_class: The command dataclass (e.g., UpdateShippingAddress).
        handler_class: The handler class (e.g., UpdateShippingAddressHandler).
        category: Functional category for organization.
        view_name: View whose fragments the command re-renders.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     name="update_shipping_address",
        ...     command_class=UpdateShippingAddress,
        ...     handler_class=UpdateShippingAddressHandler,
        ...     category=CQRSCategory.CHECKOUT,
        ...     view_name="ShippingAddressView",
        ...     description="Replace the order's shipping address",
        ... )
    """

    name: str
    command_class: type
    handler_class: type
    category: CQRSCategory
    view_name: str
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if not self.name or not self.name.replace("_", "").isalnum():
            raise ValueError(
                f"Command {self.command_class.__name__} has invalid name {self.name!r}"
            )

