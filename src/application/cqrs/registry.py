"""CQRS Registry - Single Source of Truth for ajax commands.

This registry catalogs ALL ajax commands with their metadata.
Used for:
- Routing (/ajax/{name} resolves through this registry)
- Container auto-wiring (handler instances per request)
- Validation tests (verify no drift between commands, handlers and views)

Adding new commands:
1. Define the command dataclass in an appropriate *_commands.py file
2. Create the handler class in the handlers/ directory
3. Declare its view in src/application/ajax/fragments.py
4. Add an entry to AJAX_COMMAND_REGISTRY below
5. Run tests - they'll tell you what's missing
"""

from src.application.commands.checkout_commands import (
    SaveGiftMessage,
    UpdateItemQuantity,
    UpdateShippingAddress,
)
from src.application.commands.handlers.save_gift_message_handler import (
    SaveGiftMessageHandler,
)
from src.application.commands.handlers.update_item_quantity_handler import (
    UpdateItemQuantityHandler,
)
from src.application.commands.handlers.update_shipping_address_handler import (
    UpdateShippingAddressHandler,
)
from src.application.cqrs.metadata import CommandMetadata, CQRSCategory

AJAX_COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        name="update_shipping_address",
        command_class=UpdateShippingAddress,
        handler_class=UpdateShippingAddressHandler,
        category=CQRSCategory.CHECKOUT,
        view_name="ShippingAddressView",
        description="Replace the order's shipping address and resync payment",
    ),
    CommandMetadata(
        name="update_item_quantity",
        command_class=UpdateItemQuantity,
        handler_class=UpdateItemQuantityHandler,
        category=CQRSCategory.CHECKOUT,
        view_name="OrderItemsView",
        description="Change an order item's quantity and resync payment",
    ),
    CommandMetadata(
        name="save_gift_message",
        command_class=SaveGiftMessage,
        handler_class=SaveGiftMessageHandler,
        category=CQRSCategory.GIFTING,
        view_name="GiftMessageView",
        description="Attach a gift message to an order item",
    ),
]
