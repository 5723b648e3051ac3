"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (UpdateShippingAddress, SaveGiftMessage).

Each command has a corresponding ajax handler that validates the request
parameters, executes the command and declares its optional operations.
"""

from src.application.commands.checkout_commands import (
    SaveGiftMessage,
    UpdateItemQuantity,
    UpdateShippingAddress,
)

__all__ = [
    "SaveGiftMessage",
    "UpdateItemQuantity",
    "UpdateShippingAddress",
]
