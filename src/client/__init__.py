"""Client-side update controller.

Consumes ajax response envelopes to patch a document and surface errors.

Exports:
    ClientUpdateController: Lock, request, patch, unlock
    UpdateRequest: One asynchronous update
    UpdateOutcome: What an update did
    UpdateTransportError: Connection error, timeout or non-envelope response
"""

from src.client.update_controller import (
    ClientUpdateController,
    UpdateOutcome,
    UpdateRequest,
    UpdateTransportError,
)

__all__ = [
    "ClientUpdateController",
    "UpdateOutcome",
    "UpdateRequest",
    "UpdateTransportError",
]
