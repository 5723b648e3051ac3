"""Order persistence infrastructure.

Exports:
    InMemoryOrderService: Process-local OrderServiceProtocol adapter
"""

from src.infrastructure.persistence.in_memory_order_service import (
    InMemoryOrderService,
)

__all__ = ["InMemoryOrderService"]
