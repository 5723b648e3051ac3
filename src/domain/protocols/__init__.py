"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (entities) to avoid
circular import risks.

Usage:
    from src.domain.protocols import LoggerProtocol, OrderServiceProtocol
"""

from src.domain.protocols.document_protocol import DocumentProtocol, ErrorKind
from src.domain.protocols.fragment_renderer_protocol import (
    FragmentRendererProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.order_service_protocol import OrderServiceProtocol

__all__ = [
    "DocumentProtocol",
    "ErrorKind",
    "FragmentRendererProtocol",
    "LoggerProtocol",
    "OrderServiceProtocol",
]
