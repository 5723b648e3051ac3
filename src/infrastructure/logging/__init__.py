"""Logging adapters.

Exports:
    ConsoleAdapter: structlog-backed LoggerProtocol implementation
"""

from src.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
