"""Application layer errors.

Exports:
    ApplicationError: User-input validation failure
    SystemFault: Unexpected failure captured at a step boundary
    ErrorAggregator: Per-request collector for both channels
    CommandExecutionError: Service Failure raised inside a pipeline step
"""

from src.application.errors.application_error import ApplicationError, SystemFault
from src.application.errors.command_execution_error import CommandExecutionError
from src.application.errors.error_aggregator import ErrorAggregator

__all__ = [
    "ApplicationError",
    "CommandExecutionError",
    "ErrorAggregator",
    "SystemFault",
]
