"""Per-request collector for ApplicationErrors and SystemFaults.

One ErrorAggregator is created for each ajax request and discarded once the
response envelope is built. Both channels are append-only: an entry is never
removed or reordered, and nothing is deduplicated.
"""

from src.application.errors.application_error import ApplicationError, SystemFault


class ErrorAggregator:
    """Two ordered, append-only fault channels for one request.

    No method raises.

    Example:
        >>> errors = ErrorAggregator()
        >>> errors.add_application_error(
        ...     ApplicationError(message="The city is required.", code="field_required")
        ... )
        >>> errors.has_errors()
        True
    """

    def __init__(self) -> None:
        self._application_errors: list[ApplicationError] = []
        self._system_faults: list[SystemFault] = []

    def add_application_error(self, error: ApplicationError) -> None:
        """Append a user-input validation failure."""
        self._application_errors.append(error)

    def add_system_fault(self, fault: SystemFault) -> None:
        """Append an unexpected failure."""
        self._system_faults.append(fault)

    def has_application_errors(self) -> bool:
        return bool(self._application_errors)

    def has_system_faults(self) -> bool:
        return bool(self._system_faults)

    def has_errors(self) -> bool:
        return self.has_application_errors() or self.has_system_faults()

    @property
    def application_errors(self) -> tuple[ApplicationError, ...]:
        """Snapshot of application errors in accumulation order."""
        return tuple(self._application_errors)

    @property
    def system_faults(self) -> tuple[SystemFault, ...]:
        """Snapshot of system faults in accumulation order."""
        return tuple(self._system_faults)

    @property
    def system_fault_count(self) -> int:
        return len(self._system_faults)

    def application_messages(self) -> list[str]:
        return [str(error) for error in self._application_errors]

    def system_messages(self) -> list[str]:
        return [str(fault) for fault in self._system_faults]
