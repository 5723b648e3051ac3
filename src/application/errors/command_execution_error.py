"""Exception raised when a command's service call returns a Failure.

Services report business failures as Result values. Inside the ajax pipeline a
failure during the primary operation or an optional operation is unexpected
(validation already checked what the user can fix), so handlers convert it to
this exception and the lifecycle records it as a SystemFault.
"""

from src.core.errors import DomainError


class CommandExecutionError(Exception):
    """A service call failed after validation passed.

    Attributes:
        error: The DomainError returned by the service.
    """

    def __init__(self, error: DomainError) -> None:
        super().__init__(str(error))
        self.error = error
