"""Document protocol for the client update controller.

Abstracts the rendered page the controller patches: locating ajax regions,
locking and unlocking their controls, replacing element subtrees by id and
rendering error messages into an error container.

Element identity convention: a fragment key in the response envelope equals
the id of the element it replaces.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Protocol


class ErrorKind(str, Enum):
    """Kind of message rendered into the error container."""

    APPLICATION = "application"  # User-actionable, shown verbatim
    SYSTEM = "system"  # Generic, non-identifying


class DocumentProtocol(Protocol):
    """Operations the client controller performs on the page."""

    def ajax_regions(self, origin_id: str | None) -> Sequence[str]:
        """Return the ids of the regions locked by a request.

        Args:
            origin_id: Id of the element that triggered the request. When
                given, the nearest ancestor marked as an ajax region is
                returned; otherwise every region tagged request-scoped.
        """
        ...

    def disable_interactive(self, region_id: str) -> Sequence[str]:
        """Disable the enabled interactive descendants of a region.

        Returns:
            Ids of the elements this call disabled (already disabled
            elements are left alone and not returned).
        """
        ...

    def enable(self, element_ids: Sequence[str]) -> None:
        """Re-enable the given elements."""
        ...

    def replace_element(self, element_id: str, markup: str) -> bool:
        """Replace the element with this id, subtree included, by markup.

        Returns:
            True when an element was replaced, False when no element matched.
        """
        ...

    def clear_errors(self, container_selector: str) -> None:
        """Remove every message from the error container."""
        ...

    def render_error(
        self, container_selector: str, message: str, *, kind: ErrorKind
    ) -> None:
        """Append one message to the error container."""
        ...
