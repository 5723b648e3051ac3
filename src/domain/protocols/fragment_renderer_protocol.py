"""Fragment renderer protocol.

Renders one named template into an HTML string. The ajax pipeline treats the
renderer as a black box; only the returned markup matters.
"""

from collections.abc import Mapping
from typing import Any, Protocol


class FragmentRendererProtocol(Protocol):
    """Render a template into an HTML fragment."""

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render template_name with context.

        Args:
            template_name: Template path relative to the template root.
            context: Values available to the template.

        Returns:
            Rendered HTML markup.

        Raises:
            Exception: Any rendering failure; callers record it as a fault.
        """
        ...
