"""Fragment rendering adapters.

Exports:
    JinjaFragmentRenderer: Jinja2-backed FragmentRendererProtocol implementation
"""

from src.infrastructure.rendering.jinja_fragment_renderer import (
    JinjaFragmentRenderer,
)

__all__ = ["JinjaFragmentRenderer"]
