"""Jinja2 fragment renderer.

Renders the HTML fragments shipped in the response envelope. Templates live
under settings.template_dir; autoescaping is on for .html and .j2 templates
so request parameters echoed into markup are escaped.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


def build_template_environment(template_dir: Path) -> Environment:
    """Build the Jinja2 environment for fragment templates."""
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(
            enabled_extensions=("html", "j2"), default_for_string=True
        ),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class JinjaFragmentRenderer:
    """FragmentRendererProtocol implementation backed by Jinja2.

    Missing templates and undefined template variables raise, and the
    lifecycle records them as a render fault.

    Example:
        >>> renderer = JinjaFragmentRenderer(settings.template_dir)
        >>> html = renderer.render("fragments/order_summary.html.j2", {"order": summary})
    """

    def __init__(self, template_dir: Path) -> None:
        self._environment = build_template_environment(template_dir)

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        template = self._environment.get_template(template_name)
        return template.render(**context)
