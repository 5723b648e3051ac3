"""Unit tests for JinjaFragmentRenderer.

Tests cover:
- Rendering from a template directory
- Autoescaping of echoed values
- Undefined variables and missing templates raise
- Shipped fragment templates keep their root id equal to the fragment key
"""

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from src.application.ajax.fragments import VIEW_REGISTRY
from src.core.config import settings
from src.infrastructure.persistence.in_memory_order_service import build_demo_order
from src.infrastructure.rendering.jinja_fragment_renderer import JinjaFragmentRenderer


@pytest.fixture
def template_dir(tmp_path):
    fragments = tmp_path / "fragments"
    fragments.mkdir()
    (fragments / "greeting.html.j2").write_text('<p id="greeting">Hello {{ name }}</p>')
    return tmp_path


@pytest.mark.unit
class TestJinjaFragmentRenderer:
    """Test rendering behavior."""

    def test_renders_template_with_context(self, template_dir):
        renderer = JinjaFragmentRenderer(template_dir)

        html = renderer.render("fragments/greeting.html.j2", {"name": "Ada"})

        assert html == '<p id="greeting">Hello Ada</p>'

    def test_escapes_markup_in_values(self, template_dir):
        renderer = JinjaFragmentRenderer(template_dir)

        html = renderer.render(
            "fragments/greeting.html.j2", {"name": "<script>alert(1)</script>"}
        )

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_undefined_variable_raises(self, template_dir):
        renderer = JinjaFragmentRenderer(template_dir)

        with pytest.raises(UndefinedError):
            renderer.render("fragments/greeting.html.j2", {})

    def test_missing_template_raises(self, template_dir):
        renderer = JinjaFragmentRenderer(template_dir)

        with pytest.raises(TemplateNotFound):
            renderer.render("fragments/missing.html.j2", {"name": "Ada"})


@pytest.mark.unit
class TestShippedTemplates:
    """Test the fragment templates shipped with the service."""

    @pytest.mark.parametrize(
        "fragment",
        [fragment for view in VIEW_REGISTRY.values() for fragment in view.fragments],
        ids=lambda fragment: fragment.key,
    )
    def test_root_element_id_matches_fragment_key(self, fragment):
        renderer = JinjaFragmentRenderer(settings.template_dir)
        context = {
            "command": "test",
            "params": {},
            "order": build_demo_order().to_summary(),
        }

        html = renderer.render(fragment.template, context)

        assert html.lstrip().split(">", 1)[0].find(f'id="{fragment.key}"') != -1
        assert "data-ajax-region" in html
