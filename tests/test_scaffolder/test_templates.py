"""Tests for TemplateRenderer and the packaged payloads."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from jsscaffold.scaffolder.templates import TemplateRenderer, get_renderer


pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestTemplateRenderer:
    def test_default_directory_is_packaged(self, renderer: TemplateRenderer):
        assert renderer.template_dir.name == "templates"
        assert (renderer.template_dir / "common").is_dir()

    def test_render_interpolates_project_name(self, renderer: TemplateRenderer):
        text = renderer.render(
            "common/README.md.j2",
            {"project_name": "demo", "description": "A demo.", "ext": "ts"},
        )
        assert text.startswith("# demo")
        assert "A demo." in text

    def test_missing_variable_raises(self, renderer: TemplateRenderer):
        with pytest.raises(UndefinedError):
            renderer.render("common/README.md.j2", {})

    def test_render_does_not_escape(self, renderer: TemplateRenderer):
        text = renderer.render(
            "common/README.md.j2",
            {"project_name": "demo", "description": "<a & b>", "ext": "js"},
        )
        assert "<a & b>" in text

    def test_custom_directory(self, tmp_path: Path):
        (tmp_path / "x.j2").write_text("hi {{ project_name }}", encoding="utf-8")
        assert TemplateRenderer(tmp_path).render("x.j2", {"project_name": "p"}) == "hi p"

    def test_get_renderer_is_shared(self):
        assert get_renderer() is get_renderer()


class TestPayloads:
    def test_every_payload_renders(self, renderer: TemplateRenderer):
        context = {"project_name": "demo", "description": "d", "ext": "js"}
        for name in renderer.env.list_templates(extensions=["j2"]):
            assert renderer.render(name, context).strip(), name

    def test_jsx_double_braces_survive(self, renderer: TemplateRenderer):
        text = renderer.render(
            "react_native/AppNavigator.j2", {"project_name": "demo", "ext": "js"}
        )
        assert "options={{ headerShown: false }}" in text
