"""Tests for the Jinja2 template renderer (boilerplate.scaffolder.templates)."""

from __future__ import annotations

import pytest

from boilerplate.scaffolder.generator import TEMPLATE_FILES
from boilerplate.scaffolder.templates import TemplateRenderer, output_name

pytestmark = pytest.mark.unit


class TestTemplateRenderer:
    def test_packaged_templates_present(self):
        renderer = TemplateRenderer()
        for template in TEMPLATE_FILES:
            assert (renderer.template_dir / template).is_file()

    def test_no_autoescape(self):
        rendered = TemplateRenderer().render(
            "index.html.j2",
            {"project_name": "<b>&", "lang": "pt-BR", "stylesheet": "a", "script": "b"},
        )
        assert "<title><b>&</title>" in rendered


class TestOutputName:
    @pytest.mark.parametrize(
        "template, expected",
        [
            ("index.html.j2", "index.html"),
            ("style.css.j2", "style.css"),
            ("README", "README"),
        ],
    )
    def test_strips_j2_suffix(self, template, expected):
        assert output_name(template) == expected
