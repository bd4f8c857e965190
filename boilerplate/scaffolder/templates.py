"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads the Jinja2 templates shipped
in ``boilerplate/scaffolder/templates/`` and renders them with the project
context.  Autoescaping is disabled for every extension, so the project name
lands in the generated markup exactly as it was typed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the packaged ``.j2`` boilerplate templates.

    Templates are rendered with a context dictionary holding the project
    name and the relative names of the sibling files the markup links to.
    """

    def __init__(self) -> None:
        self.template_dir = _DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir), encoding="utf-8"),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"index.html.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


def output_name(template_path: str) -> str:
    """Strip the ``.j2`` suffix: ``"style.css.j2"`` -> ``"style.css"``."""
    if template_path.endswith(".j2"):
        return template_path[: -len(".j2")]
    return template_path
