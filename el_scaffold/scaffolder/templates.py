"""Jinja2 template rendering for element scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``el_scaffold/scaffolder/templates/`` directory, plus the builders for the
context those templates are rendered with.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from el_scaffold.config import ScaffoldConfig
from el_scaffold.scaffolder.paths import ResolvedPaths, relative_path


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ELEMENT_TEMPLATE = "element.html.j2"
DOCS_TEMPLATE = "index.html.j2"
DEMO_TEMPLATE = "demo.html.j2"
TEST_TEMPLATES = {
    "TDD": "test/tdd.html.j2",
    "BDD": "test/bdd.html.j2",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for element scaffolding.

    Missing context variables raise instead of rendering as empty strings, so
    a template that drifts from the context builders fails loudly.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"test/tdd.html.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Context builders
# ---------------------------------------------------------------------------


def build_context(config: ScaffoldConfig, resolved: ResolvedPaths) -> dict[str, Any]:
    """Context for the element, docs and demo templates."""
    return {
        "element_name": config.element_name,
        "dependencies": list(config.dependencies),
        "path_to_dep_cache": resolved.relative_dep_cache_path,
    }


def build_test_context(config: ScaffoldConfig, resolved: ResolvedPaths) -> dict[str, Any]:
    """Context for test stubs, which live in the app's ``test/`` directory.

    Adds the paths a stub needs from its own location: the element under test
    and the dependency cache.
    """
    element_file = resolved.target_element_dir / f"{config.element_name}.html"
    context = build_context(config, resolved)
    context["path_to_element"] = relative_path(element_file, resolved.test_dir)
    context["test_path_to_dep_cache"] = relative_path(resolved.dep_cache_dir, resolved.test_dir)
    return context
