"""
Jinja2 rendering for generated files.

Templates are looked up in the generator's template directory. Output is
never HTML-escaped: PHP source contains `<?php` and backslash namespaces
that must pass through unchanged.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from jinja2.exceptions import TemplateError as JinjaTemplateError


class TemplateError(Exception):
    """Raised when a template cannot be loaded or rendered."""

    pass


class TemplateEngine:
    """Jinja2 environment over an optional template directory."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir

        search_path: List[str] = []
        if template_dir and template_dir.exists():
            search_path.append(str(template_dir))

        self._env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template from the template directory."""
        try:
            return self._env.get_template(template_name).render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
