"""Jinja2 rendering for file-level boilerplate.

The placeholder engine in :mod:`codeweave.templating.expander` expands the
per-component code blocks; file-level boilerplate such as the usings preamble
lives in ``.j2`` files under ``codeweave/templating/templates/`` and is
rendered here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .expander import argument_name, lowercase_first, remove_component_suffix, uppercase_first


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for generated-file boilerplate.

    Undefined variables raise instead of rendering as empty strings, so a
    template/context mismatch fails at generation time.  Templates can use
    the identifier filters ``upper_first``, ``lower_first``,
    ``strip_component`` and ``argument_name``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        # Identifier casing, same rules as the $Token context values
        self.env.filters["upper_first"] = uppercase_first
        self.env.filters["lower_first"] = lowercase_first
        self.env.filters["strip_component"] = remove_component_suffix
        self.env.filters["argument_name"] = argument_name

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"usings.cs.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_usings(self, usings: list[str]) -> str:
        """Render one ``using X;`` line per namespace, each ending in a newline."""
        return self.render("usings.cs.j2", {"usings": usings})
