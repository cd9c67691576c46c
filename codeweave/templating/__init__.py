"""Template expansion for generated code blocks.

Key pieces:
    expand                - Escape-then-substitute expansion of ``$Token`` templates
    build_context         - Placeholder values for one container of a descriptor
    expand_per_container  - One expansion per container, concatenated in order
    TemplateRenderer      - Jinja2 renderer for file-level boilerplate
"""

from .expander import (
    TOKENS,
    build_context,
    escape_format_chars,
    expand,
    expand_for_descriptor,
    expand_per_container,
    lowercase_first,
    remove_component_suffix,
    to_format_string,
    uppercase_first,
)
from .renderer import TemplateRenderer

__all__ = [
    "TOKENS",
    "TemplateRenderer",
    "build_context",
    "escape_format_chars",
    "expand",
    "expand_for_descriptor",
    "expand_per_container",
    "lowercase_first",
    "remove_component_suffix",
    "to_format_string",
    "uppercase_first",
]
