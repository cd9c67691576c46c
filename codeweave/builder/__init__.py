"""Structural source builder.

Assembles usings, namespaces, types, fields, constructors and methods into a
tree and renders it with consistent indentation and blank-line spacing.

Key classes:
    FileBuilder   - Root of a source tree; ``render()`` produces the text
    TypeNode      - Class declaration with modifiers and a single base type
    MethodNode    - Method with parameters, return type and raw body
    ParameterNode - Parameter with optional passing keyword and default
"""

from .nodes import (
    DEFAULT_INDENT,
    AccessModifier,
    ConstructorNode,
    FieldNode,
    FileBuilder,
    MethodNode,
    Modifier,
    NamespaceNode,
    NullNamespace,
    ParameterKeyword,
    ParameterNode,
    TypeNode,
)
from .render import indent_lines, render_file

__all__ = [
    # Keywords
    "AccessModifier",
    "Modifier",
    "ParameterKeyword",
    # Tree nodes
    "FileBuilder",
    "NamespaceNode",
    "NullNamespace",
    "TypeNode",
    "FieldNode",
    "ConstructorNode",
    "MethodNode",
    "ParameterNode",
    # Rendering
    "DEFAULT_INDENT",
    "render_file",
    "indent_lines",
]
