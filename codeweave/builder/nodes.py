"""Source tree model for the C# file builder.

A ``FileBuilder`` owns usings plus an ordered list of namespaces and
file-level types.  Every builder call appends a node and returns it (or, for
modifier/attribute setters, returns the node itself) so calls chain::

    builder = FileBuilder()
    builder.add_namespace("Game").add_type("Player").add_modifier(AccessModifier.PUBLIC)

Insertion order is render order.  Nothing is sorted or deduplicated.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

DEFAULT_INDENT = "    "


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

class AccessModifier(str, Enum):
    """Access modifiers."""
    PUBLIC = "public"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PRIVATE = "private"


class Modifier(str, Enum):
    """Non-access modifiers."""
    STATIC = "static"
    CONST = "const"
    READONLY = "readonly"
    ABSTRACT = "abstract"
    SEALED = "sealed"
    VIRTUAL = "virtual"
    OVERRIDE = "override"
    PARTIAL = "partial"


class ParameterKeyword(str, Enum):
    """Passing-mode keywords rendered before a parameter type."""
    OUT = "out"
    REF = "ref"
    PARAMS = "params"


Keyword = Union[AccessModifier, Modifier, ParameterKeyword, str]


def keyword_text(keyword: Keyword) -> str:
    """Return the source text of an enum keyword or a plain string."""
    if isinstance(keyword, Enum):
        return keyword.value
    return keyword


class _Modifiable:
    """Mixin for nodes carrying an ordered modifier list."""

    modifiers: list[str]

    def add_modifier(self, keyword: Keyword):
        self.modifiers.append(keyword_text(keyword))
        return self


# ---------------------------------------------------------------------------
# Leaf nodes
# ---------------------------------------------------------------------------

class ParameterNode:
    """A method or constructor parameter."""

    def __init__(self, type_name: str, name: str) -> None:
        self.type_name = type_name
        self.name = name
        self.keyword: str | None = None
        self.default_value: str | None = None

    def set_keyword(self, keyword: ParameterKeyword | str) -> "ParameterNode":
        self.keyword = keyword_text(keyword)
        return self

    def set_default_value(self, literal: str) -> "ParameterNode":
        self.default_value = literal
        return self


class FieldNode(_Modifiable):
    """A field declaration with an optional literal initializer."""

    def __init__(self, type_name: str, name: str) -> None:
        self.type_name = type_name
        self.name = name
        self.modifiers: list[str] = []
        self.default_value: str | None = None

    def set_default_value(self, literal: str) -> "FieldNode":
        self.default_value = literal
        return self


class _Callable(_Modifiable):
    """Shared state of methods and constructors."""

    def __init__(self, body: str) -> None:
        self.body = body
        self.modifiers: list[str] = []
        self.parameters: list[ParameterNode] = []

    def add_parameter(self, parameter: ParameterNode):
        self.parameters.append(parameter)
        return self


class MethodNode(_Callable):
    """A method with a raw, possibly multi-line body."""

    def __init__(self, name: str, body: str = "") -> None:
        super().__init__(body)
        self.name = name
        self.return_type = "void"

    def set_return_type(self, type_name: str) -> "MethodNode":
        self.return_type = type_name
        return self


class ConstructorNode(_Callable):
    """A constructor; its name is taken from the owning type at render time."""

    def __init__(self, body: str = "") -> None:
        super().__init__(body)
        self.base_arguments: list[str] | None = None

    def call_base(self, *arguments: str) -> "ConstructorNode":
        """Chain to the base constructor with the given argument expressions."""
        self.base_arguments = list(arguments)
        return self


# ---------------------------------------------------------------------------
# Composite nodes
# ---------------------------------------------------------------------------

TypeMember = Union[FieldNode, ConstructorNode, MethodNode]


class TypeNode(_Modifiable):
    """A class, struct or interface declaration."""

    def __init__(self, name: str, kind: str = "class") -> None:
        self.name = name
        self.kind = kind
        self.modifiers: list[str] = []
        self.base_type: str | None = None
        self.members: list[TypeMember] = []

    def set_base_type(self, type_name: str) -> "TypeNode":
        """Record the single base type, rendered as ``class Name : Base``."""
        self.base_type = type_name
        return self

    def add_field(self, type_name: str, name: str) -> FieldNode:
        node = FieldNode(type_name, name)
        self.members.append(node)
        return node

    def add_constructor(self, body: str = "") -> ConstructorNode:
        node = ConstructorNode(body)
        self.members.append(node)
        return node

    def add_method(self, name: str, body: str = "") -> MethodNode:
        node = MethodNode(name, body)
        self.members.append(node)
        return node


class NamespaceNode:
    """A namespace holding type declarations."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.types: list[TypeNode] = []

    def add_type(self, name: str, kind: str = "class") -> TypeNode:
        node = TypeNode(name, kind)
        self.types.append(node)
        return node


class NullNamespace(NamespaceNode):
    """Returned for a missing namespace name; never attached to a file."""

    def __init__(self) -> None:
        super().__init__("")


class FileBuilder:
    """Root of a source tree: usings, namespaces and file-level types."""

    def __init__(self, indent: str = DEFAULT_INDENT) -> None:
        self.indent = indent
        self.usings: list[str] = []
        self.declarations: list[NamespaceNode | TypeNode] = []

    def add_using(self, name: str) -> "FileBuilder":
        self.usings.append(name)
        return self

    def add_namespace(self, name: str | None) -> NamespaceNode:
        """Append a namespace, or return a detached ``NullNamespace`` if *name* is empty."""
        if not name:
            return NullNamespace()
        node = NamespaceNode(name)
        self.declarations.append(node)
        return node

    def no_namespace(self) -> "FileBuilder":
        """Declare the following types at file level."""
        return self

    def add_type(self, name: str, kind: str = "class") -> TypeNode:
        node = TypeNode(name, kind)
        self.declarations.append(node)
        return node

    def render(self) -> str:
        from .render import render_file

        return render_file(self)

    def __str__(self) -> str:
        return self.render()
