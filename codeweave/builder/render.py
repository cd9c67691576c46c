"""Render pass for the source tree model.

Each node renders at depth zero; the owning block indents its children's
text by one unit.  Spacing rules:

- consecutive fields sit on consecutive lines,
- every other pair of siblings (field block, constructor, method, type,
  namespace) is separated by exactly one blank line,
- an empty block renders as ``header {`` directly followed by ``}``.
"""

from __future__ import annotations

from .nodes import (
    ConstructorNode,
    FieldNode,
    FileBuilder,
    MethodNode,
    NamespaceNode,
    ParameterNode,
    TypeNode,
)


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

def indent_lines(text: str, indent: str) -> str:
    """Prefix every non-blank line of *text* with *indent*; blank lines stay empty."""
    lines = text.replace("\r\n", "\n").split("\n")
    return "\n".join(indent + line if line.strip() else "" for line in lines)


def _block(header: str, blocks: list[str], indent: str) -> str:
    if not blocks:
        return header + " {\n}"
    inner = indent_lines("\n\n".join(blocks), indent)
    return f"{header} {{\n{inner}\n}}"


def _body_block(header: str, body: str, indent: str) -> str:
    if not body.strip():
        return header + " {\n}"
    return f"{header} {{\n{indent_lines(body, indent)}\n}}"


def _join_words(*words: str) -> str:
    return " ".join(word for word in words if word)


# ---------------------------------------------------------------------------
# Leaf rendering
# ---------------------------------------------------------------------------

def render_parameter(parameter: ParameterNode) -> str:
    text = _join_words(parameter.keyword or "", parameter.type_name, parameter.name)
    if parameter.default_value is not None:
        text += f" = {parameter.default_value}"
    return text


def render_field(field: FieldNode) -> str:
    text = _join_words(*field.modifiers, field.type_name, field.name)
    if field.default_value is not None:
        text += f" = {field.default_value}"
    return text + ";"


def _parameter_list(parameters: list[ParameterNode]) -> str:
    return ", ".join(render_parameter(p) for p in parameters)


def render_method(method: MethodNode, indent: str) -> str:
    header = _join_words(
        *method.modifiers,
        method.return_type,
        f"{method.name}({_parameter_list(method.parameters)})",
    )
    return _body_block(header, method.body, indent)


def render_constructor(constructor: ConstructorNode, type_name: str, indent: str) -> str:
    header = _join_words(
        *constructor.modifiers,
        f"{type_name}({_parameter_list(constructor.parameters)})",
    )
    if constructor.base_arguments is not None:
        header += f" : base({', '.join(constructor.base_arguments)})"
    return _body_block(header, constructor.body, indent)


# ---------------------------------------------------------------------------
# Composite rendering
# ---------------------------------------------------------------------------

def render_type(node: TypeNode, indent: str) -> str:
    header = _join_words(*node.modifiers, node.kind, node.name)
    if node.base_type:
        header += f" : {node.base_type}"

    blocks: list[str] = []
    fields: list[str] = []
    for member in node.members:
        if isinstance(member, FieldNode):
            fields.append(render_field(member))
            continue
        if fields:
            blocks.append("\n".join(fields))
            fields = []
        if isinstance(member, ConstructorNode):
            blocks.append(render_constructor(member, node.name, indent))
        else:
            blocks.append(render_method(member, indent))
    if fields:
        blocks.append("\n".join(fields))

    return _block(header, blocks, indent)


def render_namespace(node: NamespaceNode, indent: str) -> str:
    return _block(
        f"namespace {node.name}",
        [render_type(t, indent) for t in node.types],
        indent,
    )


def render_file(builder: FileBuilder) -> str:
    """Render the whole file.  An empty builder renders as ``""``."""
    indent = builder.indent
    declarations = [
        render_namespace(d, indent) if isinstance(d, NamespaceNode) else render_type(d, indent)
        for d in builder.declarations
    ]
    usings = "\n".join(f"using {name};" for name in builder.usings)
    body = "\n\n".join(declarations)
    if usings and body:
        return f"{usings}\n\n{body}"
    return usings or body
