"""Placeholder template expansion.

Templates are constant C# snippets containing ``$Token`` placeholders from a
fixed vocabulary.  Expansion runs in three strictly ordered passes:

1. every ``{`` and ``}`` in the raw template is doubled,
2. each placeholder is replaced by a positional marker ``{N}`` (one regex
   alternation, longest token first, so a token that is a prefix of another
   can never steal its match),
3. a single ``str.format`` call supplies the values.

Because all literal braces are doubled before any marker is introduced, the
markers cannot collide with template text, and substituted values are never
re-scanned for placeholders.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from codeweave.errors import DescriptorPreconditionError, TemplateContextError
from codeweave.models import DEFAULT_LOOKUP_SUFFIX, ComponentDescriptor

TOKENS: tuple[str, ...] = (
    "Type",
    "Name",
    "name",
    "Tag",
    "Ids",
    "typedArgs",
    "assign",
    "args",
    "Prefix",
    "prefix",
)

COMPONENT_SUFFIX = "Component"
ARGUMENT_PREFIX = "new"
ASSIGNMENT_FORMAT = "        component.{0} = {1};"


def _token_pattern(tokens: tuple[str, ...]) -> re.Pattern[str]:
    ordered = sorted(tokens, key=len, reverse=True)
    return re.compile(r"\$(" + "|".join(re.escape(t) for t in ordered) + ")")


_TOKEN_RE = _token_pattern(TOKENS)


# ---------------------------------------------------------------------------
# Expansion passes
# ---------------------------------------------------------------------------

def escape_format_chars(template: str) -> str:
    """Double every brace so it survives ``str.format`` as a literal."""
    return template.replace("{", "{{").replace("}", "}}")


def to_format_string(template: str) -> tuple[str, list[str]]:
    """Escape *template* and swap its placeholders for positional markers.

    Returns the format string and the token names in marker order.
    """
    tokens: list[str] = []

    def _marker(match: re.Match[str]) -> str:
        token = match.group(1)
        if token not in tokens:
            tokens.append(token)
        return "{%d}" % tokens.index(token)

    return _TOKEN_RE.sub(_marker, escape_format_chars(template)), tokens


def expand(template: str, context: Mapping[str, str]) -> str:
    """Expand *template* against *context* (token name without ``$`` -> value).

    Raises:
        TemplateContextError: If the template references a token that the
            context does not supply.
    """
    format_string, tokens = to_format_string(template)
    missing = [f"${t}" for t in tokens if t not in context]
    if missing:
        raise TemplateContextError(missing)
    return format_string.format(*(context[t] for t in tokens))


# ---------------------------------------------------------------------------
# Context derivation
# ---------------------------------------------------------------------------

def uppercase_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def lowercase_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def remove_component_suffix(type_name: str) -> str:
    if type_name.endswith(COMPONENT_SUFFIX):
        return type_name[: -len(COMPONENT_SUFFIX)]
    return type_name


def argument_name(member_name: str) -> str:
    """``position`` -> ``newPosition``."""
    return ARGUMENT_PREFIX + uppercase_first(member_name)


def build_context(
    descriptor: ComponentDescriptor,
    container_index: int = 0,
    lookup_suffix: str = DEFAULT_LOOKUP_SUFFIX,
) -> dict[str, str]:
    """Compute every placeholder value for one container of *descriptor*.

    Only ``Tag`` and ``Ids`` depend on *container_index*.  ``Ids`` is the
    descriptor's explicit lookup tag when it has one, else the container name
    followed by *lookup_suffix*.
    """
    if not 0 <= container_index < len(descriptor.containers):
        raise DescriptorPreconditionError(
            descriptor.full_type_name,
            f"container index {container_index} out of range "
            f"({len(descriptor.containers)} container(s))",
        )
    name = remove_component_suffix(descriptor.type_name)
    members = descriptor.members
    return {
        "Type": descriptor.full_type_name,
        "Name": name,
        "name": lowercase_first(name),
        "Tag": descriptor.containers[container_index],
        "Ids": descriptor.lookup_tag(container_index, lookup_suffix),
        "typedArgs": ", ".join(f"{m.type} {argument_name(m.name)}" for m in members),
        "assign": "\n".join(
            ASSIGNMENT_FORMAT.format(m.name, argument_name(m.name)) for m in members
        ),
        "args": ", ".join(argument_name(m.name) for m in members),
        "Prefix": uppercase_first(descriptor.single_prefix),
        "prefix": lowercase_first(descriptor.single_prefix),
    }


def expand_for_descriptor(
    template: str,
    descriptor: ComponentDescriptor,
    container_index: int = 0,
    lookup_suffix: str = DEFAULT_LOOKUP_SUFFIX,
) -> str:
    """Expand *template* with the values derived for one container."""
    return expand(template, build_context(descriptor, container_index, lookup_suffix))


def expand_per_container(
    template: str,
    descriptor: ComponentDescriptor,
    lookup_suffix: str = DEFAULT_LOOKUP_SUFFIX,
) -> str:
    """Expand *template* once per container and concatenate in container order."""
    return "".join(
        expand_for_descriptor(template, descriptor, index, lookup_suffix)
        for index in range(len(descriptor.containers))
    )
