"""Attribute classes that tag components with their pool."""

from __future__ import annotations

from collections.abc import Sequence

from codeweave.builder import DEFAULT_INDENT, AccessModifier, FileBuilder
from codeweave.models import CodeGenFile, PoolDescriptor

from .base import BaseGenerator

ATTRIBUTE_SUFFIX = "Attribute"
BASE_ATTRIBUTE = "PoolAttribute"


class PoolAttributeGenerator(BaseGenerator):
    """Generates one ``<Pool>Attribute : PoolAttribute`` class per pool name."""

    kind = "pool"

    def __init__(self, indent: str = DEFAULT_INDENT) -> None:
        self.indent = indent

    def generate(self, descriptors: Sequence[PoolDescriptor]) -> list[CodeGenFile]:
        return [
            CodeGenFile(
                file_name=pool_name + ATTRIBUTE_SUFFIX,
                file_content=pool_attribute_source(pool_name, self.indent),
                generator_name=self.generator_name,
            )
            for descriptor in descriptors
            for pool_name in descriptor.pool_names
        ]


def pool_attribute_source(pool_name: str, indent: str = DEFAULT_INDENT) -> str:
    class_name = pool_name + ATTRIBUTE_SUFFIX
    builder = FileBuilder(indent=indent)
    (
        builder.no_namespace()
        .add_type(class_name)
        .add_modifier(AccessModifier.PUBLIC)
        .set_base_type(BASE_ATTRIBUTE)
        .add_constructor()
        .add_modifier(AccessModifier.PUBLIC)
        .call_base(f'"{pool_name}"')
    )
    return builder.render()
