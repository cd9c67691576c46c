"""Routes descriptors to the generators that accept their kind."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from codeweave.config import GeneratorConfig
from codeweave.errors import DuplicateArtifactError, UnknownDescriptorKindError
from codeweave.models import CodeGenFile

from .base import BaseGenerator
from .component_extensions import ComponentExtensionsGenerator
from .pool_attribute import PoolAttributeGenerator


def default_generators(config: GeneratorConfig | None = None) -> list[BaseGenerator]:
    """Instantiate the generators enabled in *config*, in a fixed order."""
    config = config or GeneratorConfig()
    generators: list[BaseGenerator] = []
    if "component" in config.generators:
        generators.append(
            ComponentExtensionsGenerator(
                usings=config.usings,
                indent=config.indent,
                lookup_suffix=config.lookup_suffix,
            )
        )
    if "pool" in config.generators:
        generators.append(PoolAttributeGenerator(indent=config.indent))
    return generators


class CodeGenerator:
    """Runs a fixed list of generators over an ordered list of descriptors.

    Every descriptor must be accepted by at least one generator, and every
    artifact name must be unique across the whole run.  Output is ordered by
    generator first, then by descriptor input order.
    """

    def __init__(self, generators: Sequence[BaseGenerator] | None = None) -> None:
        self.generators = list(generators) if generators is not None else default_generators()

    def run(self, descriptors: Sequence[Any]) -> list[CodeGenFile]:
        """Generate all artifacts for *descriptors*.

        Raises:
            UnknownDescriptorKindError: If no generator accepts a descriptor.
            DuplicateArtifactError: If two artifacts share a file name.
        """
        for descriptor in descriptors:
            if not any(g.accepts(descriptor) for g in self.generators):
                raise UnknownDescriptorKindError(
                    getattr(descriptor, "kind", type(descriptor).__name__)
                )

        files: list[CodeGenFile] = []
        for generator in self.generators:
            accepted = [d for d in descriptors if generator.accepts(d)]
            files.extend(generator.generate(accepted))
        _check_unique_names(files)
        return files


def _check_unique_names(files: Sequence[CodeGenFile]) -> None:
    seen: dict[str, CodeGenFile] = {}
    for file in files:
        first = seen.setdefault(file.file_name, file)
        if first is not file:
            raise DuplicateArtifactError(
                file.file_name, [first.generator_name, file.generator_name]
            )
