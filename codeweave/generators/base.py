"""Common shape of all generators.

A generator declares the descriptor ``kind`` it accepts; the orchestrator
routes descriptors by matching that tag rather than by asking each generator
whether it can handle an object.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from codeweave.models import CodeGenFile


class BaseGenerator:
    """Base class for descriptor-kind-tagged generators."""

    kind: ClassVar[str] = ""

    @property
    def generator_name(self) -> str:
        """Qualified class name, stored on every artifact this generator produces."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def accepts(self, descriptor: Any) -> bool:
        return getattr(descriptor, "kind", None) == self.kind

    def generate(self, descriptors: Sequence[Any]) -> list[CodeGenFile]:
        raise NotImplementedError
