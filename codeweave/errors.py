"""Exception hierarchy for codeweave.

Every error raised by the generation core derives from ``CodeweaveError`` so
the CLI can report it in one place.  None of these are transient: a failure
always points at a malformed descriptor or a template/context mismatch and
reproduces on every run with the same input.
"""

from __future__ import annotations


class CodeweaveError(Exception):
    """Base class for all codeweave errors."""


class DescriptorPreconditionError(CodeweaveError):
    """Raised when a descriptor violates a generator precondition."""

    def __init__(self, descriptor_name: str, message: str):
        self.descriptor_name = descriptor_name
        super().__init__(f"{descriptor_name}: {message}")


class TemplateContextError(CodeweaveError):
    """Raised when a template references placeholders missing from the context."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "No context value for placeholder(s): " + ", ".join(missing)
        )


class UnknownDescriptorKindError(CodeweaveError):
    """Raised when no registered generator accepts a descriptor's kind."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"No generator accepts descriptors of kind '{kind}'")


class DescriptorFileError(CodeweaveError):
    """Raised when a descriptor file cannot be interpreted."""


class DuplicateArtifactError(CodeweaveError):
    """Raised when two generated artifacts would be written under the same name."""

    def __init__(self, file_name: str, generators: list[str]):
        self.file_name = file_name
        self.generators = generators
        super().__init__(
            f"Artifact '{file_name}' generated more than once (by {', '.join(generators)})"
        )
