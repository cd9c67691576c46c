"""codeweave configuration.

Typed settings for the command-line pipeline.  The generation core itself
takes plain arguments; this model only gathers them in one validated place
so they can be loaded from JSON or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from codeweave.builder import DEFAULT_INDENT
from codeweave.models import DEFAULT_LOOKUP_SUFFIX

KNOWN_GENERATORS: tuple[str, ...] = ("component", "pool")


class GeneratorConfig(BaseModel):
    """Global codeweave configuration.

    Instances are created once by the CLI entry point (or by tests) and then
    passed to the orchestrator and the artifact writer.  Unknown keys are
    rejected so a misspelt setting fails loudly instead of being ignored.
    """

    model_config = ConfigDict(extra="forbid")

    output_dir: Path = Field(default=Path("./Generated"))
    file_extension: str = Field(default=".cs", description="Suffix appended to artifact names")
    usings: list[str] = Field(
        default_factory=lambda: ["Entitas"],
        description="Namespaces imported at the top of every component extension file",
    )
    generators: list[str] = Field(
        default_factory=lambda: list(KNOWN_GENERATORS),
        description="Descriptor kinds whose generators are enabled",
    )
    indent: str = Field(
        default=DEFAULT_INDENT,
        description="One indentation level in builder-rendered declarations",
    )
    lookup_suffix: str = Field(
        default=DEFAULT_LOOKUP_SUFFIX,
        description="Appended to a pool name to form its lookup class when a descriptor lists no lookup tags",
    )

    @field_validator("file_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        if value and not value.startswith("."):
            return "." + value
        return value

    @field_validator("generators")
    @classmethod
    def _known_generators(cls, value: list[str]) -> list[str]:
        unknown = [kind for kind in value if kind not in KNOWN_GENERATORS]
        if unknown:
            raise ValueError(
                f"Unknown generator kind(s): {', '.join(unknown)} "
                f"(expected one of: {', '.join(KNOWN_GENERATORS)})"
            )
        return value

    @field_validator("indent")
    @classmethod
    def _whitespace_indent(cls, value: str) -> str:
        if not value or value.strip():
            raise ValueError("indent must be a non-empty run of spaces or tabs")
        return value

    @field_validator("lookup_suffix")
    @classmethod
    def _identifier_suffix(cls, value: str) -> str:
        if not value or not value.isidentifier():
            raise ValueError(f"lookup_suffix must be a non-empty identifier, got {value!r}")
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            CODEWEAVE_OUTPUT_DIR, CODEWEAVE_FILE_EXTENSION,
            CODEWEAVE_USINGS, CODEWEAVE_GENERATORS,
            CODEWEAVE_INDENT, CODEWEAVE_LOOKUP_SUFFIX.

        List-valued variables are comma separated.  CODEWEAVE_INDENT is
        either a number of spaces or a literal string in which ``\\t``
        stands for a tab.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CODEWEAVE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CODEWEAVE_OUTPUT_DIR"])
        if os.environ.get("CODEWEAVE_FILE_EXTENSION"):
            kwargs["file_extension"] = os.environ["CODEWEAVE_FILE_EXTENSION"]
        if "CODEWEAVE_USINGS" in os.environ:
            kwargs["usings"] = _split_list(os.environ["CODEWEAVE_USINGS"])
        if os.environ.get("CODEWEAVE_GENERATORS"):
            kwargs["generators"] = _split_list(os.environ["CODEWEAVE_GENERATORS"])
        if os.environ.get("CODEWEAVE_INDENT"):
            kwargs["indent"] = _parse_indent(os.environ["CODEWEAVE_INDENT"])
        if os.environ.get("CODEWEAVE_LOOKUP_SUFFIX"):
            kwargs["lookup_suffix"] = os.environ["CODEWEAVE_LOOKUP_SUFFIX"]
        return cls(**kwargs)


def _split_list(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _parse_indent(raw: str) -> str:
    if raw.isdigit():
        return " " * int(raw)
    return raw.replace("\\t", "\t")
