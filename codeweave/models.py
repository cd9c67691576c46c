"""Pydantic v2 models for generator input and output.

Descriptors are the input units handed to the generators by an external
collaborator; ``CodeGenFile`` is the output artifact.  All models are frozen:
a descriptor never changes once it has been passed to a generator.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_LOOKUP_SUFFIX = "ComponentIds"


# ---------------------------------------------------------------------------
# Component descriptors
# ---------------------------------------------------------------------------

class MemberInfo(BaseModel):
    """A public member of a component: its name and compilable type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Member name, e.g. 'x'")
    type: str = Field(..., min_length=1, description="Compilable type name, e.g. 'float'")


class ComponentDescriptor(BaseModel):
    """Describes one component for the component extensions generator."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["component"] = "component"
    full_type_name: str = Field(..., min_length=1, description="Canonical type name")
    type_name: str = Field(default="", description="Display name; defaults to the last segment of full_type_name")
    containers: tuple[str, ...] = Field(
        default=(), description="Names of the pools this component belongs to"
    )
    lookup_tags: tuple[str, ...] = Field(
        default=(),
        description="Explicit lookup identifier per container; derived from the lookup suffix when omitted",
    )
    members: tuple[MemberInfo, ...] = Field(default=())
    generate_methods: bool = Field(default=True, description="Whether this descriptor participates at all")
    generate_component: bool = Field(default=False, description="Declare the component type inline")
    is_singleton: bool = Field(default=False, description="Toggle a shared cached instance instead of add/remove")
    is_single_entity: bool = Field(default=False, description="At most one entity per pool holds this component")
    single_prefix: str = Field(default="is", description="Prefix for singleton toggle accessors")

    @model_validator(mode="before")
    @classmethod
    def _derive_type_name(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("type_name"):
            data["type_name"] = (data.get("full_type_name") or "").rsplit(".", 1)[-1]
        return data

    @model_validator(mode="after")
    def _one_lookup_tag_per_container(self) -> "ComponentDescriptor":
        if self.lookup_tags and len(self.lookup_tags) != len(self.containers):
            raise ValueError(
                f"{self.full_type_name}: expected {len(self.containers)} lookup tag(s), "
                f"got {len(self.lookup_tags)}"
            )
        return self

    def lookup_tag(self, container_index: int, suffix: str = DEFAULT_LOOKUP_SUFFIX) -> str:
        """Lookup identifier for one container: the explicit tag, else ``<container><suffix>``."""
        if self.lookup_tags:
            return self.lookup_tags[container_index]
        return self.containers[container_index] + suffix


# ---------------------------------------------------------------------------
# Pool descriptors
# ---------------------------------------------------------------------------

class PoolDescriptor(BaseModel):
    """Lists the pools for which an attribute class is generated."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pool"] = "pool"
    pool_names: tuple[str, ...] = Field(default=())

    @field_validator("pool_names")
    @classmethod
    def _non_empty_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not name for name in value):
            raise ValueError("pool names must not be empty")
        return value


Descriptor = Annotated[
    Union[ComponentDescriptor, PoolDescriptor],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Output artifact
# ---------------------------------------------------------------------------

class CodeGenFile(BaseModel):
    """A generated source file, not yet written anywhere."""

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(..., description="Artifact name without extension")
    file_content: str = Field(..., description="Generated text, LF line endings only")
    generator_name: str = Field(default="", description="Qualified name of the producing generator")

    @field_validator("file_content")
    @classmethod
    def _unix_line_endings(cls, value: str) -> str:
        return value.replace("\r\n", "\n").replace("\r", "\n")
