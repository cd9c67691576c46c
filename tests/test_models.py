"""Unit tests for descriptor and artifact models (codeweave.models).

Tests cover:
- ComponentDescriptor defaults and derived names
- Lookup tag derivation and validation
- Immutability
- PoolDescriptor validation
- CodeGenFile line-ending normalisation
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from codeweave.models import CodeGenFile, ComponentDescriptor, MemberInfo, PoolDescriptor


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# ComponentDescriptor
# ---------------------------------------------------------------------------


class TestComponentDescriptor:
    def test_defaults(self):
        descriptor = ComponentDescriptor(full_type_name="PositionComponent")
        assert descriptor.kind == "component"
        assert descriptor.type_name == "PositionComponent"
        assert descriptor.containers == ()
        assert descriptor.members == ()
        assert descriptor.generate_methods is True
        assert descriptor.generate_component is False
        assert descriptor.is_singleton is False
        assert descriptor.is_single_entity is False
        assert descriptor.single_prefix == "is"

    def test_type_name_from_qualified_name(self):
        descriptor = ComponentDescriptor(full_type_name="Game.Core.HealthComponent")
        assert descriptor.type_name == "HealthComponent"

    def test_explicit_type_name(self):
        descriptor = ComponentDescriptor(full_type_name="Game.Hp", type_name="HealthComponent")
        assert descriptor.type_name == "HealthComponent"

    def test_lookup_tags_derived(self):
        descriptor = ComponentDescriptor(full_type_name="AComponent", containers=["Core", "UI"])
        assert descriptor.lookup_tags == ()
        assert descriptor.lookup_tag(0) == "CoreComponentIds"
        assert descriptor.lookup_tag(1) == "UIComponentIds"

    def test_lookup_tag_custom_suffix(self):
        descriptor = ComponentDescriptor(full_type_name="AComponent", containers=["Core"])
        assert descriptor.lookup_tag(0, "Ids") == "CoreIds"

    def test_explicit_lookup_tags(self):
        descriptor = ComponentDescriptor(
            full_type_name="AComponent", containers=["Core"], lookup_tags=["CoreIds"]
        )
        assert descriptor.lookup_tags == ("CoreIds",)
        assert descriptor.lookup_tag(0, "Ignored") == "CoreIds"

    def test_lookup_tag_count_must_match(self):
        with pytest.raises(ValidationError):
            ComponentDescriptor(
                full_type_name="AComponent", containers=["Core", "UI"], lookup_tags=["CoreIds"]
            )

    def test_members_from_dicts(self):
        descriptor = ComponentDescriptor(
            full_type_name="AComponent", members=[{"name": "x", "type": "int"}]
        )
        assert descriptor.members == (MemberInfo(name="x", type="int"),)

    def test_frozen(self):
        descriptor = ComponentDescriptor(full_type_name="AComponent")
        with pytest.raises(ValidationError):
            descriptor.is_singleton = True

    def test_empty_full_type_name_rejected(self):
        with pytest.raises(ValidationError):
            ComponentDescriptor(full_type_name="")


# ---------------------------------------------------------------------------
# PoolDescriptor
# ---------------------------------------------------------------------------


class TestPoolDescriptor:
    def test_pool_names(self):
        assert PoolDescriptor(pool_names=["Core"]).pool_names == ("Core",)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            PoolDescriptor(pool_names=["Core", ""])


# ---------------------------------------------------------------------------
# CodeGenFile
# ---------------------------------------------------------------------------


class TestCodeGenFile:
    def test_normalises_crlf(self):
        artifact = CodeGenFile(file_name="A", file_content="a\r\nb\rc\n")
        assert artifact.file_content == "a\nb\nc\n"

    def test_generator_name_default(self):
        assert CodeGenFile(file_name="A", file_content="").generator_name == ""
