"""Shared pytest fixtures for the codeweave test suite.

Provides reusable fixtures for:
- Component descriptors (plain, singleton, single-entity, multi-pool)
- Pool descriptors
- Descriptor files on disk (JSON and YAML)
- Output directories
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from codeweave.models import ComponentDescriptor, MemberInfo, PoolDescriptor


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

@pytest.fixture
def position_descriptor() -> ComponentDescriptor:
    """A two-member component in a single pool."""
    return ComponentDescriptor(
        full_type_name="PositionComponent",
        containers=["Core"],
        members=[
            MemberInfo(name="x", type="float"),
            MemberInfo(name="y", type="float"),
        ],
    )


@pytest.fixture
def movable_descriptor() -> ComponentDescriptor:
    """A member-less singleton component in a single pool."""
    return ComponentDescriptor(
        full_type_name="MovableComponent",
        containers=["Core"],
        is_singleton=True,
    )


@pytest.fixture
def score_descriptor() -> ComponentDescriptor:
    """A single-entity component with one member."""
    return ComponentDescriptor(
        full_type_name="ScoreComponent",
        containers=["Meta"],
        members=[MemberInfo(name="value", type="int")],
        is_single_entity=True,
    )


@pytest.fixture
def multi_pool_descriptor() -> ComponentDescriptor:
    """A component shared by two pools."""
    return ComponentDescriptor(
        full_type_name="NameComponent",
        containers=["Core", "UI"],
        members=[MemberInfo(name="value", type="string")],
    )


@pytest.fixture
def pool_descriptor() -> PoolDescriptor:
    return PoolDescriptor(pool_names=["Core", "UI"])


# ---------------------------------------------------------------------------
# Descriptor files
# ---------------------------------------------------------------------------

@pytest.fixture
def descriptor_payload() -> list[dict[str, Any]]:
    """Raw descriptor data as it would appear in a descriptor file."""
    return [
        {
            "full_type_name": "PositionComponent",
            "containers": ["Core"],
            "members": [{"name": "x", "type": "float"}],
        },
        {
            "kind": "pool",
            "pool_names": ["Core"],
        },
    ]


@pytest.fixture
def descriptor_json_file(tmp_path: Path, descriptor_payload: list[dict[str, Any]]) -> Path:
    path = tmp_path / "descriptors.json"
    path.write_text(json.dumps(descriptor_payload, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def descriptor_yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "descriptors.yaml"
    path.write_text(
        textwrap.dedent(
            """\
            descriptors:
              - full_type_name: HealthComponent
                containers: [Core]
                members:
                  - name: amount
                    type: int
              - kind: pool
                pool_names: [Core]
            """
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory that generated artifacts are written into."""
    return tmp_path / "Generated"
