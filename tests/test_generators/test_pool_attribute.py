"""Tests for the pool attribute generator."""

from __future__ import annotations

import pytest

from codeweave.generators.pool_attribute import PoolAttributeGenerator, pool_attribute_source
from codeweave.models import PoolDescriptor


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


class TestPoolAttributeGenerator:
    def test_source(self):
        assert pool_attribute_source("Core") == (
            "public class CoreAttribute : PoolAttribute {\n"
            '    public CoreAttribute() : base("Core") {\n'
            "    }\n"
            "}"
        )

    def test_one_file_per_pool(self, pool_descriptor):
        files = PoolAttributeGenerator().generate([pool_descriptor])
        assert [f.file_name for f in files] == ["CoreAttribute", "UIAttribute"]
        assert files[1].file_content.startswith("public class UIAttribute : PoolAttribute {")

    def test_generator_name(self, pool_descriptor):
        (first, _) = PoolAttributeGenerator().generate([pool_descriptor])
        assert first.generator_name.endswith("pool_attribute.PoolAttributeGenerator")

    def test_no_pools(self):
        assert PoolAttributeGenerator().generate([PoolDescriptor()]) == []

    def test_multiple_descriptors_keep_order(self):
        files = PoolAttributeGenerator().generate(
            [PoolDescriptor(pool_names=["B"]), PoolDescriptor(pool_names=["A"])]
        )
        assert [f.file_name for f in files] == ["BAttribute", "AAttribute"]
