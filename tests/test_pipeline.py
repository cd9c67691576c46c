"""Tests for the command-line pipeline (codeweave.pipeline).

Covers:
- generate() with enabled/disabled generators
- run() writing files and dry runs
- main() argument handling and error exits
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from codeweave.config import GeneratorConfig
from codeweave.pipeline import generate, main, run


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerate:
    @pytest.mark.unit
    def test_all_generators(self, position_descriptor, pool_descriptor):
        files = generate([position_descriptor, pool_descriptor], GeneratorConfig())
        assert len(files) == 3

    @pytest.mark.unit
    def test_disabled_kind_is_skipped(self, position_descriptor, pool_descriptor):
        files = generate(
            [position_descriptor, pool_descriptor], GeneratorConfig(generators=["pool"])
        )
        assert [f.file_name for f in files] == ["CoreAttribute", "UIAttribute"]

    @pytest.mark.unit
    def test_usings_from_config(self, position_descriptor):
        (file,) = generate([position_descriptor], GeneratorConfig(usings=["Entitas", "Game"]))
        assert file.file_content.startswith("using Entitas;\nusing Game;\n")


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


class TestRun:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_writes_files(self, descriptor_json_file: Path, output_dir: Path):
        artifacts = await run(descriptor_json_file, GeneratorConfig(output_dir=output_dir))
        assert len(artifacts) == 2
        assert (output_dir / "PositionComponentGeneratedExtension.cs").is_file()
        assert (output_dir / "CoreAttribute.cs").is_file()

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_dry_run_writes_nothing(self, descriptor_json_file: Path, output_dir: Path):
        artifacts = await run(
            descriptor_json_file, GeneratorConfig(output_dir=output_dir), dry_run=True
        )
        assert len(artifacts) == 2
        assert not output_dir.exists()


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    @pytest.mark.integration
    def test_generates_into_output_dir(self, descriptor_yaml_file: Path, output_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            main([str(descriptor_yaml_file), "-o", str(output_dir)])
        content = (output_dir / "HealthComponentGeneratedExtension.cs").read_text(encoding="utf-8")
        assert "public Core AddHealth(int newAmount) {" in content

    @pytest.mark.integration
    def test_config_file(self, descriptor_json_file: Path, output_dir: Path, tmp_path: Path):
        config_path = GeneratorConfig(
            output_dir=output_dir, file_extension=".txt", generators=["pool"]
        ).save(tmp_path / "codeweave.json")
        main([str(descriptor_json_file), "--config", str(config_path)])
        assert [p.name for p in output_dir.iterdir()] == ["CoreAttribute.txt"]

    @pytest.mark.unit
    def test_missing_descriptor_file_exits(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1

    @pytest.mark.unit
    def test_precondition_violation_exits(self, tmp_path: Path, output_dir: Path):
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps([{"full_type_name": "FlagComponent", "is_singleton": True}]),
            encoding="utf-8",
        )
        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "-o", str(output_dir)])
        assert exc_info.value.code == 1
        assert not output_dir.exists()

    @pytest.mark.unit
    def test_invalid_descriptor_exits(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"kind": "pool", "pool_names": [""]}]), encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "--dry-run"])
        assert exc_info.value.code == 1

    @pytest.mark.unit
    def test_duplicate_artifact_exits_before_writing(self, tmp_path: Path, output_dir: Path):
        path = tmp_path / "dupes.json"
        path.write_text(
            json.dumps([{"kind": "pool", "pool_names": ["Core"]}, {"kind": "pool", "pool_names": ["Core"]}]),
            encoding="utf-8",
        )
        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "-o", str(output_dir)])
        assert exc_info.value.code == 1
        assert not output_dir.exists()
