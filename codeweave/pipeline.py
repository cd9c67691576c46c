"""codeweave command-line pipeline.

Loads descriptors, runs the enabled generators, writes the artifacts and
prints a summary::

    python -m codeweave.pipeline descriptors.json -o ./Generated
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from codeweave.config import GeneratorConfig
from codeweave.errors import CodeweaveError
from codeweave.generators import CodeGenerator, default_generators
from codeweave.loader import load_descriptors
from codeweave.models import CodeGenFile
from codeweave.utils import (
    console,
    print_artifact_table,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)
from codeweave.writer import ArtifactWriter


def generate(descriptors: Sequence[Any], config: GeneratorConfig) -> list[CodeGenFile]:
    """Run the generators enabled in *config* over *descriptors*.

    Descriptors whose kind has a disabled generator are dropped with a
    warning instead of failing the run.
    """
    generator = CodeGenerator(default_generators(config))
    enabled = [d for d in descriptors if d.kind in config.generators]
    skipped = len(descriptors) - len(enabled)
    if skipped:
        print_warning(f"Skipping {skipped} descriptor(s) with disabled generators")
    return generator.run(enabled)


async def run(
    descriptors_path: Path, config: GeneratorConfig, *, dry_run: bool = False
) -> list[CodeGenFile]:
    """Load, generate and (unless *dry_run*) write; returns the artifacts."""
    descriptors = load_descriptors(descriptors_path)
    console.print(f"  [dim]Loaded {len(descriptors)} descriptor(s) from {descriptors_path}[/dim]")

    artifacts = generate(descriptors, config)

    if dry_run:
        print_artifact_table(artifacts)
    else:
        writer = ArtifactWriter(config.output_dir, config.file_extension)
        paths = await writer.write_all(artifacts)
        print_artifact_table(artifacts, paths)

    print_summary_table(
        {
            "Descriptors": str(len(descriptors)),
            "Artifacts": str(len(artifacts)),
            "Output": "(dry run)" if dry_run else str(config.output_dir),
        },
        title="codeweave",
    )
    return artifacts


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m codeweave.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="codeweave -- generate component extensions from descriptors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m codeweave.pipeline descriptors.json\n"
            "  python -m codeweave.pipeline descriptors.yaml -o ./Generated\n"
            "  python -m codeweave.pipeline descriptors.json --config codeweave.json --dry-run\n"
        ),
    )

    parser.add_argument(
        "descriptors",
        help="Path to a JSON or YAML descriptor file",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (overrides config and CODEWEAVE_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a saved GeneratorConfig JSON file (default: environment)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate and list artifacts without writing them",
    )

    args = parser.parse_args(argv)

    descriptors_path = Path(args.descriptors)
    if not descriptors_path.exists():
        print_error(f"Error: Descriptor file not found: {descriptors_path}")
        sys.exit(1)

    try:
        config = GeneratorConfig.load(Path(args.config)) if args.config else GeneratorConfig.from_env()
        if args.output:
            config = config.model_copy(update={"output_dir": Path(args.output)})
        artifacts = asyncio.run(run(descriptors_path, config, dry_run=args.dry_run))
    except (CodeweaveError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    print_success(f"Generated {len(artifacts)} file(s)")


if __name__ == "__main__":
    main()
