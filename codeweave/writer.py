"""Write generated artifacts to disk.

Each artifact lands at ``<output_dir>/<file_name><file_extension>``.  Names
depend only on descriptor identity, so repeated runs overwrite the same
files.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from codeweave.models import CodeGenFile


class ArtifactWriter:
    """Writes ``CodeGenFile`` artifacts under an output directory."""

    def __init__(self, output_dir: str | Path, file_extension: str = ".cs") -> None:
        self.output_dir = Path(output_dir)
        self.file_extension = file_extension

    def path_for(self, artifact: CodeGenFile) -> Path:
        return self.output_dir / (artifact.file_name + self.file_extension)

    async def write(self, artifact: CodeGenFile) -> Path:
        """Write one artifact and return its path."""
        out = self.path_for(artifact)
        await asyncio.to_thread(_write_file, out, artifact.file_content)
        return out

    async def write_all(self, artifacts: Sequence[CodeGenFile]) -> list[Path]:
        """Write every artifact concurrently; paths are returned in input order."""
        return list(await asyncio.gather(*(self.write(a) for a in artifacts)))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content with LF endings."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="\n")
