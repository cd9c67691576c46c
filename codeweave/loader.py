"""Load pre-populated descriptors from JSON or YAML files.

Accepted layouts are a top-level list of descriptors or a mapping with a
``descriptors`` key.  Each entry carries a ``kind`` (``"component"`` when
omitted) that selects the descriptor model.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter

from codeweave.errors import DescriptorFileError
from codeweave.models import Descriptor

_YAML_SUFFIXES = {".yml", ".yaml"}

_DESCRIPTOR_LIST = TypeAdapter(list[Descriptor])


def parse_descriptors(data: Any) -> list[Descriptor]:
    """Validate already-decoded data into descriptor models.

    Raises:
        DescriptorFileError: If the top-level shape is not a list or a
            mapping with a ``descriptors`` list.
        pydantic.ValidationError: If an entry does not match its model.
    """
    if isinstance(data, dict):
        data = data.get("descriptors")
    if not isinstance(data, list):
        raise DescriptorFileError(
            "Expected a list of descriptors or a mapping with a 'descriptors' list"
        )
    entries = [
        {"kind": "component", **entry} if isinstance(entry, dict) and "kind" not in entry else entry
        for entry in data
    ]
    return _DESCRIPTOR_LIST.validate_python(entries)


def load_descriptors(path: str | Path) -> list[Descriptor]:
    """Read and validate a descriptor file.

    ``.yml``/``.yaml`` files are parsed with PyYAML, everything else as JSON.

    Raises:
        FileNotFoundError: If the file does not exist.
        DescriptorFileError: If the file cannot be decoded or has the wrong
            top-level shape.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DescriptorFileError(f"Could not parse {file_path}: {exc}") from exc
    return parse_descriptors(data)
