"""Reading the workspace manifest (``package.json``).

Only the top-level ``name`` string is consulted; every other field is
ignored.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result
from .structured import as_str_dict, get_str

__all__ = [
    "Manifest",
    "ManifestError",
    "ManifestErrorKind",
    "read_manifest",
]

ManifestErrorKind = Literal["not_found", "missing_name"]


@dataclass(frozen=True, slots=True)
class Manifest:
    """A manifest that yielded a usable name."""

    path: Path
    name: str


@dataclass(frozen=True, slots=True)
class ManifestError:
    """Why a manifest could not provide a workspace name.

    Attributes:
        kind: ``not_found`` when the file could not be read at all,
            ``missing_name`` when it was read but has no usable ``name``.
        path: The manifest path that was attempted.
    """

    kind: ManifestErrorKind
    path: Path


def read_manifest(path: Path) -> Result[Manifest, ManifestError]:
    """Read ``path`` and extract its ``name`` field.

    Never raises for filesystem or content problems; those come back as
    ``Err(ManifestError)``.
    """
    try:
        content = path.read_bytes()
    except OSError:
        return Err(ManifestError(kind="not_found", path=path))

    try:
        data_obj: object = json.loads(content.decode("utf-8"))
    # ValueError covers JSONDecodeError and oversized integer literals;
    # RecursionError comes from very deeply nested arrays/objects.
    except (UnicodeDecodeError, ValueError, RecursionError):
        return Err(ManifestError(kind="missing_name", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ManifestError(kind="missing_name", path=path))

    name = get_str(data, "name")
    if name is None:
        return Err(ManifestError(kind="missing_name", path=path))

    return Ok(Manifest(path=path, name=name))
