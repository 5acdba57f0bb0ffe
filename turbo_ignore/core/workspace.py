"""Workspace name resolution.

The workspace is the logical name of a package within a monorepo. It is
resolved, in order, from:

1. An explicit ``workspace`` value (non-empty)
2. The ``name`` field of ``package.json`` in ``directory`` (or the cwd)

Every call emits exactly one diagnostic on the supplied console and returns
the name, or None when it cannot be determined.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .config import DEFAULT_CONFIG, ResolverConfig
from .manifest import ManifestError, read_manifest
from .result import is_err

if TYPE_CHECKING:
    from turbo_ignore.output.console import ConsoleProtocol

__all__ = [
    "ResolutionRequest",
    "WorkspaceResolver",
    "resolve_workspace",
    "display_path",
]


@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """Inputs to a single resolution.

    Attributes:
        workspace: Explicit workspace name. Empty string counts as absent.
        directory: Directory holding the manifest. Relative paths are taken
            against the working directory; None means the working directory.
    """

    workspace: str | None = None
    directory: str | Path | None = None


def display_path(path: Path, cwd: Path | None) -> str:
    """Render ``path`` relative to ``cwd`` with forward slashes.

    Without a working directory the path is rendered as given.
    """
    if cwd is None:
        return path.as_posix()
    return Path(os.path.relpath(path, cwd)).as_posix()


def _working_directory() -> Path | None:
    try:
        return Path.cwd()
    except OSError:
        # cwd was removed out from under the process
        return None


def _failure_message(error: ManifestError, cwd: Path | None, config: ResolverConfig) -> str:
    rel = display_path(error.path, cwd)
    match error.kind:
        case "not_found":
            return f'"{rel}" could not be found. {config.tool_name} inferencing failed'
        case "missing_name":
            return f'"{rel}" is missing the "name" field (required).'


def resolve_workspace(
    request: ResolutionRequest,
    *,
    console: ConsoleProtocol,
    cwd: Path | None = None,
    config: ResolverConfig = DEFAULT_CONFIG,
) -> str | None:
    """Resolve the workspace name for ``request``.

    Args:
        request: Override and base directory.
        console: Receives exactly one info or error message.
        cwd: Working directory used as the default base directory and for
            rendering paths in messages. Defaults to ``Path.cwd()``.
        config: Manifest filename and tool name.

    Returns:
        The workspace name, or None if it could not be determined.
    """
    if request.workspace:
        console.info(f'using "{request.workspace}" as workspace from arguments')
        return request.workspace

    base_cwd = cwd if cwd is not None else _working_directory()
    directory = Path(".") if request.directory is None else Path(request.directory)
    if base_cwd is not None:
        directory = base_cwd / directory
    manifest_path = directory / config.manifest_filename

    result = read_manifest(manifest_path)
    if is_err(result):
        console.error(_failure_message(result.error, base_cwd, config))
        return None

    name = result.value.name
    console.info(f'inferred "{name}" as workspace from "{config.manifest_filename}"')
    return name


@dataclass(frozen=True, slots=True)
class WorkspaceResolver:
    """Binds a console and config for repeated resolutions.

    Holds no per-call state; every ``resolve`` re-reads the manifest.
    """

    console: ConsoleProtocol
    config: ResolverConfig = DEFAULT_CONFIG

    def resolve(self, request: ResolutionRequest, *, cwd: Path | None = None) -> str | None:
        return resolve_workspace(request, console=self.console, cwd=cwd, config=self.config)
