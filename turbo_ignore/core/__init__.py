"""Core domain types and logic."""

from .config import DEFAULT_CONFIG, ResolverConfig
from .errors import ErrorCode
from .manifest import Manifest, ManifestError, read_manifest
from .result import Err, Ok, Result, is_err
from .workspace import ResolutionRequest, WorkspaceResolver, resolve_workspace

__all__ = [
    # config
    "DEFAULT_CONFIG",
    "ResolverConfig",
    # errors
    "ErrorCode",
    # manifest
    "Manifest",
    "ManifestError",
    "read_manifest",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    # workspace
    "ResolutionRequest",
    "WorkspaceResolver",
    "resolve_workspace",
]
