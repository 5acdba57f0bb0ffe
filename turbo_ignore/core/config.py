"""Resolver configuration."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ResolverConfig",
    "DEFAULT_CONFIG",
    "MANIFEST_FILENAME",
    "TOOL_NAME",
]

MANIFEST_FILENAME = "package.json"
TOOL_NAME = "turbo-ignore"


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Names substituted into resolution and its diagnostics.

    Attributes:
        manifest_filename: File looked up in the base directory.
        tool_name: Name reported when inference fails.
    """

    manifest_filename: str = MANIFEST_FILENAME
    tool_name: str = TOOL_NAME


DEFAULT_CONFIG = ResolverConfig()
