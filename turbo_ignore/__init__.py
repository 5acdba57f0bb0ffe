"""Workspace name resolution for turbo-ignore."""

__version__ = "0.1.0"
