"""Console output abstraction.

Resolution reports through a console object rather than printing directly,
so the same code writes styled output with Rich in production and is
captured verbatim by ``MockConsole`` in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "LOG_PREFIX",
    "Style",
    "ConsoleProtocol",
    "OutputRecord",
    "RichConsole",
    "MockConsole",
]

LOG_PREFIX = "≫  "


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def newline(self) -> None: ...


class RichConsole:
    """Console implementation using Rich.

    Every diagnostic line is prefixed with ``LOG_PREFIX``. Errors and
    warnings go to stderr, everything else to stdout.
    """

    def __init__(self, *, prefix: str = LOG_PREFIX) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._out = Console(highlight=False, soft_wrap=True)
        self._err = Console(stderr=True, highlight=False, soft_wrap=True)
        self._prefix = prefix
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
        }

    def _emit(self, message: str, style: Style, *, stderr: bool = False) -> None:
        from rich.text import Text

        line = Text(self._prefix, style="dim")
        line.append(message, style=self._style_map.get(style, ""))
        (self._err if stderr else self._out).print(line)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._out.print(message, style=self._style_map.get(style) or None, markup=False)

    def success(self, message: str) -> None:
        self._emit(message, Style.SUCCESS)

    def error(self, message: str) -> None:
        self._emit(message, Style.ERROR, stderr=True)

    def warning(self, message: str) -> None:
        self._emit(message, Style.WARNING, stderr=True)

    def info(self, message: str) -> None:
        self._emit(message, Style.INFO)

    def newline(self) -> None:
        self._out.print()


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing.

    Messages are stored exactly as passed, without prefix, so tests can
    compare diagnostics verbatim and tell channels apart by ``style``.
    """

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.INFO))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helper methods

    def clear(self) -> None:
        """Clear all captured output."""
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    def has_error(self) -> bool:
        """Check if any error was printed."""
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        """Count outputs with a specific style."""
        return sum(1 for o in self.outputs if o.style == style)
