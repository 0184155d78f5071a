"""Console output abstraction.

Close passes can report the failures they do not return. They do so through
``ConsoleProtocol`` so that the library itself does not depend on a
particular output backend: ``RichConsole`` writes to the terminal,
``MockConsole`` captures reports in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    WARNING = auto()  # Yellow, suppressed close failure

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...


class RichConsole:
    """Console implementation using Rich library.

    Messages are printed as plain text, never as Rich markup: they carry
    exception reprs such as ``OSError('[Errno 5] ...')``.
    """

    def __init__(self, *, stderr: bool = True) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console
        from rich.text import Text

        self._console = Console(stderr=stderr)
        self._text = Text
        self._style_map = {
            Style.WARNING: "yellow",
        }

    def warning(self, message: str) -> None:
        label = (f"{Style.WARNING}:", self._style_map[Style.WARNING])
        self._console.print(self._text.assemble(label, " ", message))


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
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]
