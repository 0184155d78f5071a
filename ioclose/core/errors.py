"""Exceptions raised at the Python protocol boundary.

Everywhere else failures travel as ``Err`` values; the context manager exit
path is the one place where a failed close pass has to become an exception.
"""

from __future__ import annotations

__all__ = ["CloseFailed"]


class CloseFailed(Exception):
    """A scoped close pass failed after its block exited normally.

    Attributes:
        error: The first error returned by the close pass.
    """

    def __init__(self, error: object) -> None:
        super().__init__(f"close failed: {error}")
        self.error = error
