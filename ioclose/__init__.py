"""Utilities for objects that have, or collect, a ``close()`` method."""

from .closer import Closer, CloserFunc, CloseResult, Closers, ErrorSlot, close_all
from .core import CloseFailed, Config, Err, Ok, Result, is_err, is_ok

__version__ = "0.1.0"

__all__ = [
    "CloseFailed",
    "CloseResult",
    "Closer",
    "CloserFunc",
    "Closers",
    "Config",
    "Err",
    "ErrorSlot",
    "Ok",
    "Result",
    "close_all",
    "is_err",
    "is_ok",
]
