"""Closing several resources together.

``close_all`` closes a fixed set of resources in the given order. ``Closers``
collects resources as they are acquired and closes them in reverse order,
which undoes nested acquisition:

    def export(path: Path, ...) -> Result[None, object]:
        slot = ErrorSlot()
        closers = Closers()
        try:
            out = open(path, "w")
            closers.append(out)
            cursor = conn.cursor()
            closers.append(cursor)
            ...
        finally:
            closers.close_deferred(slot)
        return Ok() if slot.error is None else Err(slot.error)

Every registered callback is attempted even when an earlier one fails. Only
the first failure is returned; the others are dropped, or reported as
warnings when a console is attached.

A close callback fails when it raises an ``Exception`` or returns an ``Err``.
Any other return value (``None`` for regular file objects, ``Err(None)``) is a
success.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from types import TracebackType
from typing import Protocol, runtime_checkable

from ioclose.core.config import Config
from ioclose.core.errors import CloseFailed
from ioclose.core.result import Err, Ok, Result, is_err
from ioclose.output.console import ConsoleProtocol

__all__ = [
    "Closer",
    "CloserFunc",
    "CloseResult",
    "Closers",
    "ErrorSlot",
    "close_all",
]

type CloseResult = Result[None, object]
type CloseCallback = Callable[[], object]


@runtime_checkable
class Closer(Protocol):
    """Anything with a ``close()`` method: files, sockets, cursors, Closers."""

    def close(self) -> object: ...


@dataclass(frozen=True, slots=True)
class CloserFunc:
    """Adapts a zero-argument callable into a Closer.

    ``CloserFunc(None)`` is valid and closes successfully without doing
    anything.
    """

    fn: CloseCallback | None

    def close(self) -> CloseResult:
        if self.fn is None:
            return Ok()
        return _call(self.fn)


@dataclass(slots=True)
class ErrorSlot:
    """Caller-owned error cell filled by ``Closers.close_deferred``."""

    error: object | None = None


def _call(callback: CloseCallback) -> CloseResult:
    try:
        value = callback()
    except Exception as e:
        return Err(e)
    # Err(None) carries no error: success.
    if isinstance(value, Err) and value.error is not None:
        return value
    return Ok()


def _close_each(
    callbacks: Iterable[CloseCallback],
    console: ConsoleProtocol | None,
    config: Config,
) -> CloseResult:
    """Call every callback, keep the first failure."""
    first: CloseResult = Ok()
    for callback in callbacks:
        result = _call(callback)
        if not is_err(result):
            continue
        if is_err(first):
            if console is not None and config.report.suppressed:
                console.warning(f"suppressed close error: {result.error!r}")
            continue
        first = result
    return first


def close_all(
    *closers: Closer | None,
    console: ConsoleProtocol | None = None,
    config: Config | None = None,
) -> CloseResult:
    """Close each argument in order and return the first failure.

    ``None`` arguments are skipped. All closers are attempted, whatever
    happened to the previous ones. Useful for example to close several
    prepared statements at once.

    Args:
        closers: Objects to close, in closing order
        console: Where to report failures after the first one
        config: Reporting options (defaults to ``Config()``)

    Returns:
        Ok(None) if every close succeeded, Err(first_error) otherwise
    """
    return _close_each(
        (c.close for c in closers if c is not None),
        console,
        config or Config(),
    )


class Closers:
    """A list of close callbacks, closed together in reverse order.

    Register resources with ``append`` (objects with a ``close()`` method) or
    ``append_func`` (bare callables) as they are acquired, then release them
    with ``close``, ``close_deferred`` or a ``with`` block. A Closers is
    empty again after each close pass and can be reused.

    Not thread-safe.
    """

    def __init__(
        self,
        *,
        console: ConsoleProtocol | None = None,
        config: Config | None = None,
    ) -> None:
        self._callbacks: list[CloseCallback] = []
        self._console = console
        self._config = config or Config()

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        return f"Closers(pending={len(self._callbacks)})"

    def append(self, *closers: Closer | None) -> None:
        """Register the ``close`` method of each non-None argument."""
        for closer in closers:
            if closer is None:
                continue
            self._callbacks.append(closer.close)

    def append_func(self, *fns: CloseCallback | None) -> None:
        """Register each non-None callable."""
        for fn in fns:
            if fn is None:
                continue
            self._callbacks.append(fn)

    def close(self) -> CloseResult:
        """Call all callbacks in reverse registration order.

        Every callback is called exactly once. The first failure met (that
        is, the failing callback appended last) is returned.
        """
        # Detach first so the list is empty even if a callback raises a
        # BaseException such as KeyboardInterrupt.
        callbacks, self._callbacks = self._callbacks, []
        return _close_each(reversed(callbacks), self._console, self._config)

    def close_deferred(self, slot: ErrorSlot | None) -> None:
        """Run a close pass and store its error in ``slot`` if it is empty.

        An error already held by the slot is kept. Meant to be called from a
        ``finally`` clause; closers appended after the ``try`` started are
        still closed.
        """
        result = self.close()
        if slot is not None and slot.error is None and is_err(result):
            slot.error = result.error

    def __enter__(self) -> Closers:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        result = self.close()
        if exc is not None or not is_err(result):
            return
        error = result.error
        if isinstance(error, BaseException):
            raise CloseFailed(error) from error
        raise CloseFailed(error)
