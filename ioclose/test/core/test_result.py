"""Tests for ioclose.core.result module."""

import pytest

from ioclose.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    """Tests for Ok type."""

    def test_default_value_is_none(self) -> None:
        """Ok() represents a successful close."""
        assert Ok().value is None
        assert Ok() == Ok(None)

    def test_is_ok(self) -> None:
        assert Ok().is_ok() is True
        assert Ok().is_err() is False

    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42
        assert Ok(42).unwrap_or(0) == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap_err on Ok"):
            Ok().unwrap_err()

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)
        assert Ok(1).map_err(str) == Ok(1)

    def test_repr(self) -> None:
        assert repr(Ok()) == "Ok(None)"

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]


class TestErr:
    """Tests for Err type."""

    def test_is_err(self) -> None:
        assert Err("e").is_err() is True
        assert Err("e").is_ok() is False

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("broken pipe").unwrap()

    def test_unwrap_chains_exception(self) -> None:
        """Unwrapping an exception error keeps it as the cause."""
        error = OSError("broken pipe")
        with pytest.raises(ValueError) as excinfo:
            Err(error).unwrap()
        assert excinfo.value.__cause__ is error

    def test_unwrap_or_and_unwrap_err(self) -> None:
        result: Result[int, str] = Err("e")
        assert result.unwrap_or(7) == 7
        assert Err("e").unwrap_err() == "e"

    def test_map(self) -> None:
        assert Err("e").map(lambda x: x) == Err("e")
        assert Err("e").map_err(str.upper) == Err("E")

    def test_repr(self) -> None:
        assert repr(Err("e")) == "Err('e')"

    def test_equality_uses_error_identity_for_exceptions(self) -> None:
        error = RuntimeError("x")
        assert Err(error) == Err(error)
        assert Err(error) != Err(RuntimeError("x"))
        assert Err(None) != Ok(None)


class TestTypeGuards:
    """Tests for is_ok and is_err."""

    def test_is_ok(self) -> None:
        assert is_ok(Ok()) is True
        assert is_ok(Err("e")) is False

    def test_is_err(self) -> None:
        assert is_err(Err("e")) is True
        assert is_err(Ok()) is False

    def test_pattern_matching(self) -> None:
        result: Result[None, str] = Err("closing")
        match result:
            case Ok():
                pytest.fail("expected Err")
            case Err(error):
                assert error == "closing"
