"""Result type: Ok[T] | Err[E] for explicit error handling.

A Result holds exactly one of a success value (``Ok``) or a failure value
(``Err``). Both variants are frozen msgspec structs, so the active variant and
its payload are fixed once built; every combinator returns a new instance.

Example:
    ```python
    from okerr import Err, Ok, make_err, make_ok

    make_ok(42).map(lambda x: x * 2)
    # Ok(value=84)

    make_err('Error occurred').and_then(lambda x: make_ok(x + 10))
    # Err(error='Error occurred')

    match parse(raw):
        case Ok(value):
            ...
        case Err(error):
            ...
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, NoReturn, TypeIs, TypeVar, overload

import msgspec

from okerr.errors import UNWRAP_ERR_ON_OK, UNWRAP_ON_ERR, UnwrapError

__all__ = [
    'UNIT',
    'Err',
    'Ok',
    'Result',
    'Unit',
    'collect',
    'make_err',
    'make_ok',
]

T = TypeVar('T')
E = TypeVar('E')
U = TypeVar('U')
F = TypeVar('F')


class Unit(msgspec.Struct, frozen=True, gc=False):
    """Marker for the side of a Result that carries no meaningful data.

    All instances compare equal; use the module-level ``UNIT``.
    """


UNIT = Unit()


class Ok(msgspec.Struct, Generic[T], frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True; narrows the type to Ok[T]."""
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to return.

        Raises:
            UnwrapError: Always, with message "Called unwrap_err on an Ok value".
        """
        raise UnwrapError(UNWRAP_ERR_ON_OK, self.value)

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], T]) -> T:
        """Return the contained Ok value without calling the fallback."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            A new Ok holding the result of f.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], F]) -> Ok[T]:
        """Pass the Ok value through in a new Ok."""
        return Ok(self.value)

    def and_then(self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a fallible step: return whatever f returns for the value.

        Also known as flatmap or bind.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Short-circuit: pass the Ok value through without calling f."""
        return Ok(self.value)

    def flatten(self) -> Ok[Any] | Err[Any]:
        """Flatten one level of nesting: Ok(Ok(v)) -> Ok(v), Ok(Err(e)) -> Err(e).

        Raises:
            TypeError: If the contained value is not itself a Result.
        """
        if isinstance(self.value, Ok | Err):
            return self.value
        raise TypeError(f'flatten() requires a nested Result, got {type(self.value).__name__}')


class Err(msgspec.Struct, Generic[E], frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True; narrows the type to Err[E]."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value to return.

        Raises:
            UnwrapError: Always, with message "Called unwrap on an Err value".
        """
        raise UnwrapError(UNWRAP_ON_ERR, self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with the caller's message verbatim.

        Raises:
            UnwrapError: Always, with ``msg`` as its message.
        """
        raise UnwrapError(msg, self.error)

    def unwrap_or(self, default: T) -> T:
        """Return the default since this is Err."""
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the error."""
        return f(self.error)

    def map(self, _f: Callable[[Any], U]) -> Err[E]:
        """Pass the error through in a new Err."""
        return Err(self.error)

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            A new Err holding the result of f.
        """
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Ok[U] | Err[E]]) -> Err[E]:
        """Short-circuit: pass the error through without calling f."""
        return Err(self.error)

    def or_else(self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Recover from the error: return whatever f returns for it."""
        return f(self.error)

    def flatten(self) -> Err[E]:
        """Return a copy of self; there is nothing to flatten."""
        return Err(self.error)


type Result[T = Unit, E = Unit] = Ok[T] | Err[E]


@overload
def make_ok(value: T) -> Result[T, Unit]: ...


@overload
def make_ok(value: T, err_type: type[E]) -> Result[T, E]: ...


def make_ok(value: Any, err_type: Any = None) -> Any:  # noqa: ARG001
    """Build a Result tagged Ok.

    Args:
        value: The success payload.
        err_type: Only pins the static Err type of the returned Result.
            Omitted, the Err side is ``Unit``.

    Examples:
        >>> make_ok(42)
        Ok(value=42)
        >>> make_ok(42, str).map_err(len)
        Ok(value=42)
    """
    return Ok(value)


@overload
def make_err(error: E) -> Result[Unit, E]: ...


@overload
def make_err(error: E, ok_type: type[T]) -> Result[T, E]: ...


def make_err(error: Any, ok_type: Any = None) -> Any:  # noqa: ARG001
    """Build a Result tagged Err.

    Args:
        error: The failure payload.
        ok_type: Only pins the static Ok type of the returned Result.
            Omitted, the Ok side is ``Unit``.
    """
    return Err(error)


def collect(results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err; later items are not consumed.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
