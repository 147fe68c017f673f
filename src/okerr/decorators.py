"""@safe: bridge exception-raising code into Ok/Err results."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from okerr._logging import get_logger
from okerr.result import Err, Ok

__all__ = ['safe']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


@overload
def safe(
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe(
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Move a raising function onto the Result track.

    The wrapped callable returns ``Ok(return_value)``, or ``Err(exc)`` when it
    raises one of ``exceptions``. Other exceptions, and anything derived only
    from BaseException under the default, leave the call as usual. Each
    captured exception emits a ``safe_captured_exception`` debug event.

    Args:
        func: Set when applied bare as ``@safe``.
        exceptions: Exception types turned into Err. Defaults to ``(Exception,)``.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def parse_port(text: str) -> int:
            return int(text)

        parse_port('8080').map(lambda port: port + 1)
        # Ok(value=8081)
        parse_port('http').unwrap_or(80)
        # 80
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            get_logger(__name__).debug(
                'safe_captured_exception',
                function=getattr(wrapped, '__qualname__', repr(wrapped)),
                exc_type=type(e).__name__,
            )
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper
