"""Result type: Ok[T] | Err[E] for explicit error handling.

Besides the methods on Ok and Err, this module provides a function API
(``result_map``, ``result_or_else``, ``result_map_err``, ``result_try``)
for code that prefers free functions over method chains.

Example:
    ```python
    from awaitkit.result import Ok, result_try

    result_try(lambda: int('42'))
    # Ok(value=42)
    result_try(lambda: int('nope'))
    # Err(error=ValueError(...))
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from awaitkit.errors import ResultUnwrapError

if TYPE_CHECKING:
    from awaitkit.option import Option
    from awaitkit.settled import Fulfilled, Rejected

__all__ = [
    'Err',
    'Ok',
    'Result',
    'collect',
    'is_err',
    'is_ok',
    'result_map',
    'result_map_err',
    'result_or_else',
    'result_try',
    'result_try_async',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
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
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok holds no error.

        Raises:
            ResultUnwrapError: Always.
        """
        raise ResultUnwrapError(f'Called unwrap_err on Ok: {self.value!r}')

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.
        """
        return f(self.value)

    def or_else[F](self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the contained value and return self."""
        f(self.value)
        return self

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from awaitkit.option import Some

        return Some(self.value)

    def err(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Ok."""
        from awaitkit.option import Nothing

        return Nothing

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other since this is Ok."""
        return other

    def or_[F](self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Return self since this is Ok."""
        return self

    def zip[U, E](self, other: Ok[U] | Err[E]) -> Ok[tuple[T, U]] | Err[E]:
        """Combine two Ok values into a tuple.

        If other is Err, returns it.
        """
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten Result[Result[T, E], E] into Result[T, E]."""
        return self.value  # type: ignore[return-value]

    def to_settled(self) -> Fulfilled[T]:
        """Convert to a settled outcome, returning Fulfilled(value)."""
        from awaitkit.settled import Fulfilled

        return Fulfilled(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value to unwrap.

        Raises:
            ResultUnwrapError: Always, carrying the contained error.
        """
        raise ResultUnwrapError(f'Called unwrap on Err: {self.error!r}', self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the contained error."""
        return f(self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            ResultUnwrapError: Always, with the custom message.
        """
        raise ResultUnwrapError(f'{msg}: {self.error!r}', self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def inspect(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self without calling f since this is Err."""
        return self

    def ok(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Err."""
        from awaitkit.option import Nothing

        return Nothing

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error)."""
        from awaitkit.option import Some

        return Some(self.error)

    def and_[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def zip[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def to_settled(self) -> Rejected:
        """Convert to a settled outcome, returning Rejected(error).

        A non-exception error is wrapped in Exception.
        """
        from awaitkit.settled import from_result

        return from_result(self)  # type: ignore[return-value]


type Result[T, E = Exception] = Ok[T] | Err[E]


def is_ok[T, E](res: Result[T, E]) -> TypeIs[Ok[T]]:
    return isinstance(res, Ok)


def is_err[T, E](res: Result[T, E]) -> TypeIs[Err[E]]:
    return isinstance(res, Err)


def result_map[T, E, U](res: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Map the success value of a result, leaving an Err untouched."""
    if isinstance(res, Ok):
        return Ok(f(res.value))
    return res


def result_or_else[T, E, U](res: Result[T, E], f: Callable[[E], U]) -> T | U:
    """Unwrap a result, mapping an error to a fallback value."""
    if isinstance(res, Ok):
        return res.value
    return f(res.error)


def result_map_err[T, E, U, F](res: Result[T, E], f: Callable[[E], Result[U, F]]) -> Ok[T] | Result[U, F]:
    """Map a result's error into a new result.

    Unlike result_or_else, f may produce either a replacement value or a new error.
    """
    if isinstance(res, Ok):
        return res
    return f(res.error)


def result_try[T](f: Callable[[], T]) -> Result[T, Exception]:
    """Run a function that might raise and wrap the outcome.

    Returns:
        Ok(value) if f returned, Err(exception) if it raised.
    """
    try:
        return Ok(f())
    except Exception as e:
        return Err(e)


async def result_try_async[T](f: Callable[[], Awaitable[T] | T]) -> Result[T, Exception]:
    """Async version of result_try.

    f may be a coroutine function or a plain callable; an awaitable return
    value is awaited before wrapping.
    """
    try:
        value = f()
        if inspect.isawaitable(value):
            value = await value
        return Ok(value)  # type: ignore[arg-type]
    except Exception as e:
        return Err(e)


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

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
