"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from awaitkit.errors import OptionUnwrapError

if TYPE_CHECKING:
    from awaitkit.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'option_is_none',
    'option_is_some',
    'option_map',
    'option_or_else',
    'option_or_raise',
    'option_wrap',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value."""
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value."""
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from awaitkit.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from awaitkit.result import Ok

        return Ok(self.value)

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other since this is Some."""
        return other

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self since this is Some."""
        return self

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple, or Nothing if other is Nothing."""
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten Option[Option[T]] into Option[T]."""
        return self.value  # type: ignore[return-value]


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Raises:
            OptionUnwrapError: Always.
        """
        raise OptionUnwrapError

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            OptionUnwrapError: Always, with the custom message.
        """
        raise OptionUnwrapError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by the recovery function."""
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from awaitkit.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, returning Err(f())."""
        from awaitkit.result import Err

        return Err(f())

    def and_[T](self, _other: Some[T] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def zip[T, U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def option_wrap[T](value: T | None) -> Option[T]:
    """Wrap a possibly-None value as an Option.

    Example:
        ```python
        opt = option_wrap(config.get('timeout'))
        ```
    """
    if value is None:
        return Nothing
    return Some(value)


def option_map[I, O](value: Option[I], mapper: Callable[[I], O | Option[O]]) -> Option[O]:
    """Modify the value of an option if it exists.

    The mapper may return a plain value or an Option; a returned Option is
    used as-is rather than wrapped a second time.

    Example:
        ```python
        option_map(opt, lambda v: v * 5)
        option_map(opt, lambda v: Some(v) if v > 0 else Nothing)
        ```
    """
    if isinstance(value, NothingType):
        return Nothing
    mapped = mapper(value.value)
    if isinstance(mapped, Some | NothingType):
        return mapped
    return Some(mapped)


def option_is_some[T](value: Option[T]) -> TypeIs[Some[T]]:
    return isinstance(value, Some)


def option_is_none[T](value: Option[T]) -> TypeIs[NothingType]:
    return isinstance(value, NothingType)


def option_or_else[T, D](value: Option[T], default: D) -> T | D:
    """Unwrap an option, falling back to default if it is Nothing."""
    if isinstance(value, Some):
        return value.value
    return default


def option_or_raise[T](value: Option[T], err: BaseException | str | None = None) -> T:
    """Unwrap an option, raising if it is Nothing.

    Args:
        value: The option to unwrap.
        err: Exception to raise, or a message for OptionUnwrapError.

    Raises:
        OptionUnwrapError: If value is Nothing and err is not an exception.
    """
    if isinstance(value, Some):
        return value.value
    if isinstance(err, BaseException):
        raise err
    raise OptionUnwrapError(err)
