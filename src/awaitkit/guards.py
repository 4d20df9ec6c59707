"""Runtime type guards.

Each guard returns a plain bool and narrows the checked value for type
checkers via ``TypeIs``.

Example:
    ```python
    from awaitkit.guards import is_list, is_string

    def names(val: object) -> list[str]:
        if is_list(val, is_string):
            return val
        return []
    ```
"""

from __future__ import annotations

import concurrent.futures
import inspect
import math
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, Literal, TypeIs, overload

__all__ = [
    'is_awaitable',
    'is_boolean',
    'is_error',
    'is_falsy',
    'is_function',
    'is_integer',
    'is_list',
    'is_mapping_with_keys',
    'is_none',
    'is_record',
    'is_strict_falsy',
    'is_string',
    'is_valid_number',
]


def is_string(val: object) -> TypeIs[str]:
    return isinstance(val, str)


def is_record(val: object) -> TypeIs[Mapping[Any, Any]]:
    """Test if a value is a mapping.

    Note:
        Key types are not checked, so a dict with int keys is still a record.
    """
    return isinstance(val, Mapping)


def is_boolean(val: object) -> TypeIs[bool]:
    return isinstance(val, bool)


def is_none(val: object) -> TypeIs[None]:
    return val is None


def is_valid_number(val: object) -> TypeIs[int | float]:
    """Test if a value is an int or float that is not NaN.

    bool is excluded even though it subclasses int.
    """
    if isinstance(val, bool) or not isinstance(val, int | float):
        return False
    return not (isinstance(val, float) and math.isnan(val))


def is_integer(val: object) -> TypeIs[int | float]:
    """Test if a value is a whole number (ints, and floats with no fractional part)."""
    if not is_valid_number(val):
        return False
    if isinstance(val, float):
        return val.is_integer()
    return True


@overload
def is_error[E: BaseException](val: object, type_: type[E]) -> TypeIs[E]: ...


@overload
def is_error(val: object) -> TypeIs[BaseException]: ...


def is_error(val: object, type_: type[BaseException] | None = None) -> bool:
    """Test if a value is an exception, optionally of a specific type.

    Args:
        val: The value to test.
        type_: Exception class the value must be an instance of.
    """
    if not isinstance(val, BaseException):
        return False
    return type_ is None or isinstance(val, type_)


@overload
def is_list[T](val: object, item_predicate: Callable[[Any], TypeIs[T]]) -> TypeIs[list[T]]: ...


@overload
def is_list(val: object) -> TypeIs[list[Any]]: ...


def is_list(val: object, item_predicate: Callable[[Any], bool] | None = None) -> bool:
    """Test if a value is a list, optionally checking every item.

    An empty list passes any predicate.

    Args:
        val: The value to test.
        item_predicate: A guard applied to each item.
    """
    if not isinstance(val, list):
        return False
    if item_predicate is None:
        return True
    return all(item_predicate(item) for item in val)


def is_falsy(val: object) -> bool:
    """Test if a value is falsy (False, None, 0, empty string or container)."""
    return not val


def is_strict_falsy(val: object) -> TypeIs[Literal[False] | None]:
    """Test if a value is False or None, leaving 0 and empty strings alone."""
    return val is False or val is None


def is_function(val: object) -> TypeIs[Callable[..., Any]]:
    return callable(val)


def is_mapping_with_keys(keys: Iterable[str], val: object) -> TypeIs[Mapping[str, Any]]:
    """Test if a value is a mapping containing all of the given keys."""
    if not isinstance(val, Mapping):
        return False
    return all(key in val for key in keys)


def is_awaitable(val: object) -> TypeIs[Awaitable[Any] | concurrent.futures.Future[Any]]:
    """Test if a value is pending: an awaitable or a thread-pool future."""
    return inspect.isawaitable(val) or isinstance(val, concurrent.futures.Future)
