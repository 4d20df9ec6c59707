"""Settled outcomes: Fulfilled[T] | Rejected, and their bridge to Result.

A settled outcome records how a single pending value finished. The two
variants are msgspec tagged structs, so they encode with a ``status`` field:

    >>> msgspec.json.encode(Fulfilled(2))
    b'{"status":"fulfilled","value":2}'

Result uses ``Ok``/``Err`` while settled outcomes use ``fulfilled``/``rejected``;
``to_result`` and ``from_result`` convert between the two shapes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Literal, TypeIs

import msgspec

from awaitkit.result import Err, Ok, Result

__all__ = [
    'Fulfilled',
    'Rejected',
    'Settled',
    'from_result',
    'is_fulfilled',
    'is_rejected',
    'settled_to_results',
    'to_result',
]


class Fulfilled[T](msgspec.Struct, frozen=True, gc=False, tag_field='status', tag='fulfilled'):
    """Outcome of a pending value that produced a value."""

    status: ClassVar[Literal['fulfilled']] = 'fulfilled'

    value: T

    def is_fulfilled(self) -> TypeIs[Fulfilled[T]]:
        return True

    def is_rejected(self) -> TypeIs[Rejected]:
        return False

    def to_result(self) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        return Ok(self.value)


class Rejected(msgspec.Struct, frozen=True, tag_field='status', tag='rejected'):
    """Outcome of a pending value that raised.

    ``reason`` is the raised exception object itself, never re-wrapped.
    """

    status: ClassVar[Literal['rejected']] = 'rejected'

    reason: BaseException

    def is_fulfilled(self) -> TypeIs[Fulfilled[Any]]:
        return False

    def is_rejected(self) -> TypeIs[Rejected]:
        return True

    def to_result(self) -> Err[BaseException]:
        """Convert to Result, returning Err(reason)."""
        return Err(self.reason)


type Settled[T] = Fulfilled[T] | Rejected


def is_fulfilled[T](outcome: Settled[T]) -> TypeIs[Fulfilled[T]]:
    return isinstance(outcome, Fulfilled)


def is_rejected[T](outcome: Settled[T]) -> TypeIs[Rejected]:
    return isinstance(outcome, Rejected)


def to_result[T](outcome: Settled[T]) -> Result[T, BaseException]:
    """Convert a settled outcome to the equivalent Result."""
    return outcome.to_result()


def from_result[T](res: Result[T, Any]) -> Settled[T]:
    """Convert a Result to the equivalent settled outcome.

    Non-exception errors are wrapped in a plain Exception so that
    ``Rejected.reason`` is always an exception.
    """
    if isinstance(res, Ok):
        return Fulfilled(res.value)
    error = res.error
    if not isinstance(error, BaseException):
        error = Exception(error)
    return Rejected(error)


def settled_to_results(record: Mapping[str, Settled[Any]]) -> dict[str, Result[Any, BaseException]]:
    """Convert a keyed record of settled outcomes into a keyed record of Results.

    Keys and their order are preserved.
    """
    return {key: outcome.to_result() for key, outcome in record.items()}
