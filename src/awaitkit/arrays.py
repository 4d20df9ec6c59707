"""List helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = ['filter_map', 'wrap_as_list']

type MaybeList[T] = T | list[T]


def wrap_as_list[T](value: MaybeList[T]) -> list[T]:
    """Wrap a value in a list if it isn't one already.

    Lists are returned as-is (same object), so callers can accept either a
    single item or a list of items.
    """
    if isinstance(value, list):
        return value
    return [value]


def filter_map[I, O](items: Iterable[I], f: Callable[[I], O | None]) -> list[O]:
    """Map and filter in one pass, dropping items for which f returns None."""
    out: list[O] = []
    for item in items:
        mapped = f(item)
        if mapped is not None:
            out.append(mapped)
    return out
