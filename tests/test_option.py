"""Tests for Option type (Some and Nothing) and the option_* function API."""

from __future__ import annotations

import pytest
from awaitkit import (
    Err,
    Nothing,
    NothingType,
    Ok,
    OptionUnwrapError,
    Some,
    option_is_none,
    option_is_some,
    option_map,
    option_or_else,
    option_or_raise,
    option_wrap,
)


class TestOptionBasics:
    """Tests for construction, querying and unwrapping."""

    def test_nothing_is_singleton_type(self) -> None:
        assert isinstance(Nothing, NothingType)
        assert NothingType() == Nothing

    def test_querying(self) -> None:
        assert Some(1).is_some() is True
        assert Some(1).is_none() is False
        assert Nothing.is_some() is False
        assert Nothing.is_none() is True

    def test_unwrap(self) -> None:
        assert Some('x').unwrap() == 'x'

    def test_nothing_unwrap_raises(self) -> None:
        with pytest.raises(OptionUnwrapError, match='Option contained no value'):
            Nothing.unwrap()

    def test_nothing_expect_raises_with_message(self) -> None:
        with pytest.raises(OptionUnwrapError, match='need a value'):
            Nothing.expect('need a value')

    def test_unwrap_or(self) -> None:
        assert Some(1).unwrap_or(0) == 1
        assert Nothing.unwrap_or(0) == 0
        assert Nothing.unwrap_or_else(lambda: 5) == 5

    def test_some_can_hold_none(self) -> None:
        assert Some(None).is_some()
        assert Some(None).unwrap() is None


class TestOptionTransform:
    """Tests for map, and_then, or_else, filter, zip, flatten."""

    def test_map(self) -> None:
        assert Some(2).map(lambda x: x * 3) == Some(6)
        assert Nothing.map(lambda x: x * 3) is Nothing

    def test_and_then(self) -> None:
        assert Some(2).and_then(lambda x: Some(x + 1)) == Some(3)
        assert Some(2).and_then(lambda x: Nothing) is Nothing
        assert Nothing.and_then(lambda x: Some(x)) is Nothing

    def test_or_else(self) -> None:
        assert Some(1).or_else(lambda: Some(2)) == Some(1)
        assert Nothing.or_else(lambda: Some(2)) == Some(2)

    def test_filter(self) -> None:
        assert Some(4).filter(lambda x: x % 2 == 0) == Some(4)
        assert Some(3).filter(lambda x: x % 2 == 0) is Nothing
        assert Nothing.filter(lambda x: True) is Nothing

    def test_zip_and_flatten(self) -> None:
        assert Some(1).zip(Some('a')) == Some((1, 'a'))
        assert Some(1).zip(Nothing) is Nothing
        assert Some(Some(1)).flatten() == Some(1)
        assert Nothing.flatten() is Nothing

    def test_and_or(self) -> None:
        assert Some(1).and_(Some(2)) == Some(2)
        assert Nothing.and_(Some(2)) is Nothing
        assert Some(1).or_(Some(2)) == Some(1)
        assert Nothing.or_(Some(2)) == Some(2)


class TestOptionToResult:
    """Tests for ok_or and ok_or_else."""

    def test_ok_or(self) -> None:
        assert Some(1).ok_or('missing') == Ok(1)
        assert Nothing.ok_or('missing') == Err('missing')

    def test_ok_or_else(self) -> None:
        assert Some(1).ok_or_else(lambda: 'missing') == Ok(1)
        assert Nothing.ok_or_else(lambda: 'missing') == Err('missing')


class TestOptionFunctions:
    """Tests for the option_* function API."""

    def test_option_wrap(self) -> None:
        assert option_wrap(None) is Nothing
        assert option_wrap(0) == Some(0)
        assert option_wrap('') == Some('')

    def test_option_map_plain_value(self) -> None:
        assert option_map(Some(2), lambda v: v * 5) == Some(10)

    def test_option_map_returning_option_is_not_double_wrapped(self) -> None:
        assert option_map(Some(-1), lambda v: Some(v) if v > 0 else Nothing) is Nothing
        assert option_map(Some(3), lambda v: Some(v) if v > 0 else Nothing) == Some(3)

    def test_option_map_nothing(self) -> None:
        assert option_map(Nothing, lambda v: v) is Nothing

    def test_option_is_some_is_none(self) -> None:
        assert option_is_some(Some(1))
        assert not option_is_some(Nothing)
        assert option_is_none(Nothing)
        assert not option_is_none(Some(1))

    def test_option_or_else(self) -> None:
        assert option_or_else(Some(1), 'default') == 1
        assert option_or_else(Nothing, 'default') == 'default'

    def test_option_or_raise_returns_value(self) -> None:
        assert option_or_raise(Some(1), 'unused') == 1

    def test_option_or_raise_with_message(self) -> None:
        with pytest.raises(OptionUnwrapError, match='no user'):
            option_or_raise(Nothing, 'no user')

    def test_option_or_raise_with_exception(self) -> None:
        with pytest.raises(LookupError, match='no user'):
            option_or_raise(Nothing, LookupError('no user'))

    def test_option_or_raise_default_message(self) -> None:
        with pytest.raises(OptionUnwrapError, match='Option contained no value'):
            option_or_raise(Nothing)
