"""Tests for equality and ordering rules."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any

import pytest

from collectkit.Support.Comparison import (
    OPERATORS,
    compare,
    compare_keys,
    is_numeric,
    loose_equals,
    operator_for,
    strict_equals,
    to_number,
)


class TestNumbers:
    """Numeric detection and conversion."""

    @pytest.mark.parametrize('candidate', [1, 1.5, '3', '-2', '+4.5', ' 7 ', '1e3', '.5'])
    def test_numeric(self, candidate: Any) -> None:
        """Test values treated as numbers."""
        assert is_numeric(candidate)

    @pytest.mark.parametrize('candidate', [True, None, '', 'abc', '1a', [], '0x1A'])
    def test_not_numeric(self, candidate: Any) -> None:
        """Test values not treated as numbers."""
        assert not is_numeric(candidate)

    def test_to_number(self) -> None:
        """Test converting numeric strings."""
        assert to_number('3') == 3
        assert isinstance(to_number('3'), int)
        assert to_number('2.5') == 2.5
        assert to_number(' 1e2 ') == 100.0


class TestEquality:
    """Strict and loose equality."""

    def test_strict_requires_same_type(self) -> None:
        """Test that strict equality does not coerce."""
        assert strict_equals(3, 3)
        assert not strict_equals(3, '3')
        assert not strict_equals(1, True)
        assert not strict_equals(1, 1.0)
        assert strict_equals([1, [2]], [1, [2]])
        assert not strict_equals({'a': 1, 'b': 2}, {'b': 2, 'a': 1})

    def test_loose_coerces(self) -> None:
        """Test loose equality coercions."""
        assert loose_equals(3, '3')
        assert loose_equals('1e1', '10')
        assert loose_equals(None, '')
        assert loose_equals(None, 0)
        assert loose_equals(True, 'yes')
        assert loose_equals(False, [])
        assert not loose_equals('abc', 0)
        assert not loose_equals(None, 'a')
        assert loose_equals({'a': 1}, {'a': '1'})
        assert loose_equals([1, '2'], ['1', 2])


class TestOrdering:
    """The default total ordering."""

    def test_numbers_and_numeric_strings(self) -> None:
        """Test numeric ordering across numbers and strings."""
        assert compare(2, 10) == -1
        assert compare('2', '10') == -1
        assert compare(10, '9') == 1
        assert compare(3, 3.0) == 0

    def test_strings(self) -> None:
        """Test lexicographic ordering of text."""
        assert compare('bar-1', 'bar-10') == -1
        assert compare('foo', 'bar') == 1

    def test_mixed_types_use_rank(self) -> None:
        """Test that unrelated types still order deterministically."""
        values = ['b', [1], None, 2, True, 'a']
        ordered = sorted(values, key=cmp_to_key(compare))
        assert ordered == [None, True, 2, 'a', 'b', [1]]

    def test_containers(self) -> None:
        """Test container ordering by size then elements."""
        assert compare([1, 2], [1]) == 1
        assert compare([1, 2], [1, 3]) == -1
        assert compare({'id': 0}, {'id': 1}) == -1
        assert compare({'a': 1}, {'b': 1}) == 1

    def test_keys(self) -> None:
        """Test that integer keys sort before string keys."""
        assert sorted(['b', 2, 'a', 1], key=cmp_to_key(compare_keys)) == [1, 2, 'a', 'b']


class TestOperators:
    """Operator lookup for where clauses."""

    def test_known_operators(self) -> None:
        """Test that every listed operator resolves."""
        for symbol in OPERATORS:
            assert operator_for(symbol, strict=True) is not None
            assert operator_for(symbol, strict=False) is not None

    def test_unknown_operator(self) -> None:
        """Test that unknown symbols resolve to nothing."""
        assert operator_for('like', strict=True) is None

    def test_equality_operators_follow_strictness(self) -> None:
        """Test loose and strict equality operators."""
        assert operator_for('=', strict=False)(3, '3')
        assert not operator_for('=', strict=True)(3, '3')
        assert not operator_for('===', strict=False)(3, '3')
        assert operator_for('!=', strict=True)(3, '3')
        assert not operator_for('<>', strict=False)(3, '3')

    def test_ordering_operators_reject_none(self) -> None:
        """Test that ordering against None is always false."""
        assert not operator_for('<', strict=True)(None, 1)
        assert not operator_for('>=', strict=True)(1, None)
        assert operator_for('>=', strict=True)(2, '2')
