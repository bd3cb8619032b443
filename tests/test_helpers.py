"""Tests for the global helper functions."""

from __future__ import annotations

from typing import Any, List

from collectkit.Helpers import (
    array_except,
    array_flatten,
    array_forget,
    array_get,
    array_has,
    array_only,
    array_pluck,
    array_set,
    array_where,
    array_wrap,
    blank,
    collect,
    config,
    data_forget,
    data_get,
    data_has,
    data_set,
    deferred,
    filled,
    logger,
    tap,
    value,
)
from collectkit.Support.Collection import Collection


class TestDataHelpers:
    """Dot-notation helpers."""

    def test_data_round_trip(self) -> None:
        """Test setting, reading and removing a nested value."""
        target: dict = {}
        data_set(target, 'user.name', 'Taylor')
        assert data_has(target, 'user.name')
        assert data_get(target, 'user.name') == 'Taylor'

        data_set(target, 'user.name', 'Other', overwrite=False)
        assert data_get(target, 'user.name') == 'Taylor'

        data_forget(target, 'user.name')
        assert target == {'user': {}}

    def test_deferred_default(self) -> None:
        """Test that deferred defaults run only on a miss."""
        calls: List[int] = []
        fallback = deferred(lambda: calls.append(1) or 'computed')

        assert data_get({'a': 1}, 'a', fallback) == 1
        assert calls == []
        assert data_get({'a': 1}, 'b', fallback) == 'computed'
        assert calls == [1]

    def test_value(self) -> None:
        """Test resolving plain and deferred values."""
        producer = lambda: 'x'
        assert value(5) == 5
        assert value(producer) is producer
        assert value(deferred(producer)) == 'x'


class TestArrayHelpers:
    """Array helpers delegating to Arr."""

    def test_get_set_has_forget(self) -> None:
        """Test dot-notation array access."""
        array: dict = {'products': {'desk': {'price': 100}}}
        assert array_get(array, 'products.desk.price') == 100
        assert array_has(array, 'products.desk')

        array_set(array, 'products.desk.price', 200)
        assert array['products']['desk']['price'] == 200

        assert array_forget(array, 'products.desk') == {'products': {}}

    def test_only_and_except(self) -> None:
        """Test key subsets."""
        array = {'name': 'Desk', 'price': 100, 'orders': 10}
        assert array_only(array, ['name', 'price']) == {'name': 'Desk', 'price': 100}
        assert array_except(array, 'price') == {'name': 'Desk', 'orders': 10}

    def test_pluck(self) -> None:
        """Test plucking with and without a key field."""
        rows = [{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'b'}]
        assert array_pluck(rows, 'name') == {0: 'a', 1: 'b'}
        assert array_pluck(rows, 'name', 'id') == {1: 'a', 2: 'b'}

    def test_where_passes_key_first(self) -> None:
        """Test that two-argument callbacks receive the key first."""
        array = {'a': 1, 'b': 2, 'c': 3}
        assert array_where(array, lambda key, item: key != 'b' and item > 1) == {'c': 3}
        assert array_where(array, lambda item: item < 2) == {'a': 1}

    def test_flatten_and_wrap(self) -> None:
        """Test flattening and wrapping."""
        assert array_flatten(['a', ['b', ['c']]]) == ['a', 'b', 'c']
        assert array_flatten(['a', ['b', ['c']]], 1) == ['a', 'b', ['c']]
        assert array_wrap('a') == ['a']
        assert array_wrap(None) == []
        assert array_wrap(['a']) == ['a']


class TestUtilityHelpers:
    """General purpose helpers."""

    def test_collect(self) -> None:
        """Test that collect builds a collection."""
        c = collect([1, 2])
        assert isinstance(c, Collection)
        assert c.all() == {0: 1, 1: 2}
        assert collect().is_empty()

    def test_tap(self) -> None:
        """Test that tap returns its value after the callback."""
        seen: List[Any] = []
        assert tap('x', seen.append) == 'x'
        assert seen == ['x']

    def test_filled_and_blank(self) -> None:
        """Test emptiness checks."""
        assert filled('text')
        assert filled(0)
        assert filled(False)
        assert blank(None)
        assert blank('   ')
        assert blank([])
        assert blank(Collection())
        assert filled(Collection([1]))

    def test_config_and_logger(self) -> None:
        """Test the configuration and logging helpers."""
        assert config('json.indent') is None
        assert logger('collectkit.tests').name == 'collectkit.tests'
