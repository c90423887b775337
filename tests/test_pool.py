"""Tests for EntityPool."""

import pytest

from brickbreaker.game.pool import EntityPool


@pytest.fixture
def pool():
    pool = EntityPool()
    for name in ('a', 'b', 'c'):
        pool.add(name)
    return pool


def test_ids_increase_in_order(pool):
    assert pool.ids() == [0, 1, 2]
    assert pool.values() == ['a', 'b', 'c']
    assert pool.first() == (0, 'a')


def test_ids_are_never_reused(pool):
    pool.remove(0)
    pool.clear()
    assert pool.add('d') == 3


def test_remove_during_iteration(pool):
    for entity_id in pool.ids():
        pool.remove(entity_id)
    assert len(pool) == 0
    assert pool.first() is None


def test_remove_unknown_is_noop(pool):
    assert pool.remove(42) is None
    assert len(pool) == 3


def test_replace(pool):
    pool.replace(1, 'B')
    assert pool.get(1) == 'B'
    assert 1 in pool


def test_replace_unknown_raises(pool):
    with pytest.raises(KeyError):
        pool.replace(42, 'x')


def test_iteration_is_a_snapshot(pool):
    seen = []
    for entity in pool:
        seen.append(entity)
        pool.add(entity * 2)
    assert seen == ['a', 'b', 'c']
