import numpy as np
import pytest

from pycellarrays.arrays.maps import (
    Broadcasting, FunctionMap, Map, evaluate, evaluate_cached, return_cache,
    return_value, testargs,
)
from pycellarrays.arrays.reindex import PosNegReindex, Reindex
from pycellarrays.core.errors import DomainError, OutOfDomainIndexError


def _cached_sequence(k, arg_tuples):
    """Evaluate every tuple through one cache, copying the (aliased) results."""
    cache = return_cache(k, *arg_tuples[0])
    return [np.copy(evaluate_cached(cache, k, *args)) for args in arg_tuples]


def test_map_without_evaluate_cached_cannot_be_instantiated():
    class Incomplete(Map):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_plain_callables_are_maps():
    f = lambda x, y: x * y
    assert evaluate(f, 3, 4) == 12
    assert return_cache(f, 3, 4) is None
    assert evaluate_cached(None, f, 3, 4) == 12
    assert testargs(f, 3, 4) == (3, 4)
    assert return_value(f, 2, 5) == 10


def test_function_map():
    k = FunctionMap(abs)
    assert k.evaluate(-3) == 3
    assert k(-2) == 2
    with pytest.raises(TypeError):
        FunctionMap(3)


def test_broadcasting_cache_consistency():
    k = Broadcasting(np.add)
    args = [
        (np.array([1.0, 2.0]), np.array([10.0, 20.0])),
        (np.array([3.0, 4.0]), np.array([1.0, 1.0])),
        (np.array([[1.0], [2.0]]), np.array([5.0, 6.0])),   # grows the buffer
        (np.array([7.0]), 1.0),
    ]
    expected = [evaluate(k, *a) for a in args]
    got = _cached_sequence(k, args)
    for e, g in zip(expected, got):
        np.testing.assert_array_equal(e, g)


def test_broadcasting_reuses_the_cache_buffer():
    k = Broadcasting(np.multiply)
    a = np.array([1.0, 2.0, 3.0])
    cache = return_cache(k, a, a)
    r1 = evaluate_cached(cache, k, a, a)
    r2 = evaluate_cached(cache, k, a, 2.0)
    assert r1 is r2
    np.testing.assert_array_equal(r2, [2.0, 4.0, 6.0])


def test_broadcasting_scalars_bypass_the_buffer():
    k = Broadcasting(np.divide)
    assert k.evaluate(1, 4) == 0.25


def test_reindex_evaluate_and_cache_agree():
    values = np.array([[1, 2], [3, 4], [5, 6]])
    k = Reindex(values)
    for i in range(3):
        np.testing.assert_array_equal(k.evaluate(i), values[i])
    got = _cached_sequence(k, [(2,), (0,), (1,)])
    np.testing.assert_array_equal(got, values[[2, 0, 1]])


def test_reindex_multi_index():
    values = np.arange(6).reshape(2, 3)
    assert Reindex(values).evaluate(1, 2) == 5
    assert Reindex(values).testargs(1, 2) == (0, 0)


def test_reindex_empty_domain():
    k = Reindex([])
    with pytest.raises(DomainError, match="empty domain"):
        k.testargs(3)


def test_reindex_return_value_falls_back_on_empty_domain():
    k = Reindex(np.zeros((0, 2, 3)))
    item = k.return_value(0)
    assert item.shape == (2, 3)
    assert np.all(item == 0)
    # non-empty: evaluated on the test argument, not on the given index
    np.testing.assert_array_equal(Reindex(np.array([7, 8])).return_value(1), 7)


def test_reindex_empty_domain_check_can_be_disabled(restore_settings):
    restore_settings.checks = False
    assert Reindex([]).testargs(3) == (0,)


def test_posneg_reindex_selects_side_by_sign():
    k = PosNegReindex([10, 20, 30], [100, 200])
    assert k.evaluate(1) == 10
    assert k.evaluate(3) == 30
    assert k.evaluate(-1) == 100
    assert k.evaluate(-2) == 200


def test_posneg_reindex_zero_is_out_of_domain(restore_settings):
    k = PosNegReindex([10], [100])
    with pytest.raises(OutOfDomainIndexError):
        k.evaluate(0)
    restore_settings.checks = False
    with pytest.raises(IndexError):
        k.evaluate(0)


def test_posneg_reindex_testargs():
    assert PosNegReindex([1], []).testargs(5) == (1,)
    assert PosNegReindex([], [1]).testargs(5) == (-1,)
    with pytest.raises(DomainError):
        PosNegReindex([], []).testargs(5)
    assert PosNegReindex(np.zeros((0, 2)), []).return_value(1).shape == (2,)


def test_posneg_reindex_cache_consistency():
    k = PosNegReindex(np.array([1.5, 2.5]), np.array([-1.5]))
    ids = [1, -1, 2, -1]
    cache = return_cache(k, 1)
    assert [evaluate_cached(cache, k, i) for i in ids] == [evaluate(k, i) for i in ids]
