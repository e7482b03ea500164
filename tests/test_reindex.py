import numpy as np
import pytest

from pycellarrays.arrays import (
    CompressedArray, Fill, IdentityVector, LazyArray, PosNegPartition,
    PosNegReindex, Reindex, ReindexPattern, classify_reindex, lazy_map,
    posneg_array, reindex,
)
from pycellarrays.core.errors import LengthMismatchError, OutOfDomainIndexError


def _generic_gather(values, j_to_i):
    """Reference result: no specialization involved."""
    return [values[i] for i in j_to_i]


def _assert_items_equal(result, expected):
    assert len(result) == len(expected)
    for r, e in zip(result, expected):
        np.testing.assert_array_equal(r, e)


J_TO_I = [[], [0], [2, 0, 1], [1, 1, 1, 3], [3, 2, 1, 0]]


@pytest.mark.parametrize("j_to_i", J_TO_I)
def test_generic_gather(j_to_i):
    values = [10, 20, 30, 40]
    result = reindex(values, j_to_i)
    assert classify_reindex(values, j_to_i) is ReindexPattern.GENERIC
    assert isinstance(result, LazyArray)
    _assert_items_equal(result, _generic_gather(values, j_to_i))


@pytest.mark.parametrize("j_to_i", J_TO_I)
def test_fill_specialization(j_to_i):
    values = Fill(np.array([1.0, 2.0]), 4)
    result = reindex(values, j_to_i)
    assert isinstance(result, Fill)
    assert len(result) == len(j_to_i)
    _assert_items_equal(result, _generic_gather(values, j_to_i))


def test_fill_specialization_takes_the_index_shape():
    result = reindex(Fill(7, 3), np.zeros((2, 5), dtype=int))
    assert result.shape == (2, 5)


@pytest.mark.parametrize("j_to_i", J_TO_I)
def test_compressed_specialization(j_to_i):
    pool = [np.eye(2), 2 * np.eye(2)]
    values = CompressedArray(pool, [1, 0, 0, 1])
    result = reindex(values, j_to_i)
    assert isinstance(result, CompressedArray)
    assert result.values is pool
    _assert_items_equal(result, _generic_gather(values, j_to_i))


@pytest.mark.parametrize("j_to_i", J_TO_I)
def test_lazy_specialization_pushes_reindex_into_arguments(j_to_i):
    x = np.array([1.0, 2.0, 3.0, 4.0])
    y = [10.0, 20.0, 30.0, 40.0]
    values = lazy_map(lambda a, b: a * b, x, y)
    result = reindex(values, j_to_i)
    assert classify_reindex(values, j_to_i) is ReindexPattern.LAZY
    assert isinstance(result, LazyArray)
    # the map array stays a Fill, the arguments are reindexed one by one
    assert isinstance(result.g, Fill)
    assert len(result.f) == 2
    _assert_items_equal(result, _generic_gather(values, j_to_i))


def test_deep_chain_stays_equal_to_the_gather():
    values = np.arange(6.0)
    a = values
    for _ in range(10):
        a = lazy_map(lambda v: v + 1.0, a)
    j_to_i = [5, 0, 3]
    for _ in range(3):
        a = reindex(a, [0, 1, 2, 3, 4, 5])
    result = reindex(a, j_to_i)
    assert isinstance(result.g, Fill)
    _assert_items_equal(result, values[j_to_i] + 10.0)


def test_reindex_of_a_lazy_array_with_non_fill_maps():
    from pycellarrays.arrays import FunctionMap
    g = [FunctionMap(lambda v: v + 1), FunctionMap(lambda v: v * 10)]
    values = lazy_map(g, [1, 2])
    result = reindex(values, [1, 0, 1])
    assert list(result) == [20, 2, 20]


def test_identity_shortcut_returns_values_unchanged():
    values = np.array([3, 1, 2])
    assert reindex(values, IdentityVector(3)) is values
    fill = Fill(1.0, 3)
    assert reindex(fill, IdentityVector(3)) is fill


def test_identity_shortcut_length_mismatch(restore_settings):
    values = np.array([3, 1, 2])
    with pytest.raises(LengthMismatchError):
        reindex(values, IdentityVector(4))
    restore_settings.checks = False
    assert reindex(values, IdentityVector(4)) is values


# ---------------------------------------------------------------------------
# positive / negative partitions
# ---------------------------------------------------------------------------
@pytest.fixture
def posneg():
    values_pos = [10, 20, 30]
    values_neg = [100, 200]
    i_to_iposneg = PosNegPartition([1, -1, 2, -2, 3])
    return values_pos, values_neg, posneg_array(values_pos, values_neg, i_to_iposneg)


def test_posneg_composite_items(posneg):
    _, _, values = posneg
    assert list(values) == [10, 100, 20, 200, 30]


def test_posneg_positive_fast_path(posneg):
    values_pos, _, values = posneg
    assert classify_reindex(values, [0, 2, 4]) is ReindexPattern.POSNEG
    result = reindex(values, [0, 2, 4])
    assert result is values_pos
    assert list(result) == [10, 20, 30]


def test_posneg_negative_fast_path(posneg):
    _, values_neg, values = posneg
    result = reindex(values, [1, 3])
    assert result is values_neg
    assert list(result) == [100, 200]


def test_posneg_mixed_branch(posneg):
    _, _, values = posneg
    result = reindex(values, [0, 1, 2])
    assert isinstance(result, LazyArray)
    assert isinstance(result.g.value, PosNegReindex)
    assert list(result) == [10, 100, 20]


def test_posneg_all_positive_not_aligned(posneg):
    _, _, values = posneg
    result = reindex(values, [4, 0])
    assert isinstance(result.g.value, Reindex)
    assert list(result) == [30, 10]


def test_posneg_all_negative_not_aligned(posneg):
    _, _, values = posneg
    result = reindex(values, [3, 3, 1])
    assert isinstance(result.g.value, Reindex)
    assert list(result) == [200, 200, 100]


@pytest.mark.parametrize("j_to_i", J_TO_I + [[0, 2, 4], [1, 3], [4, 4, 1, 0]])
def test_posneg_every_branch_matches_the_gather(posneg, j_to_i):
    _, _, values = posneg
    j_to_i = [j for j in j_to_i if j < 5]
    expected = [values[i] for i in j_to_i]
    assert list(reindex(values, j_to_i)) == expected


def test_posneg_with_plain_id_array():
    values = posneg_array(np.array([1.0, 2.0]), np.array([-1.0]), np.array([-1, 2, 1]))
    assert list(reindex(values, [2, 1])) == [1.0, 2.0]
    assert list(reindex(values, [0, 2])) == [-1.0, 1.0]


def test_posneg_zero_id_fails_on_access():
    values = posneg_array([1], [2], [1, 0])
    result = reindex(values, [1, 0])
    with pytest.raises(OutOfDomainIndexError):
        result[0]
    assert result[1] == 1
