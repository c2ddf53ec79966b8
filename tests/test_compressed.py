import numpy as np
import pytest

from ivo.compressed import (
    Compressed,
    compress_columns,
    compress_rows,
    csc_vecmat,
    csr_matvec,
)


def _entries_from_dense(dense):
    rows, columns = dense.shape
    return {
        j * columns + k: float(dense[j, k])
        for j in range(rows)
        for k in range(columns)
        if dense[j, k] != 0
    }


def _dense_from_rows(csr, columns):
    dense = np.zeros((csr.major, columns))
    for j in range(csr.major):
        for k, value in csr.segment(j):
            dense[j, k] = value
    return dense


def _dense_from_columns(csc, rows):
    dense = np.zeros((rows, csc.major))
    for k in range(csc.major):
        for j, value in csc.segment(k):
            dense[j, k] = value
    return dense


DENSE = np.array(
    [
        [1.0, 0.0, 2.0, 0.0],
        [0.0, 0.0, 0.0, 0.0],
        [0.0, 3.0, 0.0, 4.0],
    ]
)


def test_row_compression_worked_example():
    csr = compress_rows({0: 1.0, 2: 2.0, 4: 3.0}, 2, 3)
    assert csr == Compressed(inner=(0, 2, 3), outer=(0, 2, 1), entries=(1.0, 2.0, 3.0))


def test_rows_round_trip():
    csr = compress_rows(_entries_from_dense(DENSE), *DENSE.shape)
    assert np.array_equal(_dense_from_rows(csr, DENSE.shape[1]), DENSE)


def test_columns_round_trip():
    csc = compress_columns(_entries_from_dense(DENSE), *DENSE.shape)
    assert np.array_equal(_dense_from_columns(csc, DENSE.shape[0]), DENSE)


def test_pointer_invariants():
    entries = _entries_from_dense(DENSE)
    for compressed, major in (
        (compress_rows(entries, *DENSE.shape), DENSE.shape[0]),
        (compress_columns(entries, *DENSE.shape), DENSE.shape[1]),
    ):
        assert len(compressed.inner) == major + 1
        assert compressed.inner[0] == 0
        assert compressed.inner[-1] == len(entries)
        assert list(compressed.inner) == sorted(compressed.inner)
        assert compressed.nnz == len(entries)


def test_minor_indices_sorted_within_segments():
    entries = {7: 1.0, 4: 2.0, 6: 3.0, 5: 4.0, 0: 5.0}
    csr = compress_rows(entries, 2, 4)
    for j in range(csr.major):
        minors = [k for k, _ in csr.segment(j)]
        assert minors == sorted(minors)


def test_zero_entries_are_dropped():
    csr = compress_rows({0: 0.0, 3: 5.0}, 2, 2)
    assert csr.nnz == 1
    assert csr.segment(1) == [(1, 5.0)]
    assert csr.segment(0) == []


def test_empty_matrix():
    csr = compress_rows({}, 3, 2)
    assert csr.inner == (0, 0, 0, 0)
    assert csr.nnz == 0
    assert np.array_equal(csr_matvec(csr, [1.0, 1.0]), np.zeros(3))


def test_out_of_range_entry_raises():
    with pytest.raises(ValueError):
        compress_rows({6: 1.0}, 2, 3)
    with pytest.raises(ValueError):
        compress_columns({-1: 1.0}, 2, 3)


def test_segment_out_of_range_raises():
    csr = compress_rows({0: 1.0}, 1, 1)
    with pytest.raises(IndexError):
        csr.segment(1)


def test_matvec_matches_dense():
    csr = compress_rows(_entries_from_dense(DENSE), *DENSE.shape)
    vector = np.array([1.0, -2.0, 0.5, 3.0])
    assert np.allclose(csr_matvec(csr, vector), DENSE @ vector)


def test_vecmat_matches_dense():
    csc = compress_columns(_entries_from_dense(DENSE), *DENSE.shape)
    vector = np.array([2.0, 7.0, -1.0])
    assert np.allclose(csc_vecmat(csc, vector), vector @ DENSE)


def test_random_products_match_dense():
    rng = np.random.default_rng(3)
    dense = rng.normal(size=(5, 4))
    dense[rng.random(size=dense.shape) < 0.5] = 0.0
    entries = _entries_from_dense(dense)
    x = rng.normal(size=4)
    y = rng.normal(size=5)
    assert np.allclose(csr_matvec(compress_rows(entries, 5, 4), x), dense @ x)
    assert np.allclose(csc_vecmat(compress_columns(entries, 5, 4), y), y @ dense)


def test_short_vector_raises():
    csr = compress_rows(_entries_from_dense(DENSE), *DENSE.shape)
    with pytest.raises(ValueError):
        csr_matvec(csr, [1.0, 2.0])


def test_unpacks_as_triple():
    inner, outer, values = compress_columns({1: 2.0}, 1, 2)
    assert inner == (0, 0, 1)
    assert outer == (0,)
    assert values == (2.0,)