import numpy as np
import pandas as pd
import pytest
from ppa.datatypes import points as pt

rows = [[0., 1., 2.],
        [3., 4., 5.],
        [6., 7., 8.],
        [9., 10., 11.]]

cols = [[0., 3., 6., 9.],
        [1., 4., 7., 10.],
        [2., 5., 8., 11.]]


def test_empty():
    p = pt.PointStorage.empty(3)
    assert len(p) == 0
    assert p.dim == 3
    assert p.dtype == np.float64
    assert p.as_array().shape == (0, 3)
    assert list(p) == []


def test_empty_float32():
    p = pt.PointStorage.empty(2, dtype=np.float32)
    assert p.dtype == np.float32
    with pytest.raises(TypeError):
        pt.PointStorage.empty(2, dtype=np.int64)


def test_from_flat():
    p = pt.PointStorage.from_flat(np.arange(12), 3)
    assert len(p) == 4
    assert p.dim == 3
    assert p.dtype == np.float64
    np.testing.assert_array_equal(p.get(0), [0, 1, 2])
    np.testing.assert_array_equal(p.get(1), [3, 4, 5])
    for dim in (1, 2, 4, 6, 12):
        assert len(pt.PointStorage.from_flat(range(12), dim)) == 12 // dim


def test_from_flat_shape_error():
    for dim in (5, 7, 13):
        with pytest.raises(pt.ShapeError) as e:
            pt.PointStorage.from_flat(np.arange(12), dim)
        assert "(12)" in str(e.value)
        assert f"({dim})" in str(e.value)


def test_from_flat_copies():
    data = np.arange(6, dtype=np.float32)
    p = pt.PointStorage.from_flat(data, 2)
    data[0] = 100
    assert p.dtype == np.float32
    assert p.get(0)[0] == 0


def test_from_rows():
    p = pt.PointStorage.from_rows(rows)
    assert len(p) == 4
    assert p.dim == 3
    np.testing.assert_array_equal(p.get(0), [0, 1, 2])
    np.testing.assert_array_equal(p.get(1), [3, 4, 5])
    np.testing.assert_array_equal(p.as_array(), np.array(rows))


def test_from_rows_shape_error():
    with pytest.raises(pt.ShapeError) as e:
        pt.PointStorage.from_rows([[0, 1, 2], [3, 4], [5, 6, 7, 8]])
    assert str(e.value) == ("Row length (2) does not match number of "
                            "dimensions (3)")
    with pytest.raises(pt.ShapeError):
        pt.PointStorage.from_rows([])


def test_from_columns():
    p = pt.PointStorage.from_columns(cols)
    assert len(p) == 4
    assert p.dim == 3
    np.testing.assert_array_equal(p.get(0), [0, 1, 2])
    np.testing.assert_array_equal(p.get(1), [3, 4, 5])


def test_from_columns_shape_error():
    with pytest.raises(pt.ShapeError) as e:
        pt.PointStorage.from_columns([[0, 1, 2], [3, 4]])
    assert str(e.value) == ("Column length (2) does not match number of "
                            "rows (3)")
    with pytest.raises(pt.ShapeError):
        pt.PointStorage.from_columns([])


def test_rows_and_columns_agree():
    pr = pt.PointStorage.from_rows(rows)
    pc = pt.PointStorage.from_columns(cols)
    assert len(pr) == len(pc)
    for i in range(len(pr)):
        np.testing.assert_array_equal(pr.get(i), pc.get(i))
    matrix = np.random.default_rng(1).random((7, 5))
    pr = pt.PointStorage.from_rows(matrix)
    pc = pt.PointStorage.from_columns(matrix.T)
    np.testing.assert_array_equal(pr.as_array(), pc.as_array())


def test_append():
    p = pt.PointStorage.empty(2)
    for i in range(10):
        p.append([i, -i])
    assert len(p) == 10
    np.testing.assert_array_equal(p.get(9), [9, -9])
    np.testing.assert_array_equal(p.as_array()[:, 0], np.arange(10))
    with pytest.raises(AssertionError):
        p.append([1, 2, 3])
    assert len(p) == 10


def test_get_out_of_range():
    p = pt.PointStorage.from_rows(rows)
    with pytest.raises(AssertionError):
        p.get(4)
    with pytest.raises(AssertionError):
        p.get_mutable(-1)


def test_get_is_read_only():
    p = pt.PointStorage.from_rows(rows)
    with pytest.raises(ValueError):
        p.get(0)[0] = 5
    with pytest.raises(ValueError):
        p[0][0] = 5
    m = p.get_mutable(1)
    m[:] = [30, 40, 50]
    np.testing.assert_array_equal(p.get(1), [30, 40, 50])
    np.testing.assert_array_equal(p.get(2), [6, 7, 8])


def test_iterate():
    p = pt.PointStorage.from_rows(rows)
    first = [list(r) for r in p]
    second = [list(r) for r in p]
    assert first == rows
    assert second == rows


def test_collection():
    p = pt.PointStorage.from_rows(rows)
    pc = pt.PointCollection(p, ["a", "b", "c", "d"])
    assert pc.points is p
    assert pc.ids == ["a", "b", "c", "d"]
    assert len(pc) == 4
    assert pc.dim == 3
    assert pt.PointCollection(p).ids is None


def test_collection_cardinality_error():
    p = pt.PointStorage.from_rows(rows)
    for ids in (["a"], ["a", "b", "c"], list("abcde"), []):
        with pytest.raises(pt.CardinalityError) as e:
            pt.PointCollection(p, ids)
        assert str(e.value) == (f"Data length (4) does not match number "
                                f"of IDs ({len(ids)})")


def test_collection_to_dataframe():
    p = pt.PointStorage.from_rows(rows)
    df = pt.PointCollection(p, ["a", "b", "c", "d"]).to_dataframe(
        ["x", "y", "z"])
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["x", "y", "z"]
    assert list(df.index) == ["a", "b", "c", "d"]
    assert df.loc["b", "y"] == 4
    df = pt.PointCollection(p).to_dataframe()
    assert list(df.columns) == ["x0", "x1", "x2"]
    with pytest.raises(ValueError):
        pt.PointCollection(p).to_dataframe(["x"])


def test_views_stay_within_points():
    class Unchecked(pt.PointStorage):
        def __len__(self):
            return 10

    p = Unchecked.empty(2)
    for i in range(3):
        p.append([i, i])
    assert len(p._data) > p._size
    np.testing.assert_array_equal(p.get_mutable(2), [2, 2])
    assert len(p.get_mutable(3)) == 0


def test_collection_keeps_ids_as_given():
    p = pt.PointStorage.from_rows(rows)
    pc = pt.PointCollection(p, (1, 2, 3, 4))
    assert pc.ids == [1, 2, 3, 4]
