"""
Containers for n-dimensional point data

Classes
-------
PointStorage
    Flat, row-major buffer of points with a fixed dimension
PointCollection
    A PointStorage with an optional parallel list of point IDs

Exceptions
----------
PointConstructionError
    Base class for inconsistent construction input
ShapeError
    Buffer, rows or columns don't fit the point dimension
CardinalityError
    Number of IDs does not match the number of points
"""
import numpy as np
import pandas as pd


class PointConstructionError(ValueError):
    """Construction input of a point container is inconsistent"""


class ShapeError(PointConstructionError):
    """Data does not fit the dimension of the points"""


class CardinalityError(PointConstructionError):
    """IDs and points are not of the same length"""


def _check_dtype(dtype):
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(f"Points must have a floating point data type, "
                        f"got {dtype}")
    return dtype


class PointStorage(object):
    """
    Represents a collection of n-dimensional float points

    The coordinates are stored in a single flat array, point after point
    (row-major). Use one of the class methods to create an instance.

    Methods
    -------
    empty
        Create a storage without points
    from_flat
        Create a storage from a flat buffer of coordinates
    from_rows
        Create a storage from a list of points
    from_columns
        Create a storage from a list of coordinate axes
    append
        Add a point at the end
    get
        Read-only view on a single point
    get_mutable
        Writable view on a single point
    as_array
        Read-only (points x dim) view on all data
    """
    def __init__(self, data, dim):
        # _data may be longer than the stored points, it grows on append
        self._data = data
        self._dim = dim
        self._size = len(data)

    @classmethod
    def empty(cls, dim, dtype=np.float64):
        """Create a storage of dimension dim with zero points"""
        assert dim > 0, "Dimension must be a positive integer"
        return cls(np.empty(0, dtype=_check_dtype(dtype)), int(dim))

    @classmethod
    def from_flat(cls, data, dim, dtype=None):
        """
        Create a storage from a flat sequence of coordinates

        Parameters
        ----------
        data : array-like, 1D
            Coordinates, dim consecutive values form a point
        dim : int
            Dimension of the points
        dtype : numpy dtype, optional
            Floating point type of the storage. Defaults to the type of
            data if that is a float array, otherwise float64.

        Returns
        -------
        storage : PointStorage

        Raises
        ------
        ShapeError
            If the length of data is not a multiple of dim
        """
        assert dim > 0, "Dimension must be a positive integer"
        data = cls._to_array(data, dtype).ravel()
        if len(data) % dim != 0:
            raise ShapeError(f"Data length ({len(data)}) does not match "
                             f"number of dimensions ({dim})")
        return cls(data, int(dim))

    @classmethod
    def from_rows(cls, rows, dtype=None):
        """
        Create a storage from a sequence of points

        The dimension is taken from the first row, all other rows must
        have the same length.

        Raises
        ------
        ShapeError
            If there are no rows or the rows are of unequal length
        """
        rows = list(rows)
        if not rows:
            raise ShapeError("Can not determine the dimension of zero rows")
        dim = len(rows[0])
        for row in rows:
            if len(row) != dim:
                raise ShapeError(f"Row length ({len(row)}) does not match "
                                 f"number of dimensions ({dim})")
        if dim == 0:
            raise ShapeError("Rows must contain at least one coordinate")
        data = cls._to_array(rows, dtype).reshape(-1)
        return cls(data, dim)

    @classmethod
    def from_columns(cls, columns, dtype=None):
        """
        Create a storage from a sequence of coordinate axes

        Column i holds coordinate i of every point, so the result is the
        transpose of the columns.

        Raises
        ------
        ShapeError
            If there are no columns or the columns are of unequal length
        """
        columns = list(columns)
        if not columns:
            raise ShapeError("Can not create points from zero columns")
        rows = len(columns[0])
        for col in columns:
            if len(col) != rows:
                raise ShapeError(f"Column length ({len(col)}) does not "
                                 f"match number of rows ({rows})")
        data = cls._to_array(columns, dtype).reshape(len(columns), rows)
        return cls(np.ascontiguousarray(data.T).reshape(-1), len(columns))

    @staticmethod
    def _to_array(data, dtype):
        if dtype is None:
            arr = np.asarray(data)
            if not np.issubdtype(arr.dtype, np.floating):
                arr = arr.astype(np.float64)
            return np.array(arr, copy=True)
        return np.array(data, dtype=_check_dtype(dtype), copy=True)

    @property
    def dim(self):
        """Number of coordinates per point"""
        return self._dim

    @property
    def dtype(self):
        return self._data.dtype

    def __len__(self):
        return self._size // self._dim

    def __repr__(self):
        return (f"<PointStorage: {len(self)} points, dim={self._dim}, "
                f"dtype={self.dtype}>")

    def append(self, row):
        """Add a single point of length dim at the end"""
        row = np.asarray(row, dtype=self.dtype).ravel()
        assert len(row) == self._dim, (f"Row length ({len(row)}) does not "
                                       f"match number of dimensions "
                                       f"({self._dim})")
        if self._size + self._dim > len(self._data):
            capacity = max(2 * len(self._data), self._size + self._dim)
            grown = np.empty(capacity, dtype=self.dtype)
            grown[:self._size] = self._data[:self._size]
            self._data = grown
        self._data[self._size:self._size + self._dim] = row
        self._size += self._dim

    def get_mutable(self, index):
        """Return a writable view of the point at index"""
        assert 0 <= index < len(self), (f"Index {index} out of range for "
                                        f"{len(self)} points")
        start = index * self._dim
        return self._data[:self._size][start:start + self._dim]

    def get(self, index):
        """Return a read-only view of the point at index"""
        view = self.get_mutable(index)
        view.flags.writeable = False
        return view

    __getitem__ = get

    def as_array(self):
        """Return a read-only view of all points as a (points, dim) array"""
        view = self._data[:self._size].reshape(-1, self._dim)
        view.flags.writeable = False
        return view

    def __iter__(self):
        return iter(self.as_array())


class PointCollection(object):
    """
    Represents a set of points with optional IDs

    Parameters
    ----------
    points : PointStorage
        The coordinates
    ids : sequence of str, optional
        One ID per point, stored as a list of the values as given.
        Default is None, no IDs.

    Raises
    ------
    CardinalityError
        If ids are given and don't have the same length as points
    """
    def __init__(self, points, ids=None):
        if ids is not None:
            ids = list(ids)
            if len(ids) != len(points):
                raise CardinalityError(f"Data length ({len(points)}) does "
                                       f"not match number of IDs "
                                       f"({len(ids)})")
        self.__points = points
        self.__ids = ids

    @property
    def points(self):
        """The PointStorage holding the coordinates"""
        return self.__points

    @property
    def ids(self):
        """List of point IDs, None if the points have no IDs"""
        return self.__ids

    @property
    def dim(self):
        return self.__points.dim

    def __len__(self):
        return len(self.__points)

    def __repr__(self):
        ids = "with IDs" if self.__ids is not None else "without IDs"
        return (f"<PointCollection: {len(self)} points, dim={self.dim}, "
                f"{ids}>")

    def to_dataframe(self, columns=None):
        """
        Return the points as a pandas DataFrame

        Parameters
        ----------
        columns : list of str, optional
            Column names. Default is x0, x1, ...

        Returns
        -------
        df : pandas DataFrame
            One row per point, indexed by the IDs if available
        """
        if columns is None:
            columns = [f"x{i}" for i in range(self.dim)]
        if len(columns) != self.dim:
            raise ValueError(f"Expected {self.dim} column names, "
                             f"got {len(columns)}")
        index = (pd.Index(self.__ids, name="id")
                 if self.__ids is not None else None)
        return pd.DataFrame(np.array(self.__points.as_array()),
                            columns=list(columns), index=index)
