"""
Module to read point data from files

Classes
-------
PointReader
    Interface for everything that turns a file into a PointCollection
CsvOptions
    Delimiter and no-data token of a CSV file
CsvPointReader
    Reads named columns of a CSV file into a PointCollection

Exceptions
----------
CsvError
    Base class of all errors raised while reading a CSV file
CsvIOError
    The file could not be opened, decoded or tokenized
ColumnNotFoundError
    A requested column is not in the header
ValueParseError
    A cell is neither a number nor the no-data token
"""
import abc
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from ._decorators import timeit
from .datatypes.points import PointCollection, PointStorage, _check_dtype

# Initialize the Logger
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


class CsvError(Exception):
    """Reading a CSV file into points failed"""


class CsvIOError(CsvError, OSError):
    """The CSV file could not be opened or read"""


class ColumnNotFoundError(CsvError):
    """A requested column does not exist in the header"""
    def __init__(self, column):
        super().__init__(f"Column {column} not found.")
        self.column = column


class ValueParseError(CsvError):
    """A cell could not be interpreted as a number"""
    def __init__(self, value, column=None, row=None):
        super().__init__(f"Unable to parse value '{value}' to float.")
        self.value = value
        self.column = column
        self.row = row


class PointReader(abc.ABC):
    """
    Interface for file readers that produce a PointCollection

    Subclasses implement read for one file format. The column setup and
    format options are passed on construction so that the same reader can
    be used on many files.
    """
    @abc.abstractmethod
    def read(self, filepath):
        """Read a file and return a PointCollection"""


class CsvOptions(object):
    """
    Format options of a CSV point file

    Parameters
    ----------
    delimiter : str, optional
        Single character separating the fields. Default is ";".
    no_data : str, optional
        Cell content that represents a missing value. Such cells are read
        as NaN. Default is "NA".
    """
    def __init__(self, delimiter=";", no_data="NA"):
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, "
                             f"got {delimiter!r}")
        self.delimiter = delimiter
        self.no_data = no_data

    def __repr__(self):
        return (f"CsvOptions(delimiter={self.delimiter!r}, "
                f"no_data={self.no_data!r})")


def _raw_cell(value):
    return value


def _parse_float(text):
    """Parse text as a plain base 10 float, raise ValueError otherwise"""
    if text != text.strip() or "_" in text:
        raise ValueError(f"Invalid float literal {text!r}")
    return float(text)


class CsvPointReader(PointReader):
    """
    Reader for CSV point collection files

    Parameters
    ----------
    columns : list of str
        Header names of the coordinate columns. Their order determines
        the order of the coordinates of each point.
    id_column : str, optional
        Header name of a column with point IDs. Default is None, then the
        points have no IDs.
    options : CsvOptions, optional
        Delimiter and no-data token. Default is CsvOptions().
    dtype : numpy dtype, optional
        Floating point type of the coordinates. Default is float64.

    Examples
    --------
    >>>reader = CsvPointReader(["X", "Y", "Z"], id_column="ID")
    >>>points = reader.read("points.csv")
    """
    def __init__(self, columns, id_column=None, options=None,
                 dtype=np.float64):
        self.columns = [str(c) for c in columns]
        if not self.columns:
            raise ValueError("At least one coordinate column is required")
        self.id_column = id_column
        self.options = CsvOptions() if options is None else options
        self.dtype = _check_dtype(dtype)

    @staticmethod
    def _column_index(header, column):
        """Return the position of column in the header"""
        try:
            return header.index(column)
        except ValueError:
            raise ColumnNotFoundError(column) from None

    def _read_csv(self, filepath, **kwargs):
        try:
            return pd.read_csv(filepath,
                               sep=self.options.delimiter,
                               header=None,
                               engine="python",
                               keep_default_na=False,
                               na_filter=False,
                               encoding="utf-8",
                               **kwargs)
        except OSError as e:
            raise CsvIOError(f"Could not open {filepath}: {e}") from e
        except UnicodeDecodeError as e:
            raise CsvIOError(f"Could not decode {filepath}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise CsvIOError(f"No header found in {filepath}") from e
        except pd.errors.ParserError as e:
            raise CsvIOError(f"Malformed CSV file {filepath}: {e}") from e

    def _read_table(self, filepath):
        """
        Read the whole file as raw text cells

        Returns
        -------
        header : list of str
            The first row of the file, as written
        table : pandas DataFrame
            The data rows, one column per header field

        Raises
        ------
        CsvIOError
            If the file can not be read or a row has more or fewer fields
            than the header
        """
        width = self._read_csv(filepath, nrows=1, dtype=str).shape[1]
        # converters keep every cell as text, fields missing from short
        # rows come out as None
        table = self._read_csv(filepath,
                               converters={i: _raw_cell
                                           for i in range(width)})
        header = list(table.iloc[0])
        table = table.iloc[1:].reset_index(drop=True)
        complete = table.iloc[:, -1].map(lambda v: isinstance(v, str))
        if not complete.all():
            row = int(np.argmin(complete.to_numpy())) + 1
            raise CsvIOError(f"Malformed CSV file {filepath}: data row "
                             f"{row} has fewer fields than the header "
                             f"({width})")
        return header, table

    @timeit
    def read(self, filepath):
        """
        Read a CSV file and parse it into a PointCollection

        Parameters
        ----------
        filepath : str or Path
            Path to the CSV file

        Returns
        -------
        points : PointCollection
            One point per data row, in file order

        Raises
        ------
        CsvIOError
            If the file can not be opened or read, or its rows differ in
            the number of fields
        ColumnNotFoundError
            If the ID column or a coordinate column is not in the header
        ValueParseError
            If a coordinate cell is neither a number nor the no-data token.
            Nothing is returned for the rest of the file in this case.
        """
        filepath = Path(filepath)
        no_data = self.options.no_data
        header, table = self._read_table(filepath)

        id_index = None
        if self.id_column is not None:
            id_index = self._column_index(header, self.id_column)
        col_indices = [self._column_index(header, c) for c in self.columns]
        logger.debug(f"{filepath.name}: columns {self.columns} at "
                     f"{col_indices}, ID column at {id_index}")

        dim = len(col_indices)
        cells = table.iloc[:, col_indices].to_numpy(dtype=object)
        data = np.empty(len(cells) * dim, dtype=self.dtype)
        for r, row in enumerate(cells):
            for c, text in enumerate(row):
                if text == no_data:
                    data[r * dim + c] = np.nan
                    continue
                try:
                    data[r * dim + c] = _parse_float(text)
                except ValueError:
                    raise ValueParseError(text, column=self.columns[c],
                                          row=r + 1) from None

        ids = None
        if id_index is not None:
            ids = list(table.iloc[:, id_index])
        logger.debug(f"{filepath.name}: read {len(cells)} points")
        return PointCollection(PointStorage.from_flat(data, dim), ids)
