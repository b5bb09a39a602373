import logging

_logger = logging.getLogger(__name__)

__doc__ = """
ppa: point pattern analysis
===========================

Read point coordinates from tabular files into dimension-homogeneous point
collections for spatial statistics.
"""

from .datatypes.points import (PointStorage, PointCollection,
                               PointConstructionError, ShapeError,
                               CardinalityError)
from .data_io import (PointReader, CsvOptions, CsvPointReader, CsvError,
                      CsvIOError, ColumnNotFoundError, ValueParseError)

__all__ = ["PointStorage", "PointCollection", "PointConstructionError",
           "ShapeError", "CardinalityError", "PointReader", "CsvOptions",
           "CsvPointReader", "CsvError", "CsvIOError", "ColumnNotFoundError",
           "ValueParseError"]
