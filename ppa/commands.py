"""
Analysis commands working on point collections

A command holds its input PointCollections and an output prefix. Executing
it checks that the inputs are usable for the analysis and writes a summary
of them to ``<output><name>.json``.

Classes
-------
Command
    Base class of all commands
JaccardCommand
    Similarity between a point set and a reference point set
AvgNNCommand
    Average nearest neighbor distance of a point set
"""
import logging

import numpy as np

from . import jsontools as jt

# Initialize the Logger
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


class CommandError(Exception):
    """The inputs of a command are not suited for the analysis"""


def describe(points, source=None):
    """
    Return a dictionary summarizing a PointCollection

    Parameters
    ----------
    points : PointCollection
        The points to describe
    source : str, optional
        Where the points were read from

    Returns
    -------
    result : dict
        Number of points, dimension, whether there are IDs, the number of
        points with missing coordinates and the bounding box of the
        non-missing values per axis.
    """
    arr = points.points.as_array()
    missing = np.isnan(arr).any(axis=1)
    bounds = []
    for axis in range(points.dim):
        values = arr[:, axis]
        values = values[~np.isnan(values)]
        if len(values):
            bounds.append([float(values.min()), float(values.max())])
        else:
            bounds.append(None)
    result = {
        "points": len(points),
        "dimension": points.dim,
        "has_ids": points.ids is not None,
        "incomplete_points": int(missing.sum()),
        "bounds": bounds,
    }
    if source is not None:
        result["source"] = str(source)
    return result


class Command(object):
    """
    Base class for analysis commands

    Parameters
    ----------
    output : str
        Prefix of the output file(s)
    """
    name = "command"

    def __init__(self, output):
        self.output = str(output)

    @property
    def output_path(self):
        return f"{self.output}{self.name}.json"

    def check(self):
        """Raise CommandError if the inputs don't fit the command"""

    def summary(self):
        return {"command": self.name}

    def execute(self):
        """Check the inputs and write the summary, return the summary"""
        self.check()
        result = self.summary()
        jt.write_to_json(self.output_path, result)
        logger.info(f"{self.name}: summary written to {self.output_path}")
        return result


class JaccardCommand(Command):
    """
    Jaccard similarity between two sets of points

    Parameters
    ----------
    points : PointCollection
        The points to compare
    reference : PointCollection
        The reference points, must have the same dimension
    output : str
        Prefix of the output file(s)
    """
    name = "jaccard"

    def __init__(self, points, reference, output, source=None,
                 reference_source=None):
        super().__init__(output)
        self.points = points
        self.reference = reference
        self.source = source
        self.reference_source = reference_source

    def check(self):
        if self.points.dim != self.reference.dim:
            raise CommandError(f"Points ({self.points.dim}D) and reference "
                               f"points ({self.reference.dim}D) have "
                               f"different dimensions")

    def summary(self):
        result = super().summary()
        result["points"] = describe(self.points, self.source)
        result["reference"] = describe(self.reference,
                                       self.reference_source)
        return result


class AvgNNCommand(Command):
    """
    Average nearest neighbor distance of a set of points

    Parameters
    ----------
    points : PointCollection
        The points to analyse, at least one
    output : str
        Prefix of the output file(s)
    """
    name = "avg-nn"

    def __init__(self, points, output, source=None):
        super().__init__(output)
        self.points = points
        self.source = source

    def check(self):
        if len(self.points) == 0:
            raise CommandError("Average nearest neighbor distance needs at "
                               "least one point")

    def summary(self):
        result = super().summary()
        result["points"] = describe(self.points, self.source)
        return result
