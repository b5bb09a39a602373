"""
Point pattern analysis command line tool

Usage
-----
    ppa -p points.csv -o out/run_ avg-nn
    ppa -p points.csv -o out/run_ jaccard -r reference.csv
    ppa options.txt

In the last form the options are read from a text file. Newlines count as
spaces and text in double quotes is kept as one argument.
"""
import argparse
import logging
import sys
from pathlib import Path

from . import commands as cmd
from .data_io import CsvError, CsvOptions, CsvPointReader

# Initialize the Logger
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


def split_args(text):
    """
    Split a string into command line arguments

    The string is split at double quotes. Parts outside of quotes are split
    at spaces, empty parts are dropped. Parts inside quotes are kept as a
    single argument. All parts are stripped of surrounding whitespace.

    Examples
    --------
    >>>split_args('-p "my data/*.csv" -o out avg-nn')
    ['-p', 'my data/*.csv', '-o', 'out', 'avg-nn']
    """
    args = []
    for i, part in enumerate(text.split('"')):
        part = part.strip()
        if i % 2 == 0:
            args.extend(s.strip() for s in part.split(" ") if s.strip())
        else:
            args.append(part)
    return args


def read_options_file(filepath):
    """Read command line arguments from a text file"""
    with open(str(Path(filepath)), "r") as f:
        content = f.read()
    return split_args(content.replace("\r\n", " ").replace("\n", " "))


def get_parser():
    """Return the argument parser of the ppa command"""
    parser = argparse.ArgumentParser(
        prog="ppa",
        description="Point pattern analysis command line tool",
        epilog="Arguments can also be read from a file: ppa <options-file>")
    parser.add_argument("-p", "--pattern", required=True,
                        help="Path of the point file to analyse")
    parser.add_argument("-o", "--output", required=True, metavar="path",
                        help="Output file name(s) prefix")
    parser.add_argument("-c", "--columns", nargs="+", default=["X", "Y"],
                        metavar="name",
                        help="Coordinate columns (default: X Y)")
    parser.add_argument("--id-column", default=None, metavar="name",
                        help="Column with point IDs")
    parser.add_argument("-d", "--delimiter", default=";",
                        help="Field delimiter (default: ;)")
    parser.add_argument("--no-data", default="NA", metavar="token",
                        help="Token for missing values (default: NA)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print debug messages")

    sub = parser.add_subparsers(dest="command", metavar="command")
    sub.required = True
    jac = sub.add_parser(
        "jaccard", help="Jaccard similarity between two sets of points")
    jac.add_argument("-r", "--ref", required=True, metavar="path",
                     dest="reference",
                     help="Path to file with reference points")
    sub.add_parser(
        "avg-nn", help="Average nearest neighbor distance of a set of points")
    return parser


def parse_args(argv):
    """
    Parse the arguments, reading them from a file if that is the only one
    """
    if len(argv) == 1 and not argv[0].startswith("-"):
        argv = read_options_file(argv[0])
    return get_parser().parse_args(argv)


def build_command(args):
    """Read the input files and create the command to run"""
    reader = CsvPointReader(args.columns,
                            id_column=args.id_column,
                            options=CsvOptions(args.delimiter, args.no_data))
    points = reader.read(args.pattern)
    if args.command == "jaccard":
        reference = reader.read(args.reference)
        return cmd.JaccardCommand(points, reference, args.output,
                                  source=args.pattern,
                                  reference_source=args.reference)
    return cmd.AvgNNCommand(points, args.output, source=args.pattern)


def _setup_logging(verbose=False):
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=logging.DEBUG, handlers=[handler],
                        format="%(levelname)s %(name)s: %(message)s")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except OSError as e:
        _setup_logging()
        logger.error(f"Could not read the options file: {e}")
        return 1
    _setup_logging(args.verbose)
    try:
        command = build_command(args)
        command.execute()
    except (CsvError, cmd.CommandError, OSError, ValueError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
