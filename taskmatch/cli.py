# -*- coding: utf-8 -*-
"""Command line interface: reads a graph, computes a maximum matching and writes the result."""
import argparse
import logging
import sys

from . import __version__
from .matching.bipartite import ALGORITHMS
from .serialization import dump_result, load_graph

__all__ = ['main']

logger = logging.getLogger(__name__)


def configure_logging(level):
    root = logging.getLogger()
    root.setLevel(level)

    if len(root.handlers) == 0:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)


def _parser():
    parser = argparse.ArgumentParser(
        prog='taskmatch', description="Find a maximum matching between workers and tasks"
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s {}".format(__version__))
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logs")
    parser.add_argument("--dot", metavar="PATH", help="also write a Graphviz rendering of the matching to PATH")
    parser.add_argument("algorithm", choices=sorted(ALGORITHMS), help="the matching algorithm to use")
    parser.add_argument("input", help="path to the JSON input document, '-' for stdin")
    parser.add_argument("output", help="path to write the JSON result to, '-' for stdout")
    return parser


def _read_graph(path):
    if path == '-':
        return load_graph(sys.stdin)
    with open(path, encoding='utf-8') as f:
        return load_graph(f)


def _write_result(result, path):
    if path == '-':
        dump_result(result, sys.stdout)
        return
    with open(path, 'w', encoding='utf-8') as f:
        dump_result(result, f)


def run(args):
    graph = _read_graph(args.input)
    result = graph.find_matching(args.algorithm)
    logger.info("%s found a matching of size %d", args.algorithm, result.match_count)
    # No output is written if the rendering fails
    dot_source = graph.as_graph(result.pairs).source if args.dot else None
    _write_result(result, args.output)
    if dot_source is not None:
        with open(args.dot, 'w', encoding='utf-8') as f:
            f.write(dot_source)
    return result


def main(argv=None):
    args = _parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    configure_logging(level)

    try:
        run(args)
    except (ValueError, OSError, ImportError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
