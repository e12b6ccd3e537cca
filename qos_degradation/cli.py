"""Command line entry point: build a graph and compare the blocking solvers."""

import argparse
import sys

from . import constants, iterative_greedy, linear_rounding, randomness
from .graph import Graph, norm


def _format_vector(x):
    return "".join(f"{v} " for v in x)


def _report(title, x):
    print(f"{title}: {_format_vector(x)}")
    print(f"Norm = {norm(x)}")


def _parser():
    parser = argparse.ArgumentParser(
        prog="qos-degradation",
        description="Block all path queries of a graph by degrading edges.",
    )
    parser.add_argument("--vertices", type=int, default=10,
                        help="number of vertices of a random graph")
    parser.add_argument("--density", type=float, default=None,
                        help="edge probability of a random graph")
    parser.add_argument("--input", help="load a graph written by --output instead")
    parser.add_argument("--output", help="write the graph to this file")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    return parser


def main(argv=None):
    """Run the iterative greedy and linear rounding solvers and print their results."""
    args = _parser().parse_args(argv)
    if args.seed is not None:
        randomness.seed(args.seed)
    try:
        if args.input:
            with open(args.input, encoding="utf-8") as handle:
                graph = Graph.loads(handle.read())
        else:
            density = constants.EDGE_DENSITY if args.density is None else args.density
            graph = Graph()
            graph.randomize(args.vertices, density)
        if args.output:
            graph.write(args.output)
        _report("Iterative Greedy type 1", iterative_greedy.solve(graph, 1))
        _report("Linear Rounding", linear_rounding.solve(graph))
    except (OSError, ValueError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())