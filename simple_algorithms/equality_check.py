"""Decide whether equalities and inequalities between variables can all hold."""

import argparse
import sys

from simple_algorithms.disjoint_set import DisjointSet


def is_satisfiable(variable_count, equalities, inequalities):
    """Return True unless some inequality joins two variables forced equal.

    Variables are numbered from 1.
    """
    variables = DisjointSet(variable_count)
    for first, second in equalities:
        variables.union(first - 1, second - 1)
    return all(
        variables.find(first - 1) != variables.find(second - 1)
        for first, second in inequalities
    )


def main(argv=None):
    """Read constraints from standard input, print 1 if satisfiable and 0 if not."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    variable_count = int(next(tokens))
    equal_count = int(next(tokens))
    unequal_count = int(next(tokens))
    equalities = [(int(next(tokens)), int(next(tokens))) for _ in range(equal_count)]
    inequalities = [(int(next(tokens)), int(next(tokens))) for _ in range(unequal_count)]
    if is_satisfiable(variable_count, equalities, inequalities):
        print(1)
        return 0
    print(0)
    return 1