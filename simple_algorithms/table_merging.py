"""Merge database tables and report the largest table after each merge."""

import argparse
import sys

from simple_algorithms.disjoint_set import DisjointSet


def merge_tables(sizes, requests):
    """Apply 1-based (destination, source) merges; return the largest size after each."""
    sizes = list(sizes)
    tables = DisjointSet(len(sizes), sizes)
    largest = []
    for destination, source in requests:
        if destination < 1 or source < 1:
            raise IndexError("table numbers start at 1")
        tables.union(destination - 1, source - 1)
        largest.append(tables.max_rank())
    return largest


def main(argv=None):
    """Read table sizes and merge requests from standard input and print the maxima."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    table_count = int(next(tokens))
    request_count = int(next(tokens))
    sizes = [int(next(tokens)) for _ in range(table_count)]
    requests = [(int(next(tokens)), int(next(tokens))) for _ in range(request_count)]
    for value in merge_tables(sizes, requests):
        print(value)
    return 0