"""Check whether an index-linked binary tree is a binary search tree."""

import argparse
import sys
from itertools import pairwise

from simple_algorithms.tree_traversal import in_order_indices, read_tree


def is_search_tree(nodes):
    """Return True if in-order values never decrease."""
    values = [nodes[index].value for index in in_order_indices(nodes)]
    return all(previous <= current for previous, current in pairwise(values))


def is_search_tree_with_duplicates(nodes):
    """Return True if in-order (value, index) pairs never decrease.

    Equal values must therefore appear in order of their node indices.
    """
    keys = [(nodes[index].value, index) for index in in_order_indices(nodes)]
    return all(previous <= current for previous, current in pairwise(keys))


def main(argv=None):
    """Read a tree from standard input and print CORRECT or INCORRECT."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--duplicates",
        action="store_true",
        help="order equal values by node index",
    )
    args = parser.parse_args(argv)
    nodes = read_tree(sys.stdin.read().split())
    check = is_search_tree_with_duplicates if args.duplicates else is_search_tree
    print("CORRECT" if check(nodes) else "INCORRECT")
    return 0