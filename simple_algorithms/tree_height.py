"""Height of a rooted forest given by a parent array."""

import argparse
import sys
from collections import defaultdict


def tree_height(parents):
    """Return the number of levels in the forest where parents[i] is i's parent or -1."""
    children = defaultdict(list)
    for node, parent in enumerate(parents):
        children[parent].append(node)

    height = 0
    pending = [(-1, 0)]
    while pending:
        node, depth = pending.pop()
        for child in children[node]:
            pending.append((child, depth + 1))
            height = max(height, depth + 1)
    return height


def main(argv=None):
    """Read a node count and parent array from standard input and print the height."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens, "0"))
    parents = [int(next(tokens)) for _ in range(count)]
    print(tree_height(parents))
    return 0