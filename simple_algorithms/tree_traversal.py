"""In-order, pre-order and post-order traversals of an index-linked binary tree."""

import argparse
import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TreeNode:
    """A node holding a value and the list indices of its children, if any."""

    value: int
    left: Optional[int] = None
    right: Optional[int] = None


def in_order_indices(nodes):
    """Return node indices in in-order sequence, starting at the root nodes[0]."""
    if not nodes:
        return []
    order = []
    stack = []
    current = 0
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = nodes[current].left
        current = stack.pop()
        order.append(current)
        current = nodes[current].right
    return order


def in_order(nodes):
    """Return node values in in-order sequence."""
    return [nodes[index].value for index in in_order_indices(nodes)]


def pre_order(nodes):
    """Return node values in pre-order sequence."""
    if not nodes:
        return []
    values = []
    stack = [0]
    while stack:
        node = nodes[stack.pop()]
        values.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def post_order(nodes):
    """Return node values in post-order sequence."""
    if not nodes:
        return []
    values = []
    stack = []
    current = 0
    previous = None
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = nodes[current].left
        current = stack[-1]
        right = nodes[current].right
        if right is not None and right != previous:
            current = right
        else:
            values.append(nodes[current].value)
            previous = current
            current = None
            stack.pop()
    return values


def _child(token):
    index = int(token)
    return None if index == -1 else index


def read_tree(tokens):
    """Build nodes from a count followed by (value, left, right) triples; -1 means no child."""
    tokens = iter(tokens)
    count = int(next(tokens, 0))
    return [
        TreeNode(int(next(tokens)), _child(next(tokens)), _child(next(tokens)))
        for _ in range(count)
    ]


def main(argv=None):
    """Read a tree from standard input and print its three traversals."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    nodes = read_tree(sys.stdin.read().split())
    for values in (in_order(nodes), pre_order(nodes), post_order(nodes)):
        print(" ".join(str(value) for value in values))
    return 0