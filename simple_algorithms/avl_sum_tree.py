"""Balanced search tree of distinct integers that answers range-sum queries."""

import argparse
import sys

_MODULUS = 1_000_000_001


class _Node:
    __slots__ = ("value", "left", "right", "height", "total")

    def __init__(self, value):
        self.value = value
        self.left = None
        self.right = None
        self.height = 1
        self.total = value


def _height(node):
    return node.height if node else 0


def _total(node):
    return node.total if node else 0


def _update(node):
    node.height = 1 + max(_height(node.left), _height(node.right))
    node.total = node.value + _total(node.left) + _total(node.right)


def _balance_factor(node):
    return _height(node.left) - _height(node.right) if node else 0


def _rotate_right(node):
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node):
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node):
    _update(node)
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node, value):
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node
    return _rebalance(node)


def _remove_min(node):
    """Detach the smallest node of a subtree; return (new subtree, smallest value)."""
    if node.left is None:
        return node.right, node.value
    node.left, smallest = _remove_min(node.left)
    return _rebalance(node), smallest


def _remove(node, value):
    if node is None:
        return None
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        node.right, node.value = _remove_min(node.right)
    return _rebalance(node)


def _verify(node, low, high):
    """Check one subtree and return its height."""
    if node is None:
        return 0
    if (low is not None and node.value <= low) or (high is not None and node.value >= high):
        raise ValueError(f"value {node.value} breaks the search order")
    left_height = _verify(node.left, low, node.value)
    right_height = _verify(node.right, node.value, high)
    if abs(left_height - right_height) > 1:
        raise ValueError(f"node {node.value} is out of balance")
    height = 1 + max(left_height, right_height)
    if node.height != height:
        raise ValueError(f"node {node.value} stores a wrong height")
    if node.total != node.value + _total(node.left) + _total(node.right):
        raise ValueError(f"node {node.value} stores a wrong sum")
    return height


class AvlSumTree:
    """AVL tree of distinct values keeping the sum of every subtree."""

    def __init__(self, values=()):
        self._root = None
        for value in values:
            self.insert(value)

    def insert(self, value):
        """Add value; adding a present value does nothing."""
        self._root = _insert(self._root, value)

    def remove(self, value):
        """Remove value; removing an absent value does nothing."""
        self._root = _remove(self._root, value)

    def find(self, value):
        node = self._root
        while node:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __contains__(self, value):
        return self.find(value)

    def __len__(self):
        return sum(1 for _ in self)

    def _sum_below(self, bound, inclusive):
        total = 0
        node = self._root
        while node:
            if node.value < bound or (inclusive and node.value == bound):
                total += _total(node.left) + node.value
                node = node.right
            else:
                node = node.left
        return total

    def sum(self, low, high):
        """Return the sum of stored values v with low <= v <= high."""
        if low > high:
            return 0
        return self._sum_below(high, True) - self._sum_below(low, False)

    def __iter__(self):
        """Yield the stored values in ascending order."""
        stack = []
        node = self._root
        while node or stack:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def check_invariants(self):
        """Verify order, balance, heights and sums; return the tree height.

        Raises ValueError if the structure is inconsistent.
        """
        return _verify(self._root, None, None)


def mix(last_sum, value):
    """Shift a query argument by the last reported sum."""
    return (value + last_sum) % _MODULUS


def run_commands(commands):
    """Apply ("+", i), ("-", i), ("?", i) and ("s", l, r) commands; return output lines.

    Every argument is first shifted by the last reported sum with mix().
    """
    tree = AvlSumTree()
    last_sum = 0
    output = []
    for name, *args in commands:
        if name == "+":
            tree.insert(mix(last_sum, args[0]))
        elif name == "-":
            tree.remove(mix(last_sum, args[0]))
        elif name == "?":
            output.append("Found" if tree.find(mix(last_sum, args[0])) else "Not found")
        elif name == "s":
            last_sum = tree.sum(mix(last_sum, args[0]), mix(last_sum, args[1]))
            output.append(str(last_sum))
    return output


def main(argv=None):
    """Read set commands from standard input and print the answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens, "0"))
    commands = []
    for _ in range(count):
        name = next(tokens)
        if name == "s":
            commands.append((name, int(next(tokens)), int(next(tokens))))
        else:
            commands.append((name, int(next(tokens))))
    for line in run_commands(commands):
        print(line)
    return 0