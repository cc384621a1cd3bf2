"""A stack that reports its maximum in constant time."""

import argparse
import sys


class MaxStack:
    """LIFO stack keeping the running maximum alongside every value."""

    def __init__(self):
        self._items = []

    def push(self, value):
        running = value if not self._items else max(self._items[-1][1], value)
        self._items.append((value, running))

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self):
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def max(self):
        """Return the largest value held, or 0 when the stack is empty."""
        return self._items[-1][1] if self._items else 0

    def __len__(self):
        return len(self._items)


def run_commands(commands):
    """Apply ("push", value), ("pop",) and ("max",) commands; return the reported maxima."""
    stack = MaxStack()
    maxima = []
    for name, *args in commands:
        if name == "push":
            stack.push(args[0])
        elif name == "pop":
            stack.pop()
        elif name == "max":
            maxima.append(stack.max())
    return maxima


def main(argv=None):
    """Read stack commands from standard input and print each requested maximum."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens, "0"))
    commands = []
    for _ in range(count):
        name = next(tokens)
        if name == "push":
            commands.append((name, int(next(tokens))))
        else:
            commands.append((name,))
    for value in run_commands(commands):
        print(value)
    return 0