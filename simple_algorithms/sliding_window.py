"""Maximum of every window of fixed width over a sequence."""

import argparse
import sys
from collections import deque

from simple_algorithms.max_stack import MaxStack


class WindowMaxQueue:
    """Queue over the last window_size values, answering max() from two stacks."""

    def __init__(self, window_size):
        self.window_size = window_size
        self._window = deque(maxlen=window_size)
        self._incoming = MaxStack()
        self._outgoing = MaxStack()

    def push(self, value):
        """Append a value, dropping the oldest one once the window is full."""
        self._window.append(value)
        if len(self._incoming) == self.window_size:
            while len(self._incoming):
                self._outgoing.push(self._incoming.pop())
        self._incoming.push(value)
        if len(self._outgoing):
            self._outgoing.pop()

    def max(self):
        """Return the window maximum, or None until the window is full."""
        if len(self._window) < self.window_size:
            return None
        return max(self._incoming.max(), self._outgoing.max())


def sliding_window_maxima(values, window_size):
    """Return the maximum of each full window as the values are pushed."""
    queue = WindowMaxQueue(window_size)
    maxima = []
    first = queue.max()
    if first is not None:
        maxima.append(first)
    for value in values:
        queue.push(value)
        current = queue.max()
        if current is not None:
            maxima.append(current)
    return maxima


def main(argv=None):
    """Read values and a window size from standard input and print window maxima."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens))
    values = [int(next(tokens)) for _ in range(count)]
    window_size = int(next(tokens))
    print("".join(f"{value} " for value in sliding_window_maxima(values, window_size)))
    return 0