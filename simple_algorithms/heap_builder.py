"""Turn an array into a min-heap in place, recording every swap."""

import argparse
import sys


def sift_down(values, index, swaps):
    """Move values[index] down to its place, appending (i, j) for each swap made."""
    size = len(values)
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        if left >= size:
            return
        smallest = left
        if right < size and values[right] < values[left]:
            smallest = right
        if not values[smallest] < values[index]:
            return
        values[index], values[smallest] = values[smallest], values[index]
        swaps.append((index, smallest))
        index = smallest


def build_heap(values):
    """Rearrange values into a min-heap in place and return the swaps performed."""
    swaps = []
    for index in range(len(values) // 2, -1, -1):
        sift_down(values, index, swaps)
    return swaps


def main(argv=None):
    """Read an array from standard input and print the swaps that heapify it."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens, "0"))
    values = [float(next(tokens)) for _ in range(count)]
    swaps = build_heap(values)
    print(len(swaps))
    for first, second in swaps:
        print(first, second)
    return 0