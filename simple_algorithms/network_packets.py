"""Simulate a network buffer that processes packets one after another."""

import argparse
import sys
from collections import deque


def process_packets(buffer_size, packets):
    """Return the start time of each (arrival, duration) packet, or None if dropped.

    At most one finished packet leaves the buffer per arrival.
    """
    finish_times = deque()
    starts = []
    for arrival, duration in packets:
        if finish_times and finish_times[0] <= arrival:
            finish_times.popleft()
        if len(finish_times) >= buffer_size:
            starts.append(None)
            continue
        start = max(finish_times[-1], arrival) if finish_times else arrival
        finish_times.append(start + duration)
        starts.append(start)
    return starts


def main(argv=None):
    """Read buffer size and packets from standard input and print start times."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    buffer_size = int(next(tokens))
    count = int(next(tokens))
    packets = [(int(next(tokens)), int(next(tokens))) for _ in range(count)]
    for start in process_packets(buffer_size, packets):
        print(-1 if start is None else start)
    return 0