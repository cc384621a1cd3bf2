"""Assign jobs to parallel processors in order, earliest free processor first."""

import argparse
import heapq
import sys


def schedule(processor_count, durations):
    """Return (processor, start time) for each job; ties go to the lowest processor."""
    durations = list(durations)
    if processor_count < 1 and durations:
        raise ValueError("at least one processor is required")
    free_at = [(0, processor) for processor in range(processor_count)]
    assignments = []
    for duration in durations:
        start, processor = free_at[0]
        assignments.append((processor, start))
        heapq.heapreplace(free_at, (start + duration, processor))
    return assignments


def main(argv=None):
    """Read processor count and job durations from standard input and print the plan."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    processor_count = int(next(tokens))
    job_count = int(next(tokens))
    durations = [int(next(tokens)) for _ in range(job_count)]
    for processor, start in schedule(processor_count, durations):
        print(processor, start)
    return 0