"""Hash table of strings resolved by chaining, with polynomial hashing."""

import argparse
import sys

_PRIME = 1_000_000_007
_MULTIPLIER = 263


def poly_hash(text, bucket_count):
    """Return the polynomial hash of text reduced to a bucket number."""
    result = 0
    power = 1
    for char in text:
        result = (result + ord(char) * power) % _PRIME
        power = power * _MULTIPLIER % _PRIME
    return result % bucket_count


class HashChains:
    """Set of strings stored in bucket_count chains, newest first in each chain."""

    def __init__(self, bucket_count):
        if bucket_count < 1:
            raise ValueError("at least one bucket is required")
        self.bucket_count = bucket_count
        self._buckets = [[] for _ in range(bucket_count)]

    def _chain(self, text):
        return self._buckets[poly_hash(text, self.bucket_count)]

    def add(self, text):
        """Insert text at the front of its chain unless already present."""
        chain = self._chain(text)
        if text not in chain:
            chain.insert(0, text)

    def delete(self, text):
        """Remove text if present."""
        chain = self._chain(text)
        if text in chain:
            chain.remove(text)

    def find(self, text):
        return text in self._chain(text)

    def check(self, bucket):
        """Return the strings of one chain, front first."""
        if not 0 <= bucket < self.bucket_count:
            raise IndexError(f"bucket {bucket} out of range")
        return list(self._buckets[bucket])


def run_queries(bucket_count, queries):
    """Apply (command, argument) queries; return output lines for find and check."""
    table = HashChains(bucket_count)
    output = []
    for command, argument in queries:
        if command == "add":
            table.add(argument)
        elif command == "del":
            table.delete(argument)
        elif command == "find":
            output.append("yes" if table.find(argument) else "no")
        elif command == "check":
            output.append(" ".join(table.check(argument)))
    return output


def main(argv=None):
    """Read a bucket count and queries from standard input and print the answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    bucket_count = int(next(tokens))
    count = int(next(tokens))
    queries = []
    for _ in range(count):
        command = next(tokens)
        argument = next(tokens)
        queries.append((command, int(argument) if command == "check" else argument))
    for line in run_queries(bucket_count, queries):
        print(line)
    return 0