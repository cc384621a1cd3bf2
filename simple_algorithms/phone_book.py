"""Phone book keyed by number, answering add, delete and find queries."""

import argparse
import sys

NUMBER_LIMIT = 10_000_000
NOT_FOUND = "not found"


class PhoneBook:
    """Maps phone numbers below NUMBER_LIMIT to contact names."""

    def __init__(self):
        self._names = {}

    @staticmethod
    def _check(number):
        if not 0 <= number < NUMBER_LIMIT:
            raise IndexError(f"number {number} out of range")

    def add(self, number, name):
        """Store name under number, replacing any earlier name."""
        self._check(number)
        if name:
            self._names[number] = name
        else:
            self._names.pop(number, None)

    def delete(self, number):
        """Forget number; deleting an unknown number does nothing."""
        self._check(number)
        self._names.pop(number, None)

    def find(self, number):
        """Return the name stored under number, or None."""
        self._check(number)
        return self._names.get(number)


def run_queries(queries):
    """Apply ("add", number, name), ("del", number) and ("find", number) queries.

    Return one output line per find query.
    """
    book = PhoneBook()
    answers = []
    for name, *args in queries:
        if name == "add":
            book.add(args[0], args[1])
        elif name == "del":
            book.delete(args[0])
        elif name == "find":
            found = book.find(args[0])
            answers.append(NOT_FOUND if found is None else found)
    return answers


def main(argv=None):
    """Read phone book queries from standard input and print the find results."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens, "0"))
    queries = []
    for _ in range(count):
        command = next(tokens)
        if command == "add":
            queries.append((command, int(next(tokens)), next(tokens)))
        else:
            queries.append((command, int(next(tokens))))
    for line in run_queries(queries):
        print(line)
    return 0