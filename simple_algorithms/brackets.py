"""Locate the first unbalanced bracket in a line of text."""

import argparse
import sys

_CLOSING_TO_OPENING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())


def check_brackets(text):
    """Return the 1-based position of the first bracket error, or None if balanced.

    A closing bracket with no matching opener is reported at its own position.
    When openers are left unclosed at the end, the earliest of them is reported.
    """
    open_brackets = []
    for position, char in enumerate(text, start=1):
        if char in _OPENING:
            open_brackets.append((position, char))
        elif char in _CLOSING_TO_OPENING:
            if not open_brackets or open_brackets[-1][1] != _CLOSING_TO_OPENING[char]:
                return position
            open_brackets.pop()
    if open_brackets:
        return open_brackets[0][0]
    return None


def main(argv=None):
    """Read one word from standard input and report its bracket balance."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    words = sys.stdin.read().split()
    text = words[0] if words else ""
    error = check_brackets(text)
    print("Success" if error is None else error)
    return 0