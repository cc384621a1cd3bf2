"""Find every occurrence of a pattern in a text with the Rabin-Karp method."""

import argparse
import sys

_PRIME = 1_000_000_007
_BASE = 2


def rabin_karp_search(text, pattern):
    """Return the starting indices of all occurrences of pattern in text."""
    n, m = len(text), len(pattern)
    if m == 0 or n < m:
        return []

    high_power = pow(_BASE, m - 1, _PRIME)
    pattern_hash = 0
    window_hash = 0
    for pattern_char, text_char in zip(pattern, text):
        pattern_hash = (_BASE * pattern_hash + ord(pattern_char)) % _PRIME
        window_hash = (_BASE * window_hash + ord(text_char)) % _PRIME

    matches = []
    for start in range(n - m + 1):
        if pattern_hash == window_hash and text[start:start + m] == pattern:
            matches.append(start)
        if start < n - m:
            window_hash = (
                _BASE * (window_hash - ord(text[start]) * high_power) + ord(text[start + m])
            ) % _PRIME
    return matches


def main(argv=None):
    """Read a pattern and a text from standard input and print match positions."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    words = sys.stdin.read().split()
    pattern = words[0] if words else ""
    text = words[1] if len(words) > 1 else ""
    print(" ".join(str(index) for index in rabin_karp_search(text, pattern)))
    return 0