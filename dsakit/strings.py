"""String problems: repeated words, IP addresses, prefixes, brackets and search."""

from __future__ import annotations

import itertools
from collections import Counter
from collections.abc import Iterable, Sequence

_PRIME = 119


def first_repeated_word(text: str) -> str | None:
    """The first space-separated word seen a second time, or None."""
    tokens = text.split(" ")
    if tokens and tokens[-1] == "":
        tokens.pop()
    seen: set[str] = set()
    for token in tokens:
        if token in seen:
            return token
        seen.add(token)
    return None


def _valid_octet(part: str) -> bool:
    if not 1 <= len(part) <= 3:
        return False
    if len(part) > 1 and part[0] == "0":
        return False
    return int(part) <= 255


def valid_ip_addresses(digits: str) -> list[str]:
    """Every dotted IPv4 address formed by placing three dots in ``digits``."""
    if not digits.isdigit() or not digits.isascii():
        raise ValueError("an IP address can only be built from decimal digits")
    size = len(digits)
    if not 4 <= size <= 12:
        return []
    addresses = []
    for i, j, k in itertools.combinations(range(1, size), 3):
        parts = (digits[:i], digits[i:j], digits[j:k], digits[k:])
        if all(_valid_octet(part) for part in parts):
            addresses.append(".".join(parts))
    return addresses


def common_prefix(words: Iterable[str]) -> str:
    """Longest prefix shared by all ``words``; empty when they share none."""
    words = list(words)
    if not words:
        raise ValueError("common_prefix() needs at least one word")
    prefix = words[0]
    for word in words[1:]:
        length = 0
        for a, b in zip(prefix, word):
            if a != b:
                break
            length += 1
        prefix = prefix[:length]
    return prefix


def minimum_bracket_swaps(text: str) -> int:
    """Fewest adjacent swaps that balance a string of square brackets."""
    opened = closed = fault = swaps = 0
    for ch in text:
        if ch == "]":
            closed += 1
            fault = closed - opened
        elif ch == "[":
            opened += 1
            if fault > 0:
                swaps += fault
                fault -= 1
        else:
            raise ValueError(f"unexpected character {ch!r}; only '[' and ']' are allowed")
    return swaps


def _hash(text: str) -> int:
    return sum(ord(ch) * _PRIME**power for power, ch in enumerate(text))


def rabin_karp(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1."""
    n, m = len(text), len(pattern)
    if n == 0 or m == 0 or m > n:
        return -1
    target = _hash(pattern)
    window = _hash(text[:m])
    top = _PRIME ** (m - 1)
    for start in range(n - m + 1):
        if window == target and text[start:start + m] == pattern:
            return start
        if start < n - m:
            window = (window - ord(text[start])) // _PRIME + ord(text[start + m]) * top
    return -1


def second_most_frequent(words: Sequence[str]) -> str:
    """A word with the second highest count; ties go to the alphabetically first."""
    counts = Counter(words)
    if len(counts) < 2:
        raise ValueError("need at least two distinct words")
    wanted = sorted(counts.values(), reverse=True)[1]
    return next(word for word in sorted(counts) if counts[word] == wanted)