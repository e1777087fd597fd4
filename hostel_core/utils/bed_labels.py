"""
Bed label sequence: A, B, ..., Z, AA, AB, ..., AZ, BA, ...
"""

from string import ascii_uppercase
from typing import Iterable, List

ALPHABET_SIZE = len(ascii_uppercase)


def label_for_index(index: int) -> str:
    """Zero-based position to seat label (0 -> A, 25 -> Z, 26 -> AA)."""
    if index < 0:
        raise ValueError("Bed label index cannot be negative")
    label = ""
    n = index + 1
    while n:
        n, remainder = divmod(n - 1, ALPHABET_SIZE)
        label = ascii_uppercase[remainder] + label
    return label


def index_for_label(label: str) -> int:
    """Inverse of :func:`label_for_index`."""
    if not label or not label.isalpha() or not label.isupper() or not label.isascii():
        raise ValueError(f"Invalid bed label: {label!r}")
    n = 0
    for char in label:
        n = n * ALPHABET_SIZE + (ord(char) - ord("A") + 1)
    return n - 1


def next_label_indexes(existing: Iterable[int], count: int) -> List[int]:
    """
    Positions for ``count`` new beds, continuing after the highest
    existing position so labels stay strictly increasing.
    """
    start = max(existing, default=-1) + 1
    return list(range(start, start + count))
