#!/usr/bin/env python3

"""Letter frequency counting.

Bins the ASCII letters of a text into 26 case-folded bins (a..z) and tracks the
most populated bin. Everything that is not an ASCII letter (digits, punctuation,
whitespace, non-ASCII bytes) is ignored.
"""

import string
from dataclasses import dataclass, field
from typing import Dict, Union

import numpy as np


ALPHABET = string.ascii_lowercase

# Bytes 'A'..'Z' and 'a'..'z' differ only in this bit
_CASE_BIT = 0x20
_ORD_A = ord("a")


@dataclass(frozen=True, eq=False)
class LetterHistogram:
    """Counts per lowercase letter plus the peak count across all bins.

    The 26 bins always exist; letters that never appeared hold 0. ``peak`` is 0
    when the input had no letters at all.
    """

    counts: np.ndarray = field(
        default_factory=lambda: np.zeros(len(ALPHABET), dtype=np.int64)
    )
    peak: int = field(init=False)

    def __post_init__(self):
        counts = np.array(self.counts, dtype=np.int64)
        if counts.shape != (len(ALPHABET),):
            raise ValueError(
                f"expected {len(ALPHABET)} bins, got shape {counts.shape}"
            )
        if (counts < 0).any():
            raise ValueError("bin counts must be non-negative")
        counts.setflags(write=False)
        object.__setattr__(self, "counts", counts)
        object.__setattr__(self, "peak", int(counts.max()))

    def __eq__(self, other):
        if not isinstance(other, LetterHistogram):
            return NotImplemented
        return bool(np.array_equal(self.counts, other.counts))

    def count_for(self, letter: str) -> int:
        """Return the count for a single letter (case-insensitive)."""
        idx = ALPHABET.find(letter.lower()) if len(letter) == 1 else -1
        if idx < 0:
            raise ValueError(f"not an ASCII letter: {letter!r}")
        return int(self.counts[idx])

    @property
    def total(self) -> int:
        """Total number of letters counted."""
        return int(self.counts.sum())

    def as_dict(self) -> Dict[str, int]:
        return {c: int(n) for c, n in zip(ALPHABET, self.counts)}


def _to_bytes(text: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(text, str):
        # Only ASCII letters matter; anything unencodable can be dropped
        return text.encode("utf-8", errors="ignore")
    return bytes(text)


def count_letters(text: Union[str, bytes, bytearray]) -> LetterHistogram:
    """Bin every ASCII letter in ``text`` into its lowercase letter bin.

    Args:
        text: Input text, either decoded or as raw bytes

    Returns:
        LetterHistogram with 26 counts and the peak count
    """
    raw = _to_bytes(text)
    if not raw:
        return LetterHistogram()

    data = np.frombuffer(raw, dtype=np.uint8)
    folded = data | _CASE_BIT
    letters = folded[(folded >= _ORD_A) & (folded <= ord("z"))]
    counts = np.bincount(letters - _ORD_A, minlength=len(ALPHABET))
    return LetterHistogram(counts=counts)
