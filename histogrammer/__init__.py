"""Letter-frequency histogram module for text file analysis."""

from .core.frequency_counter import LetterHistogram, count_letters, ALPHABET
from .core.histogram_renderer import render_histogram, tick_digits

__all__ = [
    "LetterHistogram",
    "count_letters",
    "ALPHABET",
    "render_histogram",
    "tick_digits",
]
