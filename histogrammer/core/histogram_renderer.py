#!/usr/bin/env python3

"""ASCII bar chart rendering for letter histograms.

The chart is drawn top to bottom. Each of the ``rows`` rows covers the value
range ``[row_floor, row_ceil)`` of ``[0, peak]``; a letter's bar is filled in
every row whose floor its count exceeds. Rows are labelled with the (floored)
midpoint of their range every ``tick_stride`` rows, counting down from the top
row, which is always labelled. Two footer lines draw the horizontal axis and
the a..z labels.

Example (``"aabbbcccc"``, rows=4, tick_stride=2)::

    3|  *
     | **
    1|***
     |***
     +--------------------------
     |abcdefghijklmnopqrstuvwxyz
"""

import math
from typing import List, Optional, Tuple

import numpy as np

from histogrammer.core.config_manager import (
    DEFAULT_GLYPH_CONFIG,
    GlyphConfig,
    RenderConfig,
)
from histogrammer.core.frequency_counter import ALPHABET, LetterHistogram


def tick_digits(peak: int) -> int:
    """Width of the tick column: number of decimal digits in ``peak``.

    An empty histogram gets a single-character column. Counted on the decimal
    string since floating-point log10 rounds 10**k - 1 up to k for large k.
    """
    if peak == 0:
        return 1
    return len(str(int(peak)))


def row_bounds(r: int, rows: int, peak: int) -> Tuple[float, float]:
    """Return the ``[row_floor, row_ceil)`` value range covered by row ``r``."""
    row_floor = (r / rows) * peak
    row_ceil = ((r + 1) / rows) * peak
    return row_floor, row_ceil


def draws_tick(r: int, rows: int, tick_stride: int) -> bool:
    """True if row ``r`` (0 = bottom) carries a tick label.

    Counted from the top so the topmost row is always labelled.
    """
    return (rows - 1 - r) % tick_stride == 0


def tick_label(row_floor: float, row_ceil: float, digits: int, draw: bool) -> str:
    """Tick column text for one row, right-aligned to ``digits`` characters."""
    if not draw:
        return " " * digits
    # Midpoint of the row's range, rounded down
    value = int(math.floor(0.5 * (row_floor + row_ceil)))
    return str(value).rjust(digits)


def render_rows(
    model: LetterHistogram,
    config: RenderConfig,
    glyphs: Optional[GlyphConfig] = None,
) -> List[str]:
    """Render the chart body, one line per row, top row first."""
    glyphs = glyphs or DEFAULT_GLYPH_CONFIG
    digits = tick_digits(model.peak)
    markers = np.array([glyphs.blank, glyphs.filled])

    lines: List[str] = []
    for r in reversed(range(config.rows)):
        row_floor, row_ceil = row_bounds(r, config.rows, model.peak)
        tick = tick_label(
            row_floor, row_ceil, digits, draws_tick(r, config.rows, config.tick_stride)
        )
        filled = model.counts > row_floor
        bars = "".join(markers[filled.astype(np.intp)])
        lines.append(f"{tick}{glyphs.vertical_axis}{bars}")
    return lines


def render_footer(peak: int, glyphs: Optional[GlyphConfig] = None) -> List[str]:
    """Render the horizontal axis line and the alphabet label line."""
    glyphs = glyphs or DEFAULT_GLYPH_CONFIG
    pad = " " * tick_digits(peak)
    return [
        f"{pad}{glyphs.corner}{glyphs.horizontal_axis * len(ALPHABET)}",
        f"{pad}{glyphs.vertical_axis}{ALPHABET}",
    ]


def render_histogram(
    model: LetterHistogram,
    config: RenderConfig,
    glyphs: Optional[GlyphConfig] = None,
) -> List[str]:
    """Render ``model`` as an ASCII bar chart.

    Args:
        model: Letter counts and peak
        config: Row count and tick stride (both >= 1)
        glyphs: Characters used to draw bars and axes (defaults to ``*``, `` ``,
            ``|``, ``-``, ``+``)

    Returns:
        List of ``config.rows`` chart lines followed by the two footer lines
    """
    return render_rows(model, config, glyphs) + render_footer(model.peak, glyphs)
