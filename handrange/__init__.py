"""handrange - poker hand-range notation parser and 13x13 matrix classifier."""

__version__ = "1.0.0"

from .cells import RANKS, cell_code, cell_position, rank_index
from .errors import RangeSyntaxError
from .matrix import CellStyle, Highlight, classify_cell, range_classifier, range_highlight
from .ranges import RangeSets, parse_range, parse_range_expression

__all__ = [
    "RANKS",
    "CellStyle",
    "Highlight",
    "RangeSets",
    "RangeSyntaxError",
    "cell_code",
    "cell_position",
    "classify_cell",
    "parse_range",
    "parse_range_expression",
    "range_classifier",
    "range_highlight",
    "rank_index",
]
