from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from handrange.cells import RANKS, cell_code
from handrange.config import get_config
from handrange.ranges import RangeSets, parse_range_expression


class Highlight(Enum):
    NONE = "none"
    BASE = "base"
    EMPHASIZED = "emphasized"


@dataclass(frozen=True)
class CellStyle:
    background: Optional[str] = None
    foreground: Optional[str] = None
    bold: bool = False

    @property
    def rich_style(self) -> str:
        parts = []
        if self.bold:
            parts.append("bold")
        if self.foreground:
            parts.append(self.foreground)
        if self.background:
            parts.append(f"on {self.background}")
        return " ".join(parts)


def classify_code(sets: RangeSets, code: str) -> Highlight:
    if code in sets.emph:
        return Highlight.EMPHASIZED
    if code in sets.base:
        return Highlight.BASE
    return Highlight.NONE


def classify_cell(sets: RangeSets, row: int, col: int) -> Highlight:
    return classify_code(sets, cell_code(row, col))


def range_classifier(spec: str) -> Callable[[int, int], Highlight]:
    sets = parse_range_expression(spec)

    def classify(row: int, col: int) -> Highlight:
        return classify_cell(sets, row, col)

    return classify


def range_highlight(
    spec: str,
    base_color: Optional[str] = None,
    emphasize_color: Optional[str] = None,
) -> Callable[[str], CellStyle]:
    """Return a cell-code -> CellStyle function for painting a range.

    Emphasized cells get ``emphasize_color`` with a light foreground, base
    cells get ``base_color``; unselected cells get an empty style. Colors
    default to the ``[highlight]`` config section.
    """
    colors = get_config().highlight
    base_style = CellStyle(background=base_color or colors.base_color, bold=True)
    emph_style = CellStyle(
        background=emphasize_color or colors.emphasize_color,
        foreground="white",
        bold=True,
    )
    sets = parse_range_expression(spec)
    styles = {
        Highlight.EMPHASIZED: emph_style,
        Highlight.BASE: base_style,
        Highlight.NONE: CellStyle(),
    }

    def style(code: str) -> CellStyle:
        return styles[classify_code(sets, code)]

    return style


def highlight_grid(spec: str) -> list[list[Highlight]]:
    sets = parse_range_expression(spec)
    return [[classify_cell(sets, r, c) for c in range(len(RANKS))]
            for r in range(len(RANKS))]
