import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from handrange.cells import (
    expand_dashed_range, expand_open_ended, expand_pair_plus, expand_pair_range,
    combo_code, pair_code, rank_index, sort_codes,
)
from handrange.errors import RangeSyntaxError

logger = logging.getLogger(__name__)

EMPHASIS_MARKER = "**"

_SEPARATORS = re.compile(r"[\s,]+")
_DASHES = str.maketrans({"–": "-", "—": "-"})

_R = "[AKQJT2-9]"
_SHAPES = [
    ("PAIR", re.compile(rf"^({_R})\1$")),
    ("PAIR_PLUS", re.compile(rf"^({_R})\1\+$")),
    ("PAIR_RANGE", re.compile(rf"^({_R})\1-({_R})\2$")),
    ("COMBO", re.compile(rf"^({_R})({_R})([SO])$")),
    ("COMBO_PLUS", re.compile(rf"^({_R})({_R})([SO])\+$")),
    ("COMBO_RANGE", re.compile(rf"^({_R})({_R})([SO])-({_R})({_R})\3$")),
]


class TokenShape(Enum):
    PAIR = "pair"
    PAIR_PLUS = "pair+"
    PAIR_RANGE = "pair-range"
    COMBO = "combo"
    COMBO_PLUS = "combo+"
    COMBO_RANGE = "combo-range"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    raw: str
    shape: TokenShape
    ranks: tuple[str, ...] = ()
    suffix: str = ""


@dataclass(frozen=True)
class RangeSets:
    """Result of parsing one range expression.

    ``emph`` is always a subset of ``base``. ``rejected`` lists the raw
    tokens that expanded to nothing, in input order.
    """

    base: frozenset[str]
    emph: frozenset[str]
    rejected: tuple[str, ...] = ()

    def __contains__(self, code: object) -> bool:
        return code in self.base


def tokenize(expression: str) -> list[str]:
    return [t for t in _SEPARATORS.split(expression.translate(_DASHES)) if t.strip()]


def classify_token(raw: str) -> Token:
    t = raw.strip().upper()
    for name, pattern in _SHAPES:
        m = pattern.match(t)
        if not m:
            continue
        shape = TokenShape[name]
        if shape is TokenShape.PAIR or shape is TokenShape.PAIR_PLUS:
            return Token(raw, shape, (m.group(1),))
        if shape is TokenShape.PAIR_RANGE:
            return Token(raw, shape, (m.group(1), m.group(2)))
        if shape is TokenShape.COMBO_RANGE:
            ranks = (m.group(1), m.group(2), m.group(4), m.group(5))
            if ranks[0] == ranks[1] or ranks[2] == ranks[3]:
                break
            return Token(raw, shape, ranks, m.group(3).lower())
        # suited/offsuit cannot be a pair
        if m.group(1) == m.group(2):
            break
        return Token(raw, shape, (m.group(1), m.group(2)), m.group(3).lower())
    return Token(raw, TokenShape.UNKNOWN)


def expand_token(token: Token) -> list[str]:
    shape, ranks, suffix = token.shape, token.ranks, token.suffix
    if shape is TokenShape.PAIR:
        return [pair_code(ranks[0])]
    if shape is TokenShape.PAIR_PLUS:
        return expand_pair_plus(ranks[0])
    if shape is TokenShape.PAIR_RANGE:
        return expand_pair_range(*ranks)
    if shape is TokenShape.COMBO:
        high, low = ranks
        if rank_index(high) > rank_index(low):
            high, low = low, high
        return [combo_code(high, low, suffix)]
    if shape is TokenShape.COMBO_PLUS:
        return expand_open_ended(*ranks, suffix)
    if shape is TokenShape.COMBO_RANGE:
        return expand_dashed_range(*ranks, suffix)
    return []


def split_emphasis(spec: str) -> tuple[str, str]:
    """Split ``spec`` into (base, emphasis) expressions.

    Segments between successive markers alternate base/emphasis, so
    ``"22+**JJ+**AKs**QQ**"`` emphasizes JJ+ and QQ. A dangling final
    marker leaves the trailing segment in base.
    """
    parts = spec.split(EMPHASIS_MARKER)
    if len(parts) % 2 == 0:
        parts[-2:] = [parts[-2] + "," + parts[-1]]
    base = ",".join(parts[0::2])
    emph = ",".join(parts[1::2])
    return base, emph


def _expand_expression(expression: str, out: set[str], rejected: list[str]) -> None:
    for raw in tokenize(expression):
        codes = expand_token(classify_token(raw))
        if not codes:
            logger.debug("Ignoring range token %r", raw)
            rejected.append(raw)
        out.update(codes)


@lru_cache(maxsize=512)
def parse_range_expression(spec: str, strict: bool = False) -> RangeSets:
    base_expr, emph_expr = split_emphasis(spec)
    base: set[str] = set()
    emph: set[str] = set()
    rejected: list[str] = []
    _expand_expression(base_expr, base, rejected)
    _expand_expression(emph_expr, emph, rejected)
    base |= emph

    if strict and rejected:
        raise RangeSyntaxError(tuple(rejected))
    return RangeSets(frozenset(base), frozenset(emph), tuple(rejected))


def parse_range(range_str: str) -> list[str]:
    return sort_codes(parse_range_expression(range_str).base)


def in_range(spec: str, code: str) -> bool:
    return code in parse_range_expression(spec).base
