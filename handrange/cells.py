from typing import Iterable, Optional

RANKS = "AKQJT98765432"
RANK_INDEX = {r: i for i, r in enumerate(RANKS)}
SUFFIXES = "so"
TOTAL_COMBOS = 1326


def rank_index(rank: str) -> Optional[int]:
    return RANK_INDEX.get(rank.upper()) if len(rank) == 1 else None


def pair_code(rank: str) -> str:
    return f"{rank}{rank}"


def combo_code(high: str, low: str, suffix: str) -> str:
    return f"{high}{low}{suffix}"


def cell_code(row: int, col: int) -> str:
    if not (0 <= row < 13 and 0 <= col < 13):
        raise ValueError(f"Matrix position out of range: {(row, col)}")
    if row == col:
        return pair_code(RANKS[row])
    if row < col:
        return combo_code(RANKS[row], RANKS[col], "s")
    return combo_code(RANKS[col], RANKS[row], "o")


def cell_position(code: str) -> tuple[int, int]:
    if not is_cell_code(code):
        raise ValueError(f"Invalid cell code: {code}")
    hi, lo = RANK_INDEX[code[0]], RANK_INDEX[code[1]]
    if len(code) == 2:
        return (hi, hi)
    if code[2] == "s":
        return (hi, lo)
    return (lo, hi)


def is_cell_code(code: str) -> bool:
    """True for 'AA', 'AKs', 'AKo'; False for reversed or lowercase forms."""
    if len(code) == 2:
        return code[0] in RANK_INDEX and code[0] == code[1]
    if len(code) == 3:
        hi, lo = RANK_INDEX.get(code[0]), RANK_INDEX.get(code[1])
        if hi is None or lo is None or code[2] not in SUFFIXES:
            return False
        return hi < lo
    return False


ALL_CODES = [cell_code(r, c) for r in range(13) for c in range(13)]


def sort_codes(codes: Iterable[str]) -> list[str]:
    return sorted(codes, key=cell_position)


def combo_count(code: str) -> int:
    if len(code) == 2 and code[0] == code[1]:
        return 6
    if len(code) == 3:
        if code[2] == "s":
            return 4
        if code[2] == "o":
            return 12
    return 0


def total_combos(codes: Iterable[str]) -> int:
    return sum(combo_count(c) for c in codes)


def range_pct(codes: Iterable[str]) -> float:
    return total_combos(codes) / TOTAL_COMBOS * 100


# ── Expansion ───────────────────────────────────────────────
# Indices grow toward weaker ranks; every helper returns [] when a rank
# is outside RANKS or the shape would produce a malformed code.


def expand_pair_plus(rank: str) -> list[str]:
    i = rank_index(rank)
    if i is None:
        return []
    return [pair_code(RANKS[k]) for k in range(i, -1, -1)]


def expand_pair_range(rank1: str, rank2: str) -> list[str]:
    a, b = rank_index(rank1), rank_index(rank2)
    if a is None or b is None:
        return []
    return [pair_code(RANKS[k]) for k in _walk(a, b)]


def expand_open_ended(high: str, low: str, suffix: str) -> list[str]:
    hi, lo = rank_index(high), rank_index(low)
    if hi is None or lo is None or hi >= lo or suffix not in SUFFIXES:
        return []
    return [combo_code(RANKS[hi], RANKS[k], suffix) for k in range(lo, hi, -1)]


def expand_dashed_range(hi1: str, lo1: str, hi2: str, lo2: str, suffix: str) -> list[str]:
    """Resolve 'KQo-KTo' (same high), 'K9s-T9s' (same low) and 'T9s-54s' (diagonal)."""
    idx = [rank_index(r) for r in (hi1, lo1, hi2, lo2)]
    if None in idx or suffix not in SUFFIXES:
        return []
    h1, l1, h2, l2 = idx

    if h1 == h2:
        pairs = [(h1, k) for k in _walk(l1, l2)]
    elif l1 == l2:
        pairs = [(k, l1) for k in _walk(h1, h2)]
    elif h2 - h1 == l2 - l1:
        step = 1 if h2 >= h1 else -1
        pairs = [(h1 + k * step, l1 + k * step) for k in range(abs(h2 - h1) + 1)]
    else:
        return []

    if any(h >= l for h, l in pairs):
        return []
    return [combo_code(RANKS[h], RANKS[l], suffix) for h, l in pairs]


def _walk(start: int, end: int) -> range:
    step = 1 if end >= start else -1
    return range(start, end + step, step)
