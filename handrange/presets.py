import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from handrange.ranges import RangeSets, parse_range_expression

DATA_DIR = Path(__file__).parent / "data"

_cache: dict[str, dict] = {}


def _load_presets() -> dict:
    if "presets" in _cache:
        return _cache["presets"]
    with open(DATA_DIR / "presets.json", encoding="utf-8") as f:
        _cache["presets"] = json.load(f)
    return _cache["presets"]


@dataclass
class PresetRow:
    label: str
    range: str

    @property
    def sets(self) -> RangeSets:
        return parse_range_expression(self.range)


@dataclass
class Spot:
    key: str
    calls: list[PresetRow] = field(default_factory=list)
    threebets: list[PresetRow] = field(default_factory=list)

    def rows(self) -> list[PresetRow]:
        return self.calls + self.threebets

    def ranges(self) -> Iterator[tuple[str, RangeSets]]:
        for row in self.rows():
            yield row.label, row.sets


def default_spot_key() -> str:
    return _load_presets()["default"]


def list_spots() -> list[str]:
    return list(_load_presets()["spots"])


def get_spot(key: Optional[str] = None) -> Spot:
    data = _load_presets()
    key = key or data["default"]
    if key not in data["spots"]:
        raise KeyError(f"No preset ranges for spot: {key}")
    slot = data["spots"][key]
    return Spot(
        key=key,
        calls=[PresetRow(**row) for row in slot.get("calls", [])],
        threebets=[PresetRow(**row) for row in slot.get("threebets", [])],
    )
