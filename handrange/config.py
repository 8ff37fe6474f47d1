"""Application configuration for handrange."""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

logger = logging.getLogger(__name__)


@dataclass
class HighlightConfig:
    """Colors used when painting the 13x13 matrix (any rich color name)."""

    base_color: str = "grey37"
    emphasize_color: str = "dark_orange3"


@dataclass
class ParserConfig:
    strict: bool = False


@dataclass
class Config:
    highlight: HighlightConfig = field(default_factory=HighlightConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from the first file found, falling back to defaults."""
        config_paths = [
            Path.cwd() / "handrange.toml",
            Path.cwd() / ".handrange.toml",
            Path.home() / ".config" / "handrange" / "config.toml",
            Path.home() / ".handrange.toml",
        ]

        for path in config_paths:
            if path.exists():
                logger.debug("Loading config from %s", path)
                return cls.from_file(path)

        return cls()

    @classmethod
    def from_file(cls, path: Path) -> Self:
        with open(path, "rb") as f:
            data = tomllib.load(f)

        hl_data = data.get("highlight", {})
        highlight = HighlightConfig(
            base_color=hl_data.get("base_color", HighlightConfig.base_color),
            emphasize_color=hl_data.get("emphasize_color", HighlightConfig.emphasize_color),
        )

        parser_data = data.get("parser", {})
        parser = ParserConfig(strict=bool(parser_data.get("strict", False)))

        return cls(highlight=highlight, parser=parser)


_config: Config | None = None


def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config.load()
    return _config
