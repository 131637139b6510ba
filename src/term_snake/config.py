"""Game configuration dataclasses."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Glyphs:
    """Characters used to draw each kind of tile."""

    wall: str = "#"
    floor: str = " "
    snake: str = "O"
    fruit: str = "@"

    def __post_init__(self) -> None:
        for name, glyph in asdict(self).items():
            if len(glyph) != 1:
                raise ValueError(f"Glyph '{name}' must be a single character.")


@dataclass(frozen=True)
class GameConfig:
    """Process parameters for a single game.

    Supports JSON serialization so a setup can be saved and replayed.
    """

    width: int = 32
    height: int = 32
    initial_length: int = 3
    start_x: int = 12
    start_y: int = 12
    tick_interval_ms: int = 100
    glyphs: Glyphs = field(default_factory=Glyphs)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError("width and height must each be at least 4.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")

        # The body extends in increasing x from the head.
        tail_x = self.start_x + self.initial_length - 1
        if not (
            1 <= self.start_x and tail_x <= self.width - 2
            and 1 <= self.start_y <= self.height - 2
        ):
            raise ValueError(
                "Initial snake does not fit inside the walls; "
                "adjust start_x/start_y or reduce initial_length."
            )

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        raw = dict(raw)
        glyph_data = raw.pop("glyphs", {})
        raw["glyphs"] = Glyphs(**glyph_data)
        return cls(**raw)
