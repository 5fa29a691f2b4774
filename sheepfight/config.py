"""Game constants, sheep kinds and lane geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

WIDTH = 1245
HEIGHT = 695
FRAME_RATE = 144

OFFSET = 95
SPACING = 60
LINECOUNT = 4
LINEHEIGHT = 85
TOTAL_SHEEP_IN_QUEUE = 100

COOLDOWN_MS = 1000
INITIAL_HEALTH = 400
CONSTANT_SPEED = 1

SPRITE_SCALE = 0.35
DEFAULT_TEXTURE_SIZE = (256, 256)

WHITE_SPAWN_X = 140
BLACK_SPAWN_X = 1025
WHITE_GOAL_X = 1030
BLACK_GOAL_X = 130
WHITE_HOME_X = 130
BLACK_HOME_X = 1030

WHITE_MARKER_X = 160
BLACK_MARKER_X = 1092
MARKER_WIDTH = 20

PICS_DIR = "files/pics"
AUDIO_DIR = "files/audio"
FONTS_DIR = "files/fonts"
MENU_IMAGE = "menu.png"
BACKGROUND_IMAGE = "background.png"
WHITE_VICTORY_IMAGE = "White_Sheep_Win_Resized_Corrected.png"
BLACK_VICTORY_IMAGE = "Black_Sheep_Win_Resized-1.png"
MUSIC_FILE = "03. Choose Your Seeds.flac"
FONT_FILE = "KaiseiDecol-Medium.ttf"


@dataclass(frozen=True)
class SheepConfig:
    """One kind of sheep: its damage, pushing strength, draw chance and image."""

    name: str
    damage: int
    strength: int
    display_prob: float
    image: str


WHITE_SHEEP: tuple[SheepConfig, ...] = (
    SheepConfig("Timmy", 50, 50, 0.5, "timmy.png"),
    SheepConfig("Shaun", 30, 150, 0.3, "shaun.png"),
    SheepConfig("Meow", 10, 250, 0.2, "meow.png"),
)

BLACK_SHEEP: tuple[SheepConfig, ...] = (
    SheepConfig("Timmyblack", 50, -50, 0.5, "timmyblack.png"),
    SheepConfig("Shaunblack", 30, -150, 0.3, "shaunblack.png"),
    SheepConfig("Meowblack", 10, -250, 0.2, "meowblack.png"),
)


def pick_weighted(configs: Sequence[SheepConfig], r: float) -> Optional[SheepConfig]:
    """Return the first config whose cumulative probability reaches ``r``, or None."""
    cumulative = 0.0
    for config in configs:
        cumulative += config.display_prob
        if r <= cumulative:
            return config
    return None


def _lane_top(line: int) -> int:
    return OFFSET + line * (LINEHEIGHT + SPACING)


def lane_spawn_y(line: int) -> int:
    """Vertical position at which a sheep enters the given lane."""
    return OFFSET // 2 + line * (LINEHEIGHT + SPACING) + 2 * LINEHEIGHT // 3


def lane_marker(
    line: int, start_x: float, direction: int
) -> tuple[tuple[float, float], tuple[float, float], tuple[float, float]]:
    """Triangle marking a lane; ``direction`` is +1 to point right, -1 to point left."""
    top = _lane_top(line)
    return (
        (start_x, top),
        (start_x + direction * MARKER_WIDTH, top + LINEHEIGHT // 2),
        (start_x, top + LINEHEIGHT),
    )