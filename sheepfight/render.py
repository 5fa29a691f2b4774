"""Drawing the playing field, sheep, queue previews and victory screens."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pygame

from .config import (
    BACKGROUND_IMAGE,
    BLACK_MARKER_X,
    BLACK_VICTORY_IMAGE,
    LINECOUNT,
    PICS_DIR,
    SPRITE_SCALE,
    WHITE_MARKER_X,
    WHITE_VICTORY_IMAGE,
    SheepConfig,
    lane_marker,
)
from .game import PREVIEW_SIZE, Game, GameState, Team

logger = logging.getLogger(__name__)

HIGHLIGHT_COLOR = (255, 255, 255, 100)
HEALTH_FILL = (0, 255, 0)
HEALTH_OUTLINE = (0, 0, 0)
HEALTH_TEXT_COLOR = (0, 0, 0)
HEALTH_RADIUS = 25
HEALTH_CIRCLE_POS = {Team.WHITE: (30, 327), Team.BLACK: (1137, 327)}
HEALTH_TEXT_POS = {Team.WHITE: (34, 337), Team.BLACK: (1141, 337)}

PREVIEW_RADIUS = 25
PREVIEW_OUTLINE = 2
PREVIEW_SPACING = 20
PREVIEW_Y = 33
_PREVIEW_START_X = {Team.WHITE: 230, Team.BLACK: 960}
_PREVIEW_STEP = {Team.WHITE: 1, Team.BLACK: -1}

_MARKERS = {Team.WHITE: (WHITE_MARKER_X, 1), Team.BLACK: (BLACK_MARKER_X, -1)}
_VICTORY_IMAGES = {
    GameState.WHITE_SHEEP_VICTORY: WHITE_VICTORY_IMAGE,
    GameState.BLACK_SHEEP_VICTORY: BLACK_VICTORY_IMAGE,
}


class Assets:
    """Images loaded from a picture directory, cached by name and size."""

    def __init__(self, pics_dir: Union[str, Path] = PICS_DIR) -> None:
        self.pics_dir = Path(pics_dir)
        self._images: dict[str, pygame.Surface] = {}
        self._scaled: dict[tuple[str, tuple[int, int]], pygame.Surface] = {}

    def _image(self, name: str) -> pygame.Surface:
        """Load an image, raising FileNotFoundError when it cannot be read."""
        cached = self._images.get(name)
        if cached is not None:
            return cached
        path = self.pics_dir / name
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError, OSError) as exc:
            raise FileNotFoundError(f"Failed to load image: {path}") from exc
        self._images[name] = image
        return image

    def _scaled_image(self, name: str, size: tuple[int, int]) -> pygame.Surface:
        key = (name, size)
        cached = self._scaled.get(key)
        if cached is None:
            cached = pygame.transform.scale(self._image(name), size)
            self._scaled[key] = cached
        return cached

    def sheep_image(self, config: SheepConfig) -> Optional[pygame.Surface]:
        """The sheep's image, or None (with a warning) when it cannot be loaded."""
        try:
            return self._image(config.image)
        except FileNotFoundError:
            logger.warning("Failed to load sheep texture: %s", self.pics_dir / config.image)
            return None


def preview_positions(team: Team) -> list[tuple[int, int]]:
    """Top-left corners of the queue preview slots for a team."""
    start = _PREVIEW_START_X[team]
    step = _PREVIEW_STEP[team] * (PREVIEW_RADIUS * 2 + PREVIEW_SPACING)
    return [(start + slot * step, PREVIEW_Y) for slot in range(PREVIEW_SIZE)]


def _draw_markers(surface: pygame.Surface, game: Game) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for team, (start_x, direction) in _MARKERS.items():
        line = game.current_line[team]
        if 0 <= line < LINECOUNT:
            pygame.draw.polygon(overlay, HIGHLIGHT_COLOR, lane_marker(line, start_x, direction))
    surface.blit(overlay, (0, 0))


def _draw_sheep(surface: pygame.Surface, game: Game, assets: Assets) -> None:
    for team in (Team.WHITE, Team.BLACK):
        for lane in game.lanes[team]:
            for sheep in lane:
                base = assets._image(sheep.config.image)
                width, height = base.get_size()
                size = (max(1, round(width * SPRITE_SCALE)), max(1, round(height * SPRITE_SCALE)))
                image = assets._scaled_image(sheep.config.image, size)
                surface.blit(image, (round(sheep.x), round(sheep.y)))


def _draw_previews(surface: pygame.Surface, game: Game, assets: Assets) -> None:
    side = 2 * (PREVIEW_RADIUS + PREVIEW_OUTLINE)
    for team in (Team.WHITE, Team.BLACK):
        for config, position in zip(game.queue_preview(team), preview_positions(team)):
            if assets.sheep_image(config) is None:
                continue
            surface.blit(assets._scaled_image(config.image, (side, side)), position)


def _draw_health(surface: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    for team in (Team.WHITE, Team.BLACK):
        x, y = HEALTH_CIRCLE_POS[team]
        center = (x + HEALTH_RADIUS, y + HEALTH_RADIUS)
        pygame.draw.circle(surface, HEALTH_FILL, center, HEALTH_RADIUS)
        pygame.draw.circle(surface, HEALTH_OUTLINE, center, HEALTH_RADIUS + 1, width=1)
        text = font.render(str(game.health[team]), True, HEALTH_TEXT_COLOR)
        surface.blit(text, HEALTH_TEXT_POS[team])


def draw_game(
    surface: pygame.Surface, game: Game, assets: Assets, font: pygame.font.Font
) -> None:
    """Draw one frame of the running game; victory states get their own screen."""
    if game.state in _VICTORY_IMAGES:
        draw_victory(surface, game, assets)
        return
    surface.fill((0, 0, 0))
    surface.blit(assets._image(BACKGROUND_IMAGE), (0, 0))
    _draw_markers(surface, game)
    _draw_sheep(surface, game, assets)
    _draw_previews(surface, game, assets)
    _draw_health(surface, game, font)


def draw_victory(surface: pygame.Surface, game: Game, assets: Assets) -> None:
    """Draw the winning team's picture centred on a black screen."""
    name = _VICTORY_IMAGES.get(game.state)
    if name is None:
        raise ValueError(f"no victory screen for state {game.state}")
    image = assets._image(name)
    surface.fill((0, 0, 0))
    width, height = surface.get_size()
    image_width, image_height = image.get_size()
    surface.blit(image, (width // 2 - image_width // 2, height // 2 - image_height // 2))