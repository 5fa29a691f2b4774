"""Main menu, keyboard handling and the game loop."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from .config import (
    AUDIO_DIR,
    BACKGROUND_IMAGE,
    DEFAULT_TEXTURE_SIZE,
    FONT_FILE,
    FONTS_DIR,
    FRAME_RATE,
    HEIGHT,
    MENU_IMAGE,
    MUSIC_FILE,
    PICS_DIR,
    WHITE_SHEEP,
    WIDTH,
)
from .game import Game, GameState, Team
from .render import Assets, draw_game
from .sheep import Rect

BUTTON_WIDTH = 350
BUTTON_HEIGHT = 70
HEALTH_FONT_SIZE = 24
MUSIC_VOLUME = 0.5
GAME_WINDOW_EXTRA_WIDTH = 20
MENU_CAPTION = "Main Menu and Game"
GAME_CAPTION = "SHEEP FIGHT"


def _load_image(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError) as exc:
        raise FileNotFoundError(f"Failed to load image: {path}") from exc


def _present(surface: pygame.Surface) -> None:
    if pygame.display.get_init() and pygame.display.get_surface() is surface:
        pygame.display.flip()


class MainMenu:
    """Title screen with a start button over a background picture."""

    def __init__(self, width: int, height: int, background: pygame.Surface) -> None:
        self.width = width
        self.height = height
        self.background = pygame.transform.scale(background, (width, height))
        self.button = Rect(
            width // 2 - 180, height // 2 + 230, BUTTON_WIDTH, BUTTON_HEIGHT
        )
        self.started = False
        self.closed = False

    def handle_event(self, event: pygame.event.Event) -> None:
        """Close on a quit request; start when the button is clicked."""
        if event.type == pygame.QUIT:
            self.closed = True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            if self.button.contains(x, y):
                self.started = True

    def render(self, surface: pygame.Surface) -> None:
        """Draw the menu background; the button itself is transparent."""
        surface.fill((0, 0, 0))
        surface.blit(self.background, (0, 0))

    def run(self, surface: pygame.Surface) -> bool:
        """Show the menu until the game is started or the window closed."""
        while not self.closed and not self.started:
            for event in pygame.event.get():
                self.handle_event(event)
            self.render(surface)
            _present(surface)
        if self.started:
            surface.fill((0, 0, 0))
            _present(surface)
        return self.started


def handle_game_key(game: Game, key: int) -> None:
    """Apply one key press to the game."""
    if key == pygame.K_ESCAPE:
        game.state = GameState.EXIT
    elif key == pygame.K_UP:
        game.select_up(Team.WHITE)
    elif key == pygame.K_DOWN:
        game.select_down(Team.WHITE)
    elif key == pygame.K_w:
        game.select_up(Team.BLACK)
    elif key == pygame.K_s:
        game.select_down(Team.BLACK)
    elif key == pygame.K_RETURN:
        game.spawn(Team.WHITE)
    elif key == pygame.K_SPACE:
        game.spawn(Team.BLACK)


def _require_file(path: Path, what: str) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"Failed to load {what}: {path}")
    return path


def _start_music(path: Path) -> None:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.set_volume(MUSIC_VOLUME)
        pygame.mixer.music.play(loops=-1)
    except pygame.error as exc:
        raise RuntimeError("Failed to load background music!") from exc


def run_game(assets: Assets) -> None:
    """Open the game window and play until it is closed."""
    _require_file(assets.pics_dir / BACKGROUND_IMAGE, "background image")
    font_path = _require_file(Path(FONTS_DIR) / FONT_FILE, "font")
    music_path = _require_file(Path(AUDIO_DIR) / MUSIC_FILE, "background music")

    pygame.init()
    window = pygame.display.set_mode((WIDTH + GAME_WINDOW_EXTRA_WIDTH, HEIGHT))
    pygame.display.set_caption(GAME_CAPTION)
    font = pygame.font.Font(str(font_path), HEALTH_FONT_SIZE)

    sample = assets.sheep_image(WHITE_SHEEP[0])
    texture_size = sample.get_size() if sample is not None else DEFAULT_TEXTURE_SIZE
    game = Game(texture_size=texture_size)

    _start_music(music_path)
    clock = pygame.time.Clock()
    while game.state is not GameState.EXIT:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.state = GameState.EXIT
            elif event.type == pygame.KEYDOWN:
                handle_game_key(game, event.key)
        if game.state is GameState.EXIT:
            break
        game.update()
        draw_game(window, game, assets, font)
        pygame.display.flip()
        clock.tick(FRAME_RATE)
    pygame.mixer.music.stop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the main menu, then run the game if it was started."""
    parser = argparse.ArgumentParser(prog="sheepfight", description="Sheep Fight.")
    parser.add_argument(
        "--pics-dir", default=PICS_DIR, help="directory holding the game pictures"
    )
    args = parser.parse_args(argv)

    pics_dir: Union[str, Path] = args.pics_dir
    background = _load_image(Path(pics_dir) / MENU_IMAGE)

    pygame.init()
    try:
        window = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(MENU_CAPTION)
        menu = MainMenu(WIDTH, HEIGHT, background)
        if menu.run(window):
            run_game(Assets(pics_dir))
    finally:
        pygame.quit()
    return 0