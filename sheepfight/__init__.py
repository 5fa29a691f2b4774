"""Two-player lane-pushing sheep battle game: rules, drawing and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["config", "sheep", "game", "render", "app"]