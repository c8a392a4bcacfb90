"""A text-mode space invaders game: console drawing, player, enemy fleet and game loop."""

__version__ = "0.1.0"
__all__ = ["console", "entities", "enemy", "game", "player"]