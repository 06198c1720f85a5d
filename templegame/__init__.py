"""A small side-scrolling action game built on pygame: scenes, player, enemies, bosses."""

__version__ = "0.1.0"
__all__ = ["__version__"]