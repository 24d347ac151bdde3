"""A tile-based side-scrolling platformer with skeletons, fire spirits and a werewolf boss."""

__version__ = "0.1.0"