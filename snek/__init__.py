"""A grid-based snake game: board rules in ``board``, window and drawing in ``app``."""

__version__ = "1.0.0"
__all__ = ["board", "app"]