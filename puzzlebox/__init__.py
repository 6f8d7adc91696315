"""Solutions to classic programming puzzles and quick coding challenges."""

__version__ = "0.1.0"