"""Terminal styles and colour themes built from LS_COLORS and EXA_COLORS strings."""

__version__ = "0.1.0"