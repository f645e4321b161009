"""Path contraction and fish-style abbreviation for shell prompt directory segments."""

__version__ = "0.1.0"
__all__ = ["directory"]