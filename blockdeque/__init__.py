"""A double-ended queue stored in fixed-size blocks, and a small greeting command."""

__version__ = "0.1.0"
__all__ = ["deque", "cli"]