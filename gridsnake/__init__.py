"""A grid-based snake arcade game: board rules, rendering, scores and a pygame window."""

__version__ = "1.0.0"