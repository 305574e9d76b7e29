"""A grid-based snake arcade game with classic, survival and time-limit modes."""

__version__ = "0.1.0"