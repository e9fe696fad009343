"""WhereTech: terrain grid exploration with random creature encounters."""

__version__ = "0.1.0"
