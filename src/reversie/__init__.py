"""reversie: reversi with bomb and immune discs."""

__version__ = "0.1.0"
