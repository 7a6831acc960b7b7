"""Golf tours: Stableford, match play y Ryder Cup."""

__version__ = "0.1.0"
