"""Work Whiz validation and transformation backend."""

__version__ = "1.0.0"
