"""UK National Rail departure board widget."""

__version__ = "0.1.0"
