"""callsy - perform an HTTP request described by a JSON file."""

__version__ = "0.1.0"

__all__ = ["__version__"]
