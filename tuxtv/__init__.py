"""TV channel catalog, logos, recordings and formatting helpers for a stream viewer."""

__version__ = "0.1.0"