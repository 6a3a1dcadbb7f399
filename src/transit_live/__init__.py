"""HERE transit routing enriched with live Trenitalia delays."""

__version__ = "0.1.0"
