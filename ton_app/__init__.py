"""TON API backend: authentication and product catalog over a single-table store."""

__version__ = "1.0.0"
