"""Solutions to the 2024 advent puzzles, days 1 to 20, one module per day."""

__version__ = "0.1.0"