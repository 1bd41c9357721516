"""Convert Goodreads library exports into shelf-partitioned documents."""

__version__ = "0.1.0"
