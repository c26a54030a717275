"""General-purpose utilities: optional values, cursor iterators, checked containers, a mutable string and console helpers."""

__version__ = "0.1.0"