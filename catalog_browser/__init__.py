"""Catalog Browser - product catalog browsing with staged filters and sorting."""

__version__ = "0.1.0"
