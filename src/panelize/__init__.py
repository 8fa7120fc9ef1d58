"""Panelize - best-fit panel layouts for detected wall segments."""

__version__ = "0.1.0"
