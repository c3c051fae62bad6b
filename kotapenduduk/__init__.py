"""A register of cities and their residents, with an interactive text menu."""

__version__ = "0.1.0"
__all__ = ["city", "linkedlist", "menu"]