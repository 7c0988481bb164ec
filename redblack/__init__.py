"""A red-black tree of comparable keys, in the ``tree`` module."""

__version__ = "0.1.0"
__all__ = ["tree"]