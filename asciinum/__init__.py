"""Tokenizing of ASCII decimal number strings and parsing of fixed-width integers."""

__version__ = "8.2.5"

__all__ = ["decimal", "integer", "options", "swar"]