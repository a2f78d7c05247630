"""Parsers for user-supplied problem references."""

from .url_parser import URLParser

__all__ = ["URLParser"]
