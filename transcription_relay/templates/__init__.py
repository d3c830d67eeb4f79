"""Inline HTML templates served by the relay."""

from .index import INDEX_PAGE

__all__ = ["INDEX_PAGE"]
