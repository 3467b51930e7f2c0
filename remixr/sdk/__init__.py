"""
remixr SDK - High-level API for page inspection.
"""

from .inspector import PageInspector, inspect

__all__ = [
    "PageInspector",
    "inspect",
]
