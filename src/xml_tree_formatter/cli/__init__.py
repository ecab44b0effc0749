"""Command-line interface module for XML Tree Formatter.

This module provides the xml-tree-formatter tool printing formatted XML, the
node tree, or the complete parsing result.
"""

from .main import main

__all__ = ["main"]
