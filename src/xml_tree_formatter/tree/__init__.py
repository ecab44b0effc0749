"""Tree building layer producing ``XmlNode`` structures."""

from .builder import XmlNode, XmlTreeBuilder, build_tree

__all__ = [
    "XmlNode",
    "XmlTreeBuilder",
    "build_tree",
]
