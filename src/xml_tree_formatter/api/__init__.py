"""Public parse API for XML tree formatting."""

from .parser import XmlTreeFormatter, parse_xml

__all__ = [
    "XmlTreeFormatter",
    "parse_xml",
]
