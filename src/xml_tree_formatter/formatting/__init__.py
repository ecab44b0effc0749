"""String formatting layer producing the canonical indented XML text."""

from .formatter import XmlStringFormatter, format_element

__all__ = [
    "XmlStringFormatter",
    "format_element",
]
