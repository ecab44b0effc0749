"""XML Tree Formatter.

Turns raw XML text into a canonical pretty-printed string and a tree of typed
nodes for interactive rendering, with a single deterministic failure shape for
malformed input.

Progressive API Disclosure:
- Level 1: Simple function - parse_xml()
- Level 2: Configured formatter - XmlTreeFormatter class with Config
- Level 3: Components - XmlParserAdapter, XmlStringFormatter, XmlTreeBuilder
"""

__version__ = "0.1.0"
__author__ = "XML Tree Formatter Team"

# Level 1 and Level 2
from .api import XmlTreeFormatter, parse_xml

# Level 3: individual components
from .formatting import XmlStringFormatter, format_element
from .parsing import ParseFailure, XmlParserAdapter

# Configuration and result objects
from .shared.config import Config, ConfigError, ConfigValidationError
from .shared.result import (
    UNKNOWN_ERROR_MESSAGE,
    XML_SYNTAX_ERROR_MESSAGE,
    ParsingResult,
)
from .tree import XmlNode, XmlTreeBuilder, build_tree

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing function
    "parse_xml",

    # Level 2: Configured formatter
    "XmlTreeFormatter",

    # Level 3: Components
    "XmlParserAdapter",
    "XmlStringFormatter",
    "XmlTreeBuilder",
    "ParseFailure",
    "format_element",
    "build_tree",

    # Result objects and data structures
    "ParsingResult",
    "XmlNode",
    "UNKNOWN_ERROR_MESSAGE",
    "XML_SYNTAX_ERROR_MESSAGE",

    # Configuration
    "Config",
    "ConfigError",
    "ConfigValidationError",
]
