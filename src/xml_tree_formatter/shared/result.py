"""Result objects for XML tree formatting.

``ParsingResult`` is the single envelope returned from every parse call: either a
formatted string plus node tree, or an error message, never both.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from xml_tree_formatter.tree.builder import XmlNode

XML_SYNTAX_ERROR_MESSAGE = "XML 解析错误，请检查语法是否正确。"
UNKNOWN_ERROR_MESSAGE = "未知解析错误"


@dataclass
class ParsingResult:
    """Outcome of a single parse call."""

    formatted_xml: str = ""
    root_node: Optional["XmlNode"] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate that success and failure signals are not mixed."""
        if self.error is not None:
            if self.root_node is not None or self.formatted_xml:
                raise ValueError("Failed result cannot carry a tree or formatted text")
        elif self.root_node is None:
            raise ValueError("Successful result requires a root node")

    @property
    def success(self) -> bool:
        """Check if parsing succeeded."""
        return self.error is None

    @classmethod
    def failure(cls, message: Optional[str]) -> "ParsingResult":
        """Create the failure shape carrying ``message``."""
        return cls(formatted_xml="", root_node=None, error=message or UNKNOWN_ERROR_MESSAGE)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a JSON-ready dictionary."""
        return {
            "formattedXml": self.formatted_xml,
            "rootNode": self.root_node.to_dict() if self.root_node else None,
            "error": self.error,
        }
