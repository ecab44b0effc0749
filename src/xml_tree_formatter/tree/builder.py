"""Node tree construction for XML tree formatting.

This module converts a parsed lxml element into a tree of ``XmlNode`` objects.
Only elements become nodes; text directly under an element is trimmed and
folded into that element's ``content``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from lxml import etree

from xml_tree_formatter.parsing.nodes import (
    element_attributes,
    is_element,
    is_text,
    iter_child_nodes,
    qualified_name,
)
from xml_tree_formatter.shared import TreeConfig, get_logger


@dataclass
class XmlNode:
    """Represents a single XML element in the node tree.

    ``id`` is derived from the element's position among element siblings along
    the path from the root, so it is stable across repeated parses of the same
    document and unique within one tree.
    """

    name: str
    id: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["XmlNode"] = field(default_factory=list)
    content: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate node values."""
        if not self.name:
            raise ValueError("Node name cannot be empty")
        if not self.id:
            raise ValueError("Node id cannot be empty")

    @property
    def is_leaf(self) -> bool:
        """Check if this node has no element children."""
        return not self.children

    def iter_nodes(self) -> Iterator["XmlNode"]:
        """Iterate this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def find(self, name: str) -> Optional["XmlNode"]:
        """Find the first descendant (or self) with the given name."""
        return next((node for node in self.iter_nodes() if node.name == name), None)

    def get_node_by_id(self, node_id: str) -> Optional["XmlNode"]:
        """Find the node with the given id in this subtree."""
        return next((node for node in self.iter_nodes() if node.id == node_id), None)

    def to_dict(self) -> Dict[str, Any]:
        """Convert node to dictionary format.

        ``content`` is omitted when absent.
        """
        result: Dict[str, Any] = {
            "name": self.name,
            "attributes": dict(self.attributes),
            "children": [child.to_dict() for child in self.children],
            "id": self.id,
        }
        if self.content is not None:
            result["content"] = self.content
        return result


class XmlTreeBuilder:
    """Builds ``XmlNode`` trees from parsed lxml elements."""

    def __init__(
        self,
        config: Optional[TreeConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the tree builder.

        Args:
            config: Tree configuration (id token and separator)
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or TreeConfig()
        self.logger = get_logger(__name__, correlation_id, "tree_builder")

    def build(self, element: etree._Element) -> XmlNode:
        """Build the node tree rooted at ``element``.

        Args:
            element: Parsed root element

        Returns:
            Root ``XmlNode`` with id equal to the configured root token
        """
        root = self._build_node(element, self.config.root_id)
        self.logger.debug(
            "Tree built",
            extra={"root": root.name, "node_count": sum(1 for _ in root.iter_nodes())}
        )
        return root

    def _build_node(self, element: etree._Element, node_id: str) -> XmlNode:
        attributes = dict(element_attributes(element))
        children: List[XmlNode] = []
        content = ""

        child_index = 0
        for child in iter_child_nodes(element):
            if is_element(child):
                child_id = f"{node_id}{self.config.id_separator}{child_index}"
                children.append(self._build_node(child, child_id))
                child_index += 1
            elif is_text(child):
                text = child.strip()
                if text:
                    content += text

        return XmlNode(
            name=qualified_name(element),
            id=node_id,
            attributes=attributes,
            children=children,
            content=content or None,
        )


def build_tree(
    element: etree._Element,
    config: Optional[TreeConfig] = None
) -> XmlNode:
    """Build the ``XmlNode`` tree rooted at ``element``."""
    return XmlTreeBuilder(config).build(element)
