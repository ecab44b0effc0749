"""Canonical indented string rendering of a parsed XML document.

Each element renders in one of three shapes:

- no child nodes at all: ``<name attrs />``
- text but no element children: ``<name attrs>text</name>`` on one line
- element children: opening tag, one line per child one level deeper, closing tag

Consumers compare this output byte for byte, so the shapes above must not drift.
"""

from typing import List, Optional

from lxml import etree

from xml_tree_formatter.parsing.nodes import (
    ChildNode,
    element_attributes,
    is_element,
    is_text,
    iter_child_nodes,
    qualified_name,
)
from xml_tree_formatter.shared import FormatterConfig, get_logger


class XmlStringFormatter:
    """Render lxml elements as canonical indented text."""

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the formatter.

        Args:
            config: Formatter configuration (indent unit, mixed text handling)
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or FormatterConfig()
        self.logger = get_logger(__name__, correlation_id, "string_formatter")

    def format(self, element: etree._Element, indent_level: int = 0) -> str:
        """Render ``element`` and its descendants.

        Args:
            element: Root of the subtree to render
            indent_level: Nesting level of ``element``

        Returns:
            Rendered text without a trailing newline
        """
        formatted = self._format_node(element, indent_level)
        self.logger.debug(
            "Formatted element",
            extra={"tag": qualified_name(element), "length": len(formatted)}
        )
        return formatted

    def _format_node(self, node: ChildNode, indent_level: int) -> str:
        if is_text(node):
            return node.strip()
        if is_element(node):
            return self._format_element(node, indent_level)
        # Comments, processing instructions, entity references.
        return ""

    def _format_element(self, element: etree._Element, indent_level: int) -> str:
        indent = self.config.indent * indent_level
        name = qualified_name(element)
        attributes = "".join(
            f' {attr_name}="{value}"' for attr_name, value in element_attributes(element)
        )

        children = list(iter_child_nodes(element))
        has_element_children = any(is_element(child) for child in children)
        has_text_content = any(is_text(child) and child.strip() for child in children)

        if not children:
            return f"{indent}<{name}{attributes} />"

        if not has_element_children and has_text_content:
            text = "".join(child for child in children if is_text(child)).strip()
            return f"{indent}<{name}{attributes}>{text}</{name}>"

        if not self.config.keep_mixed_text:
            children = [child for child in children if is_element(child)]

        lines: List[str] = []
        for child in children:
            rendered = self._format_node(child, indent_level + 1)
            if rendered:
                lines.append(rendered)

        return f"{indent}<{name}{attributes}>\n" + "\n".join(lines) + f"\n{indent}</{name}>"


def format_element(
    element: etree._Element,
    indent_level: int = 0,
    config: Optional[FormatterConfig] = None
) -> str:
    """Render ``element`` as canonical indented text.

    Examples:
        >>> from lxml import etree
        >>> print(format_element(etree.fromstring('<a><b/><c>hi</c></a>')))
        <a>
          <b />
          <c>hi</c>
        </a>
    """
    return XmlStringFormatter(config).format(element, indent_level)
