"""Core parse API for XML tree formatting.

This module assembles the parser adapter, string formatter and tree builder
into a single never-fail operation: every call returns a ``ParsingResult``,
whatever the input.
"""

import time
from typing import Optional, Union

from xml_tree_formatter.formatting import XmlStringFormatter
from xml_tree_formatter.parsing import ParseFailure, XmlParserAdapter
from xml_tree_formatter.shared import Config, ParsingResult, get_logger
from xml_tree_formatter.tree import XmlTreeBuilder

InputType = Union[str, bytes]

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000  # Milliseconds per second conversion


class XmlTreeFormatter:
    """Configured parser producing formatted text and a node tree.

    Examples:
        >>> formatter = XmlTreeFormatter()
        >>> result = formatter.parse('<a x="1"><b/></a>')
        >>> print(result.formatted_xml)
        <a x="1">
          <b />
        </a>
        >>> result.root_node.children[0].id
        'root-0'
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the formatter.

        Args:
            config: Complete configuration; defaults apply when omitted
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or Config()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "xml_tree_formatter")

    def parse(self, xml_input: InputType) -> ParsingResult:
        """Parse ``xml_input`` into formatted text and a node tree.

        Args:
            xml_input: XML document text

        Returns:
            ParsingResult with either ``formatted_xml`` and ``root_node`` set,
            or ``error`` set
        """
        start_time = time.time()

        self.logger.info(
            "Starting parse operation",
            extra={
                "content_length": len(xml_input) if hasattr(xml_input, "__len__") else None,
                "preview": _preview(xml_input),
            }
        )

        try:
            self._check_input_size(xml_input)

            # Fresh components per call; nothing is shared between parses.
            adapter = XmlParserAdapter(self.config.engine, correlation_id=self.correlation_id)
            root = adapter.parse(xml_input)

            formatted_xml = XmlStringFormatter(
                self.config.formatter, self.correlation_id
            ).format(root)
            root_node = XmlTreeBuilder(self.config.tree, self.correlation_id).build(root)

        except ParseFailure as failure:
            self.logger.info(
                "Input rejected by parser adapter",
                extra={"error": failure.message, "details": failure.details}
            )
            return ParsingResult.failure(failure.message)

        except Exception as e:
            # Never-fail guarantee
            self.logger.exception(
                "Parse operation failed",
                extra={"processing_time_ms": (time.time() - start_time) * MS_PER_SECOND}
            )
            return ParsingResult.failure(str(e))

        self.logger.info(
            "Parse operation completed",
            extra={
                "root": root_node.name,
                "output_length": len(formatted_xml),
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            }
        )
        return ParsingResult(formatted_xml=formatted_xml, root_node=root_node, error=None)

    def _check_input_size(self, xml_input: InputType) -> None:
        limit = self.config.global_.max_input_size_bytes
        if limit is None:
            return
        if isinstance(xml_input, str):
            size = len(xml_input.encode("utf-8"))
        elif isinstance(xml_input, bytes):
            size = len(xml_input)
        else:
            return
        if size > limit:
            raise ParseFailure(
                f"Input exceeds maximum size of {limit} bytes",
                {"size": size, "limit": limit},
            )


def _preview(xml_input: InputType) -> str:
    text = xml_input if isinstance(xml_input, str) else repr(xml_input)
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH] + "..."
    return text


def parse_xml(
    xml_input: InputType,
    config: Optional[Config] = None,
    correlation_id: Optional[str] = None
) -> ParsingResult:
    """Parse XML text into canonical formatted text and a node tree.

    This is the primary entry point. It never raises: malformed input, blank
    input and internal faults all come back as a result with ``error`` set.

    Args:
        xml_input: XML document text
        config: Optional configuration
        correlation_id: Optional correlation ID for request tracking

    Returns:
        ParsingResult for the input

    Examples:
        >>> result = parse_xml('<a>hi</a>')
        >>> result.formatted_xml
        '<a>hi</a>'
        >>> result.root_node.content
        'hi'

        Malformed XML handling:
        >>> result = parse_xml('<a><b></a>')
        >>> result.success
        False
        >>> result.root_node is None
        True
    """
    return XmlTreeFormatter(config, correlation_id).parse(xml_input)
