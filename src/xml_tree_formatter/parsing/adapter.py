"""Parser adapter turning raw XML text into an lxml document root.

The adapter hides which lxml parser mode is in use. A strict parser reports
malformed input by raising ``XMLSyntaxError``; a recovering parser returns a
partial document and records the problems in its error log. Both reporting
styles are normalized into a single ``ParseFailure``.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from lxml import etree

from xml_tree_formatter.shared import (
    XML_SYNTAX_ERROR_MESSAGE,
    ParserEngineConfig,
    get_logger,
)

InputType = Union[str, bytes]


class ParseFailure(Exception):
    """Raised when input cannot be turned into a document with one root element."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


@dataclass
class EngineError:
    """Single error reported by a parser engine."""

    message: str
    line: int = 0
    column: int = 0
    level: int = etree.ErrorLevels.ERROR

    @classmethod
    def from_log_entry(cls, entry: Any) -> "EngineError":
        """Create from an lxml ``_LogEntry``."""
        return cls(
            message=entry.message,
            line=entry.line,
            column=entry.column,
            level=entry.level,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for diagnostics."""
        return {
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "level": self.level,
        }


@dataclass
class EngineOutcome:
    """What a parser engine produced for one input."""

    root: Optional[etree._Element]
    errors: List[EngineError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check if the engine recorded any error-level diagnostics."""
        return any(error.level >= etree.ErrorLevels.ERROR for error in self.errors)


class ParserEngine(ABC):
    """Abstract base class for XML parser engines."""

    name = "engine"

    def __init__(self, config: Optional[ParserEngineConfig] = None) -> None:
        self.config = config or ParserEngineConfig()

    def _create_parser(self, recover: bool, encoding: Optional[str]) -> etree.XMLParser:
        # One parser per call; error logs must not leak between calls.
        return etree.XMLParser(
            encoding=encoding,
            recover=recover,
            resolve_entities=self.config.resolve_entities,
            huge_tree=self.config.huge_tree,
            remove_blank_text=self.config.remove_blank_text,
            load_dtd=False,
            dtd_validation=False,
            no_network=True,
        )

    @abstractmethod
    def parse(self, data: bytes, encoding: Optional[str]) -> EngineOutcome:
        """Parse ``data`` and return the engine outcome.

        Engines may raise ``lxml.etree.XMLSyntaxError`` instead of reporting
        errors in the outcome.
        """


class LxmlEngine(ParserEngine):
    """Engine backed by ``lxml.etree.fromstring``."""

    recover = False

    def parse(self, data: bytes, encoding: Optional[str]) -> EngineOutcome:
        parser = self._create_parser(recover=self.recover, encoding=encoding)
        root = etree.fromstring(data, parser)
        return EngineOutcome(
            root=root,
            errors=[EngineError.from_log_entry(entry) for entry in parser.error_log],
        )


class StrictLxmlEngine(LxmlEngine):
    """Well-formedness parser that raises on the first fatal error."""

    name = "lxml-strict"
    recover = False


class RecoveringLxmlEngine(LxmlEngine):
    """Parser that always returns what it could build and logs errors in-band."""

    name = "lxml-recover"
    recover = True


def create_engine(config: Optional[ParserEngineConfig] = None) -> ParserEngine:
    """Create the parser engine selected by ``config``."""
    config = config or ParserEngineConfig()
    if config.recover:
        return RecoveringLxmlEngine(config)
    return StrictLxmlEngine(config)


class XmlParserAdapter:
    """Turn raw text into a parsed root element or a definitive ``ParseFailure``."""

    def __init__(
        self,
        config: Optional[ParserEngineConfig] = None,
        engine: Optional[ParserEngine] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            config: Engine configuration, used when ``engine`` is not given
            engine: Explicit engine instance
            correlation_id: Optional correlation ID for request tracking
        """
        self.engine = engine or create_engine(config)
        self.logger = get_logger(__name__, correlation_id, "parser_adapter")

    def parse(self, xml_input: InputType) -> etree._Element:
        """Parse ``xml_input`` into its root element.

        Args:
            xml_input: XML document text

        Returns:
            The document's single top-level element

        Raises:
            ParseFailure: If the input is blank, not well-formed, or the engine
                failed for a reason unrelated to XML syntax
        """
        start_time = time.time()

        if not isinstance(xml_input, (str, bytes)):
            raise ParseFailure(f"Unsupported input type: {type(xml_input).__name__}")

        if not xml_input.strip():
            raise ParseFailure(XML_SYNTAX_ERROR_MESSAGE, {"reason": "empty input"})

        try:
            if isinstance(xml_input, str):
                # Force UTF-8 so an encoding declaration in the text is ignored.
                outcome = self.engine.parse(xml_input.encode("utf-8"), "utf-8")
            else:
                outcome = self.engine.parse(xml_input, None)
        except etree.XMLSyntaxError as e:
            self.logger.debug(
                "Engine raised syntax error",
                extra={"engine": self.engine.name, "error": str(e)}
            )
            raise ParseFailure(
                XML_SYNTAX_ERROR_MESSAGE,
                {
                    "engine": self.engine.name,
                    "errors": [
                        EngineError.from_log_entry(entry).to_dict()
                        for entry in e.error_log
                    ],
                },
            ) from e
        except Exception as e:
            self.logger.warning(
                "Engine failed for a reason unrelated to XML syntax",
                extra={"engine": self.engine.name, "error": str(e)}
            )
            raise ParseFailure(str(e), {"engine": self.engine.name}) from e

        if outcome.root is None or outcome.has_errors:
            self.logger.debug(
                "Engine reported errors in-band",
                extra={
                    "engine": self.engine.name,
                    "error_count": len(outcome.errors),
                    "has_root": outcome.root is not None,
                }
            )
            raise ParseFailure(
                XML_SYNTAX_ERROR_MESSAGE,
                {
                    "engine": self.engine.name,
                    "errors": [error.to_dict() for error in outcome.errors],
                },
            )

        self.logger.debug(
            "Document parsed",
            extra={
                "engine": self.engine.name,
                "processing_time_ms": (time.time() - start_time) * 1000,
            }
        )
        return outcome.root
