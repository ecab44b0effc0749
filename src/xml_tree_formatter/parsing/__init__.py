"""Parsing layer: lxml engines behind a failure-normalizing adapter."""

from .adapter import (
    EngineError,
    EngineOutcome,
    LxmlEngine,
    ParseFailure,
    ParserEngine,
    RecoveringLxmlEngine,
    StrictLxmlEngine,
    XmlParserAdapter,
    create_engine,
)
from .nodes import (
    ChildNode,
    element_attributes,
    is_element,
    is_text,
    iter_child_nodes,
    qualified_name,
)

__all__ = [
    "EngineError",
    "EngineOutcome",
    "LxmlEngine",
    "ParseFailure",
    "ParserEngine",
    "RecoveringLxmlEngine",
    "StrictLxmlEngine",
    "XmlParserAdapter",
    "create_engine",
    "ChildNode",
    "element_attributes",
    "is_element",
    "is_text",
    "iter_child_nodes",
    "qualified_name",
]
