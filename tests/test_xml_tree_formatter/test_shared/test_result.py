"""Tests for the ParsingResult envelope."""

import pytest

from xml_tree_formatter.shared.result import (
    UNKNOWN_ERROR_MESSAGE,
    XML_SYNTAX_ERROR_MESSAGE,
    ParsingResult,
)
from xml_tree_formatter.tree import XmlNode


class TestParsingResult:
    """Test success and failure shapes."""

    def test_success_shape(self) -> None:
        """Test a successful result."""
        result = ParsingResult(formatted_xml="<a />", root_node=XmlNode(name="a", id="root"))

        assert result.success is True
        assert result.error is None

    def test_failure_factory(self) -> None:
        """Test the failure constructor."""
        result = ParsingResult.failure(XML_SYNTAX_ERROR_MESSAGE)

        assert result.success is False
        assert result.error == XML_SYNTAX_ERROR_MESSAGE
        assert result.root_node is None
        assert result.formatted_xml == ""

    @pytest.mark.parametrize("message", ["", None])
    def test_failure_without_message(self, message) -> None:
        """Test the generic message for empty failures."""
        assert ParsingResult.failure(message).error == UNKNOWN_ERROR_MESSAGE

    def test_mixed_signals_rejected(self) -> None:
        """Test that an error cannot accompany a tree."""
        with pytest.raises(ValueError, match="Failed result cannot carry"):
            ParsingResult(
                formatted_xml="<a />",
                root_node=XmlNode(name="a", id="root"),
                error="bad",
            )

    def test_success_requires_root(self) -> None:
        """Test that a success without a tree is rejected."""
        with pytest.raises(ValueError, match="requires a root node"):
            ParsingResult(formatted_xml="<a />")

    def test_failure_to_dict(self) -> None:
        """Test the wire form of a failure."""
        assert ParsingResult.failure("bad").to_dict() == {
            "formattedXml": "",
            "rootNode": None,
            "error": "bad",
        }
