"""Tests for lxml node access helpers."""

from lxml import etree

from xml_tree_formatter.parsing.nodes import (
    element_attributes,
    is_element,
    is_text,
    iter_child_nodes,
    qualified_name,
)


class TestIterChildNodes:
    """Test document-order iteration over text runs and nodes."""

    def test_text_and_tails_are_interleaved(self) -> None:
        """Test that text, children and tails come back in document order."""
        root = etree.fromstring("<a>x<b/>y<!--c-->z</a>")

        nodes = list(iter_child_nodes(root))

        assert len(nodes) == 5
        assert nodes[0] == "x"
        assert is_element(nodes[1]) and nodes[1].tag == "b"
        assert nodes[2] == "y"
        assert not is_text(nodes[3]) and not is_element(nodes[3])
        assert nodes[4] == "z"

    def test_empty_element_has_no_child_nodes(self) -> None:
        """Test that an element without content yields nothing."""
        assert list(iter_child_nodes(etree.fromstring("<a></a>"))) == []

    def test_whitespace_is_a_text_run(self) -> None:
        """Test that whitespace-only text still counts as a child node."""
        nodes = list(iter_child_nodes(etree.fromstring("<a>  </a>")))

        assert nodes == ["  "]

    def test_processing_instruction_is_not_an_element(self) -> None:
        """Test that processing instructions are classified as other nodes."""
        nodes = list(iter_child_nodes(etree.fromstring("<a><?pi data?></a>")))

        assert len(nodes) == 1
        assert not is_element(nodes[0])
        assert not is_text(nodes[0])


class TestQualifiedNames:
    """Test recovery of prefixed names from Clark notation."""

    def test_plain_tag(self) -> None:
        """Test tag without namespace."""
        assert qualified_name(etree.fromstring("<Root/>")) == "Root"

    def test_prefixed_tag(self) -> None:
        """Test tag with a declared prefix."""
        root = etree.fromstring('<p:a xmlns:p="urn:p"><p:b/></p:a>')

        assert qualified_name(root) == "p:a"
        assert qualified_name(root[0]) == "p:b"

    def test_default_namespace_tag_has_no_prefix(self) -> None:
        """Test tag in a default namespace."""
        root = etree.fromstring('<a xmlns="urn:d"/>')

        assert qualified_name(root) == "a"


class TestElementAttributes:
    """Test attribute extraction including namespace declarations."""

    def test_attributes_keep_source_order(self) -> None:
        """Test plain attributes in their original order."""
        root = etree.fromstring('<a z="3" x="1" y="2"/>')

        assert element_attributes(root) == [("z", "3"), ("x", "1"), ("y", "2")]

    def test_namespace_declaration_comes_first(self) -> None:
        """Test that xmlns declarations are rendered before attributes."""
        root = etree.fromstring('<p:a xmlns:p="urn:p" p:x="1" y="2"/>')

        assert element_attributes(root) == [
            ("xmlns:p", "urn:p"),
            ("p:x", "1"),
            ("y", "2"),
        ]

    def test_default_namespace_declaration(self) -> None:
        """Test default namespace rendered as plain xmlns."""
        root = etree.fromstring('<a xmlns="urn:d" k="v"/>')

        assert element_attributes(root) == [("xmlns", "urn:d"), ("k", "v")]

    def test_inherited_declaration_is_not_repeated(self) -> None:
        """Test that children do not repeat their parent's declarations."""
        root = etree.fromstring('<a xmlns:p="urn:p"><p:b p:x="1"/></a>')

        assert element_attributes(root[0]) == [("p:x", "1")]

    def test_xml_prefix_attribute(self) -> None:
        """Test the implicit xml prefix."""
        root = etree.fromstring('<a xml:lang="en"/>')

        assert element_attributes(root) == [("xml:lang", "en")]

    def test_values_are_unescaped(self) -> None:
        """Test attribute values come back with entities resolved."""
        root = etree.fromstring('<a x="1 &amp; 2" y="&lt;b&gt;"/>')

        assert element_attributes(root) == [("x", "1 & 2"), ("y", "<b>")]
