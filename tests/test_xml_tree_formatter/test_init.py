"""Test module for xml_tree_formatter package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import xml_tree_formatter

    # Assert
    assert xml_tree_formatter is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import xml_tree_formatter

    # Assert
    assert isinstance(xml_tree_formatter.__version__, str)
    assert xml_tree_formatter.__version__ == "0.1.0"


def test_package_exports_parse_entry_point() -> None:
    """Test that the Level 1 entry point is exported and usable."""
    # Arrange
    import xml_tree_formatter

    # Act
    result = xml_tree_formatter.parse_xml("<a/>")

    # Assert
    assert "parse_xml" in xml_tree_formatter.__all__
    assert isinstance(result, xml_tree_formatter.ParsingResult)
    assert result.formatted_xml == "<a />"
