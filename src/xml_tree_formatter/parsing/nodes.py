"""Node access helpers over lxml elements.

lxml stores character data on ``text`` and ``tail`` attributes instead of as
separate nodes. These helpers present an element's children as an ordered
sequence of text runs and nodes, and recover the qualified names (with
prefixes) that lxml replaces by ``{uri}local`` Clark notation.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union

from lxml import etree

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# A child node is either a text run or an lxml node (element, comment,
# processing instruction or entity reference).
ChildNode = Union[str, etree._Element]


def is_text(node: ChildNode) -> bool:
    """Check if a child node is a text run."""
    return isinstance(node, str)


def is_element(node: ChildNode) -> bool:
    """Check if a child node is an element.

    Comments, processing instructions and entity references are lxml nodes
    too, but their ``tag`` is a factory function rather than a string.
    """
    return not isinstance(node, str) and isinstance(node.tag, str)


def iter_child_nodes(element: etree._Element) -> Iterator[ChildNode]:
    """Iterate the direct child nodes of ``element`` in document order."""
    if element.text is not None:
        yield element.text
    for child in element:
        yield child
        if child.tail is not None:
            yield child.tail


def qualified_name(element: etree._Element) -> str:
    """Get the tag name of ``element`` as written in the source."""
    local_name = etree.QName(element).localname
    if element.prefix:
        return f"{element.prefix}:{local_name}"
    return local_name


def _attribute_name(key: str, nsmap: Dict[Optional[str], str]) -> str:
    if not key.startswith("{"):
        return key

    qname = etree.QName(key)
    if qname.namespace == XML_NAMESPACE:
        prefix: Optional[str] = "xml"
    else:
        prefix = next(
            (p for p, uri in nsmap.items() if p and uri == qname.namespace),
            None,
        )
    if prefix:
        return f"{prefix}:{qname.localname}"
    return qname.localname


def namespace_declarations(element: etree._Element) -> List[Tuple[str, str]]:
    """Get the ``xmlns`` declarations introduced on ``element`` itself."""
    parent = element.getparent()
    inherited = parent.nsmap if parent is not None else {}

    declarations = []
    for prefix, uri in element.nsmap.items():
        if prefix in inherited and inherited[prefix] == uri:
            continue
        name = f"xmlns:{prefix}" if prefix else "xmlns"
        declarations.append((name, uri))
    return declarations


def element_attributes(element: etree._Element) -> List[Tuple[str, str]]:
    """Get ``(name, value)`` attribute pairs of ``element`` in source order.

    Namespace declarations come first, followed by regular attributes with
    their prefixes restored.
    """
    nsmap = element.nsmap
    attributes = namespace_declarations(element)
    attributes.extend(
        (_attribute_name(key, nsmap), value)
        for key, value in element.attrib.items()
    )
    return attributes
