"""Type guards and serialization helpers for lxml handles.

Every guard is total: it accepts any object and never raises.
"""
from __future__ import annotations

from html import escape

from lxml import etree
from lxml import html as lxml_html

__all__ = [
    "ROOT_TAG_NAME",
    "RAW_TEXT_ELEMENTS",
    "is_document",
    "is_element",
    "is_node",
    "looks_like_xml_tree",
    "local_name",
    "qualified_name",
    "node_type",
    "element_children",
    "serialize",
    "serialize_contents",
    "text_content",
]

# A document has no tag, so it is given a name that can't clash with a real one.
ROOT_TAG_NAME = "[document]"

# The HTML serializer writes the text of these elements unescaped.
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


def is_document(obj) -> bool:
    return isinstance(obj, etree._ElementTree)


def is_element(obj) -> bool:
    """Is this an lxml element proper?

    Comments, processing instructions and entities are `_Element` subclasses too,
    but their `tag` is a factory function rather than a string.
    """
    return isinstance(obj, etree._Element) and isinstance(obj.tag, str)


def is_node(obj) -> bool:
    return is_document(obj) or is_element(obj)


def looks_like_xml_tree(node) -> bool:
    """Guess whether a handle came out of an XML parser.

    lxml's HTML parsers build `HtmlElement`s. html5lib builds plain elements,
    but under an `<html>` root with no namespace. Anything else is taken to be
    XML. An empty document is assumed to be HTML.
    """
    if is_element(node):
        node = node.getroottree()
    if not is_document(node):
        return False
    root = node.getroot()
    if root is None or isinstance(root, lxml_html.HtmlElement):
        return False
    return not (isinstance(root.tag, str) and root.tag.lower() == "html")


def local_name(element) -> str:
    return element.tag.rpartition("}")[2]


def qualified_name(element) -> str:
    """The tag name as written in the source: `prefix:local`, or just `local`."""
    prefix = element.prefix
    name = local_name(element)
    return f"{prefix}:{name}" if prefix else name


def node_type(node, known_xml: bool) -> str | None:
    if is_document(node):
        return "root"
    if is_element(node):
        name = local_name(node).lower()
        if not known_xml and name in RAW_TEXT_ELEMENTS:
            return name
        return "tag"
    return None


def element_children(node) -> list:
    """The element children of a document or element, in document order."""
    if is_document(node):
        root = node.getroot()
        return [] if root is None else [root]
    if is_element(node):
        return [child for child in node if is_element(child)]
    return []


def _method(known_xml: bool) -> str:
    return "xml" if known_xml else "html"


def serialize(node, known_xml: bool) -> str:
    if is_document(node):
        if node.getroot() is None:
            return ""
        return etree.tostring(node, method=_method(known_xml), encoding="unicode")
    if is_element(node):
        return etree.tostring(
            node,
            method=_method(known_xml),
            encoding="unicode",
            with_tail=False,
        )
    return ""


def serialize_contents(node, known_xml: bool) -> str:
    """Serialize everything inside a node but not the node itself."""
    if is_document(node):
        root = node.getroot()
        if root is None:
            return ""
        top_level = [*reversed(list(root.itersiblings(preceding=True))), root]
        top_level.extend(root.itersiblings())
        return "".join(
            etree.tostring(n, method=_method(known_xml), encoding="unicode", with_tail=False)
            for n in top_level
        )
    if not is_element(node):
        return ""
    text = node.text or ""
    if known_xml or local_name(node).lower() not in RAW_TEXT_ELEMENTS:
        text = escape(text, quote=False)
    return text + "".join(
        etree.tostring(child, method=_method(known_xml), encoding="unicode")
        for child in node
    )


def text_content(node) -> str:
    """Concatenated text of a node and its descendants. Comments and processing
    instructions don't count.
    """
    if is_document(node):
        node = node.getroot()
    if not is_element(node):
        return ""
    return etree.tostring(node, method="text", encoding="unicode", with_tail=False)
