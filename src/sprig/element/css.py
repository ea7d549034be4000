"""CSS selector queries, handed over to cssselect through lxml."""
from __future__ import annotations

from functools import lru_cache

from cssselect import SelectorError
from lxml.cssselect import CSSSelector

from ..errors import InvalidArgument
from .nodes import is_document, is_element

__all__ = ["compile_selector", "select_nodes"]


@lru_cache(maxsize=256)
def compile_selector(query: str, known_xml: bool) -> CSSSelector:
    """Translate a CSS selector to a compiled XPath expression.

    HTML trees use cssselect's HTML translator, which matches tag and attribute
    names case-insensitively the way browsers do.
    """
    try:
        return CSSSelector(query, translator="xml" if known_xml else "html")
    except SelectorError as e:
        raise InvalidArgument(f"Invalid CSS selector {query!r}: {e}") from e


def select_nodes(node, query: str, known_xml: bool) -> list:
    """All descendants of `node` matching `query`, in document order.

    A document's root element counts as one of its descendants; an element is
    never a match for itself.
    """
    if is_document(node):
        if node.getroot() is None:
            return []
        context = node
    elif is_element(node):
        context = node
    else:
        return []
    selector = compile_selector(query, known_xml)
    return [match for match in selector(context) if match is not node]
