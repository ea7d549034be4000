from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import PrivateAttr

from ..errors import InvalidArgument
from ..minify import Minifier, MinifyOptions, default_minifier
from ..models import Element
from .bunch import Bunch
from .css import select_nodes
from .nodes import (
    ROOT_TAG_NAME,
    element_children,
    is_document,
    is_element,
    is_node,
    looks_like_xml_tree,
    node_type,
    qualified_name,
    serialize,
    serialize_contents,
    text_content,
)

__all__ = ["Leaf"]


def _check_int(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Expected {name} to be an integer, got {value!r}.")


class Leaf(Element):
    """A single node from a markup document: the document itself, one of its
    elements, or nothing at all (an empty Leaf).

    A Leaf never changes after it is built. Navigating from it builds new Leaf
    objects around the neighbouring lxml nodes; those are only ever elements or
    the document, since text, comments and processing instructions are skipped.
    """

    node: Any = None
    known_xml: bool = False
    _root: Any = PrivateAttr(default=None)

    def __init__(self, node=None, known_xml: bool | None = None):
        """Constructor.

        :param node: An lxml `_ElementTree` (a document) or `_Element` (an
            element). A mapping, like None, makes an empty Leaf.
        :param known_xml: Whether the tree was parsed as XML. This decides how
            the node is serialized and how CSS selectors are translated. If not
            given it is guessed from the kind of lxml element.
        """
        if isinstance(node, Mapping):
            node = None
        elif node is not None and not is_node(node):
            raise InvalidArgument(f"Invalid node type: {type(node).__name__}.")
        if known_xml is None:
            known_xml = looks_like_xml_tree(node)
        super().__init__(node=node, known_xml=known_xml)
        if is_document(node):
            # Held so the root element proxy, and with it the identity below, stays the same.
            self._root = node.getroot()

    def _wrap(self, node) -> Leaf | None:
        return None if node is None else Leaf(node, known_xml=self.known_xml)

    def _children(self) -> list[Leaf]:
        return [Leaf(child, known_xml=self.known_xml) for child in element_children(self.node)]

    @property
    def _identity(self):
        # lxml hands out a fresh _ElementTree on every getroottree() call, so
        # documents are told apart by their root element.
        if is_document(self.node):
            return ("document", self._root)
        return ("element", self.node)

    def __eq__(self, other):
        if not isinstance(other, Leaf):
            return NotImplemented
        return self._identity == other._identity

    def __hash__(self):
        return hash(self._identity)

    def __bool__(self) -> bool:
        return self.node is not None

    def __repr__(self) -> str:
        if self.node is None:
            return "Leaf()"
        return f"Leaf(<{self.name}>)"

    @property
    def is_empty(self) -> bool:
        """Does this Leaf wrap nothing?"""
        return self.node is None

    @property
    def attributes(self) -> dict[str, str]:
        """A new dictionary of the attributes on the Leaf."""
        if is_element(self.node):
            return dict(self.node.attrib)
        return {}

    attr = attributes

    @property
    def name(self) -> str:
        if is_document(self.node):
            return ROOT_TAG_NAME
        if is_element(self.node):
            return qualified_name(self.node)
        return ""

    @property
    def type(self) -> str | None:
        """One of "root", "tag", "script" or "style", or None for an empty Leaf."""
        return node_type(self.node, self.known_xml)

    @property
    def parent(self) -> Leaf | None:
        """The parent of the Leaf. The document is the parent of the root
        element; the document itself has no parent.
        """
        if not is_element(self.node):
            return None
        parent = self.node.getparent()
        if parent is None:
            return Leaf(self.node.getroottree(), known_xml=self.known_xml)
        return self._wrap(parent)

    @property
    def children(self) -> Bunch | None:
        """The element children of the Leaf, or None if it has none."""
        children = self._children()
        return Bunch(children) if children else None

    @property
    def first_child(self) -> Leaf | None:
        children = self._children()
        return children[0] if children else None

    @property
    def last_child(self) -> Leaf | None:
        children = self._children()
        return children[-1] if children else None

    @property
    def next_sibling(self) -> Leaf | None:
        """The next element on the same level of the tree, if any."""
        if not is_element(self.node):
            return None
        sibling = self.node.getnext()
        while sibling is not None and not is_element(sibling):
            sibling = sibling.getnext()
        return self._wrap(sibling)

    @property
    def previous_sibling(self) -> Leaf | None:
        """The previous element on the same level of the tree, if any."""
        if not is_element(self.node):
            return None
        sibling = self.node.getprevious()
        while sibling is not None and not is_element(sibling):
            sibling = sibling.getprevious()
        return self._wrap(sibling)

    prev_sibling = previous_sibling

    @property
    def siblings(self) -> Bunch:
        """All elements on the same level of the tree, this one included."""
        if not is_element(self.node):
            return Bunch([])
        parent = self.node.getparent()
        if parent is None:
            return Bunch([self])
        return Bunch([Leaf(node, known_xml=self.known_xml) for node in element_children(parent)])

    @property
    def root(self) -> Leaf:
        """The document this Leaf belongs to."""
        leaf = self
        while (parent := leaf.parent) is not None:
            leaf = parent
        return leaf

    @property
    def text(self) -> str:
        """The text content of the Leaf. Ignores comments."""
        return text_content(self.node)

    @property
    def markup(self) -> str:
        return serialize(self.node, self.known_xml)

    @property
    def inner_markup(self) -> str:
        """The serialized content of the Leaf, without its own tags."""
        return serialize_contents(self.node, self.known_xml)

    def select(self, query: str, limit: int | None = None) -> Bunch:
        """Find the descendants matching a CSS selector.

        :param query: A CSS selector.
        :param limit: Keep only the first `limit` matches. None, zero or a
            negative number keeps them all.
        :return: A Bunch of the matches in document order.
        """
        if not isinstance(query, str):
            raise InvalidArgument("Expected query to be a string.")
        if limit is not None:
            _check_int(limit, "limit")
        found = [
            Leaf(match, known_xml=self.known_xml)
            for match in select_nodes(self.node, query, self.known_xml)
        ]
        if limit is not None and 0 < limit < len(found):
            del found[limit:]
        return Bunch(found)

    def select_one(self, query: str, nth: int = 0) -> Leaf:
        """Find a single descendant matching a CSS selector.

        :param query: A CSS selector.
        :param nth: Which match to pick, counting from 1. Zero, or a position past
            the last match, picks the first one.
        :return: The match, or an empty Leaf if nothing matched.
        """
        if not isinstance(query, str):
            raise InvalidArgument("Expected query to be a string.")
        _check_int(nth, "nth")
        found = select_nodes(self.node, query, self.known_xml)
        if not found:
            return Leaf(known_xml=self.known_xml)
        if 0 < nth <= len(found):
            return Leaf(found[nth - 1], known_xml=self.known_xml)
        return Leaf(found[0], known_xml=self.known_xml)

    def nth_child(self, position: int) -> Leaf | None:
        """The element child at a position counted from 1, or None if there is
        no child there.
        """
        _check_int(position, "position")
        if position < 1:
            raise InvalidArgument("Expected position to be a number >= 1.")
        children = self._children()
        return children[position - 1] if position <= len(children) else None

    async def minify(
        self,
        options: MinifyOptions | Mapping | None = None,
        minifier: Minifier | None = None,
    ) -> str:
        """Minify the Leaf's markup.

        The defaults are those of `MinifyOptions`: whitespace is collapsed and
        the output is not treated as HTML5.
        """
        return await (minifier or default_minifier).minify(self.markup, options)

    async def inner_minify(
        self,
        options: MinifyOptions | Mapping | None = None,
        minifier: Minifier | None = None,
    ) -> str:
        """Minify the markup of the Leaf's content. See `minify`."""
        return await (minifier or default_minifier).minify(self.inner_markup, options)

    def unwrap(self):
        """The wrapped lxml handle, or None for an empty Leaf."""
        return self.node
