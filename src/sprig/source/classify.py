"""Decide how to get hold of a document from whatever the user passed in.

The checks run in a fixed order and the first one that matches wins:

1. an lxml document                        -> ParsedDocument
2. a Bunch                                 -> ParsedMany
3. an lxml element (or a Leaf)             -> RawNode
4. a non-empty list/tuple of lxml elements -> RawNodeList
5. text, bytes or a path-like object       -> Text (URL, path or markup)
6. anything else                           -> Unrecognized
"""
from __future__ import annotations

import os
from enum import Enum
from typing import Any

from ..element import Bunch, Leaf, is_document, is_element
from ..models import HandleRecord
from .locators import is_path, is_url

__all__ = [
    "Locator",
    "Plan",
    "ParsedDocument",
    "ParsedMany",
    "RawNode",
    "RawNodeList",
    "Text",
    "Unrecognized",
    "classify",
    "locate",
]


class Locator(Enum):
    """What a piece of text turned out to be."""

    URL = "url"
    PATH = "path"
    MARKUP = "markup"


class Plan(HandleRecord):
    """Base model for acquisition plans."""


class ParsedDocument(Plan):
    handle: Any


class ParsedMany(Plan):
    handles: tuple[Any, ...]


class RawNode(Plan):
    handle: Any


class RawNodeList(Plan):
    handles: tuple[Any, ...]


class Text(Plan):
    content: Any
    locator: Locator


class Unrecognized(Plan):
    pass


def _flatten(bunch: Bunch):
    for member in bunch:
        if isinstance(member, Bunch):
            yield from _flatten(member)
        elif member is not None:
            yield member


def locate(content) -> Locator:
    """Tell a URL, a path and literal markup apart. URLs win over paths."""
    if isinstance(content, os.PathLike):
        return Locator.PATH
    if isinstance(content, str):
        looks_like_markup = "<" in content
    else:
        looks_like_markup = b"<" in content
    if looks_like_markup:
        return Locator.MARKUP
    if is_url(content):
        return Locator.URL
    if is_path(content):
        return Locator.PATH
    return Locator.MARKUP


def classify(source) -> Plan:
    if isinstance(source, Leaf):
        source = source.node
        if source is None:
            return Unrecognized()
    if is_document(source):
        return ParsedDocument(handle=source)
    if isinstance(source, Bunch):
        return ParsedMany(
            handles=tuple(leaf.node for leaf in _flatten(source) if is_element(leaf.node)),
        )
    if is_element(source):
        return RawNode(handle=source)
    if isinstance(source, (list, tuple)) and source and all(is_element(s) for s in source):
        return RawNodeList(handles=tuple(source))
    if isinstance(source, (str, bytes, bytearray, os.PathLike)):
        locator = locate(source)
        if locator is not Locator.MARKUP and isinstance(source, (bytes, bytearray)):
            # Locators are text; is_url and is_path only accept UTF-8 bytes.
            source = bytes(source).decode("utf-8")
        return Text(content=source, locator=locator)
    return Unrecognized()
