from __future__ import annotations

import asyncio
import logging
import os
import sys
import warnings

from .builder import builder_registry
from .builder.core import XML, TreeBuilder
from .element import Bunch, Leaf
from .errors import FeatureNotFound
from .source import (
    Fetcher,
    Locator,
    ParsedDocument,
    ParsedMany,
    RawNode,
    RawNodeList,
    Text,
    classify,
    find_document,
    read_file,
    resolve_path,
)
from .source.documents import is_xml_path

__all__ = [
    "DEFAULT_BUILDER_FEATURES",
    "MarkupResemblesLocatorWarning",
    "lookup_builder",
    "parse",
    "load",
    "load_sync",
]

log = logging.getLogger(__name__)

# If the end-user gives no indication which tree builder they
# want, look for one with these features.
DEFAULT_BUILDER_FEATURES = ["html", "fast"]

# Frames from these modules are never "the caller" of load().
_INTERNAL_MODULES = (__name__, "asyncio")


class MarkupResemblesLocatorWarning(UserWarning):
    """The warning issued when the input looks like a path to a file on
    disk, but no document could be found there.
    """


def lookup_builder(features=None, builder=None) -> TreeBuilder:
    """Find and instantiate a tree builder.

    :param features: Desirable features of the parser to be used. This may be
        the name of a specific parser ("lxml", "lxml-xml", "html5lib") or the
        type of markup to be used ("html", "html5", "xml").
    :param builder: A TreeBuilder subclass to instantiate, or an instance to
        use, instead of looking one up based on `features`.
    """
    if isinstance(builder, TreeBuilder):
        return builder
    if isinstance(builder, type):
        return builder()
    if isinstance(features, str):
        features = [features]
    if not features:
        features = DEFAULT_BUILDER_FEATURES
    builder_class = builder_registry.lookup(*features)
    if builder_class is None:
        raise FeatureNotFound(
            "Couldn't find a tree builder with the features you "
            "requested: %s. Do you need to install a parser library?"
            % ",".join(features),
        )
    return builder_class()


def parse(markup, features=None, from_encoding=None, builder=None, exclude_encodings=None) -> Leaf:
    """Parse markup into a document Leaf.

    :param markup: A string, or bytes in any encoding.
    :param features: See `lookup_builder`.
    :param from_encoding: The encoding of `markup`, if it is bytes and you
        know better than the encoding detector.
    :param builder: See `lookup_builder`.
    :param exclude_encodings: Encodings never to try when decoding bytes.
    :raise ParseError: If the parser rejects the markup.
    """
    tree_builder = lookup_builder(features, builder)
    log.debug("Parsing with %s", tree_builder.NAME)
    return tree_builder.build(markup, from_encoding, exclude_encodings)


def _caller_directory() -> str:
    """The directory of the module that called into sprig.

    This code adapted from warnings.py: walk up the stack past sprig's own
    frames (and the event loop's) to the first frame that belongs to a file.
    In a REPL there is no such file, and the working directory is used.
    """
    try:
        frame = sys._getframe(1)
    except ValueError:
        frame = None
    while frame is not None and frame.f_globals.get("__name__", "").startswith(_INTERNAL_MODULES):
        frame = frame.f_back
    filename = frame.f_globals.get("__file__") if frame is not None else None
    if not filename:
        return os.getcwd()
    return os.path.dirname(os.path.abspath(filename))


def _wrap_many(handles) -> Bunch:
    return Bunch([Leaf(handle) for handle in handles])


async def load(
    source,
    features=None,
    *,
    caller: str | None = None,
    fetcher: Fetcher | None = None,
    from_encoding: str | None = None,
    builder=None,
    exclude_encodings=None,
) -> Leaf | Bunch:
    """Turn a document, wherever it is, into a traversable Leaf.

    :param source: Literal markup (text or bytes), a URL (the scheme may be
        left out, https is tried first), a path to a file or directory, an lxml
        document or element, a list of lxml elements, or a Leaf or Bunch.
    :param features: See `lookup_builder`. If not given, XML files and XML
        responses are parsed as XML, everything else as HTML.
    :param caller: The directory relative paths are taken from. Defaults to the
        directory of the calling module.
    :param fetcher: A Fetcher used to download URLs.
    :param from_encoding: The encoding of the document, if it is bytes and you
        know better than the encoding detector.
    :param builder: See `lookup_builder`.
    :param exclude_encodings: Encodings never to try when decoding a document
        that is bytes.
    :return: A Leaf, or a Bunch when several elements were passed in. Input
        that can't be understood, and paths where no single document is found,
        give an empty Leaf.
    """
    plan = classify(source)
    if isinstance(plan, ParsedDocument):
        return Leaf(plan.handle) if plan.handle.getroot() is not None else Leaf()
    if isinstance(plan, (ParsedMany, RawNodeList)):
        return _wrap_many(plan.handles)
    if isinstance(plan, RawNode):
        return Leaf(plan.handle)
    if not isinstance(plan, Text):
        log.debug("Nothing to load from %s", type(source).__name__)
        return Leaf()

    if plan.locator is Locator.URL:
        fetched = await (fetcher or Fetcher()).fetch(plan.content)
        if features is None and builder is None and fetched.is_xml:
            features = XML
        return parse(fetched.text, features, builder=builder)

    if plan.locator is Locator.PATH:
        resolved = resolve_path(plan.content, caller or _caller_directory())
        document = find_document(resolved)
        if document is None:
            warnings.warn(
                f"The input looks like a path, but no single document was found at {resolved.absolute}.",
                MarkupResemblesLocatorWarning,
                stacklevel=2,
            )
            return Leaf()
        if features is None and builder is None and is_xml_path(document):
            features = XML
        log.debug("Loading %s", document.absolute)
        return parse(
            read_file(document, from_encoding, exclude_encodings),
            features,
            builder=builder,
        )

    return parse(plan.content, features, from_encoding, builder, exclude_encodings)


def load_sync(source, features=None, **kwargs) -> Leaf | Bunch:
    """Run `load` to completion outside of an event loop."""
    kwargs.setdefault("caller", _caller_directory())
    return asyncio.run(load(source, features, **kwargs))
