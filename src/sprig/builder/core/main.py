"""
The main class `TreeBuilder` is the base of every parser back end: the lxml
HTML parser, the lxml XML parser, and html5lib. Each one turns markup into an
lxml tree, and `TreeBuilder.build` wraps that tree in a `Leaf`.

Subclasses set 4 class variables
- `NAME`
- `ALTERNATE_NAMES`
- `features`
- `is_xml`

and implement `feed`.
"""
from __future__ import annotations

import logging

from sprig.dammit import decode_markup
from sprig.element import Leaf
from sprig.errors import InvalidArgument, ParseError

from .features import INIT

__all__ = ["TreeBuilder", "ParseError"]

log = logging.getLogger(__name__)


class TreeBuilder:
    """Turn a textual document into a tree of Leaf objects."""

    NAME = INIT
    ALTERNATE_NAMES = []
    features = []

    is_xml = False

    def __init__(self, **parser_kwargs):
        """Constructor.

        :param parser_kwargs: Keyword arguments for the underlying parser
         (for instance `remove_comments=True` for lxml).
        """
        self.parser_kwargs = parser_kwargs

    def prepare_markup(self, markup, from_encoding=None, exclude_encodings=None):
        """Run any preliminary steps necessary to make incoming markup
        acceptable to the parser.

        :param markup: Some markup, as a string or as bytes.
        :param from_encoding: The user asked to try this encoding first.
        :param exclude_encodings: The user asked _not_ to try any of
            these encodings.

        :yield: The markup as a string, once per strategy worth trying.
         Strategies are tried in turn until the parser accepts one.

         By default, text is parsed as-is and bytes are decoded with the
         first encoding that works.
        """
        yield decode_markup(
            markup,
            known_definite_encodings=[from_encoding],
            is_html=not self.is_xml,
            exclude_encodings=exclude_encodings,
        )

    def feed(self, markup: str):
        """Parse some markup.

        This method is not implemented in TreeBuilder; it must be
        implemented in subclasses.

        :return: An lxml `_ElementTree`.
        :raise ParseError: If the parser rejects the markup.
        """
        raise NotImplementedError()

    def build(self, markup, from_encoding=None, exclude_encodings=None) -> Leaf:
        """Parse some markup into a document Leaf.

        Blank markup gives an empty Leaf rather than a parser error.
        """
        if not isinstance(markup, (str, bytes, bytearray)):
            raise InvalidArgument("Expected markup to be a string or bytes.")
        rejections = []
        for prepared in self.prepare_markup(markup, from_encoding, exclude_encodings):
            if not prepared.strip():
                return Leaf(known_xml=self.is_xml)
            try:
                tree = self.feed(prepared)
            except ParseError as e:
                log.debug("%s rejected the markup: %s", self.NAME, e)
                rejections.append(e)
                continue
            return Leaf(tree, known_xml=self.is_xml)
        raise ParseError(
            "The markup you provided was rejected by the parser. "
            + "Trying a different parser or a different encoding may help.\n\n"
            + "Original exception(s) from parser:\n "
            + "\n ".join(str(e) for e in rejections),
        )
