from lxml import etree
from lxml import html as lxml_html

from sprig.builder.core.features import FAST, HTML, LXML, LXML_HTML, PERMISSIVE
from sprig.builder.core.main import ParseError, TreeBuilder
from sprig.builder.core.xml import DetectsXMLParsedAsHTML

__all__ = ["LXMLTreeBuilder"]


class LXMLTreeBuilder(TreeBuilder, DetectsXMLParsedAsHTML):
    """Parses HTML with libxml2's forgiving HTML parser."""

    NAME = LXML
    ALTERNATE_NAMES = [LXML_HTML]

    features = ALTERNATE_NAMES + [NAME, HTML, FAST, PERMISSIVE]
    is_xml = False

    def parser_for(self, encoding):
        return lxml_html.HTMLParser(encoding=encoding, **self.parser_kwargs)

    def feed(self, markup):
        self.warn_if_markup_looks_like_xml(markup)
        # Hand lxml bytes with the encoding forced: it refuses text that
        # carries an encoding declaration.
        try:
            root = lxml_html.document_fromstring(
                markup.encode("utf-8"),
                parser=self.parser_for("utf-8"),
            )
        except (UnicodeError, LookupError, ValueError, etree.LxmlError) as e:
            raise ParseError(e)
        return root.getroottree()
