from lxml import etree

from sprig.builder.core.features import FAST, LXML_XML, STRICT, XML
from sprig.builder.core.main import ParseError, TreeBuilder

__all__ = ["LXMLTreeBuilderForXML"]


class LXMLTreeBuilderForXML(TreeBuilder):
    """Parses well-formed XML with libxml2. Markup that isn't well-formed is
    rejected rather than repaired.
    """

    NAME = LXML_XML
    ALTERNATE_NAMES = [XML]

    features = [NAME, XML, FAST, STRICT]
    is_xml = True

    def parser_for(self, encoding):
        kwargs = dict(resolve_entities=False)
        kwargs.update(self.parser_kwargs)
        return etree.XMLParser(encoding=encoding, **kwargs)

    def feed(self, markup):
        try:
            root = etree.fromstring(markup.encode("utf-8"), self.parser_for("utf-8"))
        except (UnicodeError, LookupError, etree.XMLSyntaxError) as e:
            raise ParseError(e)
        return root.getroottree()
