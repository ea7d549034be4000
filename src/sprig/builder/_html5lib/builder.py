import html5lib

from sprig.builder.core.features import HTML, HTML5LIB, HTML_5, PERMISSIVE
from sprig.builder.core.main import ParseError, TreeBuilder
from sprig.builder.core.xml import DetectsXMLParsedAsHTML

__all__ = ["HTML5TreeBuilder"]


class HTML5TreeBuilder(TreeBuilder, DetectsXMLParsedAsHTML):
    """Parses HTML the way a web browser does, using html5lib's lxml tree
    builder. Slower than lxml's own HTML parser.
    """

    NAME = HTML5LIB

    features = [NAME, PERMISSIVE, HTML_5, HTML]
    is_xml = False

    def feed(self, markup):
        self.warn_if_markup_looks_like_xml(markup)
        kwargs = dict(namespaceHTMLElements=False)
        kwargs.update(self.parser_kwargs)
        try:
            return html5lib.parse(markup, treebuilder="lxml", **kwargs)
        except ValueError as e:
            raise ParseError(e)
