import re
import warnings

__all__ = ["DetectsXMLParsedAsHTML", "XMLParsedAsHTMLWarning"]


class XMLParsedAsHTMLWarning(UserWarning):
    """The warning issued when an HTML parser is used to parse
    XML that is not XHTML.
    """

    MESSAGE = """It looks like you're parsing an XML document using an HTML parser. If this really is an HTML document (maybe it's XHTML?), you can ignore or filter this warning. If it's XML, you should know that using an XML parser will be more reliable. To parse this document as XML, pass the keyword argument `features="xml"`."""


class DetectsXMLParsedAsHTML:
    """A mixin for HTML tree builders that warns when the markup they are
    given looks like an XML document rather than HTML.
    """

    # Regular expression for seeing if markup has an <html> tag.
    LOOKS_LIKE_HTML = re.compile("<[^ +]html", re.I)

    XML_PREFIX = "<?xml"

    @classmethod
    def warn_if_markup_looks_like_xml(cls, markup):
        """Check whether some markup looks like XML that's not XHTML, and if
        so, issue a warning.

        :return: True if the markup looks like non-XHTML XML, False
        otherwise.
        """
        if isinstance(markup, (bytes, bytearray)):
            markup = bytes(markup).decode("utf-8", "replace")
        if (
            markup is not None
            and markup.lstrip().startswith(cls.XML_PREFIX)
            and not cls.LOOKS_LIKE_HTML.search(markup[:500])
        ):
            cls._warn()
            return True
        return False

    @classmethod
    def _warn(cls):
        """Issue a warning about XML being parsed as HTML."""
        warnings.warn(XMLParsedAsHTMLWarning.MESSAGE, XMLParsedAsHTMLWarning, stacklevel=4)
