from .html_builder import LXMLTreeBuilder
from .xml_builder import LXMLTreeBuilderForXML

__all__ = ["LXMLTreeBuilder", "LXMLTreeBuilderForXML"]
