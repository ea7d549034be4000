"""
Regular expressions finding an encoding declared inside a document, either in
an XML declaration or in an HTML <meta> tag.
"""
import re

__all__ = ["XML_ENCODING_RE", "HTML_META_RE"]

XML_ENCODING_RE = re.compile(rb"^\s*<\?.*encoding=['\"](.*?)['\"].*\?>", re.I)
HTML_META_RE = re.compile(rb"<\s*meta[^>]+charset\s*=\s*[\"']?([^>]*?)[ /;'\">]", re.I)
