"""What a TreeBuilder can be asked for: the name of its parser library, or a
quality of the parser or the markup it handles.
"""

__all__ = [
    "LXML",
    "LXML_HTML",
    "LXML_XML",
    "HTML5LIB",
    "INIT",
    "HTML",
    "HTML_5",
    "XML",
    "FAST",
    "STRICT",
    "PERMISSIVE",
]

# Parser libraries. The lxml builders answer to two names each.
LXML = "lxml"
LXML_HTML = "lxml-html"
LXML_XML = "lxml-xml"
HTML5LIB = "html5lib"

# Name of a builder that doesn't say which library it wraps.
INIT = "[Unknown tree builder]"

# Markup languages.
HTML = "html"
HTML_5 = "html5"
XML = "xml"

# Parser qualities.
FAST = "fast"
STRICT = "strict"
PERMISSIVE = "permissive"
