"""sprig - traverse and query HTML/XML documents.

sprig takes a document from wherever it lives (a string of markup, bytes, a
URL, a file or directory on disk, or a tree lxml has already parsed) and gives
back a `Leaf`: a small read-only wrapper with CSS selector queries, navigation
between parents, children and siblings, serialization, and minification.
Queries over several nodes give back a `Bunch`, which broadcasts the same
interface over all of its members.

Parsing is done by lxml (or html5lib), selector matching by cssselect,
minification by minify-html and downloading by httpx.
"""

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Bunch",
    "Leaf",
    "load",
    "load_sync",
    "parse",
    "lookup_builder",
    "MinifyOptions",
    "Minifier",
    "Fetcher",
    "fetch",
    "PathKind",
    "ResolvedPath",
    "resolve_path",
    "find_document",
    "load_document",
    "classify",
    "is_url",
    "is_path",
    "SprigError",
    "InvalidArgument",
    "ParseError",
    "ParserRejectedMarkup",
    "FetchError",
    "FilesystemError",
    "FeatureNotFound",
    "MarkupResemblesLocatorWarning",
    "XMLParsedAsHTMLWarning",
]

from .builder.core import XMLParsedAsHTMLWarning
from .element import ABSENT, Bunch, Leaf
from .errors import (
    FeatureNotFound,
    FetchError,
    FilesystemError,
    InvalidArgument,
    ParseError,
    ParserRejectedMarkup,
    SprigError,
)
from .main import (
    MarkupResemblesLocatorWarning,
    load,
    load_sync,
    lookup_builder,
    parse,
)
from .minify import Minifier, MinifyOptions
from .source import (
    Fetcher,
    PathKind,
    ResolvedPath,
    classify,
    fetch,
    find_document,
    is_path,
    is_url,
    load_document,
    resolve_path,
)
