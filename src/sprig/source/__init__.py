from .classify import (
    Locator,
    ParsedDocument,
    ParsedMany,
    Plan,
    RawNode,
    RawNodeList,
    Text,
    Unrecognized,
    classify,
    locate,
)
from .documents import find_document, load_document, read_file
from .fetch import FetchedDocument, Fetcher, fetch
from .locators import MARKUP_EXTENSIONS, is_url, is_path
from .paths import PathKind, ResolvedPath, resolve_path

__all__ = [
    "Locator",
    "Plan",
    "ParsedDocument",
    "ParsedMany",
    "RawNode",
    "RawNodeList",
    "Text",
    "Unrecognized",
    "classify",
    "locate",
    "find_document",
    "load_document",
    "read_file",
    "FetchedDocument",
    "Fetcher",
    "fetch",
    "MARKUP_EXTENSIONS",
    "is_url",
    "is_path",
    "PathKind",
    "ResolvedPath",
    "resolve_path",
]
