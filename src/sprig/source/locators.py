"""Predicates telling whether a string locates a document rather than being one.

Both predicates are total: any input gives True or False, nothing is raised and
nothing is touched on disk or on the network.
"""
from __future__ import annotations

import os
import re
from urllib.parse import urlsplit

__all__ = ["MARKUP_EXTENSIONS", "URL_SCHEMES", "has_scheme", "is_markup_name", "is_url", "is_path"]

MARKUP_EXTENSIONS = (".html", ".xml")
URL_SCHEMES = ("http", "https")

PATH_MAX = 4096

SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*://", re.I)
HOST_RE = re.compile(
    r"^(?:localhost"
    r"|(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}"
    r"|\d{1,3}(?:\.\d{1,3}){3})$",
    re.I,
)
NOT_A_PATH_RE = re.compile(r"[\x00\r\n<>]")


def _as_text(value) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return None
    return None


def has_scheme(value: str) -> bool:
    return SCHEME_RE.match(value) is not None


def is_markup_name(name: str) -> bool:
    """Does a file name end in a markup extension? Case doesn't matter."""
    return name.lower().endswith(MARKUP_EXTENSIONS)


def is_url(value) -> bool:
    """Is this an http(s) URL, with or without its scheme?

    Without a scheme, the string must start with a dotted host name (or
    `localhost`, or an IPv4 address). A host whose last label is a markup
    extension, like `index.html`, is taken to be a file name instead.
    """
    text = _as_text(value)
    if not text or "<" in text or any(c.isspace() for c in text):
        return False
    explicit = has_scheme(text)
    try:
        parts = urlsplit(text if explicit else f"https://{text}")
        host = parts.hostname
        parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in URL_SCHEMES or not host or not HOST_RE.match(host):
        return False
    if not explicit and is_markup_name(host):
        return False
    return True


def is_path(value) -> bool:
    """Could this be a filesystem path? Only the characters are checked, not
    whether anything exists there.
    """
    if isinstance(value, os.PathLike):
        return True
    text = _as_text(value)
    if not text or len(text) > PATH_MAX:
        return False
    return NOT_A_PATH_RE.search(text) is None
