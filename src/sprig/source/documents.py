"""Find the markup document a resolved path stands for, and read it."""
from __future__ import annotations

import logging
import os

from ..dammit import decode_markup
from ..errors import FilesystemError
from .locators import is_markup_name
from .paths import PathKind, ResolvedPath, list_files, markup_files_named, resolve_path

__all__ = ["INDEX_FILENAME", "find_document", "load_document", "read_file", "is_xml_path"]

log = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"


def is_xml_path(path: ResolvedPath) -> bool:
    return path.extension.lower() == ".xml"


def _only(candidates: list[str], directory: str, why: str) -> ResolvedPath | None:
    if len(candidates) != 1:
        log.debug("No single %s in %s: %s", why, directory, candidates or "none found")
        return None
    return find_document(resolve_path(os.path.join(directory, candidates[0])))


def find_document(resolved: ResolvedPath) -> ResolvedPath | None:
    """Find the file holding the document for a resolved path.

    - A file is its own document.
    - A directory's document is its `index.html` (in any case), or else its
      only markup file.
    - A path to nothing stands for the only markup file beside it whose name
      starts with the path's file name (`page` finds `page.html`).

    Anything else is ambiguous, and gives None.
    """
    if resolved.kind is PathKind.FILE:
        return resolved
    if resolved.kind is PathKind.DIRECTORY:
        names = list_files(resolved.absolute)
        for name in names:
            if name.lower() == INDEX_FILENAME:
                return find_document(resolve_path(os.path.join(resolved.absolute, name)))
        return _only(
            [name for name in names if is_markup_name(name)],
            resolved.absolute,
            "markup file",
        )
    return _only(
        markup_files_named(resolved.directory, resolved.filename),
        resolved.directory,
        f"markup file named {resolved.filename!r}",
    )


def read_file(path: ResolvedPath, from_encoding: str | None = None, exclude_encodings=None) -> str:
    """Read a markup file as text.

    `from_encoding` is tried first, and nothing in `exclude_encodings` is tried.
    """
    try:
        with open(path.absolute, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FilesystemError(f"Could not read {path.absolute!r}: {e}") from e
    return decode_markup(
        data,
        known_definite_encodings=[from_encoding],
        is_html=not is_xml_path(path),
        exclude_encodings=exclude_encodings,
    )


def load_document(
    resolved: ResolvedPath,
    from_encoding: str | None = None,
    exclude_encodings=None,
) -> str | None:
    """The text of the document a resolved path stands for, or None if there
    isn't exactly one.
    """
    document = find_document(resolved)
    if document is None:
        return None
    return read_file(document, from_encoding, exclude_encodings)
