"""Turn a path given by a user into an absolute, classified path.

Names are compared through `os.path.normcase`, so lookups are case-insensitive
exactly where the filesystem usually is (Windows). Markup extensions are
always matched case-insensitively.
"""
from __future__ import annotations

import logging
import os
import stat
from enum import Enum

from ..errors import FilesystemError, InvalidArgument
from ..models import Record
from .locators import is_markup_name

__all__ = ["PathKind", "ResolvedPath", "resolve_path", "list_files", "markup_files_named"]

log = logging.getLogger(__name__)


class PathKind(Enum):
    """What, if anything, a path points to."""

    FILE = "file"
    DIRECTORY = "directory"
    UNKNOWN = "unknown"


class ResolvedPath(Record):
    absolute: str
    directory: str
    filename: str
    extension: str
    kind: PathKind


def _kind_of(absolute: str) -> PathKind:
    try:
        mode = os.stat(absolute).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return PathKind.UNKNOWN
    except OSError as e:
        raise FilesystemError(f"Could not inspect {absolute!r}: {e}") from e
    if stat.S_ISREG(mode):
        return PathKind.FILE
    if stat.S_ISDIR(mode):
        return PathKind.DIRECTORY
    return PathKind.UNKNOWN


def list_files(directory: str) -> list[str]:
    """The names of the regular files in a directory, sorted.

    A directory that doesn't exist has no files.
    """
    try:
        with os.scandir(directory) as entries:
            return sorted(entry.name for entry in entries if entry.is_file())
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as e:
        raise FilesystemError(f"Could not list {directory!r}: {e}") from e


def markup_files_named(directory: str, stem: str) -> list[str]:
    """The markup files in `directory` whose names start with `stem`."""
    stem = os.path.normcase(stem)
    return [
        name
        for name in list_files(directory)
        if is_markup_name(name) and os.path.normcase(name).startswith(stem)
    ]


def resolve_path(path, caller: str | None = None) -> ResolvedPath:
    """Normalize and classify a path.

    :param path: An absolute or relative path, as a string or path-like object.
    :param caller: The directory relative paths are taken from. Defaults to the
        current working directory.
    :return: A new ResolvedPath. A directory that shares its name with exactly
        one markup file beside it (`docs/` next to `docs.html`) resolves to that
        file.
    :raise FilesystemError: If the filesystem fails for any reason other than
        the path not existing.
    """
    if not isinstance(path, (str, os.PathLike)):
        raise InvalidArgument("Expected path to be a string or path-like object.")
    path = os.path.expanduser(os.fspath(path))
    if not os.path.isabs(path):
        path = os.path.join(caller or os.getcwd(), path)
    absolute = os.path.normcase(os.path.abspath(path))
    directory, filename = os.path.split(absolute)
    kind = _kind_of(absolute)
    if kind is PathKind.DIRECTORY and filename:
        twins = markup_files_named(directory, filename)
        if len(twins) == 1:
            log.debug("Directory %s resolves to %s", absolute, twins[0])
            return resolve_path(os.path.join(directory, twins[0]))
    return ResolvedPath(
        absolute=absolute,
        directory=directory,
        filename=filename,
        extension=os.path.splitext(filename)[1],
        kind=kind,
    )
