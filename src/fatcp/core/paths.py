from __future__ import annotations

import os
from collections.abc import Sequence

from slugify import slugify

from fatcp.core.errors import EmptyName, InvalidPath


def split_path(path: str) -> list[str]:
    """
    Split a fully-qualified path into its segments, e.g.
    "/var/log/syslog" -> ["var", "log", "syslog"].
    """
    if not path.startswith(os.sep):
        raise InvalidPath(f"{path} not a fully-qualified path", path=path)
    clean = os.path.normpath(path[1:])
    # normpath keeps a leading ".." it cannot resolve; nothing sits above the root
    return [p for p in clean.split(os.sep) if p not in ("", ".", "..")]


def sanitize_segment(name: str) -> str:
    """Slug a directory name for a FAT filesystem."""
    slugged = slugify(name)
    if not slugged:
        raise EmptyName(f"{name!r} has no characters left after sanitizing", path=name)
    return slugged


def sanitize_filename(name: str) -> str:
    """
    Slug a filename, keeping everything from the last '.' onward untouched
    so the extension survives.
    """
    last_dot = name.rfind(".")
    if last_dot >= 0:
        slugged = slugify(name[:last_dot]) + name[last_dot:]
    else:
        slugged = slugify(name)
    if not slugged:
        raise EmptyName(f"{name!r} has no characters left after sanitizing", path=name)
    return slugged


def build_destination(dst_root: str, segments: Sequence[str], root_depth: int) -> str:
    """
    Mirror a source file under `dst_root`.

    `segments` is the split source file path and `root_depth` the segment
    count of the source root; only the segments below the root are
    reproduced, each one sanitized.
    """
    if not segments or root_depth > len(segments) - 1:
        raise InvalidPath(
            f"{os.sep + os.sep.join(segments)} is not below a root of depth {root_depth}",
            path=os.sep + os.sep.join(segments),
        )
    dest = [dst_root.rstrip(os.sep) or os.sep]
    dest.extend(sanitize_segment(s) for s in segments[root_depth:-1])
    dest.append(sanitize_filename(segments[-1]))
    if dest[0] == os.sep:
        return os.sep + os.sep.join(dest[1:])
    return os.sep.join(dest)


def display_path(path: str) -> str:
    """
    Printable form of a path. Undecodable bytes that os.walk kept as
    surrogate escapes come out as U+FFFD.
    """
    return path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
