# src/fatcp/commands/common.py
from __future__ import annotations

from pathlib import Path

from fatcp.core.errors import ArgumentError


def resolve_roots(
    source: Path | None,
    dest: Path | None,
    src_opt: Path | None,
    dest_opt: Path | None,
) -> tuple[Path, Path]:
    """
    Accept either `fatcp SRC DEST` or `fatcp -src SRC -dest DEST` and
    return both as absolute paths. The source must be an existing directory.
    """
    if (source or dest) and (src_opt or dest_opt):
        raise ArgumentError("give source and destination either as arguments or as -src/-dest, not both")
    src = source or src_opt
    dst = dest or dest_opt
    if src is None or dst is None:
        raise ArgumentError("fatcp requires a source and a destination argument.")

    try:
        src = src.expanduser().resolve()
        dst = dst.expanduser().resolve()
    except (OSError, RuntimeError) as err:
        raise ArgumentError(f"cannot resolve path: {err}") from err

    if not src.exists():
        raise ArgumentError(f"source directory {src} does not exist.", path=str(src))
    if not src.is_dir():
        raise ArgumentError(f"source {src} is not a directory.", path=str(src))
    return src, dst
