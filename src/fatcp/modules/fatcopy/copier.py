# src/fatcp/modules/fatcopy/copier.py
from __future__ import annotations

import shutil

from fatcp.core.errors import CopyStreamFailure, FileCreateFailure, FileOpenFailure

DEFAULT_CHUNK_SIZE = 1024 * 1024


def copy_file(src: str, dst: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """
    Copy the bytes of `src` over `dst` and return how many were written.

    An existing `dst` is truncated. If the stream breaks part way the
    partial `dst` is left behind.
    """
    try:
        src_fh = open(src, "rb")
    except OSError as err:
        raise FileOpenFailure(f"cannot open source {src}: {err.strerror or err}", path=src) from err

    with src_fh:
        try:
            dst_fh = open(dst, "wb")
        except OSError as err:
            raise FileCreateFailure(
                f"cannot create destination {dst}: {err.strerror or err}", path=dst
            ) from err

        try:
            with dst_fh:
                shutil.copyfileobj(src_fh, dst_fh, chunk_size)
                written = dst_fh.tell()
        except OSError as err:
            # also covers a failing flush/close of dst_fh
            raise CopyStreamFailure(
                f"copying {src} to {dst} failed: {err.strerror or err}", path=dst
            ) from err
    return written
