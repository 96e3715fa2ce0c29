# src/fatcp/modules/fatcopy/materializer.py
from __future__ import annotations

import logging
import os
import stat

from fatcp.core.errors import DirectoryCreateFailure, FilesystemStat, PathConflict
from fatcp.core.logging import get_logger
from fatcp.core.paths import display_path


class DirectoryMaterializer:
    """Creates destination directories on demand."""

    def __init__(
        self,
        verbose: bool = False,
        mode: int = 0o777,
        logger: logging.Logger | None = None,
    ) -> None:
        self.verbose = verbose
        self.mode = mode
        self.log = logger or get_logger("fatcp.materializer")

    def exists(self, path: str) -> bool:
        """
        False if nothing is at `path`, True if a directory is.
        Anything else at `path` is an error.
        """
        try:
            st = os.stat(path)
        except FileNotFoundError:
            return False
        except NotADirectoryError as err:
            raise PathConflict(
                f"cannot create {path}: one of its parents is not a directory", path=path
            ) from err
        except OSError as err:
            raise FilesystemStat(f"cannot stat {path}: {err.strerror}", path=path) from err
        if not stat.S_ISDIR(st.st_mode):
            raise PathConflict(f"{path} exists and is not a directory", path=path)
        return True

    def ensure(self, path: str) -> bool:
        """Create `path` and any missing parents. Returns True if it had to."""
        if self.exists(path):
            return False
        if self.verbose:
            self.log.info("creating directory %s", display_path(path))
        try:
            os.makedirs(path, mode=self.mode, exist_ok=True)
        except OSError as err:
            raise DirectoryCreateFailure(
                f"cannot create directory {path}: {err.strerror or err}", path=path
            ) from err
        return True
