# src/fatcp/modules/fatcopy/service.py
from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from fatcp.core.errors import FilesystemStat, InvalidPath, NotADirectory
from fatcp.core.logging import get_logger
from fatcp.core.paths import build_destination, display_path, split_path
from fatcp.core.progress import NoOpReporter, ProgressReporter

from .copier import copy_file
from .materializer import DirectoryMaterializer
from .schemas import CopyItem, CopyOptions, CopyRequest

log = get_logger("fatcp.service")


def _raise_walk_error(err: OSError) -> None:
    path = err.filename if isinstance(err.filename, str) else None
    raise FilesystemStat(f"cannot read {path}: {err.strerror or err}", path=path) from err


class FatCopyService:
    """
    Copy a tree to a FAT-friendly destination: every directory and file
    name below `src_root` is slugged, extensions are kept.

    Files are visited in lexical order. The first error stops the run;
    whatever was copied before it stays.
    """

    def __init__(
        self,
        src_root: str | Path,
        dst_root: str | Path,
        options: CopyOptions | None = None,
    ) -> None:
        self.src_root = os.path.abspath(os.fspath(src_root))
        self.dst_root = os.path.abspath(os.fspath(dst_root))
        self.options = options or CopyOptions()
        self.materializer = DirectoryMaterializer(
            verbose=self.options.verbose, mode=self.options.dir_mode
        )
        self.root_depth = len(split_path(self.src_root))

    @classmethod
    def from_request(cls, req: CopyRequest, options: CopyOptions) -> FatCopyService:
        verbose = req.verbose or options.verbose
        return cls(req.src_root, req.dst_root, options.model_copy(update={"verbose": verbose}))

    # ---------- planning ----------
    def _check_roots(self) -> None:
        if not os.path.isdir(self.src_root):
            raise NotADirectory(f"source {self.src_root} is not a directory", path=self.src_root)
        if os.path.commonpath([self.src_root, self.dst_root]) == self.src_root:
            raise InvalidPath(
                f"destination {self.dst_root} lies inside source {self.src_root}",
                path=self.dst_root,
            )

    def iter_sources(self, reporter: ProgressReporter | None = None) -> Iterator[str]:
        """Yield every non-directory entry under the source root, lexically."""
        self._check_roots()
        for dirpath, dirnames, filenames in os.walk(self.src_root, onerror=_raise_walk_error):
            dirnames.sort()
            for name in sorted(filenames):
                if reporter:
                    reporter.update("scan", 1)
                yield os.path.join(dirpath, name)

    def destination_for(self, src: str) -> str:
        return build_destination(self.dst_root, split_path(src), self.root_depth)

    def plan(self, reporter: ProgressReporter | None = None) -> list[tuple[str, str]]:
        """Pair each source file with its destination; nothing is written."""
        reporter = reporter or NoOpReporter()
        reporter.start("scan", total=None, text=self.src_root)
        pairs = [(src, self.destination_for(src)) for src in self.iter_sources(reporter)]
        reporter.end("scan")
        return pairs

    # ---------- apply ----------
    def copy_one(self, src: str, dst: str) -> CopyItem:
        """Ensure dst's parent exists, then copy."""
        created = self.materializer.ensure(os.path.dirname(dst))
        size = copy_file(src, dst, self.options.chunk_size)
        if self.options.verbose:
            log.info("copied %s to %s", display_path(src), display_path(dst))
        return CopyItem(source=src, destination=dst, bytes_copied=size, created_dir=created)

    def iter_apply(self, reporter: ProgressReporter | None = None) -> Iterator[CopyItem]:
        """
        Copy file by file while walking. A name that fails to sanitize
        stops the run at that file, after everything before it was copied.
        """
        if reporter:
            reporter.start("scan", total=None, text=self.src_root)
            total = sum(1 for _ in self.iter_sources(reporter))
            reporter.end("scan")
            reporter.start("copy", total=total, text=self.dst_root)
        for src in self.iter_sources():
            dst = self.destination_for(src)
            item = self.copy_one(src, dst)
            if reporter:
                reporter.update("copy", 1, text=os.path.basename(dst))
            yield item
        if reporter:
            reporter.end("copy")

    def apply(self, reporter: ProgressReporter | None = None) -> list[CopyItem]:
        return list(self.iter_apply(reporter))


def copy_to_fat(
    src_root: str | Path, dst_root: str | Path, options: CopyOptions | None = None
) -> list[CopyItem]:
    """Walk `src_root` and copy every file under `dst_root` with sanitized names."""
    return FatCopyService(src_root, dst_root, options).apply()
