# src/fatcp/commands/copy.py
from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console

from fatcp.commands.common import resolve_roots
from fatcp.core.config import get_settings
from fatcp.core.errors import FatcpError
from fatcp.core.logging import configure_logging
from fatcp.core.paths import display_path
from fatcp.core.rich_progress import make_copy_progress
from fatcp.modules.fatcopy.schemas import CopyOptions
from fatcp.modules.fatcopy.service import FatCopyService
from fatcp.version import get_version


class CopyRunner:
    def __init__(
        self,
        src_root: Path,
        dst_root: Path,
        options: CopyOptions,
        dry_run: bool,
        show_progress: bool,
    ) -> None:
        self.svc = FatCopyService(src_root, dst_root, options)
        self.dry_run = dry_run
        self.show_progress = show_progress
        self.console = Console()

    def run(self) -> None:
        if self.dry_run:
            pairs = self.svc.plan()
            for src, dst in pairs:
                typer.echo(f"{display_path(src)} -> {display_path(dst)}")
            typer.echo(f"[PLAN] Would copy {len(pairs)} file(s).")
            return

        t0 = time.perf_counter()
        if self.show_progress:
            progress, reporter = make_copy_progress(Console(stderr=True))
            with progress:
                items = self.svc.apply(reporter=reporter)
        else:
            items = self.svc.apply()
        elapsed = time.perf_counter() - t0

        total_bytes = sum(i.bytes_copied or 0 for i in items)
        self.console.print(
            f"Copied {len(items)} file(s), {total_bytes} bytes in {elapsed:.2f}s.",
            style="bold green",
        )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


def register(app: typer.Typer) -> None:
    """Attach the copy command to the given Typer app."""

    @app.command(help="Copy SOURCE to DEST, renaming everything for FAT filesystems.")
    def copy(
        source: Path | None = typer.Argument(None, help="Source directory."),
        dest: Path | None = typer.Argument(None, help="Destination directory."),
        src_opt: Path | None = typer.Option(None, "--src", "-src", help="Source directory."),
        dest_opt: Path | None = typer.Option(None, "--dest", "-dest", help="Destination directory."),
        verbose: int = typer.Option(0, "--verbose", "-v", help="Verbosity level; >0 logs each copy."),
        plan: bool = typer.Option(False, "--plan", help="Only list what would be copied."),
        progress: bool = typer.Option(False, "--progress/--no-progress", help="Show a progress bar."),
        version: bool = typer.Option(
            False, "--version", callback=_version_callback, is_eager=True, help="Print the version."
        ),
    ):
        settings = get_settings()
        configure_logging("INFO" if verbose > 0 else settings.LOG_LEVEL, json=settings.LOG_JSON)
        try:
            src_root, dst_root = resolve_roots(source, dest, src_opt, dest_opt)
            options = CopyOptions.from_settings(settings, verbose=(verbose > 0) or None)
            CopyRunner(src_root, dst_root, options, dry_run=plan, show_progress=progress).run()
        except FatcpError as err:
            typer.echo(f"error: {display_path(str(err))}", err=True)
            raise typer.Exit(code=1) from err
