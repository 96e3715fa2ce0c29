# src/fatcp/cli.py
from __future__ import annotations

import typer

from fatcp.commands.copy import register as register_copy

app = typer.Typer(help="Copy a directory tree with FAT-safe names", add_completion=False)

register_copy(app)


if __name__ == "__main__":
    app()
