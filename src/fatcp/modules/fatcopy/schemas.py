# src/fatcp/modules/fatcopy/schemas.py
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, DirectoryPath, Field, field_validator

from fatcp.core.config import Settings


class CopyOptions(BaseModel):
    """Per-run knobs handed to the walker and the directory materializer."""

    model_config = ConfigDict(frozen=True)

    verbose: bool = False
    dir_mode: int = Field(0o777, ge=0, le=0o7777)
    chunk_size: int = Field(1024 * 1024, gt=0)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> CopyOptions:
        values = {
            "verbose": settings.VERBOSE,
            "dir_mode": settings.DIR_MODE,
            "chunk_size": settings.CHUNK_SIZE,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class CopyItem(BaseModel):
    source: str = Field(..., examples=["/data/music/Sub Dir!/My File?.mp3"])
    destination: str = Field(..., examples=["/media/usb/sub-dir/my-file.mp3"])
    bytes_copied: int | None = Field(
        None, ge=0, description="Bytes written; null when only planned."
    )
    created_dir: bool = Field(
        False, description="True when the destination's parent had to be created."
    )


class CopyRequest(BaseModel):
    src_root: DirectoryPath = Field(..., examples=["/data/music"])
    dst_root: Path = Field(..., examples=["/media/usb"])
    verbose: bool = Field(False, description="Log every directory and file copied.")

    @field_validator("src_root", "dst_root")
    @classmethod
    def _absolute(cls, p: Path) -> Path:
        return p.expanduser().resolve()


class CopyResponse(BaseModel):
    dry_run: bool = Field(..., examples=[True])
    count: int = Field(..., ge=0, description="Number of files planned or copied.")
    items: list[CopyItem] = Field(default_factory=list)
