from __future__ import annotations

from fastapi import HTTPException, status


class FatcpError(Exception):
    """Base application exception."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ArgumentError(FatcpError):
    pass


class InvalidPath(FatcpError):
    pass


class EmptyName(FatcpError):
    """A name sanitized down to nothing."""


class FilesystemStat(FatcpError):
    pass


class NotADirectory(FatcpError):
    pass


class PathConflict(NotADirectory):
    """A file sits where a destination directory has to go."""


class DirectoryCreateFailure(FatcpError):
    pass


class FileOpenFailure(FatcpError):
    pass


class FileCreateFailure(FatcpError):
    pass


class CopyStreamFailure(FatcpError):
    pass


def to_http(exc: Exception) -> HTTPException:
    """
    Convert our exceptions to HTTPException with sensible defaults.
    """
    if isinstance(exc, (ArgumentError, InvalidPath, EmptyName)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, PathConflict):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, NotADirectory):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, FatcpError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )
    # Fallback
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )
