"""Error taxonomy for the file-processing pipeline."""

from __future__ import annotations


class TrackerError(Exception):
    """Base class for batch-level processing failures."""

    def __init__(self, message: str, file_name: str | None = None):
        super().__init__(message)
        self.file_name = file_name

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_name:
            return f"{self.file_name}: {base}"
        return base


class FormatError(TrackerError, ValueError):
    """Content is not a recognizable CSV/XML export (or unsupported extension)."""


class ReadError(TrackerError, OSError):
    """A source file could not be read as text."""


class ProcessingInProgressError(TrackerError, RuntimeError):
    """Another processing run is already replacing the working dataset."""
