"""Exceptions raised by the indexing pipeline."""
from __future__ import annotations

from pathlib import Path


class IndexerError(Exception):
    """Base class for everything the indexer raises on purpose."""


class DocumentReadError(IndexerError):
    """A source page (or the post directory itself) could not be read.

    Aborts the whole build; no artifact is written afterwards.
    """

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        msg = f"cannot read {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class BuildCancelled(IndexerError):
    """Raised between documents when the caller's cancel event is set."""


class OutputWriteError(IndexerError):
    def __init__(self, path: Path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"cannot write {self.path}: {cause}")
