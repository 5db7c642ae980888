"""Errors raised by the publish pipeline.

Every failure surfaces as a :class:`PublishError` subclass so the entrypoint can
turn it into one terminal, human-readable message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


class PublishError(Exception):
    """Base class for all publish pipeline failures."""


class ConfigurationError(PublishError):
    """Raised when required fields are empty or a setting cannot be used."""

    def __init__(self, missing_fields: Iterable[str], detail: Optional[str] = None) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(detail or f"publish is not configured, missing: {', '.join(self.missing_fields)}")


class NotFoundError(PublishError):
    """Raised when the coordinate's version directory is absent."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"local artifact directory for upload not found: {path}")


class ChecksumError(PublishError):
    """Raised when an artifact cannot be read or its sidecar cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"checksum generation failed for {path}: {reason}")


class ArchiveError(PublishError):
    """Raised when the bundle archive cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"failed to write bundle {path}: {reason}")


class UploadError(PublishError):
    """Raised when the upload request cannot be completed."""


class BundleNotFoundError(UploadError, FileNotFoundError):
    """Raised before any network I/O when the bundle file is missing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        UploadError.__init__(self, f"upload file not found: {path}")

    def __str__(self) -> str:
        return f"upload file not found: {self.path}"


class RemoteRejection(UploadError):
    """The portal answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str, *, action: str = "upload") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"central {action} failed: HTTP {status_code}\n{body}")
