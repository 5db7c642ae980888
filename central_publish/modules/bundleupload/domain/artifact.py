"""Domain objects describing artifacts inside a local Maven repository."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List

from .constants import CHECKSUM_SUFFIXES, PUBLISHABLE_EXTENSIONS, SIGNATURE_SUFFIX


class LibraryKind(str, Enum):
    """Which kind of build produced the artifacts; picks the expected primary file."""

    ANDROID = "android"
    PLAIN = "plain"
    PLUGIN = "plugin"

    @property
    def primary_extension(self) -> str:
        return "aar" if self is LibraryKind.ANDROID else "jar"


class FileKind(str, Enum):
    PUBLISHABLE = "publishable"
    SIGNATURE = "signature"
    CHECKSUM = "checksum"
    OTHER = "other"


def classify(name: str) -> FileKind:
    """Classify a file by its name alone."""
    if name.endswith(SIGNATURE_SUFFIX):
        return FileKind.SIGNATURE
    if name.endswith(CHECKSUM_SUFFIXES):
        return FileKind.CHECKSUM
    if Path(name).suffix.lstrip(".") in PUBLISHABLE_EXTENSIONS:
        return FileKind.PUBLISHABLE
    return FileKind.OTHER


@dataclass(frozen=True)
class ArtifactCoordinate:
    """Represents a Maven artifact coordinate (group, artifact, version)."""

    group_id: str
    artifact_id: str
    version: str

    @property
    def missing_fields(self) -> List[str]:
        return [
            name
            for name, value in (
                ("group_id", self.group_id),
                ("artifact_id", self.artifact_id),
                ("version", self.version),
            )
            if not (value or "").strip()
        ]

    @property
    def path_segments(self) -> List[str]:
        return [*self.group_id.split("."), self.artifact_id, self.version]

    @property
    def relative_dir(self) -> Path:
        return Path(*self.path_segments)

    def file_name(self, extension: str) -> str:
        return f"{self.artifact_id}-{self.version}.{extension}"

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class ArtifactFile:
    """One file below a coordinate's version directory."""

    absolute_path: Path
    relative_path: Path

    @property
    def name(self) -> str:
        return self.absolute_path.name

    @property
    def extension(self) -> str:
        return self.absolute_path.suffix.lstrip(".")

    @property
    def kind(self) -> FileKind:
        return classify(self.name)

    @property
    def is_publishable(self) -> bool:
        return self.kind is FileKind.PUBLISHABLE
