"""Locate the files of one coordinate inside a local Maven repository."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..domain import ArtifactCoordinate, ArtifactFile, ConfigurationError, LibraryKind, NotFoundError


class ArtifactSelector:
    """Enumerate the publishable files of ``<repo>/<group path>/<artifact>/<version>``."""

    def __init__(self, library_kind: LibraryKind = LibraryKind.PLAIN) -> None:
        self.library_kind = library_kind
        self.log = logging.getLogger(self.__class__.__name__)

    def artifact_dir(self, repo_root: Path, coordinate: ArtifactCoordinate) -> Path:
        missing = coordinate.missing_fields
        if missing:
            raise ConfigurationError(missing)
        return Path(repo_root) / coordinate.relative_dir

    def select(
        self,
        repo_root: Path,
        coordinate: ArtifactCoordinate,
        library_kind: Optional[LibraryKind] = None,
    ) -> List[ArtifactFile]:
        """Return the publishable files directly inside the version directory.

        The result is sorted by file name. Signatures, checksums and nested
        directories are left to the staging step.
        """
        version_dir = self.artifact_dir(repo_root, coordinate)
        self.log.info("Selecting artifacts for %s in %s", coordinate, version_dir)
        if not version_dir.is_dir():
            raise NotFoundError(version_dir)

        selected: List[ArtifactFile] = []
        for path in sorted(version_dir.iterdir(), key=lambda p: p.name):
            if not path.is_file():
                continue
            artifact = ArtifactFile(absolute_path=path, relative_path=path.relative_to(repo_root))
            if artifact.is_publishable:
                selected.append(artifact)
            else:
                self.log.debug("Not publishable, skipped for checksums: %s", path.name)

        self._warn_missing_primaries(coordinate, selected, library_kind or self.library_kind)
        self.log.info(
            "Selected %d publishable files for %s: %s",
            len(selected),
            coordinate,
            ", ".join(item.name for item in selected) or "-",
        )
        return selected

    def _warn_missing_primaries(
        self,
        coordinate: ArtifactCoordinate,
        selected: List[ArtifactFile],
        library_kind: LibraryKind,
    ) -> None:
        names = {item.name for item in selected}
        for extension in (library_kind.primary_extension, "pom"):
            expected = coordinate.file_name(extension)
            if expected not in names:
                self.log.warning(
                    "Expected %s artifact %s is missing for %s (library kind=%s)",
                    extension,
                    expected,
                    coordinate,
                    library_kind.value,
                )
