"""Zip a staging tree into the upload bundle."""

from __future__ import annotations

import logging
import shutil
import zipfile
from pathlib import Path

from ..domain import ArchiveError
from ..util import relative_posix, walk_tree

# Earliest timestamp the zip format can represent.
PINNED_DATE_TIME = (1980, 1, 1, 0, 0, 0)
COPY_BUFFER = 64 * 1024


class ArchiveBuilder:
    """Write every directory and file below a staging root as zip entries.

    Entry names are relative to the staging root and always use ``/``.
    Directories, empty ones included, get an entry with a trailing slash.
    With ``reproducible`` set every entry carries the same timestamp so two
    runs over identical trees produce identical bytes.
    """

    def __init__(self, reproducible: bool = True, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self.reproducible = reproducible
        self.compression = compression
        self.log = logging.getLogger(self.__class__.__name__)

    def build(self, staging_root: Path, output_file: Path) -> None:
        staging_root = Path(staging_root)
        output_file = Path(output_file)
        if not staging_root.is_dir():
            raise ArchiveError(output_file, f"staging directory missing: {staging_root}")

        entries = 0
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(output_file, "w", compression=self.compression) as bundle:
                for path in walk_tree(staging_root):
                    name = relative_posix(path, staging_root)
                    if path.is_dir():
                        bundle.writestr(self._entry(path, f"{name}/"), b"")
                    else:
                        with path.open("rb") as src, bundle.open(self._entry(path, name), "w") as dst:
                            shutil.copyfileobj(src, dst, COPY_BUFFER)
                    entries += 1
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
            raise ArchiveError(output_file, str(exc)) from exc

        self.log.info(
            "Bundle written %s (%d entries, %d bytes)",
            output_file,
            entries,
            output_file.stat().st_size,
        )

    def _entry(self, path: Path, name: str) -> zipfile.ZipInfo:
        if self.reproducible:
            info = zipfile.ZipInfo(name, date_time=PINNED_DATE_TIME)
        else:
            info = zipfile.ZipInfo.from_file(path, name)
        if name.endswith("/"):
            info.external_attr = (0o40755 << 16) | 0x10
            info.compress_type = zipfile.ZIP_STORED
        else:
            info.external_attr = 0o644 << 16
            info.compress_type = self.compression
        return info
