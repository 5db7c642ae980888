"""Compute checksum sidecar files for publishable artifacts."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import List, Protocol, Sequence

from ..domain import ChecksumAlgorithm, ChecksumError, ChecksumRecord

ALL_ALGORITHMS: Sequence[ChecksumAlgorithm] = (
    ChecksumAlgorithm.MD5,
    ChecksumAlgorithm.SHA1,
    ChecksumAlgorithm.SHA256,
)


def sidecar_path(source: Path, algorithm: ChecksumAlgorithm) -> Path:
    return source.with_name(f"{source.name}.{algorithm.value}")


class SidecarWriter(Protocol):
    """Persists a digest next to its source file."""

    def write(self, sidecar: Path, hex_digest: str) -> None:  # pragma: no cover - interface
        ...


class FileSidecarWriter:
    """Default writer: overwrites ``<file>.<algorithm>`` on disk, in place."""

    def write(self, sidecar: Path, hex_digest: str) -> None:
        sidecar.write_text(hex_digest, encoding="ascii")


class ChecksumGenerator:
    def __init__(self, writer: SidecarWriter | None = None) -> None:
        self.writer = writer or FileSidecarWriter()
        self.log = logging.getLogger(self.__class__.__name__)

    def generate(self, file: Path, algorithm: ChecksumAlgorithm | str) -> ChecksumRecord:
        """Hash the full content of ``file`` and write the lowercase hex digest sidecar."""
        algorithm = ChecksumAlgorithm(algorithm)
        try:
            content = Path(file).read_bytes()
        except OSError as exc:
            raise ChecksumError(Path(file), str(exc)) from exc

        hex_digest = hashlib.new(algorithm.value, content).hexdigest()
        sidecar = sidecar_path(Path(file), algorithm)
        try:
            self.writer.write(sidecar, hex_digest)
        except OSError as exc:
            raise ChecksumError(sidecar, str(exc)) from exc
        self.log.debug("%s %s -> %s", algorithm.value, file, hex_digest)
        return ChecksumRecord(algorithm=algorithm, hex_digest=hex_digest, source=Path(file), sidecar=sidecar)

    def generate_all(self, file: Path) -> List[ChecksumRecord]:
        return [self.generate(file, algorithm) for algorithm in ALL_ALGORITHMS]
