"""Copy an artifact directory into an isolated staging tree."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

from ..domain import ArchiveError, FileKind, StagingPolicy, classify
from ..util import walk_tree

log = logging.getLogger(__name__)

STAGING_PREFIX = "central-publish-"


def _is_staged(path: Path, policy: StagingPolicy) -> bool:
    if path.is_dir() or policy is StagingPolicy.FULL:
        return True
    return classify(path.name) is not FileKind.OTHER


def stage_artifacts(
    repo_root: Path,
    artifact_dir: Path,
    staging_root: Path,
    policy: StagingPolicy = StagingPolicy.FILTERED,
) -> List[Path]:
    """Mirror ``artifact_dir`` below ``staging_root`` keeping its path relative to ``repo_root``.

    Returns the staged files in walk order. With :attr:`StagingPolicy.FILTERED`
    only publishable, signature and checksum files are copied; directories are
    always recreated.
    """
    target_dir = staging_root / artifact_dir.relative_to(repo_root)
    target_dir.mkdir(parents=True, exist_ok=True)
    staged: List[Path] = []
    try:
        for source in walk_tree(artifact_dir):
            target = target_dir / source.relative_to(artifact_dir)
            if not _is_staged(source, policy):
                log.debug("Skipping %s (policy=%s)", source.name, policy.value)
                continue
            if source.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
            staged.append(target)
    except OSError as exc:
        raise ArchiveError(staging_root, f"staging copy failed: {exc}") from exc
    log.info("Staged %d files into %s (policy=%s)", len(staged), staging_root, policy.value)
    return staged


class StagingTree:
    """Temporary directory owned by one publish run.

    Removed on exit unless ``keep`` is set, in which case it is left for the
    operating system's temp cleanup.
    """

    def __init__(self, keep: bool = False, parent: Optional[Path] = None) -> None:
        self.keep = keep
        self.parent = parent
        self.root: Optional[Path] = None

    def __enter__(self) -> Path:
        self.root = Path(tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=self.parent))
        return self.root

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.root is None:
            return
        if self.keep:
            log.info("Keeping staging directory %s", self.root)
            return
        shutil.rmtree(self.root, ignore_errors=True)
