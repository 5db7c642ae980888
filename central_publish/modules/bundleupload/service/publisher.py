"""Sequence selection, checksums, staging, archiving and upload for one publish."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..archive import ArchiveBuilder
from ..checksum import ChecksumGenerator
from ..domain import (
    ArchiveError,
    ConfigurationError,
    FileKind,
    PublishConfig,
    RemoteRejection,
    UploadOutcome,
    classify,
)
from ..fileget import ArtifactSelector, StagingTree, stage_artifacts
from ..upload import CentralUploader


class PublishOrchestrator:
    """Run the publish pipeline; either everything succeeds or a PublishError is raised.

    Checksums are written next to the original repository files, not into the
    staging copy. They stay on disk when a later stage fails, which is safe
    because regenerating them is idempotent.
    """

    def __init__(
        self,
        uploader: CentralUploader,
        selector: Optional[ArtifactSelector] = None,
        checksums: Optional[ChecksumGenerator] = None,
        archiver: Optional[ArchiveBuilder] = None,
    ) -> None:
        self.uploader = uploader
        self.selector = selector or ArtifactSelector()
        self.checksums = checksums or ChecksumGenerator()
        self.archiver = archiver or ArchiveBuilder()
        self.log = logging.getLogger(self.__class__.__name__)

    def publish(self, config: PublishConfig) -> UploadOutcome:
        missing = config.missing_fields
        if missing:
            raise ConfigurationError(missing)
        bundle_file = config.bundle_file()

        coordinate = config.coordinate
        self.log.info("Publishing %s from %s", coordinate, config.repository_root)
        artifacts = self.selector.select(config.repository_root, coordinate, config.library_kind)
        for artifact in artifacts:
            self.checksums.generate_all(artifact.absolute_path)
        self.log.info("Generated %d checksum files", len(artifacts) * 3)

        artifact_dir = self.selector.artifact_dir(config.repository_root, coordinate)
        with StagingTree(keep=config.keep_staging) as staging_root:
            staged = stage_artifacts(
                config.repository_root,
                artifact_dir,
                staging_root,
                policy=config.staging_policy,
            )
            self._check_signatures(config, staged)
            try:
                self.archiver.build(staging_root, bundle_file)
            except ArchiveError:
                bundle_file.unlink(missing_ok=True)
                raise

        outcome = self.uploader.upload(bundle_file, config.username, config.password)
        if not outcome.success:
            raise RemoteRejection(outcome.http_status, outcome.response_body)
        return outcome

    def _check_signatures(self, config: PublishConfig, staged: List[Path]) -> None:
        signatures = [path for path in staged if classify(path.name) is FileKind.SIGNATURE]
        if signatures:
            self.log.info("Bundle carries %d signature files", len(signatures))
        elif config.signing_key_file:
            self.log.warning(
                "Signing key %s is configured but no .asc files were found for %s",
                config.signing_key_file,
                config.coordinate,
            )
