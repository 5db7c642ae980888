"""Wire the publish pipeline from one Settings instance."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from .modules.bundleupload.archive import ArchiveBuilder
from .modules.bundleupload.checksum import ChecksumGenerator
from .modules.bundleupload.domain import PublishConfig
from .modules.bundleupload.fileget import ArtifactSelector
from .modules.bundleupload.service import PublishOrchestrator
from .modules.bundleupload.upload import CentralUploader
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    client: Optional[httpx.Client] = None
    selector: ArtifactSelector = field(init=False)
    checksums: ChecksumGenerator = field(init=False)
    archiver: ArchiveBuilder = field(init=False)
    uploader: CentralUploader = field(init=False)
    publisher: PublishOrchestrator = field(init=False)

    def __post_init__(self) -> None:
        self.selector = ArtifactSelector(self.settings.library_kind)
        self.checksums = ChecksumGenerator()
        self.archiver = ArchiveBuilder(reproducible=self.settings.reproducible_archive)
        self.uploader = CentralUploader.from_settings(self.settings, client=self.client)
        self.publisher = PublishOrchestrator(
            self.uploader,
            selector=self.selector,
            checksums=self.checksums,
            archiver=self.archiver,
        )

    def publish_config(self) -> PublishConfig:
        return PublishConfig.from_settings(self.settings)

    def close(self) -> None:
        self.uploader.close()
