"""Dataclasses exchanged between the publish pipeline stages."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .artifact import ArtifactCoordinate, LibraryKind
from .constants import BUNDLE_EXTENSION, DEFAULT_BUNDLE_NAME
from .errors import ConfigurationError


class ChecksumAlgorithm(str, Enum):
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def hex_length(self) -> int:
        return {"md5": 32, "sha1": 40, "sha256": 64}[self.value]


class StagingPolicy(str, Enum):
    """How much of the artifact directory is copied into the staging tree."""

    FULL = "full"
    FILTERED = "filtered"


@dataclass(frozen=True)
class ChecksumRecord:
    algorithm: ChecksumAlgorithm
    hex_digest: str
    source: Path
    sidecar: Path


@dataclass(frozen=True)
class UploadCredentials:
    username: str
    password: str = field(repr=False)

    def authorization_header(self) -> str:
        # The portal expects base64(user:pass) under the Bearer scheme.
        token = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8")).decode("ascii")
        return f"Bearer {token}"


@dataclass(frozen=True)
class UploadOutcome:
    http_status: int
    response_body: str

    @property
    def success(self) -> bool:
        return 200 <= self.http_status <= 299

    @property
    def deployment_id(self) -> Optional[str]:
        """Opaque deployment identifier returned by the portal on success."""
        return self.response_body if self.success else None


@dataclass
class DeploymentStatus:
    deployment_id: str
    deployment_name: Optional[str] = None
    state: Optional[str] = None
    purls: List[str] = field(default_factory=list)
    errors: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], deployment_id: str) -> "DeploymentStatus":
        return cls(
            deployment_id=payload.get("deploymentId") or deployment_id,
            deployment_name=payload.get("deploymentName"),
            state=payload.get("deploymentState"),
            purls=list(payload.get("purls") or []),
            errors=dict(payload.get("errors") or {}),
        )

    @property
    def failed(self) -> bool:
        return self.state == "FAILED"


@dataclass
class PublishConfig:
    """Everything one publish run needs; built from :class:`Settings` or by hand."""

    group_id: str
    artifact_id: str
    version: str
    username: str
    password: str = field(repr=False)
    repository_root: Path
    output_dir: Path
    bundle_name: str = DEFAULT_BUNDLE_NAME
    library_kind: LibraryKind = LibraryKind.PLAIN
    staging_policy: StagingPolicy = StagingPolicy.FILTERED
    keep_staging: bool = False
    signing_key_file: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Any) -> "PublishConfig":
        return cls(
            group_id=settings.group_id,
            artifact_id=settings.artifact_id,
            version=settings.version,
            username=settings.username,
            password=settings.password,
            repository_root=Path(settings.repository_root),
            output_dir=Path(settings.output_dir),
            bundle_name=settings.bundle_name,
            library_kind=LibraryKind(settings.library_kind),
            staging_policy=StagingPolicy(settings.staging_policy),
            keep_staging=settings.keep_staging,
            signing_key_file=settings.signing_key_file,
        )

    @property
    def missing_fields(self) -> List[str]:
        required = (
            ("username", self.username),
            ("password", self.password),
            ("group_id", self.group_id),
            ("artifact_id", self.artifact_id),
            ("version", self.version),
        )
        return [name for name, value in required if not (value or "").strip()]

    @property
    def coordinate(self) -> ArtifactCoordinate:
        return ArtifactCoordinate(self.group_id, self.artifact_id, self.version)

    @property
    def credentials(self) -> UploadCredentials:
        return UploadCredentials(self.username, self.password)

    def bundle_file(self) -> Path:
        try:
            name = self.bundle_name.format(
                group_id=self.group_id,
                artifact_id=self.artifact_id,
                version=self.version,
            )
        except (KeyError, IndexError, ValueError) as exc:
            raise ConfigurationError(
                ["bundle_name"],
                detail=f"bundle_name template {self.bundle_name!r} is invalid: {exc!r}",
            ) from exc
        return self.output_dir / f"{name}.{BUNDLE_EXTENSION}"
