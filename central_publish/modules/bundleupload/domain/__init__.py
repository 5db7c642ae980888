from .artifact import ArtifactCoordinate, ArtifactFile, FileKind, LibraryKind, classify
from .errors import (
    ArchiveError,
    BundleNotFoundError,
    ChecksumError,
    ConfigurationError,
    NotFoundError,
    PublishError,
    RemoteRejection,
    UploadError,
)
from .models import (
    ChecksumAlgorithm,
    ChecksumRecord,
    DeploymentStatus,
    PublishConfig,
    StagingPolicy,
    UploadCredentials,
    UploadOutcome,
)

__all__ = [
    "ArtifactCoordinate",
    "ArtifactFile",
    "FileKind",
    "LibraryKind",
    "classify",
    "ArchiveError",
    "BundleNotFoundError",
    "ChecksumError",
    "ConfigurationError",
    "NotFoundError",
    "PublishError",
    "RemoteRejection",
    "UploadError",
    "ChecksumAlgorithm",
    "ChecksumRecord",
    "DeploymentStatus",
    "PublishConfig",
    "StagingPolicy",
    "UploadCredentials",
    "UploadOutcome",
]
