"""Runtime configuration for central-publish."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .modules.bundleupload.domain import LibraryKind, StagingPolicy
from .modules.bundleupload.domain.constants import CENTRAL_BASE_URL, DEFAULT_BUNDLE_NAME


def _default_repository_root() -> Path:
    return Path.home() / ".m2" / "repository"


class Settings(BaseSettings):
    """Configuration values mapped from ``CENTRAL_PUBLISH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CENTRAL_PUBLISH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Local repository and output
    repository_root: Path = Field(default_factory=_default_repository_root)
    output_dir: Path = Path("build")
    bundle_name: str = DEFAULT_BUNDLE_NAME

    # Coordinate
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""

    # Portal credentials, never logged
    username: str = Field("", repr=False)
    password: str = Field("", repr=False)

    # Signing is done upstream; the key path only enables a missing-signature warning
    signing_key_file: Optional[str] = None
    signing_passphrase: Optional[str] = Field(None, repr=False)

    # Pipeline switches
    library_kind: LibraryKind = LibraryKind.PLAIN
    staging_policy: StagingPolicy = StagingPolicy.FILTERED
    keep_staging: bool = False
    reproducible_archive: bool = True

    # Remote portal
    central_base_url: str = CENTRAL_BASE_URL
    upload_timeout: Optional[float] = None
    # Query the deployment state once after a successful upload
    report_status: bool = False

    log_level: str = "INFO"

    @field_validator("repository_root", mode="after")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
