"""HTTP client for the Maven Central publisher portal."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Optional

import httpx

from ..domain import (
    BundleNotFoundError,
    DeploymentStatus,
    RemoteRejection,
    UploadCredentials,
    UploadError,
    UploadOutcome,
)
from ..domain.constants import (
    BOUNDARY_PREFIX,
    CENTRAL_BASE_URL,
    CENTRAL_STATUS_PATH,
    CENTRAL_UPLOAD_PATH,
    PUBLISHING_TYPE_AUTOMATIC,
)


def generate_boundary() -> str:
    return BOUNDARY_PREFIX + uuid.uuid4().hex


class CentralUploader:
    """Upload a bundle to the portal and query deployment state."""

    def __init__(
        self,
        base_url: str = CENTRAL_BASE_URL,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.log = logging.getLogger(self.__class__.__name__)
        self._client = client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings, client: Optional[httpx.Client] = None) -> "CentralUploader":
        return cls(settings.central_base_url, client=client, timeout=settings.upload_timeout)

    def upload(self, bundle_file: Path, username: str, password: str) -> UploadOutcome:
        """POST the bundle once and report the answer.

        The form carries ``publishingType`` then ``bundle``; httpx streams the
        file and frames the parts with the boundary named in ``Content-Type``.
        A non-2xx status is returned in the outcome, not raised. Only a missing
        bundle or a transport failure raise.
        """
        bundle_file = Path(bundle_file)
        if not bundle_file.is_file():
            raise BundleNotFoundError(bundle_file.absolute())

        boundary = generate_boundary()
        credentials = UploadCredentials(username, password)
        url = f"{self.base_url}{CENTRAL_UPLOAD_PATH}"
        try:
            with bundle_file.open("rb") as handle:
                self.log.info("Uploading %s (%d bytes) to %s", bundle_file.name, bundle_file.stat().st_size, url)
                response = self._client.post(
                    url,
                    data={"publishingType": PUBLISHING_TYPE_AUTOMATIC},
                    files={"bundle": (bundle_file.name, handle, "application/octet-stream")},
                    headers={
                        "Authorization": credentials.authorization_header(),
                        "Content-Type": f"multipart/form-data; boundary={boundary}",
                    },
                )
        except httpx.HTTPError as exc:
            raise UploadError(f"upload request to {url} failed: {exc}") from exc
        except OSError as exc:
            raise UploadError(f"cannot read bundle {bundle_file}: {exc}") from exc

        outcome = UploadOutcome(http_status=response.status_code, response_body=response.text)
        if outcome.success:
            self.log.info("Central upload successful: %s", outcome.deployment_id)
        else:
            self.log.error("Central upload failed: HTTP %s\n%s", outcome.http_status, outcome.response_body)
        return outcome

    def fetch_status(self, deployment_id: str, username: str, password: str) -> DeploymentStatus:
        url = f"{self.base_url}{CENTRAL_STATUS_PATH}"
        credentials = UploadCredentials(username, password)
        try:
            response = self._client.post(
                url,
                params={"id": deployment_id},
                headers={"Authorization": credentials.authorization_header()},
            )
        except httpx.HTTPError as exc:
            raise UploadError(f"status request to {url} failed: {exc}") from exc

        if not 200 <= response.status_code <= 299:
            raise RemoteRejection(response.status_code, response.text, action="status query")
        try:
            payload = response.json()
        except ValueError as exc:
            raise UploadError(f"status response for {deployment_id} is not JSON: {exc}") from exc
        status = DeploymentStatus.from_payload(payload, deployment_id)
        self.log.info("Deployment %s state=%s", status.deployment_id, status.state)
        return status

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "CentralUploader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
