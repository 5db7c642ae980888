"""Process entrypoint: publish the configured coordinate once."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .modules.bundleupload.domain import PublishError
from .settings import Settings, get_settings

log = logging.getLogger(__name__)


def _report_status(container: ServiceContainer, deployment_id: str) -> None:
    # The upload already succeeded; a failed status query only warns.
    settings = container.settings
    try:
        status = container.uploader.fetch_status(deployment_id, settings.username, settings.password)
    except PublishError as exc:
        log.warning("Could not query deployment %s: %s", deployment_id, exc)
        return
    if status.failed:
        log.warning("Deployment %s failed validation: %s", status.deployment_id, status.errors)
    else:
        log.info("Deployment %s is %s", status.deployment_id, status.state)


def main(settings: Optional[Settings] = None, container: Optional[ServiceContainer] = None) -> int:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    container = container or ServiceContainer(settings)
    try:
        outcome = container.publisher.publish(container.publish_config())
        log.info("Publish finished, deployment id: %s", outcome.deployment_id)
        if settings.report_status:
            _report_status(container, outcome.deployment_id)
    except PublishError as exc:
        log.error("Publish failed: %s", exc)
        return 1
    finally:
        container.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
