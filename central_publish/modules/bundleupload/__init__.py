"""Bundle upload module exports."""

from .service.publisher import PublishOrchestrator

__all__ = ["PublishOrchestrator"]
