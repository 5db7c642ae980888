from .publisher import PublishOrchestrator

__all__ = ["PublishOrchestrator"]
