from .selector import ArtifactSelector
from .staging import StagingTree, stage_artifacts

__all__ = ["ArtifactSelector", "StagingTree", "stage_artifacts"]
