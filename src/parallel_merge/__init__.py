from parallel_merge.pipeline import Orchestrator, PipelineResult, sort
from parallel_merge.regions import MergeTask, Region, SortTask, partition

__all__ = [
    "MergeTask",
    "Orchestrator",
    "PipelineResult",
    "Region",
    "SortTask",
    "partition",
    "sort",
]
