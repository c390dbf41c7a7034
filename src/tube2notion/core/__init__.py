"""Core orchestration for tube2notion."""

from tube2notion.core.pipeline import HowToPipeline, PipelineError

__all__ = [
    "HowToPipeline",
    "PipelineError",
]
