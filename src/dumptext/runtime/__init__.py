"""Pipeline wiring."""
from .runner import PipelineRunner

__all__ = ["PipelineRunner"]
