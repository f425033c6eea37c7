"""Filesystem-facing stages: traversal, extraction and output assembly."""
from .extractors import (
    ExtractorRegistry,
    FileExtractor,
    LynxExtractor,
    PandocExtractor,
    PassthroughExtractor,
    default_extractor_registry,
)
from .output import OutputAssembler
from .walker import TreeWalker

__all__ = [
    "ExtractorRegistry",
    "FileExtractor",
    "LynxExtractor",
    "PandocExtractor",
    "PassthroughExtractor",
    "default_extractor_registry",
    "OutputAssembler",
    "TreeWalker",
]
