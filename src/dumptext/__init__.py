from __future__ import annotations

from dumptext.cli import DumpText, main
from dumptext.constants import DEFAULT_EXTENSION, DEFAULT_OUTPUT_FILE, SEPARATOR_TEMPLATE
from dumptext.core.errors import (
    DumpTextError,
    EmptyExtensionError,
    ExtractionError,
    InvalidInputError,
    NoExtractionMethodError,
    OutputCreationError,
    SelfOverwriteError,
    UsageError,
)
from dumptext.core.models import ExtractionMethod, RunConfig
from dumptext.core.report import RunReport
from dumptext.io.extractors import ExtractorRegistry, default_extractor_registry
from dumptext.runtime.runner import PipelineRunner

__version__ = '1.0.0'

__all__ = [
    'DumpText',
    'main',
    'DEFAULT_EXTENSION',
    'DEFAULT_OUTPUT_FILE',
    'SEPARATOR_TEMPLATE',
    'DumpTextError',
    'EmptyExtensionError',
    'ExtractionError',
    'InvalidInputError',
    'NoExtractionMethodError',
    'OutputCreationError',
    'SelfOverwriteError',
    'UsageError',
    'ExtractionMethod',
    'RunConfig',
    'RunReport',
    'ExtractorRegistry',
    'default_extractor_registry',
    'PipelineRunner',
]
