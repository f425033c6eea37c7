from __future__ import annotations

"""Public surface for dumptext.core.

Stable import location for the configuration model, the error taxonomy and
the protocol types:

    from dumptext.core import RunConfig, ExtractionMethod, ExtractionError, ...
"""

from dumptext.core.errors import (
    DumpTextError,
    EmptyExtensionError,
    ExtractionError,
    HelpRequested,
    InvalidInputError,
    NoExtractionMethodError,
    OutputCreationError,
    SelfOverwriteError,
    UsageError,
)
from dumptext.core.models import ExtractionMethod, RunConfig
from dumptext.core.report import RunReport

__all__ = [
    # Models
    "ExtractionMethod",
    "RunConfig",
    "RunReport",
    # Errors
    "DumpTextError",
    "EmptyExtensionError",
    "ExtractionError",
    "HelpRequested",
    "InvalidInputError",
    "NoExtractionMethodError",
    "OutputCreationError",
    "SelfOverwriteError",
    "UsageError",
]
