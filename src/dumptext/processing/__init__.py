"""Public API surface for dumptext.processing."""
from .line_ops import WordFilter

__all__ = ["WordFilter"]
