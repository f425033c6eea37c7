"""Argument Resolver: CLI parser and namespace validation."""
from .parser import _build_parser
from .resolver import merge_exclude_dirs, resolve_config

__all__ = ["_build_parser", "merge_exclude_dirs", "resolve_config"]
