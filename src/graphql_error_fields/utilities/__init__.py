"""Utilities for schemas with error types"""

from .build_error_schema import build_error_schema, error_directive_sdl

__all__ = ["build_error_schema", "error_directive_sdl"]
