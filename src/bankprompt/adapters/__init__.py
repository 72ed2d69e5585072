"""Adapters - Infrastructure implementations of core interfaces.

This package contains the concrete implementations of the
Protocol interfaces defined in the core module.

Adapters are organized by type:
- generation/: Text generation backends (currently the deterministic mock)
"""

from .generation import MockGenerationBackend

__all__ = ["MockGenerationBackend"]
