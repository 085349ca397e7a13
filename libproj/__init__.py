"""
Native Layer of the PROJ Binding.

This package is the only place that talks to the PROJ shared library: it
locates and loads it, declares the C prototypes and structures, marshals
strings, and owns the execution `Context`.
"""

from libproj.context import Context
from libproj.errors import (
    ProjError,
    DefinitionError,
    DestroyedHandleError,
    LibraryNotFoundError,
)
from libproj.library import load_library, version, ProjVersion

__all__ = [
    "Context",
    "ProjError",
    "DefinitionError",
    "DestroyedHandleError",
    "LibraryNotFoundError",
    "load_library",
    "version",
    "ProjVersion",
]
