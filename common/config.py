"""
Configuration for the PROJ Binding.

A `ProjConfig` decides where the PROJ shared library and its resource
files (``proj.db``) are found and how strictly the binding reports native
failures. Contexts are created from one; by default it is read from the
environment.

Environment Variables
---------------------
PROJBIND_LIBRARY
    Explicit path of the PROJ shared library.
PROJBIND_SEARCH_PATHS
    Directories holding ``proj.db``, separated by ``os.pathsep``.
PROJBIND_NETWORK
    Enable PROJ network access (grids on the CDN).
PROJBIND_STRICT_ACCESSORS
    Raise from parameter accessors whose native getter fails.
PROJBIND_LOG_LEVEL
    Level of the package loggers.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_bool(value: str, name: str = "value") -> bool:
    """Parse a boolean environment value (1/true/yes/on, 0/false/no/off)."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass
class ProjConfig:
    """Configuration for a binding context.

    Attributes
    ----------
    library_path : str, optional
        Explicit path of the PROJ shared library. When unset the copy
        bundled with pyproj is tried, then the system library.
    search_paths : list of str
        Directories holding ``proj.db``. When empty the pyproj data
        directory is used if pyproj is installed.
    enable_network : bool
        Allow PROJ to fetch grids over the network.
    strict_accessors : bool
        Raise `ProjError` when a parameter getter reports a native
        failure instead of logging it.
    log_level : str
        Level applied to the package loggers by the first context
        created in the process; later contexts do not change it.
    """
    library_path: Optional[str] = None
    search_paths: List[str] = field(default_factory=list)
    enable_network: bool = False
    strict_accessors: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ProjConfig':
        """Build a configuration from environment variables.

        Parameters
        ----------
        environ : mapping, optional
            Environment to read from (default: ``os.environ``).

        Returns
        -------
        ProjConfig
            Configuration with every unset variable left at its default.
        """
        env = os.environ if environ is None else environ
        config = cls()

        library = env.get("PROJBIND_LIBRARY")
        if library:
            config.library_path = library

        paths = env.get("PROJBIND_SEARCH_PATHS")
        if paths:
            config.search_paths = [p for p in paths.split(os.pathsep) if p]

        if "PROJBIND_NETWORK" in env:
            config.enable_network = parse_bool(env["PROJBIND_NETWORK"], "PROJBIND_NETWORK")

        if "PROJBIND_STRICT_ACCESSORS" in env:
            config.strict_accessors = parse_bool(
                env["PROJBIND_STRICT_ACCESSORS"], "PROJBIND_STRICT_ACCESSORS"
            )

        level = env.get("PROJBIND_LOG_LEVEL")
        if level:
            config.log_level = level.upper()

        return config
