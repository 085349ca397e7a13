"""
Locating and Loading the PROJ Shared Library.

The library is looked up in this order:

1. an explicit path from the configuration;
2. the copy bundled inside the installed pyproj wheel (pyproj is imported
   first so the libraries shipped beside it resolve);
3. the system library found by `ctypes.util.find_library`.

Every C function the binding calls is declared once per loaded library with
its argument and return types, so a wrong call fails in ctypes rather than
in native code.
"""

import ctypes
import ctypes.util
import functools
import importlib.util
import os
from ctypes import POINTER, c_char_p, c_double, c_int, c_size_t
from pathlib import Path
from typing import List, NamedTuple, Optional

from common.config import ProjConfig
from common.logging_config import get_logger
from libproj.constants import MINIMUM_PROJ_MAJOR
from libproj.errors import LibraryNotFoundError
from libproj.structures import (
    PJ_AREA_p,
    PJ_CONTEXT_p,
    PJ_COORD,
    PJ_FACTORS,
    PJ_INFO,
    PJ_OBJ_LIST_p,
    PJ_OPERATION_FACTORY_CONTEXT_p,
    PJ_PROJ_INFO,
    PJ_p,
    PROJ_STRING_LIST,
)

logger = get_logger(__name__)


_BUNDLED_PATTERNS = ("libproj*.so*", "libproj*.dylib", "proj*.dll")

_PROTOTYPES = (
    # context
    ("proj_info", PJ_INFO, []),
    ("proj_context_create", PJ_CONTEXT_p, []),
    ("proj_context_destroy", PJ_CONTEXT_p, [PJ_CONTEXT_p]),
    ("proj_context_errno", c_int, [PJ_CONTEXT_p]),
    ("proj_context_errno_string", c_char_p, [PJ_CONTEXT_p, c_int]),
    ("proj_context_set_search_paths", None, [PJ_CONTEXT_p, c_int, PROJ_STRING_LIST]),
    ("proj_context_set_enable_network", c_int, [PJ_CONTEXT_p, c_int]),
    ("proj_context_guess_wkt_dialect", c_int, [PJ_CONTEXT_p, c_char_p]),
    # object construction
    ("proj_create", PJ_p, [PJ_CONTEXT_p, c_char_p]),
    ("proj_create_argv", PJ_p, [PJ_CONTEXT_p, c_int, PROJ_STRING_LIST]),
    ("proj_create_from_wkt", PJ_p, [
        PJ_CONTEXT_p, c_char_p, PROJ_STRING_LIST,
        POINTER(PROJ_STRING_LIST), POINTER(PROJ_STRING_LIST),
    ]),
    ("proj_create_from_database", PJ_p, [
        PJ_CONTEXT_p, c_char_p, c_char_p, c_int, c_int, PROJ_STRING_LIST,
    ]),
    ("proj_destroy", PJ_p, [PJ_p]),
    ("proj_string_list_destroy", None, [PROJ_STRING_LIST]),
    # object queries
    ("proj_errno", c_int, [PJ_p]),
    ("proj_errno_reset", c_int, [PJ_p]),
    ("proj_get_type", c_int, [PJ_p]),
    ("proj_get_name", c_char_p, [PJ_p]),
    ("proj_get_id_auth_name", c_char_p, [PJ_p, c_int]),
    ("proj_get_id_code", c_char_p, [PJ_p, c_int]),
    ("proj_is_crs", c_int, [PJ_p]),
    ("proj_pj_info", PJ_PROJ_INFO, [PJ_p]),
    ("proj_as_wkt", c_char_p, [PJ_CONTEXT_p, PJ_p, c_int, PROJ_STRING_LIST]),
    ("proj_as_proj_string", c_char_p, [PJ_CONTEXT_p, PJ_p, c_int, PROJ_STRING_LIST]),
    ("proj_ellipsoid_get_parameters", c_int, [
        PJ_CONTEXT_p, PJ_p, POINTER(c_double), POINTER(c_double),
        POINTER(c_int), POINTER(c_double),
    ]),
    ("proj_prime_meridian_get_parameters", c_int, [
        PJ_CONTEXT_p, PJ_p, POINTER(c_double), POINTER(c_double), POINTER(c_char_p),
    ]),
    ("proj_get_ellipsoid", PJ_p, [PJ_CONTEXT_p, PJ_p]),
    ("proj_get_prime_meridian", PJ_p, [PJ_CONTEXT_p, PJ_p]),
    ("proj_crs_get_geodetic_crs", PJ_p, [PJ_CONTEXT_p, PJ_p]),
    # candidate operations
    ("proj_create_operation_factory_context", PJ_OPERATION_FACTORY_CONTEXT_p, [
        PJ_CONTEXT_p, c_char_p,
    ]),
    ("proj_operation_factory_context_destroy", None, [PJ_OPERATION_FACTORY_CONTEXT_p]),
    ("proj_operation_factory_context_set_area_of_interest", None, [
        PJ_CONTEXT_p, PJ_OPERATION_FACTORY_CONTEXT_p,
        c_double, c_double, c_double, c_double,
    ]),
    ("proj_create_operations", PJ_OBJ_LIST_p, [
        PJ_CONTEXT_p, PJ_p, PJ_p, PJ_OPERATION_FACTORY_CONTEXT_p,
    ]),
    ("proj_list_get_count", c_int, [PJ_OBJ_LIST_p]),
    ("proj_list_get", PJ_p, [PJ_CONTEXT_p, PJ_OBJ_LIST_p, c_int]),
    ("proj_list_destroy", None, [PJ_OBJ_LIST_p]),
    # areas
    ("proj_area_create", PJ_AREA_p, []),
    ("proj_area_set_bbox", None, [PJ_AREA_p, c_double, c_double, c_double, c_double]),
    ("proj_area_destroy", None, [PJ_AREA_p]),
    # coordinates
    ("proj_trans", PJ_COORD, [PJ_p, c_int, PJ_COORD]),
    ("proj_trans_array", c_int, [PJ_p, c_int, c_size_t, POINTER(PJ_COORD)]),
    ("proj_factors", PJ_FACTORS, [PJ_p, PJ_COORD]),
)


class ProjVersion(NamedTuple):
    major: int
    minor: int
    patch: int
    release: str


def bundled_library_candidates() -> List[Path]:
    """List the PROJ libraries shipped inside the installed pyproj wheel.

    The package is located without importing it.

    Returns
    -------
    list of Path
        Candidate library files, possibly empty.
    """
    spec = importlib.util.find_spec("pyproj")
    if spec is None or spec.origin is None:
        return []

    package_dir = Path(spec.origin).parent
    directories = [
        package_dir.parent / "pyproj.libs",
        package_dir / ".dylibs",
        package_dir,
    ]

    candidates = []
    for directory in directories:
        if not directory.is_dir():
            continue
        for pattern in _BUNDLED_PATTERNS:
            candidates.extend(sorted(directory.glob(pattern)))
    return candidates


def load_bundled_dependencies() -> None:
    """Load pyproj so the libraries bundled beside its libproj are resolvable.

    Wheels ship libproj next to renamed copies of sqlite, libtiff and curl.
    The dynamic loader finds them only once pyproj's extension modules have
    loaded libproj; opening the same path with ctypes afterwards reuses it.

    Raises
    ------
    LibraryNotFoundError
        If pyproj cannot be imported.
    """
    try:
        importlib.import_module("pyproj")
    except ImportError as e:
        raise LibraryNotFoundError(f"cannot load the PROJ library bundled with pyproj: {e}") from e


def find_library_path(config: Optional[ProjConfig] = None) -> str:
    """Resolve the path of the PROJ shared library.

    Parameters
    ----------
    config : ProjConfig, optional
        Configuration holding an explicit `library_path`.

    Returns
    -------
    str
        A path or library name `ctypes.CDLL` can open.

    Raises
    ------
    LibraryNotFoundError
        If no candidate exists.
    """
    if config is not None and config.library_path:
        return config.library_path

    bundled = bundled_library_candidates()
    if bundled:
        load_bundled_dependencies()
        return str(bundled[0])

    system = ctypes.util.find_library("proj")
    if system:
        return system

    raise LibraryNotFoundError(
        "PROJ shared library not found; install pyproj or set PROJBIND_LIBRARY"
    )


def declare_prototypes(lib: ctypes.CDLL) -> ctypes.CDLL:
    """Attach argument and return types to every function the binding uses."""
    for name, restype, argtypes in _PROTOTYPES:
        try:
            function = getattr(lib, name)
        except AttributeError as e:
            raise LibraryNotFoundError(f"{lib._name} does not export {name}") from e
        function.restype = restype
        function.argtypes = argtypes
    return lib


def read_version(lib: ctypes.CDLL) -> ProjVersion:
    info = lib.proj_info()
    release = info.release.decode("utf-8") if info.release else ""
    return ProjVersion(info.major, info.minor, info.patch, release)


@functools.lru_cache(maxsize=None)
def _open(path: str) -> ctypes.CDLL:
    try:
        lib = ctypes.CDLL(path)
    except OSError as e:
        raise LibraryNotFoundError(f"cannot load PROJ library {path}: {e}") from e

    declare_prototypes(lib)

    found = read_version(lib)
    if found.major < MINIMUM_PROJ_MAJOR:
        raise LibraryNotFoundError(
            f"PROJ {found.major}.{found.minor}.{found.patch} at {path} is too old; "
            f"{MINIMUM_PROJ_MAJOR}.0 or newer is required"
        )

    logger.info(f"Loaded PROJ {found.major}.{found.minor}.{found.patch} from {path}")
    return lib


def load_library(config: Optional[ProjConfig] = None) -> ctypes.CDLL:
    """Load (once per path) and return the PROJ library.

    Raises
    ------
    LibraryNotFoundError
        If the library cannot be found, opened, or is older than PROJ 8.
    """
    return _open(find_library_path(config))


def version(config: Optional[ProjConfig] = None) -> ProjVersion:
    """Version of the PROJ library the binding loads."""
    return read_version(load_library(config))


def default_search_paths() -> List[str]:
    """Directories holding ``proj.db`` according to pyproj, if installed."""
    if importlib.util.find_spec("pyproj") is None:
        return []

    from pyproj.datadir import get_data_dir
    from pyproj.exceptions import DataDirError

    try:
        data_dir = get_data_dir()
    except DataDirError:
        logger.warning("pyproj is installed but its PROJ data directory was not found")
        return []
    return [p for p in data_dir.split(os.pathsep) if p]
