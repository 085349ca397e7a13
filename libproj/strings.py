"""
String Marshaling Between Python and PROJ.

PROJ takes variadic options as NULL-terminated ``char *`` arrays of
``"KEY=VALUE"`` strings and returns warnings and errors as native string
lists it owns. Both directions are wrapped in context managers so that the
acquisition and the release of every temporary array sit around exactly one
native call, including on error paths.

Export Options
--------------
MULTILINE : YES/NO
    Defaults to YES, except for WKT1_ESRI.
INDENTATION_WIDTH : int
    Defaults to 4 (when multiline output is on).
OUTPUT_AXIS : AUTO/YES/NO
    In AUTO mode, axis are output for WKT2 variants, for WKT1_GDAL for a
    ProjectedCRS with easting/northing ordering (otherwise stripped), but
    not for WKT1_ESRI. YES outputs them unconditionally, NO omits them.
"""

import ctypes
from contextlib import contextmanager
from ctypes import c_char_p
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from common.logging_config import get_logger
from libproj.structures import PROJ_STRING_LIST

logger = get_logger(__name__)


OptionValue = Union[str, int, float, bool]
Options = Union[
    Mapping[str, OptionValue],
    Sequence[Tuple[str, OptionValue]],
    Sequence[str],
    None,
]

KNOWN_EXPORT_OPTIONS = ("MULTILINE", "INDENTATION_WIDTH", "OUTPUT_AXIS")


def to_bytes(text: Optional[str]) -> Optional[bytes]:
    if text is None:
        return None
    return text.encode("utf-8")


def from_bytes(raw: Optional[bytes]) -> str:
    """Decode a native string; NULL becomes the empty string."""
    if raw is None:
        return ""
    return raw.decode("utf-8", errors="replace")


def _render_value(value: OptionValue) -> str:
    if isinstance(value, bool):
        return "YES" if value else "NO"
    return str(value)


def option_strings(options: Options) -> List[str]:
    """Normalize export options into ordered ``"KEY=VALUE"`` strings.

    Parameters
    ----------
    options : mapping, sequence of pairs, sequence of str, or None
        ``{"MULTILINE": False}``, ``[("MULTILINE", "NO")]`` and
        ``["MULTILINE=NO"]`` are equivalent. Booleans render as YES/NO.

    Returns
    -------
    list of str
        Options in the order given.

    Raises
    ------
    ValueError
        If a raw string has no ``=`` or a key is empty.
    """
    if not options:
        return []

    if isinstance(options, Mapping):
        pairs: Iterable = options.items()
    else:
        pairs = options

    rendered = []
    for item in pairs:
        if isinstance(item, str):
            key, sep, value = item.partition("=")
            if not sep:
                raise ValueError(f"Option {item!r} is not of the form KEY=VALUE")
        else:
            key, value = item
            value = _render_value(value)
        key = key.strip()
        if not key:
            raise ValueError(f"Option {item!r} has an empty key")
        key = key.upper()
        if key not in KNOWN_EXPORT_OPTIONS:
            logger.debug(f"Export option {key} is not one of {KNOWN_EXPORT_OPTIONS}; forwarded as is")
        rendered.append(f"{key}={value}")
    return rendered


@contextmanager
def string_array(items: Optional[Sequence[str]]) -> Iterator[Optional[ctypes.Array]]:
    """Yield a NULL-terminated ``char *`` array for one native call.

    An empty or missing sequence yields ``None`` (a NULL array), which PROJ
    reads as "no options".
    """
    if not items:
        yield None
        return

    encoded = [to_bytes(item) for item in items]
    array = (c_char_p * (len(encoded) + 1))(*encoded, None)
    try:
        yield array
    finally:
        del array
        del encoded


@contextmanager
def argument_vector(items: Sequence[str]) -> Iterator[ctypes.Array]:
    """Yield a ``char *argv[]`` of exactly ``len(items)`` entries."""
    encoded = [to_bytes(item) for item in items]
    argv = (c_char_p * len(encoded))(*encoded)
    try:
        yield argv
    finally:
        del argv
        del encoded


def read_string_list(raw: PROJ_STRING_LIST) -> List[str]:
    """Copy a NULL-terminated native string list into Python strings."""
    strings: List[str] = []
    if not raw:
        return strings
    index = 0
    while raw[index] is not None:
        strings.append(from_bytes(raw[index]))
        index += 1
    return strings


@contextmanager
def native_string_list(lib) -> Iterator[PROJ_STRING_LIST]:
    """Yield an out-slot for a native string list and release whatever PROJ put in it."""
    slot = PROJ_STRING_LIST()
    try:
        yield slot
    finally:
        if slot:
            lib.proj_string_list_destroy(slot)
