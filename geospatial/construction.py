"""
Construction Dispatch from Definition Strings.

A single definition is checked for WKT first: PROJ recognizes WKT itself, the rest
is routed on its shape.

* WKT (any flavor) -> ``proj_create_from_wkt``
* proj-string (``+proj=...``) or URN/URL (``urn:ogc:def:...``) -> ``proj_create``
* ``AUTH:CODE`` -> ``proj_create_from_database`` in the entity's category

Several definitions are read as the tokens of one proj-string and joined by
``proj_create_argv``. The pair-of-reference-systems form is specific to
operations and lives in `geospatial.operation`.
"""

import ctypes
from typing import Sequence, Tuple, Union

from common.logging_config import get_logger
from libproj import constants
from libproj.context import Context
from libproj.errors import DefinitionError, ProjError
from libproj.strings import (
    argument_vector,
    native_string_list,
    read_string_list,
    to_bytes,
)
from geospatial.enums import Category

logger = get_logger(__name__)


PROJ_STRING = "proj-string"
URI = "uri"
AUTHORITY = "authority"

_URI_PREFIXES = ("urn:", "http://", "https://")


def classify_reference(definition: str) -> str:
    """Classify a definition that PROJ did not recognize as WKT.

    Parameters
    ----------
    definition : str
        The definition string.

    Returns
    -------
    str
        One of `PROJ_STRING`, `URI` or `AUTHORITY`.
    """
    text = definition.strip()
    if text.startswith("+") or "=" in text:
        return PROJ_STRING
    if text.lower().startswith(_URI_PREFIXES):
        return URI
    return AUTHORITY


def split_authority(definition: str) -> Tuple[str, str]:
    """Split ``AUTH:CODE`` into its two parts.

    Raises
    ------
    DefinitionError
        If the split does not yield exactly two non-empty parts.
    """
    parts = definition.strip().split(":")
    if len(parts) != 2 or not all(p.strip() for p in parts):
        raise DefinitionError(
            f"'{definition}' is not of the form AUTHORITY:CODE "
            f"(got {len(parts)} part{'s' if len(parts) != 1 else ''})"
        )
    return parts[0].strip(), parts[1].strip()


def might_be_wkt(definition: str) -> bool:
    """Every WKT flavor nests its keywords in brackets."""
    return "[" in definition or "(" in definition


def is_wkt(ctx: Context, definition: str) -> bool:
    if not might_be_wkt(definition):
        return False
    dialect = ctx.lib.proj_context_guess_wkt_dialect(ctx.handle, to_bytes(definition))
    return dialect != constants.PJ_GUESSED_NOT_WKT


def create_from_wkt(ctx: Context, definition: str):
    """Parse WKT; the grammar errors PROJ reports form the error message."""
    with native_string_list(ctx.lib) as warnings, native_string_list(ctx.lib) as errors:
        pj = ctx.lib.proj_create_from_wkt(
            ctx.handle,
            to_bytes(definition),
            None,
            ctypes.byref(warnings),
            ctypes.byref(errors),
        )
        for warning in read_string_list(warnings):
            logger.debug(f"WKT warning: {warning}")
        if not pj:
            messages = read_string_list(errors)
            if messages:
                raise ProjError("\n".join(messages), ctx.errno())
            raise ctx.last_error(f"cannot parse WKT '{definition}'")
    return pj


def create_from_database(ctx: Context, definition: str, category: Category):
    auth, code = split_authority(definition)
    logger.debug(f"Looking up {auth}:{code} in category {category.name}")
    return ctx.lib.proj_create_from_database(
        ctx.handle, to_bytes(auth), to_bytes(code), int(category), 0, None
    )


def create_from_tokens(ctx: Context, definitions: Sequence[str]):
    """Join proj-string tokens with ``proj_create_argv``."""
    tokens = [d.strip().lstrip("+") for d in definitions]
    with argument_vector(tokens) as argv:
        return ctx.lib.proj_create_argv(ctx.handle, len(tokens), argv)


def create_pj(
    ctx: Context,
    definitions: Union[str, Sequence[str]],
    kind: str,
    category: Category
):
    """Create a native object from one or more definition strings.

    Parameters
    ----------
    ctx : Context
        Context to create the object in.
    definitions : str or sequence of str
        One definition, or the tokens of a proj-string.
    kind : str
        Entity name used in error messages.
    category : Category
        Database category for ``AUTH:CODE`` lookups.

    Returns
    -------
    ctypes pointer
        A non-NULL ``PJ *`` the caller owns.

    Raises
    ------
    DefinitionError
        If no definition is given or an authority reference is malformed.
        Raised before any native call.
    ProjError
        If PROJ returns no object.
    """
    if isinstance(definitions, str):
        definitions = [definitions]
    definitions = list(definitions)

    if not definitions:
        raise DefinitionError(f"No definition given for {kind}")

    if len(definitions) == 1:
        definition = definitions[0]
        if is_wkt(ctx, definition):
            pj = create_from_wkt(ctx, definition)
        else:
            shape = classify_reference(definition)
            if shape == AUTHORITY:
                pj = create_from_database(ctx, definition, category)
            else:
                pj = ctx.lib.proj_create(ctx.handle, to_bytes(definition))
    else:
        pj = create_from_tokens(ctx, definitions)

    if not pj:
        raise ctx.last_error(f"cannot create {kind} from '{' '.join(definitions)}'")
    return pj
