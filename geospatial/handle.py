"""
Lifecycle and Export Shared by Every Handle-Bearing Entity.

A `NativeHandle` owns exactly one native ``PJ`` object. It is either live
(non-NULL handle) or destroyed (NULL handle): `destroy` releases the object
once and is a no-op afterwards, and every other method of a destroyed
entity raises `DestroyedHandleError`.

Release is always explicit: call `destroy` (or `close`), or use the entity
as a context manager. Nothing is released by the garbage collector.

Error Register
--------------
PROJ records failures of per-object calls in an error register. Every
wrapper that reads it goes through `_native_errors`, which resets the
register immediately before the native call and checks it immediately
after, so a stale code from an unrelated call is never misattributed.
"""

from contextlib import contextmanager
from typing import FrozenSet, Iterator, Optional, Sequence, Union

from common.logging_config import get_logger
from libproj.context import Context
from libproj.errors import DefinitionError, DestroyedHandleError, ProjError
from libproj.strings import Options, from_bytes, option_strings, string_array
from geospatial.enums import Category, ISOType, StringType, WKTType
from geospatial.info import ISOInfo

logger = get_logger(__name__)


def describe_definitions(definitions: Union[str, Sequence[str]]) -> str:
    """Render definitions for error messages."""
    if isinstance(definitions, str):
        return definitions
    if len(definitions) == 1:
        return definitions[0]
    return "[" + " ".join(definitions) + "]"


class NativeHandle:
    """Base class of the entities wrapping one ``PJ *``.

    Subclasses set `kind` (used in messages), `category` (database category
    for ``AUTH:CODE`` lookups) and `accepted_types` (the ISO types the
    constructed object must report).

    Parameters
    ----------
    ctx : Context
        Context the object was created against.
    pj : ctypes pointer
        Owned native handle.
    """

    kind: str = "Object"
    category: Optional[Category] = None
    accepted_types: FrozenSet[ISOType] = frozenset()

    def __init__(self, ctx: Context, pj):
        self._ctx = ctx
        self._pj = pj

    @classmethod
    def adopt(cls, ctx: Context, pj, definitions: Union[str, Sequence[str]]):
        """Take ownership of `pj` after checking its type.

        The handle is destroyed when its type is not in `accepted_types`.

        Raises
        ------
        DefinitionError
            If the object is not of the expected family.
        """
        entity = cls(ctx, pj)
        found = entity.type_of()
        if found not in cls.accepted_types:
            entity.destroy()
            article = "an" if cls.kind[0] in "AEIOU" else "a"
            raise DefinitionError(
                f"{describe_definitions(definitions)} does not yield {article} {cls.kind}"
            )
        logger.debug(f"Created {cls.kind} ({found.name}) from {describe_definitions(definitions)}")
        return entity

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def destroy(self) -> None:
        """Release the native object. Calling it again does nothing."""
        if self._pj is not None:
            self._ctx.lib.proj_destroy(self._pj)
            self._pj = None
            logger.debug(f"Destroyed {self.kind}")

    close = destroy

    @property
    def handle(self):
        """The raw ``PJ *``, for other binding calls only."""
        return self._live()

    def handle_is_null(self) -> bool:
        """True once the native object is released.

        This is the only supported null check of a handle.
        """
        return not self._pj

    @property
    def context(self) -> Context:
        return self._ctx

    def _live(self):
        if not self._pj:
            raise DestroyedHandleError(self.kind)
        return self._pj

    def _resolve(self, ctx: Optional[Context]) -> Context:
        return ctx if ctx is not None else self._ctx

    @contextmanager
    def _native_errors(self, ctx: Optional[Context] = None) -> Iterator:
        """Reset the object's error register, run one native call, check it."""
        ctx = self._resolve(ctx)
        pj = self._live()
        ctx.lib.proj_errno_reset(pj)
        yield pj
        errno = ctx.lib.proj_errno(pj)
        if errno != 0:
            raise ProjError.from_errno(ctx, errno)

    def _accessor_failed(self, ctx: Context, accessor: str) -> None:
        """Report a parameter getter that returned failure.

        Silent by default (a warning is logged); raises when the context is
        configured with ``strict_accessors``.
        """
        if ctx.strict_accessors:
            raise ctx.last_error(f"{accessor} failed on {self.kind}")
        logger.warning(f"{accessor} failed on {self.kind} {self.name!r}; returned values are undefined")

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def type_of(self) -> ISOType:
        """ISO type of the object; UNKNOWN for a destroyed handle."""
        if self.handle_is_null():
            return ISOType.UNKNOWN
        return ISOType.from_native(self._ctx.lib.proj_get_type(self._pj))

    def info(self) -> ISOInfo:
        """Snapshot of the object description."""
        return ISOInfo.from_native(self._ctx.lib.proj_pj_info(self._live()))

    @property
    def name(self) -> str:
        return from_bytes(self._ctx.lib.proj_get_name(self._live()))

    def identifier(self) -> Optional[str]:
        """First identifier as ``"AUTH:CODE"``, or None."""
        pj = self._live()
        auth = self._ctx.lib.proj_get_id_auth_name(pj, 0)
        code = self._ctx.lib.proj_get_id_code(pj, 0)
        if auth is None or code is None:
            return None
        return f"{from_bytes(auth)}:{from_bytes(code)}"

    def __str__(self) -> str:
        if self.handle_is_null():
            return ""
        return self.name

    def __repr__(self) -> str:
        if self.handle_is_null():
            return f"<{self.kind} destroyed>"
        return f"<{self.kind} {self.type_of().name} {self.name!r}>"

    # ------------------------------------------------------------------
    # export
    # ------------------------------------------------------------------

    def proj_string(
        self,
        string_type: StringType = StringType.VERSION5,
        options: Options = None,
        ctx: Optional[Context] = None
    ) -> str:
        """Export the object as a proj-string.

        Parameters
        ----------
        string_type : StringType
            proj-string dialect.
        options : mapping or sequence, optional
            Export options, see `libproj.strings`.
        ctx : Context, optional
            Context to run the export in (default: the creating context).

        Raises
        ------
        ProjError
            If PROJ cannot export the object.
        """
        ctx = self._resolve(ctx)
        pj = self._live()
        ctx.lib.proj_errno_reset(pj)
        with string_array(option_strings(options)) as native_options:
            raw = ctx.lib.proj_as_proj_string(ctx.handle, pj, int(string_type), native_options)
        if raw is None:
            raise ctx.last_error(f"{self.kind} cannot be exported as a proj-string")
        return from_bytes(raw)

    def wkt(
        self,
        wkt_type: WKTType = WKTType.WKT2_2018,
        options: Options = None,
        ctx: Optional[Context] = None
    ) -> str:
        """Export the object as WKT.

        Parameters
        ----------
        wkt_type : WKTType
            WKT flavor.
        options : mapping or sequence, optional
            ``MULTILINE``, ``INDENTATION_WIDTH`` and ``OUTPUT_AXIS``, see
            `libproj.strings`.
        ctx : Context, optional
            Context to run the export in (default: the creating context).

        Raises
        ------
        ProjError
            If PROJ cannot export the object in that flavor.
        """
        ctx = self._resolve(ctx)
        pj = self._live()
        ctx.lib.proj_errno_reset(pj)
        with string_array(option_strings(options)) as native_options:
            raw = ctx.lib.proj_as_wkt(ctx.handle, pj, int(wkt_type), native_options)
        if raw is None:
            raise ctx.last_error(f"{self.kind} cannot be exported as {wkt_type.name}")
        return from_bytes(raw)
