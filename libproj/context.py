"""
The PROJ Execution Context.

A `Context` owns one ``PJ_CONTEXT``: the native error register, the resource
search paths and the database connection. Every other object of the binding
is created against one.

Thread Safety
-------------
A context and the error register it carries must not be shared between
threads. Create one context per thread.
"""

import ctypes
from typing import Optional, Sequence

from common.config import ProjConfig
from common.logging_config import apply_default_level, get_logger
from libproj.errors import DestroyedHandleError, ProjError
from libproj.library import default_search_paths, load_library
from libproj.strings import from_bytes, string_array

logger = get_logger(__name__)


class Context:
    """Owner of a native ``PJ_CONTEXT``.

    Parameters
    ----------
    config : ProjConfig, optional
        Library location, search paths and strictness. Read from the
        environment when omitted.

    Examples
    --------
    >>> with Context() as ctx:
    ...     pm = new_prime_meridian(ctx, "EPSG:8901")
    ...     pm.destroy()
    """

    def __init__(self, config: Optional[ProjConfig] = None):
        self.config = config if config is not None else ProjConfig.from_env()
        apply_default_level(self.config.log_level)

        self.lib = load_library(self.config)
        self._ctx = self.lib.proj_context_create()
        if not self._ctx:
            self._ctx = None
            raise ProjError("proj_context_create returned NULL")

        search_paths = self.config.search_paths or default_search_paths()
        if search_paths:
            self.set_search_paths(search_paths)
        self.set_enable_network(self.config.enable_network)

        logger.debug(f"Created PROJ context (search paths: {search_paths})")

    def __enter__(self) -> 'Context':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __repr__(self) -> str:
        state = "destroyed" if self.handle_is_null() else "live"
        return f"<Context {state}>"

    def destroy(self) -> None:
        """Release the native context. Calling it again does nothing."""
        if self._ctx is not None:
            self.lib.proj_context_destroy(self._ctx)
            self._ctx = None
            logger.debug("Destroyed PROJ context")

    close = destroy

    @property
    def handle(self):
        """The raw ``PJ_CONTEXT *`` for other binding calls."""
        if self._ctx is None:
            raise DestroyedHandleError("Context")
        return self._ctx

    def handle_is_null(self) -> bool:
        return not self._ctx

    @property
    def strict_accessors(self) -> bool:
        return self.config.strict_accessors

    def errno(self) -> int:
        """Current value of the context error register."""
        return self.lib.proj_context_errno(self.handle)

    def error_message(self, errno: int) -> str:
        """Native text for an error code."""
        message = from_bytes(self.lib.proj_context_errno_string(self.handle, errno))
        return message or f"Unknown error (code {errno})"

    def last_error(self, default: Optional[str] = None) -> ProjError:
        """Build an error from the context register.

        Parameters
        ----------
        default : str, optional
            Message used when the register holds no error.
        """
        errno = self.errno()
        if errno == 0 and default is not None:
            return ProjError(default, 0)
        return ProjError.from_errno(self, errno)

    def set_search_paths(self, paths: Sequence[str]) -> None:
        """Set the directories PROJ searches for ``proj.db`` and grids."""
        paths = list(paths)
        with string_array(paths) as array:
            self.lib.proj_context_set_search_paths(self.handle, len(paths), array)

    def set_enable_network(self, enabled: bool) -> bool:
        """Enable or disable network access; returns the effective state."""
        return bool(self.lib.proj_context_set_enable_network(self.handle, int(enabled)))
