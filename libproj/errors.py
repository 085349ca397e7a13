"""Exceptions raised by the binding."""

from typing import Optional


class ProjError(RuntimeError):
    """A failure reported by the PROJ library.

    Attributes
    ----------
    errno : int
        Native error code, 0 when the library reported none.
    """

    def __init__(self, message: str, errno: int = 0):
        super().__init__(message)
        self.errno = errno

    @classmethod
    def from_errno(cls, ctx, errno: int, prefix: Optional[str] = None) -> 'ProjError':
        """Build an error whose message is the native text for `errno`."""
        message = ctx.error_message(errno)
        if prefix:
            message = f"{prefix}: {message}"
        return cls(message, errno)


class DefinitionError(ValueError):
    """A definition string has a shape the binding cannot dispatch."""


class DestroyedHandleError(ProjError):
    """A method was called on an object whose native handle is released."""

    def __init__(self, kind: str):
        super().__init__(f"{kind} has been destroyed")


class LibraryNotFoundError(ProjError):
    """The PROJ shared library cannot be located or is unsupported."""
