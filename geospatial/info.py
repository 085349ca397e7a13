"""Descriptive snapshot of a native object."""

from dataclasses import dataclass

from libproj.strings import from_bytes
from libproj.structures import PJ_PROJ_INFO


@dataclass(frozen=True)
class ISOInfo:
    """Information about a PROJ object, copied out of native memory.

    The strings are copied when the snapshot is taken, so an `ISOInfo`
    stays valid after the object it describes is destroyed.

    Attributes
    ----------
    id : str
        Short identifier of the operation method (e.g. "utm"), often empty
        for non-operations.
    description : str
        Long description, the object name for database objects.
    definition : str
        proj-string definition the object was built from, if any.
    has_inverse : bool
        Whether an inverse operation exists.
    accuracy : float
        Expected accuracy in meters, -1 when unknown.
    """
    id: str
    description: str
    definition: str
    has_inverse: bool = False
    accuracy: float = -1.0

    @classmethod
    def from_native(cls, raw: PJ_PROJ_INFO) -> 'ISOInfo':
        return cls(
            id=from_bytes(raw.id),
            description=from_bytes(raw.description),
            definition=from_bytes(raw.definition),
            has_inverse=bool(raw.has_inverse),
            accuracy=float(raw.accuracy),
        )
