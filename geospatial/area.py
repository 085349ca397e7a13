"""
Areas of Interest.

An `Area` owns a native ``PJ_AREA`` holding a geographic bounding box. It
is used when several candidate operations exist between two reference
systems: candidates not valid over the area are left out.

The candidate search reads the bounding box (`bbox`) and hands its four
bounds to the operation factory; it never passes the ``PJ_AREA`` itself.
The native handle is kept so that an `Area` has the same lifecycle as the
other entities and so that `handle` can be given to PROJ functions taking a
``PJ_AREA *`` (such as ``proj_create_crs_to_crs``).
"""

from typing import Optional, Union

from common.logging_config import get_logger
from common.types import BoundingBox
from libproj.context import Context
from libproj.errors import DestroyedHandleError, ProjError

logger = get_logger(__name__)


class Area:
    """A bounding box in degrees backed by a native ``PJ_AREA``.

    Parameters
    ----------
    ctx : Context
        Context whose library allocates the area.
    bbox : BoundingBox or float
        A bounding box, or the west bound followed by `south`, `east` and
        `north`.

    Examples
    --------
    >>> with Area(ctx, 6.0, 47.0, 12.0, 55.0) as area:
    ...     op = new_operation(ctx, "EPSG:4326", "EPSG:32632", area=area)
    """

    kind = "Area"

    def __init__(
        self,
        ctx: Context,
        bbox: Union[BoundingBox, float],
        south: Optional[float] = None,
        east: Optional[float] = None,
        north: Optional[float] = None
    ):
        if not isinstance(bbox, BoundingBox):
            if south is None or east is None or north is None:
                raise ValueError("Area needs a BoundingBox or four bounds")
            bbox = BoundingBox(float(bbox), float(south), float(east), float(north))

        self._ctx = ctx
        self._bbox = bbox
        self._area = ctx.lib.proj_area_create()
        if not self._area:
            self._area = None
            raise ProjError("proj_area_create returned NULL")
        ctx.lib.proj_area_set_bbox(self._area, bbox.west, bbox.south, bbox.east, bbox.north)
        logger.debug(f"Created Area {bbox}")

    def __enter__(self) -> 'Area':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __repr__(self) -> str:
        if self.handle_is_null():
            return "<Area destroyed>"
        b = self._bbox
        return f"<Area west={b.west} south={b.south} east={b.east} north={b.north}>"

    def destroy(self) -> None:
        """Release the native area. Calling it again does nothing."""
        if self._area is not None:
            self._ctx.lib.proj_area_destroy(self._area)
            self._area = None

    close = destroy

    @property
    def handle(self):
        if not self._area:
            raise DestroyedHandleError(self.kind)
        return self._area

    def handle_is_null(self) -> bool:
        return not self._area

    @property
    def bbox(self) -> BoundingBox:
        if not self._area:
            raise DestroyedHandleError(self.kind)
        return self._bbox
