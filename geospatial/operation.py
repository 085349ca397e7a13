"""
Coordinate Operations.

An `Operation` is a conversion, a transformation, a concatenated operation
or any other coordinate operation PROJ can build. It can be created from:

* one definition: ``"EPSG:9616"``, ``"+proj=utm +zone=32 +ellps=GRS80"``,
  ``"urn:ogc:def:coordinateOperation:EPSG::1671"`` or a WKT string;
* the tokens of a proj-string: ``"proj=utm", "zone=32", "ellps=GRS80"``;
* two reference systems and an area of interest:
  ``new_operation(ctx, "EPSG:25832", "EPSG:25833", area=area)``. PROJ lists
  the candidate pipelines valid over the area and the first one is used.

Coordinates
-----------
Operations built from proj-strings expect angular input in radians.
Operations between two reference systems follow the axis order and units of
the source system (degrees, latitude first for ``EPSG:4326``).
"""

import ctypes
from contextlib import ExitStack
from typing import List, Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from common.logging_config import get_logger
from common.types import BoundingBox, Coordinate, Locatable
from libproj.context import Context
from libproj.errors import DefinitionError, ProjError
from libproj.strings import Options
from libproj.structures import PJ_COORD
from geospatial.area import Area
from geospatial.construction import create_pj
from geospatial.enums import OPERATION_TYPES, Category, Direction, WKTType
from geospatial.factors import Factors
from geospatial.handle import NativeHandle
from geospatial.reference_system import ReferenceSystem

logger = get_logger(__name__)


EXPORTABLE_WKT_TYPES = frozenset({WKTType.WKT2_2018, WKTType.WKT2_2018_SIMPLIFIED})


def first_candidate_operation(
    ctx: Context,
    source: str,
    target: str,
    area: Union[Area, BoundingBox]
):
    """Build the first candidate operation between two reference systems.

    Every temporary native object (both reference systems, the factory
    context and the candidate list) is released on every exit path.

    Parameters
    ----------
    ctx : Context
        Context to create the objects in.
    source, target : str
        Definitions of the source and target reference systems.
    area : Area or BoundingBox
        Area of interest used to select candidates.

    Returns
    -------
    ctypes pointer
        The owned ``PJ *`` of candidate 0.

    Raises
    ------
    DefinitionError
        If no candidate operation exists.
    ProjError
        If PROJ fails to build a reference system or the candidate list.
    """
    bbox = area.bbox if isinstance(area, Area) else area

    with ExitStack() as stack:
        src = stack.enter_context(ReferenceSystem.create(ctx, source))
        tgt = stack.enter_context(ReferenceSystem.create(ctx, target))

        factory = ctx.lib.proj_create_operation_factory_context(ctx.handle, None)
        if not factory:
            raise ctx.last_error("cannot create an operation factory context")
        stack.callback(ctx.lib.proj_operation_factory_context_destroy, factory)

        ctx.lib.proj_operation_factory_context_set_area_of_interest(
            ctx.handle, factory, bbox.west, bbox.south, bbox.east, bbox.north
        )

        candidates = ctx.lib.proj_create_operations(ctx.handle, src.handle, tgt.handle, factory)
        if not candidates:
            raise ctx.last_error(f"cannot list operations between '{source}' and '{target}'")
        stack.callback(ctx.lib.proj_list_destroy, candidates)

        count = ctx.lib.proj_list_get_count(candidates)
        logger.info(f"{count} candidate operation(s) between '{source}' and '{target}'")
        if count == 0:
            raise DefinitionError(f"No operation found between '{source}' and '{target}'")

        pj = ctx.lib.proj_list_get(ctx.handle, candidates, 0)
        if not pj:
            raise ctx.last_error(f"cannot read candidate 0 between '{source}' and '{target}'")
    return pj


class Operation(NativeHandle):
    """A coordinate operation."""

    kind = "Operation"
    category = Category.COORDINATE_OPERATION
    accepted_types = OPERATION_TYPES

    @classmethod
    def create(
        cls,
        ctx: Context,
        *definitions: str,
        area: Optional[Union[Area, BoundingBox]] = None
    ) -> 'Operation':
        if len(definitions) == 2 and area is not None:
            pj = first_candidate_operation(ctx, definitions[0], definitions[1], area)
        else:
            pj = create_pj(ctx, definitions, cls.kind, cls.category)
        return cls.adopt(ctx, pj, definitions)

    # ------------------------------------------------------------------
    # coordinates
    # ------------------------------------------------------------------

    def transform(self, direction: Direction, c: Locatable) -> Locatable:
        """Transform the location of `c` forward or inverse.

        Parameters
        ----------
        direction : Direction
            FORWARD or INVERSE.
        c : Locatable
            Object whose location is transformed.

        Returns
        -------
        Locatable
            `c` itself, with its location updated.

        Raises
        ------
        ProjError
            If PROJ cannot transform the coordinate. `c` is left untouched.
        """
        xyzt = c.location()
        native = PJ_COORD.from_values(*xyzt.as_tuple())
        with self._native_errors() as pj:
            result = self._ctx.lib.proj_trans(pj, int(direction), native)
        c.set_location(Coordinate(*result.values()))
        return c

    def transform_array(
        self,
        direction: Direction,
        coords: List[Coordinate]
    ) -> List[Coordinate]:
        """Transform a list of coordinates in one native call.

        On success every coordinate is updated in place and the same list is
        returned. On failure none of them is modified.

        Raises
        ------
        ProjError
            If PROJ fails on any coordinate of the batch.
        """
        count = len(coords)
        buffer = (PJ_COORD * count)(
            *[PJ_COORD.from_values(*c.as_tuple()) for c in coords]
        )
        with self._native_errors() as pj:
            errno = self._ctx.lib.proj_trans_array(pj, int(direction), count, buffer)
            if errno != 0:
                raise ProjError.from_errno(self._ctx, errno)

        for coordinate, transformed in zip(coords, buffer):
            coordinate.set_location(Coordinate(*transformed.values()))
        return coords

    def transform_points(self, direction: Direction, points: ArrayLike) -> NDArray[np.float64]:
        """Transform an ``(N, k)`` array of points, ``1 <= k <= 4``.

        Missing components are padded with z = 0 and t = HUGE_VAL (no
        time). The input is not modified.

        Parameters
        ----------
        direction : Direction
            FORWARD or INVERSE.
        points : array_like
            Points, one per row.

        Returns
        -------
        ndarray
            Transformed points, same shape as the input.

        Raises
        ------
        ValueError
            If the array is not two-dimensional with 1 to 4 columns.
        ProjError
            If PROJ fails on any point.
        """
        array = np.asarray(points, dtype=np.float64)
        if array.ndim != 2 or not 1 <= array.shape[1] <= 4:
            raise ValueError(f"points must have shape (N, 1..4), got {array.shape}")

        count, width = array.shape
        buffer = np.zeros((count, 4), dtype=np.float64)
        buffer[:, 3] = np.inf
        buffer[:, :width] = array

        with self._native_errors() as pj:
            errno = self._ctx.lib.proj_trans_array(
                pj, int(direction), count, buffer.ctypes.data_as(ctypes.POINTER(PJ_COORD))
            )
            if errno != 0:
                raise ProjError.from_errno(self._ctx, errno)

        return buffer[:, :width].copy()

    def factors(self, c: Coordinate) -> Factors:
        """Cartographic factors at `c`.

        Depending on the projection the values are computed numerically
        (default) or analytically. The partial derivatives of the projected
        coordinates are included.

        Raises
        ------
        ProjError
            If PROJ cannot compute the factors at `c`.
        """
        native = PJ_COORD.from_values(*c.location().as_tuple())
        with self._native_errors() as pj:
            raw = self._ctx.lib.proj_factors(pj, native)
        return Factors.from_native(raw)

    def has_inverse(self) -> bool:
        return self.info().has_inverse

    # ------------------------------------------------------------------
    # export
    # ------------------------------------------------------------------

    def wkt(
        self,
        wkt_type: WKTType = WKTType.WKT2_2018,
        options: Options = None,
        ctx: Optional[Context] = None
    ) -> str:
        """Export the operation as WKT2:2018.

        Operations only export to `WKTType.WKT2_2018` and
        `WKTType.WKT2_2018_SIMPLIFIED`; any other style returns an empty
        string without calling PROJ.
        """
        if wkt_type not in EXPORTABLE_WKT_TYPES:
            return ""
        return super().wkt(wkt_type, options, ctx)


def new_operation(
    ctx: Context,
    *definitions: str,
    area: Optional[Union[Area, BoundingBox]] = None
) -> Operation:
    """Create an `Operation`.

    With an `area` and exactly two definitions, the definitions are the
    source and target reference systems. Otherwise a single definition is
    dispatched on its shape and several definitions are proj-string tokens.

    Raises
    ------
    DefinitionError
        If nothing is given, a reference is malformed, no candidate exists,
        or the result is not an operation.
    ProjError
        If PROJ cannot build the object.
    """
    return Operation.create(ctx, *definitions, area=area)
