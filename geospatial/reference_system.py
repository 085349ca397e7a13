"""
Coordinate Reference Systems Resolved by PROJ.

A `ReferenceSystem` is built from a proj-string (``+proj=longlat
+datum=WGS84 +type=crs``), WKT, a URN or ``AUTH:CODE`` (``EPSG:4326``).
Its ellipsoid, prime meridian and geodetic CRS are returned as new entities
the caller owns and must destroy.
"""

from typing import Optional

from libproj.context import Context
from geospatial.construction import create_pj
from geospatial.ellipsoid import Ellipsoid
from geospatial.enums import CRS_TYPES, Category
from geospatial.handle import NativeHandle
from geospatial.prime_meridian import PrimeMeridian


class ReferenceSystem(NativeHandle):
    """A coordinate reference system."""

    kind = "ReferenceSystem"
    category = Category.CRS
    accepted_types = CRS_TYPES

    @classmethod
    def create(cls, ctx: Context, *definitions: str) -> 'ReferenceSystem':
        pj = create_pj(ctx, definitions, cls.kind, cls.category)
        return cls.adopt(ctx, pj, definitions)

    def is_crs(self) -> bool:
        return bool(self._ctx.lib.proj_is_crs(self._live()))

    def _component(self, ctx: Optional[Context], getter: str, entity_class, label: str):
        ctx = self._resolve(ctx)
        pj = self._live()
        ctx.lib.proj_errno_reset(pj)
        component = getattr(ctx.lib, getter)(ctx.handle, pj)
        if not component:
            raise ctx.last_error(f"{self.name!r} has no {label}")
        return entity_class.adopt(ctx, component, f"{label} of {self.name}")

    def ellipsoid(self, ctx: Optional[Context] = None) -> Ellipsoid:
        """Ellipsoid of the reference system (a new entity the caller owns)."""
        return self._component(ctx, "proj_get_ellipsoid", Ellipsoid, "ellipsoid")

    def prime_meridian(self, ctx: Optional[Context] = None) -> PrimeMeridian:
        """Prime meridian of the reference system (a new entity the caller owns)."""
        return self._component(ctx, "proj_get_prime_meridian", PrimeMeridian, "prime meridian")

    def geodetic_crs(self, ctx: Optional[Context] = None) -> 'ReferenceSystem':
        """Geodetic CRS underlying the reference system (a new entity the caller owns)."""
        return self._component(ctx, "proj_crs_get_geodetic_crs", ReferenceSystem, "geodetic CRS")


def new_reference_system(ctx: Context, *definitions: str) -> ReferenceSystem:
    """Create a `ReferenceSystem` from one definition or proj-string tokens.

    Examples
    --------
    >>> crs = new_reference_system(ctx, "EPSG:4326")
    >>> crs = new_reference_system(ctx, "proj=longlat", "datum=WGS84", "type=crs")
    """
    return ReferenceSystem.create(ctx, *definitions)
