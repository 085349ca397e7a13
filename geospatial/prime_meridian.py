"""
Prime Meridians Resolved by PROJ.

Greenwich is ``EPSG:8901``; its longitude is 0 degree.
"""

import ctypes
from typing import NamedTuple, Optional

import pint

from common.units import to_quantity
from libproj.context import Context
from libproj.strings import from_bytes
from geospatial.construction import create_pj
from geospatial.enums import Category, ISOType
from geospatial.handle import NativeHandle


class PrimeMeridianParameters(NamedTuple):
    """Parameters of a prime meridian.

    Attributes
    ----------
    longitude : float
        Longitude of the meridian, in `unit_name`.
    unit_conv_factor : float
        Conversion factor of the unit to radians.
    unit_name : str
        Angular unit of the longitude (e.g. "degree").
    """
    longitude: float
    unit_conv_factor: float
    unit_name: str


class PrimeMeridian(NativeHandle):
    """The origin of longitudes of a geodetic datum."""

    kind = "PrimeMeridian"
    category = Category.PRIME_MERIDIAN
    accepted_types = frozenset({ISOType.PRIME_MERIDIAN})

    @classmethod
    def create(cls, ctx: Context, definition: str) -> 'PrimeMeridian':
        pj = create_pj(ctx, definition, cls.kind, cls.category)
        return cls.adopt(ctx, pj, definition)

    def parameters(self, ctx: Optional[Context] = None) -> PrimeMeridianParameters:
        """Longitude, unit conversion factor and unit name.

        Native failures are not raised unless the context is configured with
        ``strict_accessors``.
        """
        ctx = self._resolve(ctx)
        pj = self._live()
        longitude, factor = ctypes.c_double(), ctypes.c_double()
        unit = ctypes.c_char_p()

        ctx.lib.proj_errno_reset(pj)
        ok = ctx.lib.proj_prime_meridian_get_parameters(
            ctx.handle, pj,
            ctypes.byref(longitude), ctypes.byref(factor), ctypes.byref(unit),
        )
        if not ok:
            self._accessor_failed(ctx, "proj_prime_meridian_get_parameters")
        return PrimeMeridianParameters(
            float(longitude.value), float(factor.value), from_bytes(unit.value)
        )

    def longitude(self, ctx: Optional[Context] = None) -> float:
        return self.parameters(ctx).longitude

    def unit_name(self, ctx: Optional[Context] = None) -> str:
        return self.parameters(ctx).unit_name

    def longitude_quantity(self, ctx: Optional[Context] = None) -> pint.Quantity:
        """Longitude with its unit attached."""
        params = self.parameters(ctx)
        return to_quantity(params.longitude, params.unit_name)


def new_prime_meridian(ctx: Context, definition: str) -> PrimeMeridian:
    """Create a `PrimeMeridian` from a WKT string, a URN or ``AUTH:CODE``."""
    return PrimeMeridian.create(ctx, definition)
