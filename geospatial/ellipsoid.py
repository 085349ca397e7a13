"""
Ellipsoids Resolved by PROJ.

An `Ellipsoid` wraps a native ellipsoid object built from a WKT string, a
URN or an ``AUTH:CODE`` reference (e.g. ``EPSG:7030``).

Parameter Accessors
-------------------
The accessors reset the object's error register before the native call but
do not raise when the native getter fails (it does when the handle is not
an ellipsoid, which the constructor already rules out). Such failures are
logged; contexts configured with ``strict_accessors`` raise instead.
"""

import ctypes
from typing import NamedTuple, Optional, Tuple

import pint

from common.units import to_quantity
from libproj.context import Context
from geospatial.construction import create_pj
from geospatial.enums import Category, ISOType
from geospatial.handle import NativeHandle


class EllipsoidParameters(NamedTuple):
    """Parameters of an ellipsoid.

    Attributes
    ----------
    semi_major : float
        Semi-major axis in meters.
    semi_minor : float
        Semi-minor axis in meters.
    semi_minor_computed : bool
        True when the semi-minor axis is derived from the flattening rather
        than defined.
    inverse_flattening : float
        Inverse flattening (0 for a sphere).
    """
    semi_major: float
    semi_minor: float
    semi_minor_computed: bool
    inverse_flattening: float


class Ellipsoid(NativeHandle):
    """A reference ellipsoid."""

    kind = "Ellipsoid"
    category = Category.ELLIPSOID
    accepted_types = frozenset({ISOType.ELLIPSOID})

    @classmethod
    def create(cls, ctx: Context, definition: str) -> 'Ellipsoid':
        """Create an ellipsoid from a WKT string, a URN or ``AUTH:CODE``."""
        pj = create_pj(ctx, definition, cls.kind, cls.category)
        return cls.adopt(ctx, pj, definition)

    def _get_parameters(self, ctx: Optional[Context], want_a=False, want_b=False, want_rf=False):
        ctx = self._resolve(ctx)
        pj = self._live()
        a, b, rf = ctypes.c_double(), ctypes.c_double(), ctypes.c_double()
        computed = ctypes.c_int()

        ctx.lib.proj_errno_reset(pj)
        # unrequested slots are passed as NULL
        ok = ctx.lib.proj_ellipsoid_get_parameters(
            ctx.handle,
            pj,
            ctypes.byref(a) if want_a else None,
            ctypes.byref(b) if want_b else None,
            ctypes.byref(computed) if want_b else None,
            ctypes.byref(rf) if want_rf else None,
        )
        if not ok:
            self._accessor_failed(ctx, "proj_ellipsoid_get_parameters")
        return float(a.value), float(b.value), computed.value == 1, float(rf.value)

    def semi_major(self, ctx: Optional[Context] = None) -> float:
        """Semi-major axis in meters."""
        a, _, _, _ = self._get_parameters(ctx, want_a=True)
        return a

    def semi_minor(self, ctx: Optional[Context] = None) -> Tuple[float, bool]:
        """Semi-minor axis in meters and whether it is computed or defined."""
        _, b, computed, _ = self._get_parameters(ctx, want_b=True)
        return b, computed

    def inverse_flattening(self, ctx: Optional[Context] = None) -> float:
        _, _, _, rf = self._get_parameters(ctx, want_rf=True)
        return rf

    def parameters(self, ctx: Optional[Context] = None) -> EllipsoidParameters:
        """All parameters in one native call."""
        return EllipsoidParameters(
            *self._get_parameters(ctx, want_a=True, want_b=True, want_rf=True)
        )

    def semi_major_quantity(self, ctx: Optional[Context] = None) -> pint.Quantity:
        return to_quantity(self.semi_major(ctx), "metre")


def new_ellipsoid(ctx: Context, definition: str) -> Ellipsoid:
    """Create an `Ellipsoid` from a WKT string, a URN or ``AUTH:CODE``.

    Raises
    ------
    DefinitionError
        If the definition is malformed or does not yield an ellipsoid.
    ProjError
        If PROJ cannot resolve the definition.
    """
    return Ellipsoid.create(ctx, definition)
