"""
Cartographic Factors at a Point.

The values are computed by PROJ (numerically by default, analytically where
the projection provides it) and copied into an immutable bundle.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from dataclasses import dataclass, fields

import numpy as np

from libproj.structures import PJ_FACTORS


@dataclass(frozen=True)
class Factors:
    """Scale factors, distortion and partial derivatives at one coordinate.

    Attributes
    ----------
    meridional_scale : float
        Scale factor along the meridian (h).
    parallel_scale : float
        Scale factor along the parallel (k).
    areal_scale : float
        Areal scale factor (s).
    angular_distortion : float
        Maximum angular distortion (omega), radians.
    meridian_parallel_angle : float
        Angle between meridian and parallel (theta prime), radians.
    meridian_convergence : float
        Meridian convergence (alpha), radians.
    tissot_semimajor : float
        Semi-major axis of the Tissot indicatrix (a).
    tissot_semiminor : float
        Semi-minor axis of the Tissot indicatrix (b).
    dx_dlam, dx_dphi, dy_dlam, dy_dphi : float
        Partial derivatives of the projected coordinates with respect to
        longitude and latitude.

    Notes
    -----
    - For a conformal projection: h = k and omega = 0.
    - For an equal-area projection: s = 1.
    """
    meridional_scale: float
    parallel_scale: float
    areal_scale: float
    angular_distortion: float
    meridian_parallel_angle: float
    meridian_convergence: float
    tissot_semimajor: float
    tissot_semiminor: float
    dx_dlam: float
    dx_dphi: float
    dy_dlam: float
    dy_dphi: float

    @classmethod
    def from_native(cls, raw: PJ_FACTORS) -> 'Factors':
        return cls(**{f.name: float(getattr(raw, f.name)) for f in fields(cls)})

    @property
    def is_conformal(self) -> bool:
        """Check if the projection is locally conformal."""
        return bool(np.abs(self.angular_distortion) < 1e-6)

    @property
    def is_equal_area(self) -> bool:
        """Check if the projection is locally equal-area."""
        return bool(np.abs(self.areal_scale - 1.0) < 1e-6)
