"""
Geospatial Entities Backed by PROJ.

Each entity owns exactly one native object, created against a `Context`
and released explicitly with `destroy` (or by leaving a ``with`` block).
No geodetic computation happens in Python: parameters, transformations,
factors and exports are all delegated to PROJ.

This module provides:
- Ellipsoids, prime meridians and reference systems
- Coordinate operations (single coordinates, batches, numpy arrays)
- Cartographic factors and object descriptions
- Areas of interest selecting among candidate operations
"""

from geospatial.enums import (
    ISOType,
    Category,
    Direction,
    WKTType,
    StringType,
    CRS_TYPES,
    OPERATION_TYPES,
)

from geospatial.info import ISOInfo
from geospatial.factors import Factors
from geospatial.handle import NativeHandle
from geospatial.area import Area

from geospatial.ellipsoid import (
    Ellipsoid,
    EllipsoidParameters,
    new_ellipsoid,
)

from geospatial.prime_meridian import (
    PrimeMeridian,
    PrimeMeridianParameters,
    new_prime_meridian,
)

from geospatial.reference_system import (
    ReferenceSystem,
    new_reference_system,
)

from geospatial.operation import (
    Operation,
    new_operation,
)

__all__ = [
    # Enumerations
    "ISOType",
    "Category",
    "Direction",
    "WKTType",
    "StringType",
    "CRS_TYPES",
    "OPERATION_TYPES",
    # Values
    "ISOInfo",
    "Factors",
    # Entities
    "NativeHandle",
    "Area",
    "Ellipsoid",
    "EllipsoidParameters",
    "new_ellipsoid",
    "PrimeMeridian",
    "PrimeMeridianParameters",
    "new_prime_meridian",
    "ReferenceSystem",
    "new_reference_system",
    "Operation",
    "new_operation",
]
