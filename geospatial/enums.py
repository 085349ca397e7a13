"""
Enumerations Passed Through to PROJ.

Values match the corresponding C enumerations, so members are handed to
native calls unchanged.
"""

from enum import IntEnum

from libproj import constants


class ISOType(IntEnum):
    """Type of an ISO-19111 object (``PJ_TYPE``)."""
    UNKNOWN = 0
    ELLIPSOID = 1
    PRIME_MERIDIAN = 2
    GEODETIC_REFERENCE_FRAME = 3
    DYNAMIC_GEODETIC_REFERENCE_FRAME = 4
    VERTICAL_REFERENCE_FRAME = 5
    DYNAMIC_VERTICAL_REFERENCE_FRAME = 6
    DATUM_ENSEMBLE = 7
    CRS = 8
    GEODETIC_CRS = 9
    GEOCENTRIC_CRS = 10
    GEOGRAPHIC_CRS = 11
    GEOGRAPHIC_2D_CRS = 12
    GEOGRAPHIC_3D_CRS = 13
    VERTICAL_CRS = 14
    PROJECTED_CRS = 15
    COMPOUND_CRS = 16
    TEMPORAL_CRS = 17
    ENGINEERING_CRS = 18
    BOUND_CRS = 19
    OTHER_CRS = 20
    CONVERSION = 21
    TRANSFORMATION = 22
    CONCATENATED_OPERATION = 23
    OTHER_COORDINATE_OPERATION = 24
    TEMPORAL_DATUM = 25
    ENGINEERING_DATUM = 26
    PARAMETRIC_DATUM = 27
    DERIVED_PROJECTED_CRS = 28
    COORDINATE_METADATA = 29

    @classmethod
    def from_native(cls, value: int) -> 'ISOType':
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


CRS_TYPES = frozenset({
    ISOType.CRS,
    ISOType.GEODETIC_CRS,
    ISOType.GEOCENTRIC_CRS,
    ISOType.GEOGRAPHIC_CRS,
    ISOType.GEOGRAPHIC_2D_CRS,
    ISOType.GEOGRAPHIC_3D_CRS,
    ISOType.VERTICAL_CRS,
    ISOType.PROJECTED_CRS,
    ISOType.COMPOUND_CRS,
    ISOType.TEMPORAL_CRS,
    ISOType.ENGINEERING_CRS,
    ISOType.BOUND_CRS,
    ISOType.OTHER_CRS,
    ISOType.DERIVED_PROJECTED_CRS,
})

OPERATION_TYPES = frozenset({
    ISOType.CONVERSION,
    ISOType.TRANSFORMATION,
    ISOType.CONCATENATED_OPERATION,
    ISOType.OTHER_COORDINATE_OPERATION,
})


class Category(IntEnum):
    """Database category searched by an ``AUTH:CODE`` lookup (``PJ_CATEGORY``)."""
    ELLIPSOID = constants.PJ_CATEGORY_ELLIPSOID
    PRIME_MERIDIAN = constants.PJ_CATEGORY_PRIME_MERIDIAN
    DATUM = constants.PJ_CATEGORY_DATUM
    CRS = constants.PJ_CATEGORY_CRS
    COORDINATE_OPERATION = constants.PJ_CATEGORY_COORDINATE_OPERATION
    DATUM_ENSEMBLE = constants.PJ_CATEGORY_DATUM_ENSEMBLE


class Direction(IntEnum):
    """Direction of a coordinate operation (``PJ_DIRECTION``)."""
    FORWARD = constants.PJ_FWD
    INVERSE = constants.PJ_INV


class WKTType(IntEnum):
    """WKT export style (``PJ_WKT_TYPE``)."""
    WKT2_2015 = constants.PJ_WKT2_2015
    WKT2_2015_SIMPLIFIED = constants.PJ_WKT2_2015_SIMPLIFIED
    WKT2_2018 = constants.PJ_WKT2_2019
    WKT2_2018_SIMPLIFIED = constants.PJ_WKT2_2019_SIMPLIFIED
    WKT1_GDAL = constants.PJ_WKT1_GDAL
    WKT1_ESRI = constants.PJ_WKT1_ESRI


class StringType(IntEnum):
    """proj-string dialect (``PJ_PROJ_STRING_TYPE``)."""
    VERSION5 = constants.PJ_PROJ_5
    VERSION4 = constants.PJ_PROJ_4
