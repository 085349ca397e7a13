import math

import pytest

from common.types import BoundingBox, Coordinate
from common.units import pint_unit_name, to_quantity, ureg
from geospatial.enums import ISOType, CRS_TYPES, OPERATION_TYPES, WKTType
from geospatial.factors import Factors
from geospatial.info import ISOInfo
from libproj.structures import PJ_COORD, PJ_FACTORS, PJ_PROJ_INFO


def test_coordinate_defaults():
    c = Coordinate(1, 2)
    assert c.as_tuple() == (1.0, 2.0, 0.0, math.inf)


def test_location_is_a_copy():
    c = Coordinate(1.0, 2.0, 3.0, 2020.5)
    loc = c.location()
    loc.x = 99.0
    assert c.x == 1.0


def test_set_location():
    c = Coordinate(1.0, 2.0)
    c.set_location(Coordinate(3.0, 4.0, 5.0, 6.0))
    assert c.as_tuple() == (3.0, 4.0, 5.0, 6.0)


def test_degrees_roundtrip():
    c = Coordinate.from_degrees(12.0, 55.0, 10.0)
    assert c.x == pytest.approx(math.radians(12.0))
    assert c.y == pytest.approx(math.radians(55.0))
    assert c.z == 10.0
    lon, lat = c.to_degrees()
    assert lon == pytest.approx(12.0)
    assert lat == pytest.approx(55.0)


def test_pj_coord_roundtrip():
    native = PJ_COORD.from_values(1.0, 2.0, 3.0, math.inf)
    assert native.values() == (1.0, 2.0, 3.0, math.inf)


def test_bounding_box():
    bbox = BoundingBox(6.0, 47.0, 12.0, 55.0)
    assert not bbox.crosses_antimeridian
    assert BoundingBox(170.0, -20.0, -170.0, 10.0).crosses_antimeridian


@pytest.mark.parametrize(
    "bounds",
    [(0.0, -91.0, 1.0, 0.0), (0.0, 0.0, 1.0, 90.5), (0.0, 10.0, 1.0, 5.0)],
)
def test_bounding_box_rejects_bad_latitudes(bounds):
    with pytest.raises(ValueError):
        BoundingBox(*bounds)


def test_units():
    assert pint_unit_name("metre") == "meter"
    assert pint_unit_name("US survey foot") == "survey_foot"
    assert to_quantity(0.5, "degree").to(ureg.radian).magnitude == pytest.approx(math.pi / 360)
    assert to_quantity(100.0, "grad").to(ureg.degree).magnitude == pytest.approx(90.0)


def test_factors_from_native():
    raw = PJ_FACTORS(*[float(i) for i in range(12)])
    factors = Factors.from_native(raw)
    assert factors.meridional_scale == 0.0
    assert factors.dy_dphi == 11.0
    assert not factors.is_conformal


def test_info_from_native():
    raw = PJ_PROJ_INFO()
    raw.id = b"utm"
    raw.description = b"Universal Transverse Mercator (UTM)"
    raw.definition = None
    raw.has_inverse = 1
    raw.accuracy = -1.0
    info = ISOInfo.from_native(raw)
    assert info == ISOInfo("utm", "Universal Transverse Mercator (UTM)", "", True, -1.0)


def test_type_families():
    assert ISOType.PROJECTED_CRS in CRS_TYPES
    assert ISOType.CONVERSION in OPERATION_TYPES
    assert not CRS_TYPES & OPERATION_TYPES
    assert ISOType.from_native(999) == ISOType.UNKNOWN
    assert int(WKTType.WKT2_2018) == 2
