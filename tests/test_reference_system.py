import pytest

from geospatial import CRS_TYPES, ISOType, StringType, new_reference_system


@pytest.fixture
def wgs84(ctx):
    crs = new_reference_system(ctx, "EPSG:4326")
    yield crs
    crs.destroy()


def test_geographic(wgs84):
    assert wgs84.is_crs()
    assert wgs84.type_of() == ISOType.GEOGRAPHIC_2D_CRS
    assert wgs84.type_of() in CRS_TYPES
    assert wgs84.name == "WGS 84"
    assert wgs84.identifier() == "EPSG:4326"


def test_ellipsoid(wgs84):
    with wgs84.ellipsoid() as ellipsoid:
        assert ellipsoid.name == "WGS 84"
        assert ellipsoid.semi_major() == 6378137.0
        assert ellipsoid.inverse_flattening() == pytest.approx(298.257223563)


def test_prime_meridian(wgs84):
    with wgs84.prime_meridian() as pm:
        assert pm.name == "Greenwich"
        assert pm.longitude() == 0.0


def test_components_outlive_the_crs(ctx):
    crs = new_reference_system(ctx, "EPSG:4326")
    ellipsoid = crs.ellipsoid()
    crs.destroy()
    try:
        assert ellipsoid.semi_major() == 6378137.0
    finally:
        ellipsoid.destroy()


def test_geodetic_crs_of_projected(ctx):
    with new_reference_system(ctx, "EPSG:32632") as utm:
        assert utm.type_of() == ISOType.PROJECTED_CRS
        with utm.geodetic_crs() as base:
            assert base.name == "WGS 84"
            assert base.type_of() in CRS_TYPES


def test_proj_string_definition(ctx):
    with new_reference_system(ctx, "+proj=longlat +ellps=GRS80 +type=crs") as crs:
        exported = crs.proj_string(StringType.VERSION4)
        assert "+proj=longlat" in exported
        assert "+ellps=GRS80" in exported


def test_projected_proj_string(ctx):
    with new_reference_system(ctx, "EPSG:32632") as utm:
        exported = utm.proj_string()
        assert "+proj=utm" in exported
        assert "+zone=32" in exported
