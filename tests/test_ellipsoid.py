import pytest

from common.units import ureg
from libproj.errors import ProjError
from geospatial import ISOType, WKTType, new_ellipsoid


@pytest.fixture
def wgs84(ctx):
    ellipsoid = new_ellipsoid(ctx, "EPSG:7030")
    yield ellipsoid
    ellipsoid.destroy()


def test_wgs84(wgs84):
    assert wgs84.type_of() == ISOType.ELLIPSOID
    assert wgs84.name == "WGS 84"
    assert wgs84.semi_major() == 6378137.0
    assert wgs84.inverse_flattening() == pytest.approx(298.257223563)


def test_semi_minor_is_computed(wgs84):
    b, computed = wgs84.semi_minor()
    assert b == pytest.approx(6356752.314245, abs=1e-6)
    assert computed is True


def test_parameters_in_one_call(wgs84):
    params = wgs84.parameters()
    assert params.semi_major == 6378137.0
    assert params.semi_minor == pytest.approx(6356752.314245, abs=1e-6)
    assert params.semi_minor_computed
    assert params.inverse_flattening == pytest.approx(298.257223563)


def test_semi_major_quantity(wgs84):
    assert wgs84.semi_major_quantity().to(ureg.kilometer).magnitude == pytest.approx(6378.137)


def test_sphere(ctx):
    # Clarke 1866 authalic sphere
    with new_ellipsoid(ctx, "EPSG:7052") as sphere:
        a, b, computed, rf = sphere.parameters()
        assert a == b
        assert rf == 0.0


def test_wkt_roundtrip(ctx, wgs84):
    with new_ellipsoid(ctx, wgs84.wkt(WKTType.WKT2_2018)) as copy:
        assert copy.semi_major() == wgs84.semi_major()
        assert copy.identifier() == "EPSG:7030"


def test_strict_accessor_failure(strict_ctx, monkeypatch):
    with new_ellipsoid(strict_ctx, "EPSG:7030") as ellipsoid:
        monkeypatch.setattr(strict_ctx.lib, "proj_ellipsoid_get_parameters", lambda *args: 0)
        with pytest.raises(ProjError, match="proj_ellipsoid_get_parameters"):
            ellipsoid.semi_major()


def test_silent_accessor_failure(wgs84, monkeypatch, caplog):
    monkeypatch.setattr(wgs84.context.lib, "proj_ellipsoid_get_parameters", lambda *args: 0)
    assert wgs84.semi_major() == 0.0
    assert "failed on Ellipsoid 'WGS 84'" in caplog.text
