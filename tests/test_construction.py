import pytest

from libproj.errors import DefinitionError, ProjError
from geospatial import (
    ISOType,
    new_ellipsoid,
    new_operation,
    new_prime_meridian,
    new_reference_system,
)
from geospatial.construction import (
    AUTHORITY,
    PROJ_STRING,
    URI,
    classify_reference,
    create_pj,
    might_be_wkt,
    split_authority,
)
from geospatial.enums import Category


@pytest.mark.parametrize(
    "definition,shape",
    [
        ("+proj=utm +zone=32 +ellps=GRS80", PROJ_STRING),
        ("proj=longlat datum=WGS84", PROJ_STRING),
        ("urn:ogc:def:crs:EPSG::4326", URI),
        ("http://www.opengis.net/def/crs/EPSG/0/4326", URI),
        ("EPSG:4326", AUTHORITY),
        ("ESRI:102100", AUTHORITY),
    ],
)
def test_classify_reference(definition, shape):
    assert classify_reference(definition) == shape


def test_split_authority():
    assert split_authority("EPSG:8901") == ("EPSG", "8901")
    assert split_authority(" IGNF : LAMB93 ") == ("IGNF", "LAMB93")


@pytest.mark.parametrize("bad", ["EPSG:8901:x", "EPSG", "EPSG:", ":8901"])
def test_split_authority_rejects(bad):
    with pytest.raises(DefinitionError):
        split_authority(bad)


def test_might_be_wkt():
    assert might_be_wkt('PRIMEM["Greenwich",0]')
    assert might_be_wkt("GEOGCS(...)")
    assert not might_be_wkt("EPSG:4326")


def _forbid(*args):
    raise AssertionError("native constructor called")


def test_malformed_authority_fails_before_native_calls(ctx, monkeypatch):
    for name in (
        "proj_create",
        "proj_create_argv",
        "proj_create_from_wkt",
        "proj_create_from_database",
        "proj_context_guess_wkt_dialect",
    ):
        monkeypatch.setattr(ctx.lib, name, _forbid)

    with pytest.raises(DefinitionError, match="AUTHORITY:CODE"):
        new_prime_meridian(ctx, "EPSG:8901:x")


def test_no_definition(ctx):
    with pytest.raises(DefinitionError):
        create_pj(ctx, [], "Operation", Category.COORDINATE_OPERATION)
    with pytest.raises(DefinitionError):
        new_operation(ctx)


def test_unknown_code(ctx):
    with pytest.raises(ProjError):
        new_ellipsoid(ctx, "EPSG:999999")


def test_invalid_wkt_reports_grammar_errors(ctx):
    with pytest.raises(ProjError) as err:
        new_reference_system(ctx, 'GEOGCS["broken",DATUM[')
    assert str(err.value)


def test_type_mismatch_is_rejected(ctx):
    with new_reference_system(ctx, "EPSG:4326") as crs:
        crs_wkt = crs.wkt()
    with pytest.raises(DefinitionError, match="does not yield an Ellipsoid"):
        new_ellipsoid(ctx, crs_wkt)
    with pytest.raises(DefinitionError, match="does not yield an Operation"):
        new_operation(ctx, "+proj=longlat +datum=WGS84 +type=crs")
    with pytest.raises(DefinitionError, match="does not yield a ReferenceSystem"):
        new_reference_system(ctx, "+proj=utm +zone=32 +ellps=GRS80")


def test_urn(ctx):
    with new_reference_system(ctx, "urn:ogc:def:crs:EPSG::4326") as crs:
        assert crs.type_of() == ISOType.GEOGRAPHIC_2D_CRS
        assert crs.identifier() == "EPSG:4326"


def test_wkt(ctx):
    with new_reference_system(ctx, "EPSG:32632") as utm:
        exported = utm.wkt()
    with new_reference_system(ctx, exported) as crs:
        assert crs.type_of() == ISOType.PROJECTED_CRS
        assert crs.name == "WGS 84 / UTM zone 32N"
        assert crs.identifier() == "EPSG:32632"


def test_wkt_parser_message_is_the_error(ctx, greenwich):
    # PROJ does not parse a standalone PRIMEM node
    with pytest.raises(ProjError, match="PRIMEM"):
        new_prime_meridian(ctx, greenwich.wkt())


def test_proj_string_tokens(ctx):
    with new_reference_system(ctx, "+proj=longlat", "+datum=WGS84", "type=crs") as crs:
        assert crs.is_crs()
        assert crs.type_of() in (ISOType.GEOGRAPHIC_2D_CRS, ISOType.GEOGRAPHIC_3D_CRS)
