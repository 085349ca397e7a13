import pytest

from common.types import BoundingBox, Coordinate
from libproj.context import Context
from libproj.errors import DestroyedHandleError
from geospatial import (
    Area,
    Direction,
    ISOType,
    StringType,
    WKTType,
    new_ellipsoid,
    new_operation,
    new_prime_meridian,
    new_reference_system,
)


@pytest.fixture(
    params=[
        (new_ellipsoid, "EPSG:7030"),
        (new_prime_meridian, "EPSG:8901"),
        (new_reference_system, "EPSG:4326"),
        (new_operation, "+proj=utm +zone=32 +ellps=GRS80"),
    ],
    ids=["ellipsoid", "prime_meridian", "reference_system", "operation"],
)
def entity(request, ctx):
    factory, definition = request.param
    created = factory(ctx, definition)
    yield created
    created.destroy()


def test_destroy_is_idempotent(entity):
    assert not entity.handle_is_null()
    entity.destroy()
    assert entity.handle_is_null()
    entity.destroy()
    entity.close()
    assert entity.handle_is_null()


def test_destroyed_entity(entity):
    entity.destroy()
    assert entity.type_of() == ISOType.UNKNOWN
    assert str(entity) == ""
    assert "destroyed" in repr(entity)
    with pytest.raises(DestroyedHandleError):
        entity.info()
    with pytest.raises(DestroyedHandleError):
        entity.name
    with pytest.raises(DestroyedHandleError):
        entity.handle
    with pytest.raises(DestroyedHandleError):
        entity.proj_string(StringType.VERSION4)
    with pytest.raises(DestroyedHandleError):
        entity.wkt(WKTType.WKT2_2018)


def test_context_manager(ctx):
    with new_prime_meridian(ctx, "EPSG:8901") as pm:
        assert not pm.handle_is_null()
    assert pm.handle_is_null()


def test_destroyed_operation(utm):
    utm.destroy()
    with pytest.raises(DestroyedHandleError):
        utm.transform(Direction.FORWARD, Coordinate(0.0, 0.0))
    with pytest.raises(DestroyedHandleError):
        utm.transform_array(Direction.FORWARD, [Coordinate(0.0, 0.0)])
    with pytest.raises(DestroyedHandleError):
        utm.factors(Coordinate(0.0, 0.0))


def test_destroyed_accessors(ctx):
    ellipsoid = new_ellipsoid(ctx, "EPSG:7030")
    pm = new_prime_meridian(ctx, "EPSG:8901")
    crs = new_reference_system(ctx, "EPSG:4326")
    for entity in (ellipsoid, pm, crs):
        entity.destroy()

    with pytest.raises(DestroyedHandleError, match="Ellipsoid has been destroyed"):
        ellipsoid.semi_major()
    with pytest.raises(DestroyedHandleError, match="PrimeMeridian has been destroyed"):
        pm.parameters()
    with pytest.raises(DestroyedHandleError, match="ReferenceSystem has been destroyed"):
        crs.ellipsoid()


def test_area_lifecycle(ctx):
    area = Area(ctx, BoundingBox(6.0, 47.0, 12.0, 55.0))
    assert area.bbox.north == 55.0
    assert not area.handle_is_null()
    assert area.handle
    area.destroy()
    area.destroy()
    assert area.handle_is_null()
    assert "destroyed" in repr(area)
    with pytest.raises(DestroyedHandleError):
        area.bbox


def test_area_needs_four_bounds(ctx):
    with pytest.raises(ValueError):
        Area(ctx, 6.0, 47.0)


def test_context_lifecycle(ctx, config):
    context = Context(config)
    assert not context.handle_is_null()
    assert context.errno() == 0
    context.destroy()
    context.destroy()
    assert context.handle_is_null()
    with pytest.raises(DestroyedHandleError, match="Context has been destroyed"):
        context.handle


def test_error_message_for_unknown_code(ctx):
    assert ctx.error_message(123456789)


def test_second_context_keeps_log_level(ctx, config):
    from dataclasses import replace

    from common.logging_config import get_logger

    logger = get_logger("geospatial.handle")
    before = logger.level
    other = Context(replace(config, log_level="DEBUG"))
    try:
        assert logger.level == before
    finally:
        other.destroy()
