import importlib.util

import pytest

from common.config import ProjConfig
from libproj.context import Context
from libproj.errors import LibraryNotFoundError
from geospatial import new_operation, new_prime_meridian


def open_context(config):
    """Create a context; skip only when no PROJ provider is installed at all."""
    try:
        return Context(config)
    except LibraryNotFoundError as e:
        if importlib.util.find_spec("pyproj") is not None:
            raise
        pytest.skip(f"PROJ library unavailable: {e}")


@pytest.fixture(scope="session")
def config():
    return ProjConfig.from_env()


@pytest.fixture
def ctx(config):
    context = open_context(config)
    yield context
    context.destroy()


@pytest.fixture
def strict_ctx(config):
    strict = ProjConfig(
        library_path=config.library_path,
        search_paths=list(config.search_paths),
        strict_accessors=True,
    )
    context = open_context(strict)
    yield context
    context.destroy()


@pytest.fixture
def utm(ctx):
    op = new_operation(ctx, "+proj=utm +zone=32 +ellps=GRS80")
    yield op
    op.destroy()


@pytest.fixture
def greenwich(ctx):
    pm = new_prime_meridian(ctx, "EPSG:8901")
    yield pm
    pm.destroy()


class CallRecorder:
    """Wraps a native function and counts calls."""

    def __init__(self, function=None, result=None):
        self.function = function
        self.result = result
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        if self.function is not None:
            return self.function(*args)
        return self.result


@pytest.fixture
def recorder():
    return CallRecorder
