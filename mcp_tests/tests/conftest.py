import pytest

from core.cache import AgedCache
from core.clock import ManualClock


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool and resource registration."""

    def __init__(self) -> None:
        self.tools = {}
        self.resources = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator

    def resource(self, uri: str, **kwargs):
        def _decorator(fn):
            self.resources[uri] = {"fn": fn, **kwargs}
            return fn
        return _decorator


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def cache(clock):
    return AgedCache(clock)
