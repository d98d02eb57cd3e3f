import pytest

from geosketch import SketchSession
from geosketch.clipboard import MemoryClipboard
from geosketch.geometry import Reprojector
from geosketch.output import GeoJSONOutput
from geosketch.sources import GeoJSONSource
from geosketch.surface import GraphicsLayer


@pytest.fixture
def reprojector():
    return Reprojector()


@pytest.fixture
def layer():
    return GraphicsLayer()


@pytest.fixture
def output(reprojector):
    return GeoJSONOutput(reprojector)


@pytest.fixture
def source(reprojector):
    return GeoJSONSource(reprojector)


@pytest.fixture
def alerts():
    return []


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def session(alerts, clipboard):
    session = SketchSession(alert=alerts.append, clipboard=clipboard)
    yield session
    session.close()
