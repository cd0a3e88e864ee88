import pytest

from pdfgradients.config import get_settings
from pdfgradients.schemas import ColorStop, GradientSpec

RED = (1, 0, 0)
GREEN = (0, 1, 0)
BLUE = (0, 0, 1)


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def two_stops():
    return [ColorStop(offset=0, color=RED), ColorStop(offset=1, color=BLUE)]


@pytest.fixture
def three_stops():
    return [
        ColorStop(offset=0, color=RED),
        ColorStop(offset=0.5, color=GREEN),
        ColorStop(offset=1, color=BLUE),
    ]


@pytest.fixture
def axial_spec(two_stops):
    return GradientSpec.axial(0, 0, 100, 0, stops=two_stops)
