import pytest
from kinko_notation.models import BoundingBox, PitchMapping


@pytest.fixture
def unit_box():
    return BoundingBox(x=0, y=0, width=10, height=10)


@pytest.fixture
def meri_mapping():
    return PitchMapping(step="ro", octave=1, meri=True)
