import pytest
from helpers import FakeLookup


@pytest.fixture
def fake_lookup():
    return FakeLookup()
