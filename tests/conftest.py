import pytest

from solidcap import CapabilityRegistry


@pytest.fixture
def registry() -> CapabilityRegistry:
    return CapabilityRegistry("test")
