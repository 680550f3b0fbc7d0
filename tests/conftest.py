import pytest

from noun_declension.engine import Engine
from noun_declension.stress import StressDictionary


@pytest.fixture
def engine() -> Engine:
    """Engine with an empty stress dictionary of its own."""
    return Engine(stress_dictionary=StressDictionary())
