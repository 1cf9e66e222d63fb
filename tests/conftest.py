import pytest
from tests.test_utils import STARTING_LAYOUT, BoardScenario


@pytest.fixture
def scenario():
    """Factory fixture to create board scenarios."""

    def _builder(layout):
        return BoardScenario(layout)

    return _builder


@pytest.fixture
def starting_board(scenario):
    return scenario(STARTING_LAYOUT)
