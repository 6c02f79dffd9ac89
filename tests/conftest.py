"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from trickgraph.schema.models import ComboGraph, MovementNode
from trickgraph.sequence.items import ArrowItem, TrickItem


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def two_trick_payload() -> dict:
    """Return a stored two-movement combo."""
    return {
        "tricks": [
            {"movement_id": "gainer"},
            {"movement_id": "cork", "landing_stance": "complete"},
        ],
        "transitions": [{"from_index": 0, "to_index": 1}],
    }


@pytest.fixture
def chain_payload() -> dict:
    """Return a stored four-movement combo with mixed transitions."""
    return {
        "tricks": [
            {"movement_id": "cartwheel"},
            {"movement_id": "gainer", "landing_stance": "hyper"},
            {"movement_id": "cork", "landing_stance": "complete"},
            {"movement_id": "double_leg"},
        ],
        "transitions": [
            {"from_index": 0, "to_index": 1, "transition_id": "vanish"},
            {"from_index": 1, "to_index": 2},
            {"from_index": 2, "to_index": 3, "transition_id": "swing_through"},
        ],
    }


@pytest.fixture
def two_trick_graph(two_trick_payload) -> ComboGraph:
    """Return the two-movement combo as a model."""
    return ComboGraph.model_validate(two_trick_payload)


@pytest.fixture
def chain_graph(chain_payload) -> ComboGraph:
    """Return the four-movement combo as a model."""
    return ComboGraph.model_validate(chain_payload)


@pytest.fixture
def make_trick():
    """Return a factory for trick items with readable ids."""

    def _make(item_id: str, movement_id: str | None = None, stance: str | None = None):
        return TrickItem(
            id=item_id,
            data=MovementNode(movement_id=movement_id or item_id, landing_stance=stance),
        )

    return _make


@pytest.fixture
def make_arrow():
    """Return a factory for arrow items with readable ids."""

    def _make(item_id: str, transition_id: str | None = None):
        return ArrowItem(id=item_id, transition_id=transition_id)

    return _make


@pytest.fixture
def three_trick_sequence(make_trick, make_arrow):
    """Return [t1] [a1:vs] [t2] [a2:s/t] [t3]."""
    return (
        make_trick("t1"),
        make_arrow("a1", "vs"),
        make_trick("t2"),
        make_arrow("a2", "s/t"),
        make_trick("t3"),
    )
