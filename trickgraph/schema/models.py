"""Pydantic models for the persisted combo graph."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Keys written by earlier clients, mapped to their current names.
NODE_KEY_ALIASES = {
    "trick_id": "movement_id",
    "movementId": "movement_id",
    "landingStance": "landing_stance",
}
EDGE_KEY_ALIASES = {
    "fromIndex": "from_index",
    "toIndex": "to_index",
    "transitionId": "transition_id",
}
GRAPH_KEY_ALIASES = {
    "nodes": "tricks",
    "edges": "transitions",
}


def _rename_keys(data: Mapping, aliases: dict[str, str]) -> dict:
    renamed = {}
    for key, value in data.items():
        target = aliases.get(key, key)
        # An explicit current-name key wins over its legacy alias
        if target != key and target in data:
            continue
        renamed[target] = value
    return renamed


def normalize_node_keys(data: Any) -> Any:
    """Rename legacy movement node keys. Non-mappings pass through."""
    if not isinstance(data, Mapping):
        return data
    return _rename_keys(data, NODE_KEY_ALIASES)


def normalize_edge_keys(data: Any) -> Any:
    """Rename legacy transition edge keys. Non-mappings pass through."""
    if not isinstance(data, Mapping):
        return data
    return _rename_keys(data, EDGE_KEY_ALIASES)


def normalize_graph_keys(data: Any) -> Any:
    """Rename legacy keys of a whole graph payload, nested items included.

    The input is never mutated; a new dict is returned for mappings.
    """
    if not isinstance(data, Mapping):
        return data

    graph = _rename_keys(data, GRAPH_KEY_ALIASES)

    tricks = graph.get("tricks")
    if isinstance(tricks, list):
        graph["tricks"] = [normalize_node_keys(node) for node in tricks]

    transitions = graph.get("transitions")
    if isinstance(transitions, list):
        graph["transitions"] = [normalize_edge_keys(edge) for edge in transitions]

    return graph


class MovementNode(BaseModel):
    """One performed movement within a combo."""

    model_config = ConfigDict(frozen=True)

    movement_id: str
    landing_stance: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_node(cls, data: Any) -> Any:
        """Accept legacy key names."""
        return normalize_node_keys(data)


class TransitionEdge(BaseModel):
    """The connector between two consecutive movements."""

    model_config = ConfigDict(frozen=True)

    from_index: int
    to_index: int
    transition_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_edge(cls, data: Any) -> Any:
        """Accept legacy key names."""
        return normalize_edge_keys(data)


class ComboGraph(BaseModel):
    """A combo as stored: movements in performance order plus the edges
    joining each consecutive pair.

    The model only describes structure. Edge invariants are enforced by
    ``validate_edges`` at the marshalling and projection boundaries so that
    a bad stored row can still be loaded for inspection.
    """

    model_config = ConfigDict(frozen=True)

    tricks: list[MovementNode] = Field(default_factory=list)
    transitions: list[TransitionEdge] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_graph(cls, data: Any) -> Any:
        """Accept legacy key names at every level."""
        return normalize_graph_keys(data)

    @classmethod
    def empty(cls) -> "ComboGraph":
        """Create the empty-combo state."""
        return cls()

    @property
    def is_empty(self) -> bool:
        """Check if the combo holds no movements."""
        return not self.tricks

    def get_movement_ids(self) -> list[str]:
        """Get the movement ids in performance order."""
        return [node.movement_id for node in self.tricks]

    def get_transition(self, from_index: int) -> str | None:
        """Get the transition id leaving the node at ``from_index``."""
        if 0 <= from_index < len(self.transitions):
            return self.transitions[from_index].transition_id
        return None
