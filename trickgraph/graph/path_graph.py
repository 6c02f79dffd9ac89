"""ComboPathGraph wrapper around networkx for combo payloads."""

from collections.abc import Mapping
from typing import Any, Iterator

import networkx as nx

from ..schema.models import ComboGraph, normalize_graph_keys


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ComboPathGraph:
    """A graph view of a combo, built without trusting its structure.

    Nodes are trick positions and edges are the transitions as stored.
    Edges whose endpoints are not valid positions are kept aside in
    ``dangling_edges`` rather than added to the graph.
    """

    def __init__(self):
        """Initialize an empty path graph."""
        self._graph = nx.DiGraph()
        self.dangling_edges: list[int] = []

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    @classmethod
    def from_payload(cls, data: Any) -> "ComboPathGraph":
        """Build from a raw stored payload, legacy keys included."""
        data = normalize_graph_keys(data)
        path = cls()
        if not isinstance(data, Mapping):
            return path

        tricks = data.get("tricks")
        transitions = data.get("transitions")
        tricks = tricks if isinstance(tricks, list) else []
        transitions = transitions if isinstance(transitions, list) else []

        for position, node in enumerate(tricks):
            path.add_movement(
                position,
                _field(node, "movement_id"),
                _field(node, "landing_stance"),
            )
        for edge_index, edge in enumerate(transitions):
            path.add_transition(
                edge_index,
                _field(edge, "from_index"),
                _field(edge, "to_index"),
                _field(edge, "transition_id"),
            )
        return path

    @classmethod
    def from_combo(cls, combo: ComboGraph) -> "ComboPathGraph":
        """Build from a ComboGraph model."""
        return cls.from_payload(combo.model_dump())

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_movement(
        self, position: int, movement_id: Any, landing_stance: Any = None
    ) -> None:
        """Add the movement performed at ``position``."""
        self._graph.add_node(
            position, movement_id=movement_id, landing_stance=landing_stance
        )

    def add_transition(
        self, edge_index: int, from_index: Any, to_index: Any, transition_id: Any = None
    ) -> bool:
        """Add a stored edge.

        Returns:
            False if an endpoint is not an existing position.
        """
        if not (
            _is_index(from_index)
            and _is_index(to_index)
            and self._graph.has_node(from_index)
            and self._graph.has_node(to_index)
        ):
            self.dangling_edges.append(edge_index)
            return False

        self._graph.add_edge(
            from_index, to_index, transition_id=transition_id, edge_index=edge_index
        )
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def movement_count(self) -> int:
        """Number of movements."""
        return self._graph.number_of_nodes()

    def get_movement(self, position: int) -> dict[str, Any] | None:
        """Get the node data at a position."""
        if self._graph.has_node(position):
            return dict(self._graph.nodes[position])
        return None

    def get_reachable_positions(self) -> set[int]:
        """Get positions reachable from the first movement."""
        if not self._graph.has_node(0):
            return set()
        return {0} | nx.descendants(self._graph, 0)

    def get_unreachable_positions(self) -> list[int]:
        """Get positions not reachable from the first movement, in order."""
        reachable = self.get_reachable_positions()
        return sorted(p for p in self._graph.nodes if p not in reachable)

    def has_cycle(self) -> bool:
        """Check if the transitions loop back on themselves."""
        return not nx.is_directed_acyclic_graph(self._graph)

    def is_linear_path(self) -> bool:
        """Check if the edges are exactly 0 -> 1 -> ... -> n-1."""
        count = self.movement_count
        if count <= 1:
            return self._graph.number_of_edges() == 0
        if self._graph.number_of_edges() != count - 1:
            return False
        return nx.is_simple_path(self._graph, list(range(count)))

    def iter_transitions(self) -> Iterator[tuple[int, int, Any]]:
        """Iterate over edges in stored order.

        Yields:
            Tuples of (from_index, to_index, transition_id).
        """
        edges = sorted(
            self._graph.edges(data=True), key=lambda e: e[2]["edge_index"]
        )
        for source, target, data in edges:
            yield source, target, data.get("transition_id")

    def iter_repeated_movements(self) -> Iterator[tuple[int, int, Any]]:
        """Iterate over edges joining two performances of the same movement.

        Yields:
            Tuples of (from_index, to_index, movement_id).
        """
        for source, target, _ in self.iter_transitions():
            movement = self._graph.nodes[source].get("movement_id")
            if movement and movement == self._graph.nodes[target].get("movement_id"):
                yield source, target, movement
