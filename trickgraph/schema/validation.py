"""Boundary validation shared by marshalling, unmarshalling and projection.

Nodes and edges may be either pydantic models or raw mappings read back
from storage. Each rule is implemented once as an ``iter_*`` generator that
yields every problem it finds; the ``validate_*`` functions raise the first
one. Diagnostics reuse the generators to report everything at once.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from .errors import (
    ComboError,
    EmptySequenceError,
    InvalidLandingStanceError,
    InvalidMovementIdError,
    MalformedGraphError,
    MalformedInputError,
)

_MISSING = object()


def _get(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name, _MISSING)
    return getattr(item, name, _MISSING)


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def expected_edge_count(node_count: int) -> int:
    """Number of edges a path over ``node_count`` nodes must have."""
    return max(0, node_count - 1)


def landing_stance_error(
    value: Any, index: int | None = None
) -> InvalidLandingStanceError | None:
    """Check one landing stance. Absent and None are both fine."""
    if value is _MISSING or value is None or isinstance(value, str):
        return None
    where = f" at node {index}" if index is not None else ""
    return InvalidLandingStanceError(
        f"Invalid landing_stance{where}: must be a string", index
    )


def transition_id_error(
    value: Any, index: int | None = None
) -> MalformedGraphError | None:
    """Check one transition id. Absent and None mean a plain connection."""
    if value is _MISSING or value is None:
        return None
    if isinstance(value, str) and value:
        return None
    where = f" at edge {index}" if index is not None else ""
    return MalformedGraphError(
        f"Invalid transition_id{where}: must be a non-empty string",
        index,
        code="INVALID_TRANSITION_ID",
    )


def iter_node_errors(
    nodes: Any, require_non_empty: bool = True
) -> Iterator[ComboError]:
    """Yield every validation failure in a list of movement nodes.

    Args:
        nodes: MovementNode models or raw mappings.
        require_non_empty: Whether an empty list is a failure.

    Yields:
        EmptySequenceError, InvalidMovementIdError or
        InvalidLandingStanceError instances, in node order.
    """
    if isinstance(nodes, (str, bytes, Mapping)) or not hasattr(nodes, "__len__"):
        yield MalformedInputError(
            f"Combo tricks must be a list, got {type(nodes).__name__}"
        )
        return

    if len(nodes) == 0:
        if require_non_empty:
            yield EmptySequenceError("Combo must contain at least one movement")
        return

    for index, node in enumerate(nodes):
        if node is None or isinstance(node, (str, bytes, int, float, list)):
            yield InvalidMovementIdError(
                f"Invalid node {index}: expected a movement, got {type(node).__name__}",
                index,
            )
            continue

        movement_id = _get(node, "movement_id")
        if not isinstance(movement_id, str) or not movement_id:
            yield InvalidMovementIdError(
                f"Invalid movement_id at node {index}: must be a non-empty string",
                index,
            )

        stance_error = landing_stance_error(_get(node, "landing_stance"), index)
        if stance_error is not None:
            yield stance_error


def iter_edge_errors(edges: Any, node_count: int) -> Iterator[MalformedGraphError]:
    """Yield every structural failure in a list of transition edges.

    Edge ``k`` must join node ``k`` to node ``k + 1`` and there must be
    exactly one edge per consecutive pair of nodes.

    Args:
        edges: TransitionEdge models or raw mappings.
        node_count: Number of nodes the edges index into.
    """
    if isinstance(edges, (str, bytes, Mapping)) or not hasattr(edges, "__len__"):
        yield MalformedGraphError(
            f"Combo transitions must be a list, got {type(edges).__name__}",
            code="INVALID_EDGE",
        )
        return

    expected = expected_edge_count(node_count)
    if len(edges) != expected:
        yield MalformedGraphError(
            f"Combo with {node_count} movement(s) must have {expected} "
            f"transition edge(s), found {len(edges)}",
            code="EDGE_COUNT_MISMATCH",
        )

    for index, edge in enumerate(edges):
        if edge is None or isinstance(edge, (str, bytes, int, float, list)):
            yield MalformedGraphError(
                f"Invalid edge {index}: expected a transition, got {type(edge).__name__}",
                index,
                code="INVALID_EDGE",
            )
            continue

        from_index = _get(edge, "from_index")
        to_index = _get(edge, "to_index")

        if not _is_index(from_index) or not _is_index(to_index):
            yield MalformedGraphError(
                f"Invalid edge {index}: from_index and to_index must be integers",
                index,
                code="INVALID_EDGE",
            )
        elif not (0 <= from_index < node_count and 0 <= to_index < node_count):
            yield MalformedGraphError(
                f"Invalid edge {index}: {from_index} -> {to_index} references "
                f"a node outside 0..{node_count - 1}",
                index,
                code="EDGE_OUT_OF_RANGE",
            )
        elif from_index != index or to_index != index + 1:
            yield MalformedGraphError(
                f"Invalid edge {index}: expected {index} -> {index + 1}, "
                f"found {from_index} -> {to_index}",
                index,
                code="NON_CONSECUTIVE_EDGE",
            )

        transition_error = transition_id_error(_get(edge, "transition_id"), index)
        if transition_error is not None:
            yield transition_error


def validate_nodes(nodes: Any, require_non_empty: bool = True) -> None:
    """Validate a list of movement nodes.

    Raises:
        EmptySequenceError: If the list is empty and ``require_non_empty``.
        InvalidMovementIdError: At the first node with a bad movement_id.
        InvalidLandingStanceError: If a landing_stance is not a string.
    """
    for error in iter_node_errors(nodes, require_non_empty):
        raise error


def validate_edges(edges: Any, node_count: int) -> None:
    """Validate that transition edges form a path over ``node_count`` nodes.

    Raises:
        MalformedGraphError: At the first structural violation.
    """
    for error in iter_edge_errors(edges, node_count):
        raise error


def validate_payload(data: Any, require_non_empty: bool = True) -> None:
    """Validate a marshalled combo payload.

    This is the single rule set applied on both sides of the persistence
    boundary. ``transitions`` may be omitted for single-movement combos.

    Raises:
        MalformedInputError: If the payload is not a mapping with a list of tricks.
        ComboValidationError: If a movement node is invalid.
        MalformedGraphError: If the transition edges are invalid.
    """
    if not isinstance(data, Mapping):
        raise MalformedInputError(
            f"Expected a combo mapping, got {type(data).__name__}"
        )

    tricks = data.get("tricks")
    if not isinstance(tricks, list):
        raise MalformedInputError("Combo payload must contain a list of tricks")

    validate_nodes(tricks, require_non_empty)
    validate_edges(data.get("transitions", []), len(tricks))
