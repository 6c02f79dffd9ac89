"""Structural checks over a raw stored combo payload."""

from collections.abc import Mapping

from ..graph.path_graph import ComboPathGraph
from ..schema.errors import EmptySequenceError, MalformedInputError
from ..schema.validation import iter_edge_errors, iter_node_errors
from .base import DiagnosticResult


def check_nodes(data: Mapping) -> DiagnosticResult:
    """Report every invalid movement node.

    Uses the same rules as unmarshalling, so a payload with no errors here
    and in ``check_edges`` unmarshals cleanly.

    Args:
        data: The payload, with legacy keys already normalized.

    Returns:
        DiagnosticResult with errors for bad nodes.
    """
    result = DiagnosticResult()

    tricks = data.get("tricks")
    if not isinstance(tricks, list):
        result.add_error(
            code=MalformedInputError.code,
            message="Combo payload must contain a list of tricks",
        )
        return result

    for error in iter_node_errors(tricks):
        if isinstance(error, EmptySequenceError):
            result.add_error(code=error.code, message=str(error))
        else:
            result.add_error(
                code=error.code,
                message=str(error),
                target="trick",
                index=getattr(error, "index", None),
            )

    return result


def check_edges(data: Mapping) -> DiagnosticResult:
    """Report every structural problem with the transition edges.

    Args:
        data: The payload, with legacy keys already normalized.

    Returns:
        DiagnosticResult with errors for bad edges.
    """
    result = DiagnosticResult()

    tricks = data.get("tricks")
    node_count = len(tricks) if isinstance(tricks, list) else 0

    for error in iter_edge_errors(data.get("transitions", []), node_count):
        if error.index is None:
            result.add_error(code=error.code, message=str(error))
        else:
            result.add_error(
                code=error.code,
                message=str(error),
                target="transition",
                index=error.index,
            )

    return result


def check_connectivity(path: ComboPathGraph) -> DiagnosticResult:
    """Check how the stored edges actually connect the movements.

    Reports movements that cannot be reached from the first one and
    transitions that loop, both as errors. The same movement performed
    twice in a row is a warning.

    Args:
        path: The graph built from the payload.

    Returns:
        DiagnosticResult for connectivity problems.
    """
    result = DiagnosticResult()

    if path.movement_count == 0:
        return result

    for position in path.get_unreachable_positions():
        result.add_error(
            code="DISCONNECTED_MOVEMENT",
            message=f"Movement at position {position} is not reachable from the first movement",
            target="trick",
            index=position,
        )

    if path.has_cycle():
        result.add_error(
            code="CYCLIC_TRANSITIONS",
            message="Transitions form a cycle",
        )

    for source, target, movement in path.iter_repeated_movements():
        result.add_warning(
            code="REPEATED_MOVEMENT",
            message=f"'{movement}' is performed twice in a row",
            target="trick",
            index=target,
            previous_index=source,
        )

    return result

