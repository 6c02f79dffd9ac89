"""Conversion between a ComboGraph and its editable sequence."""

import logging
from typing import Iterable, Union

from ..schema.models import ComboGraph, TransitionEdge
from ..schema.validation import validate_edges, validate_nodes
from .items import ArrowItem, ComboSequence, TrickItem, split_sequence

logger = logging.getLogger(__name__)


def graph_to_sequence(graph: ComboGraph) -> ComboSequence:
    """Project a combo graph into an alternating trick/arrow sequence.

    Each arrow carries the transition of the edge leaving the trick before
    it. Item ids are freshly generated on every call.

    Args:
        graph: The combo to project. May be empty.

    Returns:
        A well-formed sequence.

    Raises:
        ComboValidationError: If a movement node is invalid.
        MalformedGraphError: If the edges do not form a path over the nodes.
            No repair is attempted.
    """
    validate_nodes(graph.tricks, require_non_empty=False)
    validate_edges(graph.transitions, len(graph.tricks))

    items: list[Union[TrickItem, ArrowItem]] = []
    last = len(graph.tricks) - 1

    for index, node in enumerate(graph.tricks):
        items.append(TrickItem(data=node))
        if index < last:
            # validate_edges guarantees transitions[index] is index -> index + 1
            edge = graph.transitions[index]
            items.append(ArrowItem(transition_id=edge.transition_id))

    logger.debug("Projected %d movement(s) into %d item(s)", len(graph.tricks), len(items))
    return tuple(items)


def sequence_to_graph(
    sequence: Iterable[Union[TrickItem, ArrowItem]],
) -> ComboGraph:
    """Build a combo graph from an editable sequence.

    Edges are derived from adjacent trick pairs, so the result always has
    exactly ``max(0, n - 1)`` edges. A pair separated by exactly one arrow
    takes that arrow's transition; a pair separated by no arrow or by several
    arrows gets a plain edge. Arrows before the first or after the last trick
    are ignored.

    Args:
        sequence: The composer's sequence. Need not be well formed.

    Returns:
        The combo graph. Node validation is left to ``marshal_combo``.
    """
    layout = split_sequence(sequence)

    if layout.anomaly_count:
        logger.warning(
            "Sequence breaks alternation in %d place(s); "
            "affected connections are stored without a transition",
            layout.anomaly_count,
        )

    transitions = []
    for index, gap in enumerate(layout.gaps):
        transition_id = gap[0].transition_id if len(gap) == 1 else None
        transitions.append(
            TransitionEdge(
                from_index=index,
                to_index=index + 1,
                transition_id=transition_id or None,
            )
        )

    return ComboGraph(
        tricks=[item.data for item in layout.tricks],
        transitions=transitions,
    )
