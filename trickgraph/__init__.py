"""trickgraph: the combo graph engine behind the trick tracker.

A combo is stored as a ComboGraph (movements plus the transitions between
consecutive movements) and edited as a flat sequence of trick and arrow
items. This package converts between the two, applies composer edits, and
guards the persistence boundary.
"""

from .schema import (
    ComboError,
    ComboGraph,
    ComboValidationError,
    EmptySequenceError,
    InvalidLandingStanceError,
    InvalidMovementIdError,
    MalformedGraphError,
    MalformedInputError,
    MovementNode,
    TransitionEdge,
    marshal_combo,
    unmarshal_combo,
    validate_nodes,
)
from .sequence import (
    ArrowItem,
    ItemNotFoundError,
    TrickItem,
    append_movement,
    graph_to_sequence,
    remove_trick,
    sequence_to_graph,
    set_transition,
)

__all__ = [
    "ComboError",
    "ComboGraph",
    "ComboValidationError",
    "EmptySequenceError",
    "InvalidLandingStanceError",
    "InvalidMovementIdError",
    "MalformedGraphError",
    "MalformedInputError",
    "MovementNode",
    "TransitionEdge",
    "marshal_combo",
    "unmarshal_combo",
    "validate_nodes",
    "ArrowItem",
    "ItemNotFoundError",
    "TrickItem",
    "append_movement",
    "graph_to_sequence",
    "remove_trick",
    "sequence_to_graph",
    "set_transition",
]
