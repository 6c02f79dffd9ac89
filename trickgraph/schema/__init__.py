"""Schema layer: the persisted combo graph and its checked boundary."""

from .errors import (
    ComboError,
    ComboLoadError,
    ComboValidationError,
    EmptySequenceError,
    InvalidLandingStanceError,
    InvalidMovementIdError,
    MalformedGraphError,
    MalformedInputError,
)
from .models import ComboGraph, MovementNode, TransitionEdge
from .validation import validate_edges, validate_nodes, validate_payload
from .marshal import marshal_combo, unmarshal_combo
from .loader import dump_combo, load_combo, load_payload, parse_combo_from_string

__all__ = [
    "ComboError",
    "ComboLoadError",
    "ComboValidationError",
    "EmptySequenceError",
    "InvalidLandingStanceError",
    "InvalidMovementIdError",
    "MalformedGraphError",
    "MalformedInputError",
    "ComboGraph",
    "MovementNode",
    "TransitionEdge",
    "validate_edges",
    "validate_nodes",
    "validate_payload",
    "marshal_combo",
    "unmarshal_combo",
    "dump_combo",
    "load_combo",
    "load_payload",
    "parse_combo_from_string",
]
