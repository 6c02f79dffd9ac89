"""Sequence layer: the composer's editable view of a combo."""

from .errors import ItemNotFoundError
from .items import (
    ArrowItem,
    ComboSequence,
    SequenceItem,
    TrickItem,
    dump_sequence,
    is_well_formed,
    new_item_id,
    parse_sequence,
)
from .projector import graph_to_sequence, sequence_to_graph
from .editor import (
    append_movement,
    arrow_ids,
    move_trick,
    normalize_sequence,
    preview_move,
    remove_item,
    remove_trick,
    resolve_drop,
    set_landing_stance,
    set_transition,
    trick_ids,
)
from .chips import Chip, ChipKind, render_text, sequence_to_chips

__all__ = [
    "ItemNotFoundError",
    "ArrowItem",
    "ComboSequence",
    "SequenceItem",
    "TrickItem",
    "dump_sequence",
    "is_well_formed",
    "new_item_id",
    "parse_sequence",
    "graph_to_sequence",
    "sequence_to_graph",
    "append_movement",
    "arrow_ids",
    "move_trick",
    "normalize_sequence",
    "preview_move",
    "remove_item",
    "remove_trick",
    "resolve_drop",
    "set_landing_stance",
    "set_transition",
    "trick_ids",
    "Chip",
    "ChipKind",
    "render_text",
    "sequence_to_chips",
]
