"""Edit operations applied by the combo composer.

Every operation takes the current sequence and returns a new tuple; the
input is never modified, so earlier snapshots can be kept for undo.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Union

from ..schema.models import MovementNode, normalize_node_keys
from ..schema.validation import (
    landing_stance_error,
    transition_id_error,
    validate_nodes,
)
from .errors import ItemNotFoundError
from .items import ArrowItem, ComboSequence, TrickItem, split_sequence

logger = logging.getLogger(__name__)

Item = Union[TrickItem, ArrowItem]


def _find(items: list[Item], item_id: str, kind: type | None = None) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            if kind is not None and not isinstance(item, kind):
                break
            return index
    expected = None
    if kind is TrickItem:
        expected = "trick"
    elif kind is ArrowItem:
        expected = "arrow"
    raise ItemNotFoundError(item_id, expected)


def _interleave(
    tricks: list[TrickItem], arrows: Mapping[tuple[str, str], ArrowItem]
) -> ComboSequence:
    """Join tricks with arrows, reusing the arrow recorded for each pair."""
    items: list[Item] = []
    for index, trick in enumerate(tricks):
        if index > 0:
            pair = (tricks[index - 1].id, trick.id)
            items.append(arrows.get(pair) or ArrowItem())
        items.append(trick)
    return tuple(items)


def _arrows_by_pair(sequence: Iterable[Item]) -> tuple[list[TrickItem], dict]:
    layout = split_sequence(sequence)
    arrows = {}
    for index, gap in enumerate(layout.gaps):
        if gap:
            arrows[(layout.tricks[index].id, layout.tricks[index + 1].id)] = gap[0]
    return layout.tricks, arrows


def trick_ids(sequence: Iterable[Item]) -> tuple[str, ...]:
    """Get trick item ids in performance order."""
    return tuple(item.id for item in sequence if isinstance(item, TrickItem))


def arrow_ids(sequence: Iterable[Item]) -> tuple[str, ...]:
    """Get arrow item ids in order."""
    return tuple(item.id for item in sequence if isinstance(item, ArrowItem))


def append_movement(
    sequence: Iterable[Item], node: MovementNode | Mapping[str, Any]
) -> ComboSequence:
    """Append a movement, adding a plain arrow first if needed.

    Args:
        sequence: The current sequence.
        node: The movement to append.

    Raises:
        ComboValidationError: If the movement is invalid.
    """
    if isinstance(node, Mapping):
        node = normalize_node_keys(node)
    validate_nodes([node], require_non_empty=False)
    if not isinstance(node, MovementNode):
        node = MovementNode.model_validate(node)

    items = list(sequence)
    if items:
        items.append(ArrowItem())
    items.append(TrickItem(data=node))
    return tuple(items)


def set_transition(
    sequence: Iterable[Item], arrow_item_id: str, transition_id: str | None
) -> ComboSequence:
    """Attach a transition to an arrow. An empty id clears it.

    Raises:
        ItemNotFoundError: If the id does not name an arrow.
        MalformedGraphError: If the transition id is not a string.
    """
    items = list(sequence)
    index = _find(items, arrow_item_id, ArrowItem)
    if transition_id == "":
        transition_id = None

    error = transition_id_error(transition_id, arrow_ids(items).index(arrow_item_id))
    if error is not None:
        raise error

    arrow = items[index]
    items[index] = ArrowItem.model_validate(
        {**arrow.model_dump(), "transition_id": transition_id}
    )
    return tuple(items)


def set_landing_stance(
    sequence: Iterable[Item], trick_item_id: str, landing_stance: str | None
) -> ComboSequence:
    """Set or clear the landing stance of one trick. An empty stance clears it.

    Raises:
        ItemNotFoundError: If the id does not name a trick.
        InvalidLandingStanceError: If the stance is not a string.
    """
    items = list(sequence)
    index = _find(items, trick_item_id, TrickItem)
    if landing_stance == "":
        landing_stance = None

    error = landing_stance_error(landing_stance, trick_ids(items).index(trick_item_id))
    if error is not None:
        raise error

    trick = items[index]
    node = MovementNode.model_validate(
        {**trick.data.model_dump(), "landing_stance": landing_stance}
    )
    items[index] = trick.model_copy(update={"data": node})
    return tuple(items)


def remove_trick(sequence: Iterable[Item], trick_item_id: str) -> ComboSequence:
    """Remove a trick together with one neighbouring arrow.

    The arrow after the trick is removed when there is one, otherwise the
    arrow before it. Removing the only trick yields the empty sequence.

    Raises:
        ItemNotFoundError: If the id does not name a trick.
    """
    items = list(sequence)
    index = _find(items, trick_item_id, TrickItem)

    start, stop = index, index + 1
    if stop < len(items) and isinstance(items[stop], ArrowItem):
        stop += 1
    elif start > 0 and isinstance(items[start - 1], ArrowItem):
        start -= 1

    logger.debug("Removing items %d..%d for trick %s", start, stop - 1, trick_item_id)
    return tuple(items[:start] + items[stop:])


def remove_item(sequence: Iterable[Item], item_id: str) -> ComboSequence:
    """Remove whatever item was dropped on the delete target.

    A trick is removed with ``remove_trick``. An arrow stays in place as a
    plain connector, losing only its transition.

    Raises:
        ItemNotFoundError: If the id is not in the sequence.
    """
    items = list(sequence)
    index = _find(items, item_id)
    if isinstance(items[index], TrickItem):
        return remove_trick(items, item_id)
    return set_transition(items, item_id, None)


def resolve_drop(
    sequence: Iterable[Item], item_id: str, dropped_on_delete_target: bool
) -> ComboSequence:
    """Apply the outcome of a finished drag gesture.

    Args:
        sequence: The current sequence.
        item_id: The dragged item.
        dropped_on_delete_target: Whether the gesture ended on the delete target.

    Raises:
        ItemNotFoundError: If the id is not in the sequence.
    """
    items = list(sequence)
    if dropped_on_delete_target:
        return remove_item(items, item_id)
    _find(items, item_id)
    return tuple(items)


def move_trick(
    sequence: Iterable[Item], trick_item_id: str, to_position: int
) -> ComboSequence:
    """Move a trick to another trick position.

    ``to_position`` counts tricks, not items, and is clamped into range.
    Tricks that stay adjacent in the same order keep their arrow; every new
    connection gets a plain arrow, so the moved trick's transitions are
    dropped.

    Raises:
        ItemNotFoundError: If the id does not name a trick.
    """
    items = list(sequence)
    _find(items, trick_item_id, TrickItem)

    tricks, arrows = _arrows_by_pair(items)
    current = next(i for i, trick in enumerate(tricks) if trick.id == trick_item_id)
    target = max(0, min(to_position, len(tricks) - 1))

    if target == current:
        return tuple(items)

    moved = tricks.pop(current)
    tricks.insert(target, moved)
    logger.debug("Moved trick %s from position %d to %d", trick_item_id, current, target)
    return _interleave(tricks, arrows)


def preview_move(
    sequence: Iterable[Item], trick_item_id: str, to_position: int
) -> tuple[ComboSequence, int]:
    """Reorder for a drag preview.

    Returns:
        The reordered sequence and the item index of the dragged trick in it.

    Raises:
        ItemNotFoundError: If the id does not name a trick.
    """
    moved = move_trick(sequence, trick_item_id, to_position)
    index = next(i for i, item in enumerate(moved) if item.id == trick_item_id)
    return moved, index


def normalize_sequence(sequence: Iterable[Item]) -> ComboSequence:
    """Restore alternation in a damaged sequence.

    Drops arrows before the first and after the last trick, keeps the first
    of several consecutive arrows, and puts a plain arrow between tricks
    that touch.
    """
    tricks, arrows = _arrows_by_pair(sequence)
    return _interleave(tricks, arrows)
