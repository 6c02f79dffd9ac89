"""Display labels for sequence items."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Union

from .items import ArrowItem, TrickItem


class ChipKind(str, Enum):
    """Kinds of chips a renderer draws."""

    TRICK = "trick"
    TRANSITION = "transition"
    ARROW = "arrow"


@dataclass(frozen=True)
class Chip:
    """A single rendered unit of a combo."""

    kind: ChipKind
    label: str
    item_id: str


def trick_label(item: TrickItem, names: Mapping[str, str] | None = None) -> str:
    """Label a trick as ``name`` or ``name (stance)``."""
    node = item.data
    name = (names or {}).get(node.movement_id, node.movement_id)
    if node.landing_stance:
        return f"{name} ({node.landing_stance})"
    return name


def sequence_to_chips(
    sequence: Iterable[Union[TrickItem, ArrowItem]],
    names: Mapping[str, str] | None = None,
    include_plain_arrows: bool = False,
) -> list[Chip]:
    """Turn a sequence into chips.

    Args:
        sequence: The sequence to render.
        names: Optional display names keyed by movement or transition id.
        include_plain_arrows: Whether arrows without a transition get a chip.

    Returns:
        Chips in sequence order.
    """
    chips = []
    for item in sequence:
        if isinstance(item, TrickItem):
            chips.append(Chip(ChipKind.TRICK, trick_label(item, names), item.id))
        elif item.transition_id:
            label = (names or {}).get(item.transition_id, item.transition_id)
            chips.append(Chip(ChipKind.TRANSITION, label, item.id))
        elif include_plain_arrows:
            chips.append(Chip(ChipKind.ARROW, "→", item.id))
    return chips


def render_text(
    sequence: Iterable[Union[TrickItem, ArrowItem]],
    names: Mapping[str, str] | None = None,
) -> str:
    """Render a sequence on one line, e.g. ``gainer → [vanish] → cork``."""
    parts = []
    for item in sequence:
        if isinstance(item, TrickItem):
            parts.append(trick_label(item, names))
        elif item.transition_id:
            label = (names or {}).get(item.transition_id, item.transition_id)
            parts.append(f"→ [{label}] →")
        else:
            parts.append("→")
    return " ".join(parts)
