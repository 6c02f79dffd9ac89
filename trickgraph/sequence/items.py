"""Items of the flat, editable combo sequence used by the composer."""

import uuid
from dataclasses import dataclass, field
from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..schema.errors import MalformedInputError, flatten_validation_errors
from ..schema.models import MovementNode


def new_item_id(kind: str) -> str:
    """Generate a synthetic item id, meaningful only within one session."""
    return f"{kind}-{uuid.uuid4().hex[:12]}"


class TrickItem(BaseModel):
    """A movement chip."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: new_item_id("trick"))
    type: Literal["trick"] = "trick"
    data: MovementNode


class ArrowItem(BaseModel):
    """The connector chip between two movements."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: new_item_id("arrow"))
    type: Literal["arrow"] = "arrow"
    transition_id: str | None = None


SequenceItem = Annotated[Union[TrickItem, ArrowItem], Field(discriminator="type")]

# Sequences are tuples so a caller's snapshot can never change under it.
ComboSequence = tuple[Union[TrickItem, ArrowItem], ...]

_sequence_adapter = TypeAdapter(list[SequenceItem])


def parse_sequence(raw: Any) -> ComboSequence:
    """Parse a sequence sent by the UI.

    Raises:
        MalformedInputError: If an item has an unknown type or bad fields.
    """
    try:
        return tuple(_sequence_adapter.validate_python(raw))
    except ValidationError as e:
        errors = flatten_validation_errors(e)
        raise MalformedInputError(
            f"Sequence failed validation with {len(errors)} error(s)", errors
        ) from e


def dump_sequence(sequence: Iterable[Union[TrickItem, ArrowItem]]) -> list[dict]:
    """Convert a sequence to plain JSON-compatible dicts."""
    return [item.model_dump(mode="json") for item in sequence]


def is_well_formed(sequence: Iterable[Union[TrickItem, ArrowItem]]) -> bool:
    """Check the alternation invariant.

    A well-formed sequence is empty or starts and ends with a trick, with
    exactly one arrow between each pair of consecutive tricks.
    """
    items = list(sequence)
    if items and len(items) % 2 == 0:
        return False
    for index, item in enumerate(items):
        expected = TrickItem if index % 2 == 0 else ArrowItem
        if not isinstance(item, expected):
            return False
    return True


@dataclass
class SequenceLayout:
    """A sequence split into its tricks and the arrows around them.

    ``gaps[k]`` holds every arrow found between ``tricks[k]`` and
    ``tricks[k + 1]``; a well-formed sequence has exactly one in each.
    ``stray`` holds arrows before the first or after the last trick.
    """

    tricks: list[TrickItem] = field(default_factory=list)
    gaps: list[list[ArrowItem]] = field(default_factory=list)
    stray: list[ArrowItem] = field(default_factory=list)

    @property
    def anomaly_count(self) -> int:
        """Number of gaps or edges that break alternation."""
        return len(self.stray) + sum(1 for gap in self.gaps if len(gap) != 1)


def split_sequence(sequence: Iterable[Union[TrickItem, ArrowItem]]) -> SequenceLayout:
    """Split a sequence, tolerating any arrow placement."""
    layout = SequenceLayout()
    pending: list[ArrowItem] = []

    for item in sequence:
        if isinstance(item, TrickItem):
            if layout.tricks:
                layout.gaps.append(pending)
            else:
                layout.stray.extend(pending)
            layout.tricks.append(item)
            pending = []
        elif isinstance(item, ArrowItem):
            pending.append(item)
        else:
            raise TypeError(f"Unknown sequence item: {item!r}")

    layout.stray.extend(pending)
    return layout
