"""Sequence editing exceptions."""

from ..schema.errors import ComboError


class ItemNotFoundError(ComboError):
    """Raised when an edit names an item id absent from the sequence.

    Also raised when the id exists but belongs to the wrong kind of item.
    """

    def __init__(self, item_id: str, expected: str | None = None):
        self.item_id = item_id
        self.expected = expected
        kind = f"{expected} " if expected else ""
        super().__init__(f"No {kind}item with id '{item_id}' in sequence")
