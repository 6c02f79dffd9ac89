"""Marshalling between ComboGraph and its stored form."""

import logging
from typing import Any

from pydantic import ValidationError

from .errors import MalformedInputError, flatten_validation_errors
from .models import ComboGraph, normalize_graph_keys
from .validation import validate_payload

logger = logging.getLogger(__name__)


def marshal_combo(graph: ComboGraph) -> dict[str, Any]:
    """Convert a ComboGraph to its stored form.

    The stored form has the same shape as the model. Optional fields that
    are unset are omitted rather than written as null.

    Args:
        graph: The combo to store.

    Returns:
        A JSON-compatible dict.

    Raises:
        ComboValidationError: If the movements fail validation.
        MalformedGraphError: If the transition edges do not form a path.
    """
    payload = graph.model_dump(mode="json", exclude_none=True)
    validate_payload(payload)
    logger.debug(
        "Marshalled combo with %d movement(s)", len(payload["tricks"])
    )
    return payload


def unmarshal_combo(raw: Any) -> ComboGraph:
    """Convert a stored payload back into a ComboGraph.

    Legacy key names (``trick_id``, ``nodes``/``edges`` and camelCase) are
    accepted. The same rules as ``marshal_combo`` are applied.

    Args:
        raw: The payload read from storage.

    Returns:
        The validated ComboGraph.

    Raises:
        MalformedInputError: If the payload is absent or not a combo mapping.
        ComboValidationError: If the movements fail validation.
        MalformedGraphError: If the transition edges do not form a path.
    """
    if raw is None:
        raise MalformedInputError("Cannot unmarshal an absent combo graph")

    data = normalize_graph_keys(raw)
    validate_payload(data)

    try:
        graph = ComboGraph.model_validate(data)
    except ValidationError as e:
        errors = flatten_validation_errors(e)
        raise MalformedInputError(
            f"Combo payload failed validation with {len(errors)} error(s)", errors
        ) from e

    logger.debug("Unmarshalled combo with %d movement(s)", len(graph.tricks))
    return graph
