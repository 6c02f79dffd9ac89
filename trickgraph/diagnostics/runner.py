"""Diagnostics runner that orchestrates all structural checks."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..graph.path_graph import ComboPathGraph
from ..schema.errors import MalformedInputError
from ..schema.loader import load_payload
from ..schema.models import normalize_graph_keys
from .base import DiagnosticResult
from .structure import check_connectivity, check_edges, check_nodes

logger = logging.getLogger(__name__)


def run_diagnostics(raw: Any) -> DiagnosticResult:
    """Run all checks on a stored combo payload.

    Unlike ``unmarshal_combo``, which stops at the first problem, this
    reports every problem it can find. Nothing is repaired.

    Args:
        raw: The payload as read from storage.

    Returns:
        Combined DiagnosticResult from all checks.
    """
    result = DiagnosticResult()

    if raw is None:
        result.add_error(code=MalformedInputError.code, message="Combo graph is absent")
        return result

    if not isinstance(raw, Mapping):
        result.add_error(
            code=MalformedInputError.code,
            message=f"Expected a combo mapping, got {type(raw).__name__}",
        )
        return result

    data = normalize_graph_keys(raw)

    # Same order as unmarshalling
    result.merge(check_nodes(data))
    result.merge(check_edges(data))
    result.merge(check_connectivity(ComboPathGraph.from_payload(data)))

    logger.debug(
        "Diagnostics found %d error(s), %d warning(s)",
        len(result.errors),
        len(result.warnings),
    )
    return result


def diagnose_combo_file(path: str | Path) -> DiagnosticResult:
    """Load and diagnose a combo file.

    Raises:
        ComboLoadError: If the file cannot be loaded.
    """
    return run_diagnostics(load_payload(path))
