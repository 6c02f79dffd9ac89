"""Rendering diagnostics and chips for the terminal."""

import json
from typing import Literal

from ..diagnostics.base import DiagnosticIssue, DiagnosticResult, Severity
from ..sequence.chips import Chip

SYMBOLS = {Severity.ERROR: "✘", Severity.WARNING: "⚠"}


def format_diagnostic_result(
    result: DiagnosticResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Render a diagnostic result.

    Args:
        result: What the checks found.
        format: ``"text"`` for people, ``"json"`` for tools.

    Returns:
        The rendered report, without a trailing newline.
    """
    if format == "json":
        return json.dumps(
            {
                "valid": result.is_valid,
                "error_count": len(result.errors),
                "warning_count": len(result.warnings),
                "issues": [issue.to_dict() for issue in result.issues],
            },
            indent=2,
        )

    sections = [
        _section("ERRORS", result.errors),
        _section("WARNINGS", result.warnings),
        _summary(result),
    ]
    return "\n\n".join(sections)


def _section(title: str, issues: list[DiagnosticIssue]) -> str:
    body = [_issue_line(issue) for issue in issues] or ["(none)"]
    return "\n".join([f"{title}:"] + [f"  {line}" for line in body])


def _issue_line(issue: DiagnosticIssue) -> str:
    where = f"[{issue.location}] " if issue.location else ""
    return f"{SYMBOLS[issue.severity]} {issue.code}: {where}{issue.message}"


def _summary(result: DiagnosticResult) -> str:
    n_errors, n_warnings = len(result.errors), len(result.warnings)
    if n_errors:
        return f"Combo is invalid: {n_errors} error(s), {n_warnings} warning(s)"
    if n_warnings:
        return f"Combo is valid with {n_warnings} warning(s)"
    return "Combo is valid"


def format_chips_json(chips: list[Chip]) -> str:
    """Render chips as a JSON list, keeping arrows and accents readable."""
    return json.dumps(
        [{"kind": c.kind.value, "label": c.label, "item_id": c.item_id} for c in chips],
        indent=2,
        ensure_ascii=False,
    )
