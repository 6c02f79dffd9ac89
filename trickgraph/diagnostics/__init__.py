"""Diagnostics that report every structural problem in a stored combo."""

from .base import DiagnosticIssue, DiagnosticResult, Severity
from .structure import check_connectivity, check_edges, check_nodes
from .runner import diagnose_combo_file, run_diagnostics

__all__ = [
    "DiagnosticIssue",
    "DiagnosticResult",
    "Severity",
    "check_connectivity",
    "check_edges",
    "check_nodes",
    "diagnose_combo_file",
    "run_diagnostics",
]
