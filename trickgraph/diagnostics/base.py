"""Issue and result types shared by the structural checks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """How much a diagnostic issue matters.

    Errors mean the combo would not unmarshal. Warnings flag combos that
    load fine but are probably not what the rider meant.
    """

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class DiagnosticIssue:
    """A single problem found in a stored combo."""

    code: str
    message: str
    severity: Severity
    target: str | None = None  # "trick" or "transition"
    index: int | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        """Location such as ``trick 2``, or an empty string."""
        parts = [str(p) for p in (self.target, self.index) if p is not None]
        return " ".join(parts) if self.target else ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "severity": self.severity.value,
            "message": self.message,
            "target": self.target,
            "index": self.index,
            "details": dict(self.details),
        }

    def __str__(self) -> str:
        where = f" [{self.location}]" if self.location else ""
        return f"{self.severity.name}: {self.code}{where} - {self.message}"


@dataclass
class DiagnosticResult:
    """Everything the checks found, in the order they found it."""

    issues: list[DiagnosticIssue] = field(default_factory=list)

    def _of(self, severity: Severity) -> list[DiagnosticIssue]:
        return [issue for issue in self.issues if issue.severity is severity]

    @property
    def errors(self) -> list[DiagnosticIssue]:
        return self._of(Severity.ERROR)

    @property
    def warnings(self) -> list[DiagnosticIssue]:
        return self._of(Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return any(issue.severity is Severity.ERROR for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(issue.severity is Severity.WARNING for issue in self.issues)

    @property
    def is_valid(self) -> bool:
        """True when the combo would unmarshal cleanly."""
        return not self.has_errors

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        target: str | None = None,
        index: int | None = None,
        **details: Any,
    ) -> DiagnosticIssue:
        """Record an issue and return it.

        Extra keyword arguments end up in ``details``.
        """
        issue = DiagnosticIssue(code, message, severity, target, index, details)
        self.issues.append(issue)
        return issue

    def add_error(self, code: str, message: str, **kwargs: Any) -> DiagnosticIssue:
        return self.add(Severity.ERROR, code, message, **kwargs)

    def add_warning(self, code: str, message: str, **kwargs: Any) -> DiagnosticIssue:
        return self.add(Severity.WARNING, code, message, **kwargs)

    def merge(self, other: "DiagnosticResult") -> "DiagnosticResult":
        """Append the issues of another result to this one."""
        self.issues.extend(other.issues)
        return self
