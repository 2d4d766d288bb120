"""Domain models for contract analysis."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from solscan.domain.modes import ModeController
    from solscan.domain.protocols import LogSink
    from solscan.services.analyzer import VulnerabilityAnalyzer


@total_ordering
class Severity(Enum):
    """Finding severity, ordered CRITICAL > HIGH > MEDIUM > LOW > INFO."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Numeric rank, 4 for CRITICAL down to 0 for INFO."""
        return _SEVERITY_RANK[self]

    @classmethod
    def parse(cls, label: str) -> "Severity":
        """
        Map a case-insensitive label to a severity.

        Raises:
            ValueError: If the label is not a known severity
        """
        normalized = label.strip().lower() if label else ""
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unknown severity: {label!r}. "
            f"Available severities: {[m.value for m in cls]}"
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank


_SEVERITY_RANK = {
    Severity.CRITICAL: 4,
    Severity.HIGH: 3,
    Severity.MEDIUM: 2,
    Severity.LOW: 1,
    Severity.INFO: 0,
}


@dataclass(frozen=True)
class Vulnerability:
    """A suspected vulnerability reported by a detector."""

    severity: Severity
    title: str
    description: str
    line: int  # 1-based
    column: int  # 1-based
    suggestion: Optional[str] = None
    detector: Optional[str] = None


@dataclass(frozen=True)
class AnalysisReport:
    """Result of analyzing one source text."""

    vulnerabilities: tuple[Vulnerability, ...]
    total_lines: int
    detectors_run: int

    def severity_counts(self) -> dict[Severity, int]:
        """Count findings per severity, including severities with no findings."""
        counts = {severity: 0 for severity in Severity}
        for vuln in self.vulnerabilities:
            counts[vuln.severity] += 1
        return counts

    @property
    def highest_severity(self) -> Optional[Severity]:
        """Severity of the top-ranked finding, or None for a clean report."""
        if not self.vulnerabilities:
            return None
        return max(vuln.severity for vuln in self.vulnerabilities)


@dataclass
class Context:
    """Shared context passed through pipeline tasks."""

    source_ref: str
    source_kind: Optional[str] = None  # "file" or "url"
    mode_controller: Optional["ModeController"] = None
    source_text: Optional[str] = None
    report: Optional[AnalysisReport] = None
    log_display: Optional["LogSink"] = None
    generate_pdf: bool = False
    report_path: Optional[str] = None
    analysis_seconds: Optional[float] = None
    analyzer: Optional["VulnerabilityAnalyzer"] = None


@dataclass
class AuditResult:
    """Final result of the audit pipeline."""

    ctx: Context
    score: int
    pdf_path: Optional[str] = None
    error: Optional[str] = None
