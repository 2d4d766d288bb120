"""Application state management."""

from dataclasses import dataclass

from solscan.domain.models import AuditResult


@dataclass
class AppState:
    """Application state."""

    has_run_analysis: bool = False
    current_source: str | None = None
    audit_result: AuditResult | None = None

    def mark_analysis_complete(self, source_ref: str, result: AuditResult) -> None:
        """Update state after analysis completion."""
        self.has_run_analysis = True
        self.current_source = source_ref
        self.audit_result = result

    def reset(self) -> None:
        """Reset state to initial values."""
        self.has_run_analysis = False
        self.current_source = None
        self.audit_result = None
