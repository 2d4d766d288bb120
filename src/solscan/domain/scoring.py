"""Risk scoring logic."""

from solscan.domain.models import AnalysisReport, Severity

# critical=10, high=5, medium=2, low=1, info=0
SEVERITY_WEIGHTS = {
    Severity.CRITICAL: 10,
    Severity.HIGH: 5,
    Severity.MEDIUM: 2,
    Severity.LOW: 1,
    Severity.INFO: 0,
}


def compute_risk_score(report: AnalysisReport | None) -> int:
    """
    Compute a risk score for an analysis report.

    Base score is 0. Each finding adds the weight of its severity.
    """
    if report is None:
        return 0

    score = 0
    for severity, count in report.severity_counts().items():
        score += count * SEVERITY_WEIGHTS[severity]
    return score
