"""Text and JSON-ready report rendering."""

from solscan.domain.models import AnalysisReport, AuditResult, Severity, Vulnerability


def vulnerability_to_dict(vuln: Vulnerability) -> dict:
    """Convert a finding into plain JSON-serializable data."""
    return {
        "severity": vuln.severity.value,
        "title": vuln.title,
        "description": vuln.description,
        "line": vuln.line,
        "column": vuln.column,
        "suggestion": vuln.suggestion,
        "detector": vuln.detector,
    }


def report_to_dict(report: AnalysisReport) -> dict:
    """Convert an analysis report into plain JSON-serializable data."""
    return {
        "vulnerabilities": [vulnerability_to_dict(v) for v in report.vulnerabilities],
        "total_lines": report.total_lines,
        "detectors_run": report.detectors_run,
    }


def result_to_dict(result: AuditResult) -> dict:
    """Convert an audit result, including pipeline metadata, into plain data."""
    ctx = result.ctx
    data = {
        "source": ctx.source_ref,
        "mode": ctx.mode_controller.mode.value if ctx.mode_controller else None,
        "risk_score": result.score,
        "pdf_path": result.pdf_path,
        "error": result.error,
        "report": None,
    }
    if ctx.report is not None:
        data["report"] = report_to_dict(ctx.report)
    return data


def format_vulnerability(vuln: Vulnerability) -> str:
    """Format a finding as a single display line."""
    return f"[{vuln.severity.value.upper()}] {vuln.title} at line {vuln.line}, column {vuln.column}"


def render_text_report(result: AuditResult) -> str:
    """
    Render a text representation of the audit result.

    Returns a multi-line string with source info, score, severity summary and
    finding details.
    """
    ctx = result.ctx
    lines = [
        "solscan - Analysis Report",
        "=" * 40,
        "",
        f"Source: {ctx.source_ref}",
    ]

    if ctx.mode_controller:
        lines.append(f"Mode: {ctx.mode_controller.mode}")

    if result.error:
        lines.extend(["", f"Analysis failed: {result.error}"])
        return "\n".join(lines)

    report = ctx.report
    if report is None:
        lines.extend(["", "No analysis report available."])
        return "\n".join(lines)

    lines.extend([
        f"Lines: {report.total_lines}",
        f"Detectors run: {report.detectors_run}",
        "",
        f"Risk Score: {result.score}",
        f"Findings: {len(report.vulnerabilities)}",
        "",
    ])

    if not report.vulnerabilities:
        lines.append("No vulnerabilities detected.")
        return "\n".join(lines)

    # Summary by severity
    counts = report.severity_counts()
    for severity in Severity:
        if counts[severity] > 0:
            lines.append(f"  {severity.value.capitalize()}: {counts[severity]}")

    lines.extend(["", "Vulnerability Details:", ""])
    for vuln in report.vulnerabilities:
        lines.append(f"  {format_vulnerability(vuln)}")
        lines.append(f"    {vuln.description}")
        if vuln.suggestion:
            lines.append(f"    Suggestion: {vuln.suggestion}")
        if vuln.detector:
            lines.append(f"    Detector: {vuln.detector}")
        lines.append("")

    return "\n".join(lines)
