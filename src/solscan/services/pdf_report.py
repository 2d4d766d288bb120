"""HTML-based PDF report generation using WeasyPrint and Jinja2."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError

from solscan.domain.exceptions import PipelineFatalError
from solscan.domain.models import AuditResult, Severity
from solscan.services.reporting import vulnerability_to_dict
from solscan.services.settings import TEMPLATE_PATH_ENV

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "solscan_report_template.xhtml"


def extract_template_variables(result: AuditResult) -> dict:
    """Map an audit result to template variables."""
    ctx = result.ctx
    variables: dict = {
        "source": ctx.source_ref,
        "mode": str(ctx.mode_controller.mode) if ctx.mode_controller else "N/A",
        "risk_score": result.score,
        "total_lines": "N/A",
        "detectors_run": "N/A",
        "total_findings": 0,
        "severity_counts": [],
        "findings": [],
    }

    report = ctx.report
    if report is None:
        return variables

    variables["total_lines"] = report.total_lines
    variables["detectors_run"] = report.detectors_run
    variables["total_findings"] = len(report.vulnerabilities)
    counts = report.severity_counts()
    variables["severity_counts"] = [
        {"severity": severity.value, "count": counts[severity]} for severity in Severity
    ]
    variables["findings"] = [vulnerability_to_dict(v) for v in report.vulnerabilities]
    return variables


def get_template_path() -> Path:
    """Resolve the bundled XHTML template path, with optional override."""
    env_value = os.environ.get(TEMPLATE_PATH_ENV)
    if env_value:
        candidate = Path(env_value)
        if candidate.exists():
            return candidate
        raise FileNotFoundError(f"Template file not found at {TEMPLATE_PATH_ENV}: {candidate}")

    from importlib import resources

    template = resources.files("solscan.data") / TEMPLATE_NAME
    if template.is_file():
        return Path(str(template))

    raise FileNotFoundError(f"Bundled template {TEMPLATE_NAME} not found.")


def render_html_template(template_path: str | Path, variables: dict) -> str:
    """Render the XHTML template with the provided variables using Jinja2."""
    template_path = Path(template_path)
    if not template_path.exists():
        raise FileNotFoundError(f"Template file not found: {template_path}")

    try:
        env = Environment(
            loader=FileSystemLoader(template_path.parent),
            autoescape=True,
        )
        template = env.get_template(template_path.name)
        return template.render(**variables)
    except TemplateError as exc:
        raise PipelineFatalError(
            message=f"Failed to render template: {exc}",
            source="render_html_template",
        ) from exc


def convert_html_to_pdf(html_content: str, pdf_path: str | Path) -> Path:
    """Render HTML content to a PDF file using WeasyPrint."""
    # WeasyPrint loads native libraries on import
    from weasyprint import HTML

    pdf_path = Path(pdf_path)
    pdf_path.parent.mkdir(parents=True, exist_ok=True)

    logger.debug("Writing PDF report to %s", pdf_path)
    try:
        HTML(string=html_content, base_url=str(pdf_path.parent)).write_pdf(str(pdf_path))
    except Exception as exc:
        raise PipelineFatalError(
            message=f"WeasyPrint failed to generate PDF: {exc}",
            source="convert_html_to_pdf",
        ) from exc

    if not pdf_path.exists():
        raise PipelineFatalError(
            message=f"PDF not created at expected location: {pdf_path}",
            source="convert_html_to_pdf",
        )

    return pdf_path
