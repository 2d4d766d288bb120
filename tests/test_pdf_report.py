"""PDF report templating and the report task."""

from __future__ import annotations

import asyncio
import importlib
from pathlib import Path

import pytest

from solscan.domain.exceptions import PipelineFatalError
from solscan.domain.models import AnalysisReport, AuditResult, Context, Severity, Vulnerability
from solscan.domain.modes import AnalysisMode, ModeController
from solscan.services import pdf_report
from solscan.services.settings import ARTIFACTS_DIR_ENV, TEMPLATE_PATH_ENV

generate_pdf_module = importlib.import_module("solscan.services.tasks.generate_pdf_report")


def _finding() -> Vulnerability:
    return Vulnerability(
        severity=Severity.CRITICAL,
        title="Reentrancy Vulnerability",
        description="State change after external call detected",
        line=7,
        column=5,
        suggestion="Use checks-effects-interactions pattern",
        detector="reentrancy-detector",
    )


def _ctx(report=None, **kwargs) -> Context:
    return Context(
        source_ref="contracts/Vault.sol",
        mode_controller=ModeController(AnalysisMode.STRENGTH),
        report=report,
        **kwargs,
    )


@pytest.fixture(autouse=True)
def no_template_override(monkeypatch):
    monkeypatch.delenv(TEMPLATE_PATH_ENV, raising=False)


def test_template_variables_without_report() -> None:
    variables = pdf_report.extract_template_variables(AuditResult(ctx=_ctx(), score=0))
    assert variables["mode"] == "STRENGTH [eBPF Forensics]"
    assert variables["total_lines"] == "N/A"
    assert variables["findings"] == []


def test_template_variables_with_report() -> None:
    report = AnalysisReport(vulnerabilities=(_finding(),), total_lines=20, detectors_run=3)
    variables = pdf_report.extract_template_variables(AuditResult(ctx=_ctx(report), score=10))

    assert variables["risk_score"] == 10
    assert variables["total_findings"] == 1
    assert variables["severity_counts"][0] == {"severity": "critical", "count": 1}
    assert variables["findings"][0]["line"] == 7


def test_bundled_template_is_found() -> None:
    path = pdf_report.get_template_path()
    assert path.name == pdf_report.TEMPLATE_NAME
    assert path.is_file()


def test_template_override(monkeypatch, tmp_path) -> None:
    custom = tmp_path / "custom.xhtml"
    custom.write_text("<p>{{ source }}</p>", encoding="utf-8")
    monkeypatch.setenv(TEMPLATE_PATH_ENV, str(custom))
    assert pdf_report.get_template_path() == custom


def test_missing_template_override(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv(TEMPLATE_PATH_ENV, str(tmp_path / "gone.xhtml"))
    with pytest.raises(FileNotFoundError):
        pdf_report.get_template_path()


def test_render_bundled_template() -> None:
    report = AnalysisReport(vulnerabilities=(_finding(),), total_lines=20, detectors_run=3)
    variables = pdf_report.extract_template_variables(AuditResult(ctx=_ctx(report), score=10))
    html = pdf_report.render_html_template(pdf_report.get_template_path(), variables)

    assert "contracts/Vault.sol" in html
    assert "Reentrancy Vulnerability" in html
    assert "7:5" in html
    assert "No vulnerabilities detected." not in html


def test_render_escapes_source_text(tmp_path) -> None:
    template = tmp_path / "t.xhtml"
    template.write_text("<p>{{ source }}</p>", encoding="utf-8")
    html = pdf_report.render_html_template(template, {"source": "<script>"})
    assert html == "<p>&lt;script&gt;</p>"


def test_broken_template_is_fatal(tmp_path) -> None:
    template = tmp_path / "broken.xhtml"
    template.write_text("{% for x in %}", encoding="utf-8")
    with pytest.raises(PipelineFatalError, match="Failed to render template"):
        pdf_report.render_html_template(template, {})


def test_report_filename() -> None:
    assert generate_pdf_module.report_filename("contracts/Vault.sol") == "solscan-Vault-report.pdf"
    assert (
        generate_pdf_module.report_filename("https://example.com/src/Token.sol?raw=1")
        == "solscan-Token-report.pdf"
    )
    assert generate_pdf_module.report_filename("https://example.com/") == "solscan-contract-report.pdf"


def test_task_skips_when_not_requested(recording_log) -> None:
    ctx = _ctx(log_display=recording_log)
    task = generate_pdf_module.GeneratePdfReport()
    result = asyncio.run(task.run(ctx))
    assert result.report_path is None
    assert recording_log.messages == ["[generate_pdf_report] PDF report not requested, skipping"]


def test_task_requires_report() -> None:
    task = generate_pdf_module.GeneratePdfReport()
    with pytest.raises(PipelineFatalError, match="analysis report not available"):
        asyncio.run(task.run(_ctx(generate_pdf=True)))


def test_task_writes_pdf_to_artifacts(monkeypatch, tmp_path, recording_log) -> None:
    monkeypatch.setenv(ARTIFACTS_DIR_ENV, str(tmp_path))
    rendered = []

    def fake_convert(html_content: str, pdf_path) -> Path:
        rendered.append(html_content)
        Path(pdf_path).write_bytes(b"%PDF-1.7\n")
        return Path(pdf_path)

    monkeypatch.setattr(generate_pdf_module, "convert_html_to_pdf", fake_convert)

    report = AnalysisReport(vulnerabilities=(_finding(),), total_lines=20, detectors_run=3)
    ctx = _ctx(report, generate_pdf=True, log_display=recording_log)
    result = asyncio.run(generate_pdf_module.GeneratePdfReport().run(ctx))

    expected = tmp_path.resolve() / "solscan-Vault-report.pdf"
    assert result.report_path == str(expected)
    assert expected.read_bytes().startswith(b"%PDF")
    assert "Reentrancy Vulnerability" in rendered[0]


def test_task_write_failure_is_fatal(monkeypatch, tmp_path, recording_log) -> None:
    monkeypatch.setenv(ARTIFACTS_DIR_ENV, str(tmp_path))

    def failing_convert(html_content: str, pdf_path) -> Path:
        raise PermissionError("read-only file system")

    monkeypatch.setattr(generate_pdf_module, "convert_html_to_pdf", failing_convert)

    report = AnalysisReport(vulnerabilities=(), total_lines=1, detectors_run=3)
    ctx = _ctx(report, generate_pdf=True, log_display=recording_log)
    with pytest.raises(PipelineFatalError, match="PDF generation failed"):
        asyncio.run(generate_pdf_module.GeneratePdfReport().run(ctx))
    assert recording_log.errors
