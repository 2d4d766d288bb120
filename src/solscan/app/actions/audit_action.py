"""Action handler for running analyses."""

import time

from solscan.domain.models import AuditResult, Context
from solscan.services.pipeline import run_pipeline
from solscan.services.reporting import format_vulnerability


class AuditAction:
    """Handles analysis execution and result display."""

    async def execute(self, ctx: Context) -> AuditResult:
        """
        Execute the analysis pipeline and display results.

        Args:
            ctx: Context with source_ref, mode_controller and log_display

        Returns:
            AuditResult from the pipeline

        Raises:
            ValueError: If no source was entered
        """
        log = ctx.log_display

        if log:
            log.set_mode("action")

        if not ctx.source_ref or not ctx.source_ref.strip():
            if log:
                log.write("Please enter a contract file path or URL.")
            raise ValueError("Source reference is required")

        if log:
            log.write(f"Starting analysis for: {ctx.source_ref} (source: {ctx.source_kind})")
            log.write("Running pipeline...")

        start_time = time.perf_counter()
        result = await run_pipeline(ctx)
        total_duration = time.perf_counter() - start_time

        if log:
            log.set_mode("action")
            self._display_results(result, log, total_duration)
        return result

    def _display_results(self, result: AuditResult, log_display, total_duration: float) -> None:
        """Display analysis results."""
        source_ref = result.ctx.source_ref
        if result.error:
            log_display.write_error(f"\nFatal error during analysis: {result.error}")
            log_display.write_error(
                f"\nsolscan analysis failed for {source_ref} after {total_duration:.1f} seconds."
            )
            return

        log_display.write(
            f"\nsolscan completed analysis of {source_ref} in {total_duration:.1f} seconds."
        )

        if result.pdf_path:
            log_display.write(f"PDF report saved to: {result.pdf_path}")

        report = result.ctx.report
        if report is None:
            return

        summary = [
            f"Lines: {report.total_lines}",
            f"Detectors run: {report.detectors_run}",
            f"Risk score: {result.score}",
            f"Findings: {len(report.vulnerabilities)}",
        ]
        summary.extend(f"  {format_vulnerability(vuln)}" for vuln in report.vulnerabilities)
        log_display.write_section("Analysis Summary", summary)
