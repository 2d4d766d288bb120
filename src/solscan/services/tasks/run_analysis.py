"""Task to run the vulnerability analyzer over the loaded source."""

import asyncio
import time

from solscan.domain.exceptions import (
    AnalyzerInitError,
    ParseError,
    PipelineFatalError,
    SourceTooLargeError,
)
from solscan.domain.models import Context
from solscan.services.analyzer import VulnerabilityAnalyzer
from solscan.services.reporting import format_vulnerability
from solscan.services.tasks import register


class RunAnalysis:
    """Task to parse the source and run all registered detectors."""

    name = "run_analysis"

    def get_status_message(self, ctx: Context) -> str:
        """Generate status message for this task."""
        return "Analyze Contract"

    async def run(self, ctx: Context) -> Context:
        """Run the analyzer and store the report."""
        if ctx.source_text is None:
            raise PipelineFatalError(
                message="Cannot analyze: source text not loaded.",
                source=self.name,
            )

        log = ctx.log_display
        if log:
            log.write(f"[{self.name}] Starting vulnerability analysis")
            if ctx.mode_controller:
                log.write(f"[{self.name}] Mode: {ctx.mode_controller.mode}")
            await asyncio.sleep(0)

        analyzer = ctx.analyzer
        if analyzer is None:
            try:
                analyzer = VulnerabilityAnalyzer(log_display=log)
            except (AnalyzerInitError, ValueError) as e:
                if log:
                    log.write_error(f"[{self.name}] ERROR: Analyzer could not be created: {e}")
                raise PipelineFatalError(message=str(e), source=self.name) from e

        start = time.perf_counter()
        try:
            ctx.report = analyzer.analyze(ctx.source_text)
        except (ParseError, SourceTooLargeError) as e:
            if log:
                log.write_error(f"[{self.name}] ERROR: {e}")
            raise PipelineFatalError(message=f"Analysis failed: {e}", source=self.name) from e
        ctx.analysis_seconds = time.perf_counter() - start

        if ctx.mode_controller:
            ctx.mode_controller.consume_energy(ctx.analysis_seconds)

        if log:
            for vuln in ctx.report.vulnerabilities:
                log.write(f"[{self.name}]   {format_vulnerability(vuln)}")
            if ctx.mode_controller:
                log.write(f"[{self.name}] Energy remaining: {ctx.mode_controller.energy_level:.1f}")
                if not ctx.mode_controller.has_energy():
                    log.write_error(f"[{self.name}] Energy low, consider switching modes")
            await asyncio.sleep(0)

        return ctx


# Auto-register this task
register(RunAnalysis())
