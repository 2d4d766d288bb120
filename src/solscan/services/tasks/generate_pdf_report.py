"""Task to generate a PDF report from the analysis report."""

import asyncio
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from solscan.domain.exceptions import PipelineFatalError
from solscan.domain.models import AuditResult, Context
from solscan.domain.scoring import compute_risk_score
from solscan.services.pdf_report import (
    convert_html_to_pdf,
    extract_template_variables,
    get_template_path,
    render_html_template,
)
from solscan.services.settings import get_artifacts_dir, get_host_hint
from solscan.services.tasks import register


def report_filename(source_ref: str) -> str:
    """Build the PDF filename for a file path or URL."""
    if source_ref.startswith(("http://", "https://")):
        stem = PurePosixPath(urlparse(source_ref).path).stem
    else:
        stem = Path(source_ref).stem
    return f"solscan-{stem or 'contract'}-report.pdf"


class GeneratePdfReport:
    """Generate PDF report from the analysis report."""

    name = "generate_pdf_report"

    def get_status_message(self, ctx: Context) -> str:
        return "Generate PDF report"

    async def run(self, ctx: Context) -> Context:
        if not ctx.generate_pdf:
            if ctx.log_display:
                ctx.log_display.write(f"[{self.name}] PDF report not requested, skipping")
            return ctx

        if ctx.report is None:
            raise PipelineFatalError(
                message="Cannot generate PDF: analysis report not available. Ensure run_analysis task ran successfully.",
                source=self.name,
            )

        if ctx.log_display:
            ctx.log_display.write(f"[{self.name}] Generating PDF from analysis report...")
            await asyncio.sleep(0)

        variables = extract_template_variables(
            AuditResult(ctx=ctx, score=compute_risk_score(ctx.report))
        )

        try:
            artifacts_dir = get_artifacts_dir()
            output_pdf = artifacts_dir / report_filename(ctx.source_ref)
            template_path = get_template_path()

            def _generate_pdf() -> Path:
                html_content = render_html_template(template_path, variables)
                return convert_html_to_pdf(html_content, output_pdf)

            loop = asyncio.get_running_loop()
            pdf_path = await loop.run_in_executor(None, _generate_pdf)
        except OSError as e:
            if ctx.log_display:
                ctx.log_display.write_error(f"[{self.name}] ERROR: Failed to write PDF: {e}")
            raise PipelineFatalError(
                message=f"PDF generation failed: {e}",
                source=self.name,
            ) from e
        except PipelineFatalError as e:
            if ctx.log_display:
                ctx.log_display.write_error(f"[{self.name}] ERROR: Failed to write PDF: {e.message}")
            raise

        ctx.report_path = str(pdf_path)

        if ctx.log_display:
            ctx.log_display.write(f"[{self.name}] PDF saved to: {ctx.report_path}")
            host_hint = get_host_hint(artifacts_dir)
            if host_hint:
                ctx.log_display.write(f"[{self.name}] Host path hint: {host_hint}")
            await asyncio.sleep(0)

        return ctx


# Auto-register this task
register(GeneratePdfReport())
