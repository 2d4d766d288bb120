"""Main analysis pipeline."""

import asyncio
import time

from solscan.domain.exceptions import PipelineFatalError
from solscan.domain.models import AuditResult, Context
from solscan.domain.scoring import compute_risk_score
from solscan.services.tasks import get_task

# Task chains per source kind; names are resolved from the task registry
CHAINS = {
    "file": [
        "load_source",
        "run_analysis",
        "generate_pdf_report",
    ],
    "url": [
        "fetch_source",
        "run_analysis",
        "generate_pdf_report",
    ],
}


def detect_source_kind(source_ref: str) -> str:
    """Return "url" for http(s) references and "file" for everything else."""
    if source_ref.strip().lower().startswith(("http://", "https://")):
        return "url"
    return "file"


def get_task_chain(source_kind: str) -> list[str]:
    """
    Get the task chain for a source kind.

    Args:
        source_kind: Source kind ("file" or "url")

    Returns:
        List of task names in the chain

    Raises:
        ValueError: If source_kind is invalid
    """
    if source_kind not in CHAINS:
        raise ValueError(
            f"Unknown source_kind: {source_kind}. "
            f"Available sources: {list(CHAINS.keys())}"
        )
    return CHAINS[source_kind]


async def run_pipeline(ctx: Context) -> AuditResult:
    """
    Run the analysis pipeline asynchronously.

    Args:
        ctx: Initial context with source_ref set

    Returns:
        AuditResult with score, and with error set if a task failed fatally

    Raises:
        ValueError: If source_kind is invalid or a task is missing
    """
    if not ctx.source_ref or not ctx.source_ref.strip():
        raise ValueError("source_ref must be set in context")

    if ctx.source_kind is None:
        ctx.source_kind = detect_source_kind(ctx.source_ref)

    task_names = get_task_chain(ctx.source_kind)

    tasks = []
    missing_tasks = []
    for task_name in task_names:
        task = get_task(task_name)
        if task is None:
            missing_tasks.append(task_name)
        else:
            tasks.append(task)

    if missing_tasks:
        raise ValueError(f"Missing tasks in registry: {', '.join(missing_tasks)}")

    for task in tasks:
        task_start_time = time.perf_counter()
        status_msg = task.get_status_message(ctx)

        try:
            if ctx.log_display:
                ctx.log_display.write_task_section(status_msg)
                await asyncio.sleep(0)

            # Support both async and sync tasks
            result = task.run(ctx)
            if asyncio.iscoroutine(result):
                ctx = await result
            else:
                ctx = result

            task_duration = time.perf_counter() - task_start_time
            if ctx.log_display:
                ctx.log_display.write(
                    f"{status_msg} completed successfully in {task_duration:.1f} seconds"
                )
            await asyncio.sleep(0)
        except PipelineFatalError as e:
            task_duration = time.perf_counter() - task_start_time
            if ctx.log_display:
                ctx.log_display.write_error(
                    f"{status_msg} failed after {task_duration:.1f} seconds"
                )
                await asyncio.sleep(0)

            # Return partial result immediately
            return AuditResult(
                ctx=ctx,
                score=compute_risk_score(ctx.report),
                error=e.message,
            )

    return AuditResult(
        ctx=ctx,
        score=compute_risk_score(ctx.report),
        pdf_path=ctx.report_path,
    )
