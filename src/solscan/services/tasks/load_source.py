"""Task to load contract source from a local file."""

from solscan.adapters.source_client import (
    SourceClientError,
    SourceNotFoundError,
    read_source_file,
)
from solscan.domain.exceptions import PipelineFatalError
from solscan.domain.models import Context
from solscan.services.tasks import register


class LoadSource:
    """Task to read contract source from disk."""

    name = "load_source"

    def get_status_message(self, ctx: Context) -> str:
        """Generate status message for this task."""
        return f"Reading {ctx.source_ref}"

    def run(self, ctx: Context) -> Context:
        """Read the source file into the context."""
        if ctx.log_display:
            ctx.log_display.write(f"[{self.name}] Reading source file {ctx.source_ref}")

        try:
            ctx.source_text = read_source_file(ctx.source_ref)
        except SourceNotFoundError as e:
            if ctx.log_display:
                ctx.log_display.write_error(f"[{self.name}] ERROR: {e}")
            raise PipelineFatalError(
                message=f"Source file '{ctx.source_ref}' not found",
                source=self.name,
            ) from e
        except SourceClientError as e:
            if ctx.log_display:
                ctx.log_display.write_error(f"[{self.name}] ERROR: {e}")
            raise PipelineFatalError(message=str(e), source=self.name) from e

        if ctx.log_display:
            ctx.log_display.write(
                f"[{self.name}] Loaded {len(ctx.source_text)} characters from {ctx.source_ref}"
            )

        return ctx


# Auto-register this task
register(LoadSource())
