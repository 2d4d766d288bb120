"""Task to fetch contract source over HTTP."""

from solscan.adapters.source_client import (
    NetworkError,
    SourceClientError,
    SourceNotFoundError,
    fetch_source,
)
from solscan.domain.exceptions import PipelineFatalError
from solscan.domain.models import Context
from solscan.services.tasks import register


class FetchSource:
    """Task to download contract source from a URL."""

    name = "fetch_source"

    def get_status_message(self, ctx: Context) -> str:
        """Generate status message for this task."""
        return f"Fetching {ctx.source_ref}"

    def run(self, ctx: Context) -> Context:
        """Fetch the source text and update context."""
        if ctx.log_display:
            ctx.log_display.write(f"[{self.name}] Connecting to {ctx.source_ref}...")

        try:
            ctx.source_text = fetch_source(ctx.source_ref)
        except SourceNotFoundError as e:
            if ctx.log_display:
                ctx.log_display.write_error(f"[{self.name}] ERROR: Source not found: {e}")
            raise PipelineFatalError(
                message=f"Source '{ctx.source_ref}' not found",
                source=self.name,
            ) from e
        except NetworkError as e:
            if ctx.log_display:
                ctx.log_display.write_error(f"[{self.name}] ERROR: Network connection failed: {e}")
            raise PipelineFatalError(message=str(e), source=self.name) from e
        except SourceClientError as e:
            if ctx.log_display:
                ctx.log_display.write_error(f"[{self.name}] ERROR: {e}")
            raise PipelineFatalError(message=str(e), source=self.name) from e

        if ctx.log_display:
            ctx.log_display.write(
                f"[{self.name}] Fetched {len(ctx.source_text)} characters from {ctx.source_ref}"
            )

        return ctx


# Auto-register this task
register(FetchSource())
