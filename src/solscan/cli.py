"""CLI entry point."""

import argparse
import asyncio
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from solscan import __version__
from solscan.app.components.console_log import ConsoleLog
from solscan.app.main import AnalyzerApp
from solscan.domain.modes import AnalysisMode, ModeController
from solscan.domain.models import Context
from solscan.services.pipeline import detect_source_kind, run_pipeline
from solscan.services.reporting import render_text_report, result_to_dict
from solscan.services.settings import get_default_mode

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solscan",
        description="solscan - static vulnerability analyzer for Solidity contracts",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Contract file path or http(s) URL (optional, can be entered in TUI)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in AnalysisMode],
        help="Operational mode (default: $SOLSCAN_MODE or speed)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without the TUI and print the report to stdout",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format for headless runs",
    )
    parser.add_argument(
        "--pdf",
        action="store_true",
        help="Also write a PDF report to the artifacts directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def run_headless(source_ref: str, mode: AnalysisMode, output_format: str, pdf: bool) -> int:
    """Run the pipeline without the TUI and print the report."""
    log = ConsoleLog(quiet=output_format == "json")
    ctx = Context(
        source_ref=source_ref,
        source_kind=detect_source_kind(source_ref),
        mode_controller=ModeController(mode, log_display=log),
        log_display=log,
        generate_pdf=pdf,
    )
    result = asyncio.run(run_pipeline(ctx))

    if output_format == "json":
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        print(render_text_report(result))

    if result.error:
        return EXIT_ERROR
    if ctx.report is not None and ctx.report.vulnerabilities:
        return EXIT_FINDINGS
    return EXIT_CLEAN


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        mode = AnalysisMode.parse(args.mode) if args.mode else get_default_mode()
    except ValueError as e:
        parser.error(str(e))

    if args.headless:
        if not args.source:
            parser.error("a source is required with --headless")
        return run_headless(args.source, mode, args.format, args.pdf)

    app = AnalyzerApp(source_ref=args.source, mode=mode, generate_pdf=args.pdf)
    app.run()
    return EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
