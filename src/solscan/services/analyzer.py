"""Vulnerability analyzer: parse, run detectors, merge and rank findings."""

import dataclasses
import threading
from typing import Iterable, Optional

from solscan.adapters.solidity_parser import SolidityParser
from solscan.detectors import all_detectors
from solscan.domain.exceptions import ParseError, SourceTooLargeError
from solscan.domain.models import AnalysisReport, Vulnerability
from solscan.domain.protocols import Detector, LogSink, SyntaxTreeProvider
from solscan.services.settings import get_max_source_bytes


def count_lines(source: str) -> int:
    """Count newline-delimited segments; a trailing newline opens no segment."""
    if not source:
        return 0
    count = source.count("\n")
    if not source.endswith("\n"):
        count += 1
    return count


def rank_vulnerabilities(vulnerabilities: Iterable[Vulnerability]) -> list[Vulnerability]:
    """Sort by severity descending, then line ascending. Stable for ties."""
    return sorted(vulnerabilities, key=lambda vuln: (-vuln.severity.rank, vuln.line))


class VulnerabilityAnalyzer:
    """Owns a parser and a fixed, ordered list of detectors."""

    name = "analyzer"

    def __init__(
        self,
        detectors: Optional[Iterable[Detector]] = None,
        parser: Optional[SyntaxTreeProvider] = None,
        max_source_bytes: Optional[int] = None,
        log_display: Optional[LogSink] = None,
    ):
        """
        Build the analyzer.

        Args:
            detectors: Detectors to run, in order. Defaults to the registry.
            parser: Syntax tree provider. Defaults to the Solidity parser.
            max_source_bytes: Reject larger sources. Defaults to settings.
            log_display: Optional sink for progress messages

        Raises:
            AnalyzerInitError: If the default parser cannot load its grammar
        """
        if detectors is None:
            detectors = all_detectors()
        if parser is None:
            parser = SolidityParser()
        if max_source_bytes is None:
            max_source_bytes = get_max_source_bytes()

        self._detectors: tuple[Detector, ...] = tuple(detectors)
        self._parser = parser
        self.max_source_bytes = max_source_bytes
        self.log_display = log_display
        # The parser keeps internal state between calls
        self._lock = threading.Lock()

    @property
    def detectors(self) -> tuple[Detector, ...]:
        return self._detectors

    def analyze(self, source: str) -> AnalysisReport:
        """
        Analyze one source text.

        Raises:
            SourceTooLargeError: If the source exceeds max_source_bytes
            ParseError: If the source cannot be parsed
        """
        size = len(source.encode("utf-8"))
        if size > self.max_source_bytes:
            raise SourceTooLargeError(size, self.max_source_bytes)

        with self._lock:
            tree = self._parser.parse(source)
            if tree is None:
                raise ParseError()

            self._write(f"Found {len(self._detectors)} detector(s) to run")
            vulnerabilities: list[Vulnerability] = []
            for detector in self._detectors:
                self._write(f"Running detector: {detector.name}")
                found = list(detector.detect(tree, source))
                self._write(f"Detector '{detector.name}' found {len(found)} finding(s)")
                vulnerabilities.extend(_attribute(found, detector.name))

        ranked = rank_vulnerabilities(vulnerabilities)
        self._write(f"Analysis complete. Total findings: {len(ranked)}")

        return AnalysisReport(
            vulnerabilities=tuple(ranked),
            total_lines=count_lines(source),
            detectors_run=len(self._detectors),
        )

    def _write(self, message: str) -> None:
        if self.log_display:
            self.log_display.write(f"[{self.name}] {message}")


def _attribute(vulnerabilities: Iterable[Vulnerability], detector_name: str) -> list[Vulnerability]:
    """Fill in the detector name on findings that do not carry one."""
    return [
        vuln if vuln.detector else dataclasses.replace(vuln, detector=detector_name)
        for vuln in vulnerabilities
    ]
