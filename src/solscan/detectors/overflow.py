"""Integer overflow detector - stub implementation."""

from solscan.detectors import register
from solscan.domain.models import Vulnerability
from solscan.domain.protocols import SyntaxTree


class OverflowDetector:
    """Detector reserved for integer overflow checks."""

    name = "overflow-detector"

    def detect(self, tree: SyntaxTree, source: str) -> list[Vulnerability]:
        # TODO: flag unchecked arithmetic in contracts compiled below pragma 0.8
        return []


# Auto-register on import
register(OverflowDetector())
