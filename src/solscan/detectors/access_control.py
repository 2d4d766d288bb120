"""Access control detector - stub implementation."""

from solscan.detectors import register
from solscan.domain.models import Vulnerability
from solscan.domain.protocols import SyntaxTree


class AccessControlDetector:
    """Detector reserved for missing access control checks."""

    name = "access-control-detector"

    def detect(self, tree: SyntaxTree, source: str) -> list[Vulnerability]:
        # TODO: flag state-changing external/public functions without an owner or role modifier
        return []


# Auto-register on import
register(AccessControlDetector())
