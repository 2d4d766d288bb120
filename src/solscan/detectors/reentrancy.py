"""Reentrancy detector.

Flags functions where a direct child that performs an external call is
followed, among the same function's direct children, by an assignment
expression: a checks-effects-interactions violation.

Only direct children are scanned, so assignments nested in blocks are missed.
The external call check is a substring match over each child's text. At most
one finding is raised per function.
"""

from solscan.detectors import register
from solscan.domain.models import Severity, Vulnerability
from solscan.domain.protocols import SyntaxNode, SyntaxTree
from solscan.domain.syntax import node_text, start_location, walk

FUNCTION_DEFINITION = "function_definition"
ASSIGNMENT_EXPRESSION = "assignment_expression"

EXTERNAL_CALL_MARKERS = (".call{", ".transfer(", ".send(")


def is_external_call(text: str) -> bool:
    """Return True if the text contains an external call marker."""
    return any(marker in text for marker in EXTERNAL_CALL_MARKERS)


class ReentrancyDetector:
    """Detects state changes after external calls."""

    name = "reentrancy-detector"

    def detect(self, tree: SyntaxTree, source: str) -> list[Vulnerability]:
        """Scan every function definition in the tree."""
        source_bytes = source.encode("utf-8")
        vulnerabilities = []

        # Nested function definitions are visited and tested on their own
        for node in walk(tree.root_node):
            if node.type != FUNCTION_DEFINITION:
                continue
            if self._state_change_after_call(node, source_bytes):
                vulnerabilities.append(self._build_finding(node))

        return vulnerabilities

    def _state_change_after_call(self, function: SyntaxNode, source_bytes: bytes) -> bool:
        found_call = False
        for child in function.children:
            if is_external_call(node_text(child, source_bytes)):
                found_call = True
            elif found_call and child.type == ASSIGNMENT_EXPRESSION:
                return True
        return False

    def _build_finding(self, function: SyntaxNode) -> Vulnerability:
        line, column = start_location(function)
        return Vulnerability(
            severity=Severity.CRITICAL,
            title="Reentrancy Vulnerability",
            description="State change after external call detected",
            line=line,
            column=column,
            suggestion="Use checks-effects-interactions pattern",
            detector=self.name,
        )


# Auto-register on import
register(ReentrancyDetector())
