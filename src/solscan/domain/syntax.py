"""Helpers for walking syntax trees."""

from typing import Iterator

from solscan.domain.protocols import SyntaxNode


def walk(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node under root (inclusive) in depth-first pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def node_text(node: SyntaxNode, source_bytes: bytes) -> str:
    """Return the source text covered by the node's byte range."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def start_location(node: SyntaxNode) -> tuple[int, int]:
    """Return the 1-based (line, column) where the node starts."""
    row, column = node.start_point[0], node.start_point[1]
    return row + 1, column + 1
