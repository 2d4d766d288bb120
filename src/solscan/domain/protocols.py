"""Protocols (interfaces) for syntax trees, detectors and tasks."""

from typing import Awaitable, Optional, Protocol, Sequence

from solscan.domain.models import Context, Vulnerability


class SyntaxNode(Protocol):
    """A node of a parsed syntax tree.

    Mirrors the attributes of a tree-sitter ``Node`` so parser output can be
    consumed without wrapping.
    """

    type: str
    start_byte: int
    end_byte: int

    @property
    def children(self) -> Sequence["SyntaxNode"]:
        ...

    @property
    def start_point(self) -> tuple[int, int]:
        """0-based (row, column) of the node start."""
        ...


class SyntaxTree(Protocol):
    """An immutable parse result."""

    @property
    def root_node(self) -> SyntaxNode:
        ...


class SyntaxTreeProvider(Protocol):
    """Turns source text into a syntax tree."""

    def parse(self, source: str) -> Optional[SyntaxTree]:
        """Parse source text, returning None when no tree is produced."""
        ...


class Detector(Protocol):
    """Protocol for vulnerability detectors."""

    name: str

    def detect(self, tree: SyntaxTree, source: str) -> list[Vulnerability]:
        """Scan the tree read-only and return findings."""
        ...


class LogSink(Protocol):
    """Destination for progress messages."""

    def write(self, message: str) -> None:
        ...

    def write_error(self, message: str) -> None:
        ...

    def write_task_section(self, title: str) -> None:
        ...


class Task(Protocol):
    """Protocol for pipeline tasks."""

    name: str

    def get_status_message(self, ctx: Context) -> str:
        """Generate status message for this task."""
        ...

    def run(self, ctx: Context) -> Awaitable[Context] | Context:
        """Run the task and return updated context. Can be async or sync."""
        ...
