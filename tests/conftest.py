"""Shared fixtures: in-memory syntax trees with real byte offsets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from solscan.domain.models import Severity, Vulnerability


@dataclass
class FakeNode:
    type: str
    start_byte: int
    end_byte: int
    start_point: tuple[int, int]
    children: list["FakeNode"] = field(default_factory=list)


@dataclass
class FakeTree:
    root_node: FakeNode


@dataclass
class NodeLayout:
    kind: str
    text: Optional[str] = None
    children: list["NodeLayout"] = field(default_factory=list)


def leaf(kind: str, text: str) -> NodeLayout:
    """A node covering exactly the given text."""
    return NodeLayout(kind, text=text)


def branch(kind: str, *children: NodeLayout) -> NodeLayout:
    """A node whose children are laid out one per line."""
    return NodeLayout(kind, children=list(children))


def build_tree(root_layout: NodeLayout, prefix: str = "") -> tuple[FakeTree, str]:
    """Lay the nodes out as source text and return the matching tree and text."""
    parts = [prefix]

    def current_point() -> tuple[int, int]:
        encoded = "".join(parts).encode("utf-8")
        row = encoded.count(b"\n")
        column = len(encoded) - (encoded.rfind(b"\n") + 1)
        return row, column

    def offset() -> int:
        return len("".join(parts).encode("utf-8"))

    def lay(layout: NodeLayout) -> FakeNode:
        start = offset()
        point = current_point()
        children = []
        if layout.text is not None:
            parts.append(layout.text)
        else:
            for index, child in enumerate(layout.children):
                if index:
                    parts.append("\n")
                children.append(lay(child))
        return FakeNode(layout.kind, start, offset(), point, children)

    root = lay(root_layout)
    return FakeTree(root), "".join(parts)


class FakeParser:
    """Syntax tree provider that returns a prepared tree."""

    def __init__(self, tree: Optional[FakeTree]):
        self.tree = tree
        self.sources: list[str] = []

    def parse(self, source: str) -> Optional[FakeTree]:
        self.sources.append(source)
        return self.tree


class StaticDetector:
    """Detector that returns a fixed list of findings."""

    def __init__(self, name: str, findings: list[Vulnerability]):
        self.name = name
        self.findings = findings

    def detect(self, tree, source: str) -> list[Vulnerability]:
        return list(self.findings)


class RecordingLog:
    """Log sink that keeps messages in memory."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.errors: list[str] = []
        self.sections: list[str] = []

    def write(self, message: str) -> None:
        self.messages.append(message)

    def write_error(self, message: str) -> None:
        self.errors.append(message)

    def write_task_section(self, title: str) -> None:
        self.sections.append(title)


def make_vuln(severity: Severity, line: int, title: str = "Finding", detector: Optional[str] = None) -> Vulnerability:
    return Vulnerability(
        severity=severity,
        title=title,
        description=f"{title} description",
        line=line,
        column=1,
        detector=detector,
    )


CALL_TEXT = 'x.call{value: 1}("");'


def vulnerable_contract() -> NodeLayout:
    """A contract whose function performs a call and then an assignment."""
    return branch(
        "source_file",
        leaf("pragma_directive", "pragma solidity ^0.8.0;"),
        branch(
            "function_definition",
            leaf("identifier", "function withdraw()"),
            leaf("expression_statement", CALL_TEXT),
            leaf("assignment_expression", "balance = 0;"),
        ),
    )


@pytest.fixture
def recording_log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture
def vulnerable_tree() -> tuple[FakeTree, str]:
    return build_tree(vulnerable_contract())
