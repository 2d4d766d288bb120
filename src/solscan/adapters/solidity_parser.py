"""Tree-sitter Solidity parser adapter."""

from typing import Optional

from tree_sitter import Language, Parser, Tree

from solscan.domain.exceptions import AnalyzerInitError, ParseError


def load_solidity_language() -> Language:
    """
    Load the tree-sitter Solidity grammar.

    Raises:
        AnalyzerInitError: If the grammar package is missing or incompatible
    """
    try:
        import tree_sitter_solidity as tssolidity
    except ImportError as exc:
        raise AnalyzerInitError(
            "Solidity grammar not installed. Install the tree-sitter-solidity package."
        ) from exc

    try:
        return Language(tssolidity.language())
    except (TypeError, ValueError) as exc:
        raise AnalyzerInitError(f"Failed to load Solidity grammar: {exc}") from exc


class SolidityParser:
    """Parses Solidity source into a tree-sitter syntax tree.

    Not reentrant: one parser instance must not be used by two threads at once.
    """

    def __init__(self, strict: bool = True):
        """
        Initialize the parser bound to the Solidity grammar.

        Args:
            strict: Treat trees that contain syntax errors as parse failures

        Raises:
            AnalyzerInitError: If the grammar cannot be loaded
        """
        language = load_solidity_language()
        try:
            self._parser = Parser(language)
        except (TypeError, ValueError) as exc:
            raise AnalyzerInitError(f"Failed to initialize parser: {exc}") from exc
        self.strict = strict

    def parse(self, source: str) -> Optional[Tree]:
        """
        Parse source text.

        Raises:
            ParseError: If no tree is produced, or in strict mode the tree
                contains syntax errors
        """
        tree = self._parser.parse(source.encode("utf-8"))
        if tree is None:
            raise ParseError()
        if self.strict and tree.root_node.has_error:
            raise ParseError("parse failed: source does not conform to the Solidity grammar")
        return tree
