"""
AST Tree wrapper for Tree-sitter
"""

from tree_sitter import Node as TSNode
from tree_sitter import Tree as TSTree

from ..exceptions import ParseFailure, UnsupportedLanguageError
from ..observability import get_logger
from .models import Span
from .parser_registry import get_registry
from .source_file import SourceFile

logger = get_logger(__name__)


class AstTree:
    """
    Wrapper for Tree-sitter AST.

    Provides position-to-line resolution and error inspection for one
    compilation unit. Only trees without ERROR or missing nodes are handed
    out by parse().
    """

    def __init__(self, source: SourceFile, tree: TSTree):
        """
        Initialize AST tree.

        Args:
            source: Source file
            tree: Tree-sitter tree
        """
        self.source = source
        self.tree = tree
        self._root = tree.root_node

    @classmethod
    def parse(cls, source: SourceFile) -> "AstTree":
        """
        Parse source file into AST.

        Args:
            source: Source file to parse

        Returns:
            AstTree instance

        Raises:
            UnsupportedLanguageError: If no parser is registered for the language
            ParseFailure: If the tree contains syntax errors
        """
        parser = get_registry().get_parser(source.language)

        if parser is None:
            raise UnsupportedLanguageError(
                f"Language not supported: {source.language}",
                details={"file_path": source.file_path},
            )

        ast = cls(source, parser.parse(source.content.encode(source.encoding)))

        if ast.has_error():
            errors = [(node.start_point[0] + 1, node.start_point[1]) for node in ast.get_errors()]
            logger.warning("parse_failed", file=source.file_path, errors=errors)
            raise ParseFailure(source.file_path, errors)

        return ast

    @property
    def root(self) -> TSNode:
        """Get root node"""
        return self._root

    def get_text(self, node: TSNode) -> str:
        """Get text content of a node"""
        return node.text.decode(self.source.encoding) if node.text is not None else ""

    def get_span(self, node: TSNode) -> Span:
        """
        Convert Tree-sitter node to Span.

        Returns:
            Span (1-indexed lines, 0-indexed columns)
        """
        # Tree-sitter uses 0-indexed lines
        return Span(
            start_line=node.start_point[0] + 1,
            start_col=node.start_point[1],
            end_line=node.end_point[0] + 1,
            end_col=node.end_point[1],
        )

    def line_of(self, node: TSNode) -> int:
        """1-based line on which the node starts"""
        return node.start_point[0] + 1

    def end_line_of(self, node: TSNode) -> int:
        """1-based line on which the node ends"""
        return node.end_point[0] + 1

    def has_error(self) -> bool:
        """Check if AST has any error or missing nodes"""
        return self._root.has_error or bool(self.get_errors())

    def get_errors(self) -> list[TSNode]:
        """
        Get all error nodes, in source order.

        Iterative so that deeply nested code cannot exhaust the stack.
        """
        errors = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                errors.append(node)
            stack.extend(reversed(node.children))
        return errors

    def __repr__(self) -> str:
        return f"AstTree(file={self.source.file_path}, language={self.source.language})"
