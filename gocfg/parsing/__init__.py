"""
Parsing Layer

Tree-sitter based front-end: turns Go source text into a syntax tree.

Components:
- parser_registry: Language parser management
- source_file: Source file representation
- ast_tree: AST tree wrapper with position-to-line resolution
"""

from .ast_tree import AstTree
from .models import Span
from .parser_registry import ParserRegistry, get_registry
from .source_file import SourceFile

__all__ = [
    "AstTree",
    "ParserRegistry",
    "Span",
    "SourceFile",
    "get_registry",
]
