"""
gocfg

Control-flow graphs of basic blocks for Go source code, the groundwork for
control-flow metrics such as cyclomatic complexity.

Layers:
- parsing: tree-sitter front-end
- bblock: block registry, CFG builder, rendering
"""

__version__ = "0.1.0"

from .bblock import BasicBlock, BlockKind, blocks_from_file, blocks_from_source, render_blocks
from .exceptions import GoCfgError, ParseFailure

__all__ = [
    "BasicBlock",
    "BlockKind",
    "GoCfgError",
    "ParseFailure",
    "blocks_from_file",
    "blocks_from_source",
    "render_blocks",
]
