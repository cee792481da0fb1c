"""
Basic Block Layer

Turns a Go syntax tree into a control-flow graph of basic blocks keyed by
source line. Each block models the construct whose end it represents
(function entry, branch, loop, switch clause, return); successor edges follow
runtime control flow, including the non-local edges of loops, switches and
early returns.

Components:
- models: BlockKind and BasicBlock value types
- registry: line-keyed block store with numbering
- builder: single depth-first walk that registers blocks and wires edges
- render: textual rendering of a finished graph
- pipeline: source/file entry points
"""

from .builder import CfgBuilder, TraversalState, link_fallthrough
from .models import NO_FALLTHROUGH_KINDS, BasicBlock, BlockKind, count_edges, sort_blocks
from .pipeline import blocks_from_file, blocks_from_source, build_blocks
from .registry import BlockRegistry
from .render import log_blocks, render_blocks

__all__ = [
    "NO_FALLTHROUGH_KINDS",
    "BasicBlock",
    "BlockKind",
    "BlockRegistry",
    "CfgBuilder",
    "TraversalState",
    "blocks_from_file",
    "blocks_from_source",
    "build_blocks",
    "count_edges",
    "link_fallthrough",
    "log_blocks",
    "render_blocks",
    "sort_blocks",
]
