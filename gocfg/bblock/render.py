"""
Textual rendering of a finished basic-block graph.

Format, one line per block followed by one indented line per successor:

    0) FUNCTION_ENTRY (EndLine: 5) {5}
    	-> (1) FOR_STATEMENT (EndLine: 6) {6}
"""

from collections.abc import Iterable

import structlog

from ..observability import get_logger
from .models import BasicBlock


def format_block(block: BasicBlock) -> str:
    return f"{block.number}) {block.kind} (EndLine: {block.end_line}) {{{block.uid}}}"


def format_successor(block: BasicBlock) -> str:
    return f"\t-> ({block.number}) {block.kind} (EndLine: {block.end_line}) {{{block.uid}}}"


def render_blocks(blocks: Iterable[BasicBlock]) -> list[str]:
    """Render blocks in the given order, successors in ascending end line."""
    lines = []
    for block in blocks:
        lines.append(format_block(block))
        lines.extend(format_successor(succ) for succ in block.successors)
    return lines


def log_blocks(
    blocks: Iterable[BasicBlock],
    logger: structlog.stdlib.BoundLogger | None = None,
) -> None:
    """Emit the rendering through structured logging, one event per line."""
    logger = logger or get_logger(__name__)
    for line in render_blocks(blocks):
        logger.info(line)
