"""
Rendering Tests
"""

from unittest.mock import MagicMock

import pytest

from gocfg.bblock.models import BasicBlock, BlockKind
from gocfg.bblock.render import format_block, format_successor, log_blocks, render_blocks

pytestmark = pytest.mark.unit


@pytest.fixture
def loop_blocks() -> list[BasicBlock]:
    header = BasicBlock(kind=BlockKind.FOR_STATEMENT, end_line=6, number=0)
    body = BasicBlock(kind=BlockKind.FOR_BODY, end_line=8, number=1)
    exit_ = BasicBlock(kind=BlockKind.RETURN_STMT, end_line=9, number=2)
    header.add_successor(exit_, body)
    body.add_successor(header)
    return [header, body, exit_]


def test_format_block():
    block = BasicBlock(kind=BlockKind.FUNCTION_ENTRY, end_line=5, number=0)

    assert format_block(block) == "0) FUNCTION_ENTRY (EndLine: 5) {5}"


def test_format_successor():
    block = BasicBlock(kind=BlockKind.FOR_STATEMENT, end_line=6, number=1)

    assert format_successor(block) == "\t-> (1) FOR_STATEMENT (EndLine: 6) {6}"


def test_render_blocks(loop_blocks):
    """Successors follow their block, in ascending line order."""
    assert render_blocks(loop_blocks) == [
        "0) FOR_STATEMENT (EndLine: 6) {6}",
        "\t-> (1) FOR_BODY (EndLine: 8) {8}",
        "\t-> (2) RETURN_STMT (EndLine: 9) {9}",
        "1) FOR_BODY (EndLine: 8) {8}",
        "\t-> (0) FOR_STATEMENT (EndLine: 6) {6}",
        "2) RETURN_STMT (EndLine: 9) {9}",
    ]


def test_render_empty():
    assert render_blocks([]) == []


def test_log_blocks_one_event_per_line(loop_blocks):
    logger = MagicMock()

    log_blocks(loop_blocks, logger=logger)

    assert logger.info.call_count == 6
    logger.info.assert_any_call("2) RETURN_STMT (EndLine: 9) {9}")
