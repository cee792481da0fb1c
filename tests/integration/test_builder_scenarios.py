"""
CFG Builder Scenarios

End-to-end graphs for the canonical programs: a loop, a switch, an if
without else, and two constructs sharing one line.
"""

import pytest

from conftest import by_line, successor_lines
from gocfg.bblock import BlockKind

pytestmark = pytest.mark.integration


class TestLoopProgram:
    """gcd with a loop, and main with an implicit return."""

    @pytest.fixture
    def blocks(self, build_fixture):
        return build_fixture("gcd.go")

    def test_blocks(self, blocks):
        assert [(b.end_line, b.kind) for b in blocks] == [
            (5, BlockKind.FUNCTION_ENTRY),
            (6, BlockKind.FOR_STATEMENT),
            (8, BlockKind.FOR_BODY),
            (9, BlockKind.RETURN_STMT),
            (12, BlockKind.FUNCTION_ENTRY),
            (15, BlockKind.RETURN_STMT),
        ]
        assert [b.number for b in blocks] == list(range(6))

    def test_edges(self, blocks):
        lines = by_line(blocks)

        assert successor_lines(lines[5]) == [6]
        assert successor_lines(lines[6]) == [8, 9]
        assert successor_lines(lines[8]) == [6]
        assert successor_lines(lines[9]) == []
        assert successor_lines(lines[12]) == [15]
        assert successor_lines(lines[15]) == []

    def test_function_names(self, blocks):
        assert [b.function_name for b in blocks] == ["gcd", "gcd", "gcd", "gcd", "main", "main"]


class TestSwitchProgram:
    """Expression switch with a returning case and a default."""

    @pytest.fixture
    def blocks(self, build_fixture):
        return build_fixture("switch.go")

    def test_blocks(self, blocks):
        assert [(b.end_line, b.kind) for b in blocks] == [
            (5, BlockKind.FUNCTION_ENTRY),
            (8, BlockKind.SWITCH_STATEMENT),
            (11, BlockKind.CASE_CLAUSE),
            (14, BlockKind.CASE_CLAUSE),
            (16, BlockKind.CASE_CLAUSE),
            (18, BlockKind.CASE_CLAUSE),
            (21, BlockKind.RETURN_STMT),
            (23, BlockKind.CASE_CLAUSE),
            (25, BlockKind.RETURN_STMT),
        ]

    def test_switch_reaches_every_clause_and_the_exit(self, blocks):
        switch = by_line(blocks)[8]

        assert successor_lines(switch) == [11, 14, 16, 18, 21, 23, 25]

    def test_clauses_flow_to_exit(self, blocks):
        lines = by_line(blocks)

        for line in (11, 14, 16, 18, 23):
            assert successor_lines(lines[line]) == [25]

    def test_returns_are_terminal(self, blocks):
        lines = by_line(blocks)

        assert successor_lines(lines[21]) == []
        assert successor_lines(lines[25]) == []

    def test_entry(self, blocks):
        assert successor_lines(by_line(blocks)[5]) == [8]


class TestIfWithoutElse:
    """The false path is modelled by blocks at the closing brace and the line after."""

    @pytest.fixture
    def blocks(self, build_fixture):
        return build_fixture("if_no_else.go")

    def test_blocks(self, blocks):
        assert [(b.end_line, b.kind) for b in blocks] == [
            (3, BlockKind.FUNCTION_ENTRY),
            (4, BlockKind.IF_CONDITION),
            (6, BlockKind.ELSE_CONDITION),
            (7, BlockKind.ELSE_BODY),
            (8, BlockKind.RETURN_STMT),
        ]

    def test_edges(self, blocks):
        lines = by_line(blocks)

        assert successor_lines(lines[3]) == [4]
        assert successor_lines(lines[4]) == [6, 7]
        assert successor_lines(lines[6]) == [8]
        assert successor_lines(lines[7]) == [8]
        assert successor_lines(lines[8]) == []


class TestSameLineConstructs:
    """A go statement and a select on one line collapse into the later block."""

    @pytest.fixture
    def blocks(self, build_fixture):
        return build_fixture("same_line.go")

    def test_later_construct_wins(self, blocks):
        lines = by_line(blocks)

        assert lines[4].kind == BlockKind.SELECT_STATEMENT
        assert lines[4].function_name == "wait"
        assert [b.end_line for b in blocks] == [3, 4, 5, 7, 8]

    def test_edges(self, blocks):
        lines = by_line(blocks)

        assert successor_lines(lines[3]) == [4]
        assert successor_lines(lines[4]) == [5]
        assert successor_lines(lines[5]) == []
        assert successor_lines(lines[7]) == [8]
