"""
Graph Property Tests

Structural guarantees that hold for every fixture program.
"""

import pytest

from gocfg.bblock import NO_FALLTHROUGH_KINDS, BlockKind, CfgBuilder, blocks_from_file, render_blocks
from gocfg.parsing import AstTree, SourceFile

pytestmark = pytest.mark.integration

PROGRAMS = [
    "gcd.go",
    "switch.go",
    "if_no_else.go",
    "if_else.go",
    "else_if.go",
    "early_return.go",
    "trailing_if.go",
    "same_line.go",
    "loop_switch.go",
    "select_loop.go",
    "type_switch.go",
    "spawn.go",
    "method_closure.go",
    "nested_loops.go",
    "nested_switch.go",
    "clause_first_match.go",
    "clause_type_switch.go",
    "header_literals.go",
]


@pytest.mark.parametrize("name", PROGRAMS)
def test_numbering_is_dense_and_ordered(build_fixture, name):
    blocks = build_fixture(name)

    assert [b.number for b in blocks] == list(range(len(blocks)))
    assert [b.end_line for b in blocks] == sorted({b.end_line for b in blocks})


@pytest.mark.parametrize("name", PROGRAMS)
def test_successors_are_registered_blocks(build_fixture, name):
    blocks = build_fixture(name)
    ids = {id(b) for b in blocks}

    for block in blocks:
        for succ in block.successors:
            assert id(succ) in ids


@pytest.mark.parametrize("name", PROGRAMS)
def test_every_block_belongs_to_a_function(build_fixture, name):
    assert all(b.function_name for b in build_fixture(name))


@pytest.mark.parametrize("name", PROGRAMS)
def test_no_markers_or_unknown_blocks(build_fixture, name):
    for block in build_fixture(name):
        assert not block.is_marker
        assert block.kind != BlockKind.UNKNOWN


@pytest.mark.parametrize("name", PROGRAMS)
def test_returns_have_no_successors(build_fixture, name):
    for block in build_fixture(name):
        if block.kind == BlockKind.RETURN_STMT:
            assert block.successors == []


@pytest.mark.parametrize("name", PROGRAMS)
def test_sequential_edge_to_next_block(build_fixture, name):
    """Every block outside the no-fallthrough kinds reaches the next block in line order."""
    blocks = build_fixture(name)

    for current, following in zip(blocks, blocks[1:]):
        if current.kind not in NO_FALLTHROUGH_KINDS:
            assert following in current.successors


@pytest.mark.parametrize("name", PROGRAMS)
def test_build_is_deterministic(fixture_path, name):
    first = render_blocks(blocks_from_file(fixture_path(name)))
    second = render_blocks(blocks_from_file(fixture_path(name)))

    assert first == second


def test_build_is_cached_per_builder(fixture_path):
    ast = AstTree.parse(SourceFile.from_file(fixture_path("gcd.go")))
    builder = CfgBuilder(ast)

    first = builder.build()
    edges = [len(b.successors) for b in first]

    assert builder.build() is first
    assert [len(b.successors) for b in builder.build()] == edges


def test_refinalize_keeps_numbering(fixture_path):
    ast = AstTree.parse(SourceFile.from_file(fixture_path("switch.go")))
    builder = CfgBuilder(ast)
    blocks = builder.build()

    assert builder.registry.finalize() == blocks
    assert [b.number for b in blocks] == list(range(len(blocks)))


def test_deep_expression_nesting():
    """Nesting depth of expressions does not exhaust the interpreter stack."""
    depth = 2000
    expr = "(" * depth + "1" + ")" * depth
    source = f"package main\n\nfunc deep() int {{\n\treturn {expr}\n}}\n"

    ast = AstTree.parse(SourceFile.from_content(source))
    blocks = CfgBuilder(ast).build()

    assert [(b.end_line, b.kind) for b in blocks] == [
        (3, BlockKind.FUNCTION_ENTRY),
        (4, BlockKind.RETURN_STMT),
    ]
