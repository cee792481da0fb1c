"""
Basic Block Models

BlockKind, BasicBlock
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class BlockKind(str, Enum):
    """Construct whose end a basic block represents"""

    FUNCTION_ENTRY = "FUNCTION_ENTRY"
    IF_CONDITION = "IF_CONDITION"
    ELSE_CONDITION = "ELSE_CONDITION"
    ELSE_BODY = "ELSE_BODY"
    SWITCH_STATEMENT = "SWITCH_STATEMENT"
    CASE_CLAUSE = "CASE_CLAUSE"
    SELECT_STATEMENT = "SELECT_STATEMENT"
    COMM_CLAUSE = "COMM_CLAUSE"
    RETURN_STMT = "RETURN_STMT"
    FOR_STATEMENT = "FOR_STATEMENT"
    FOR_BODY = "FOR_BODY"
    GO_STATEMENT = "GO_STATEMENT"
    START = "START"
    EXIT = "EXIT"
    UNKNOWN = "UNKNOWN"

    @property
    def ordinal(self) -> int:
        """Position of the tag in declaration order"""
        return list(BlockKind).index(self)

    @property
    def is_marker(self) -> bool:
        return self in (BlockKind.START, BlockKind.EXIT)

    def __str__(self) -> str:
        return self.value


# Kinds that never receive the default edge to the next block in line order.
NO_FALLTHROUGH_KINDS = frozenset(
    {
        BlockKind.FOR_BODY,
        BlockKind.ELSE_CONDITION,
        BlockKind.ELSE_BODY,
        BlockKind.COMM_CLAUSE,
        BlockKind.CASE_CLAUSE,
        BlockKind.RETURN_STMT,
    }
)


@dataclass(eq=False)
class BasicBlock:
    """
    One node of the control-flow graph, keyed by the line its construct ends on.

    Blocks compare by identity: the registry hands out one object per line and
    successor edges point at those objects.
    """

    kind: BlockKind
    end_line: int
    number: int = -1  # assigned by BlockRegistry.finalize()
    function_name: str = ""
    last_successor: BasicBlock | None = field(default=None, repr=False)
    _successors: dict[int, BasicBlock] = field(default_factory=dict, repr=False)

    @classmethod
    def marker(cls, kind: BlockKind) -> BasicBlock:
        """
        Construct a synthetic START or EXIT block.

        Markers are never registered; they exist for consumers that want
        explicit anchors around a function graph.
        """
        if not kind.is_marker:
            raise ValueError(f"Not a marker kind: {kind}")
        return cls(kind=kind, end_line=0)

    @property
    def is_marker(self) -> bool:
        return self.kind.is_marker

    @property
    def key(self) -> int:
        """Ordering key: end line, or the negated kind tag for markers"""
        if self.is_marker:
            return -self.kind.ordinal
        return self.end_line

    @property
    def uid(self) -> str:
        return str(self.key)

    @property
    def successors(self) -> list[BasicBlock]:
        """Outgoing edges in ascending end-line order"""
        return [self._successors[k] for k in sorted(self._successors)]

    def add_successor(self, *blocks: BasicBlock) -> None:
        # Edges to the same line collapse into one
        for block in blocks:
            self._successors[block.key] = block
            self.last_successor = block

    def has_successor_of_kind(self, kind: BlockKind) -> bool:
        return any(b.kind == kind for b in self._successors.values())

    def update_from(self, other: BasicBlock) -> None:
        """Overwrite kind, edges and owner with the data of a newer block for the same line."""
        self.kind = other.kind
        self.function_name = other.function_name
        self.last_successor = other.last_successor
        self._successors = dict(other._successors)

    def __str__(self) -> str:
        if self.is_marker:
            return str(self.kind)
        return f"BLOCK NR.{self.number} ({self.kind}) (EndLine: {self.end_line})"


def sort_blocks(blocks: Iterable[BasicBlock]) -> list[BasicBlock]:
    """Blocks in ascending end-line order"""
    return sorted(blocks, key=lambda b: b.key)


def count_edges(blocks: Iterable[BasicBlock]) -> int:
    return sum(len(b.successors) for b in blocks)
