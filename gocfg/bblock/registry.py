"""
Block Registry

Owns the line-keyed store of basic blocks for one compilation unit.
"""

from .models import BasicBlock, BlockKind, sort_blocks


class BlockRegistry:
    """
    Maps source end-line to its BasicBlock.

    Passive: the builder decides what to register, the registry only
    creates, updates in place, and numbers blocks.
    """

    def __init__(self):
        self._blocks: dict[int, BasicBlock] = {}
        self.last_block: BasicBlock | None = None

    def get_or_create(self, end_line: int, kind: BlockKind, function_name: str = "") -> BasicBlock:
        """
        Register a block for end_line.

        An existing block at the same line is overwritten in place with the
        new kind and owner and loses its edges; references to it stay valid.
        """
        block = BasicBlock(kind=kind, end_line=end_line, function_name=function_name)

        existing = self._blocks.get(end_line)
        if existing is not None:
            existing.update_from(block)
            block = existing
        else:
            self._blocks[end_line] = block

        self.last_block = block
        return block

    def get(self, end_line: int) -> BasicBlock | None:
        return self._blocks.get(end_line)

    def finalize(self) -> list[BasicBlock]:
        """Blocks in ascending end-line order, numbered by rank."""
        blocks = sort_blocks(self._blocks.values())
        for number, block in enumerate(blocks):
            block.number = number
        return blocks

    @staticmethod
    def successors_of(block: BasicBlock) -> list[BasicBlock]:
        return block.successors

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, end_line: int) -> bool:
        return end_line in self._blocks
