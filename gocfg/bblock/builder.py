"""
CFG Builder

Walks a Go syntax tree once, depth-first, registering a basic block for every
construct of interest and wiring successor edges as it unwinds.

Responsibility: block identification and edge wiring
NOT responsible for: parsing (parsing layer), rendering (render module)
"""

from dataclasses import dataclass

from tree_sitter import Node as TSNode

from ..observability import get_logger
from ..parsing import AstTree
from .models import NO_FALLTHROUGH_KINDS, BasicBlock, BlockKind
from .registry import BlockRegistry

logger = get_logger(__name__)


# Go syntax types
FUNCTION_TYPES = {"function_declaration", "method_declaration"}

CLAUSE_TYPES = {"expression_case", "type_case", "communication_case", "default_case"}

# First statement of these types inside a clause body decides the clause's kind
CLAUSE_KIND_OVERRIDES = {
    "return_statement": BlockKind.RETURN_STMT,
    "expression_switch_statement": BlockKind.SWITCH_STATEMENT,
}

SKIPPED_TYPES = {"comment"}

# Children of a for or switch header that the arm walks itself
HEADER_SKIPPED_TYPES = {"block"} | CLAUSE_TYPES | SKIPPED_TYPES


@dataclass
class TraversalState:
    """
    Back-references scoped to the subtree being visited.

    Arms that rebind a field restore it before returning, except a return
    statement, whose rebinding of return_target is meant to be seen by the
    statements that follow it and by the enclosing if.
    """

    function_name: str = ""
    function_end_line: int = 0
    return_target: BasicBlock | None = None
    loop_header: BasicBlock | None = None
    loop_body_marker: BasicBlock | None = None
    switch_header: BasicBlock | None = None


def statements_of(node: TSNode | None) -> list[TSNode]:
    """Statements of a block, flattening statement_list and dropping comments."""
    if node is None:
        return []

    statements = []
    for child in node.named_children:
        if child.type == "statement_list":
            statements.extend(c for c in child.named_children if c.type not in SKIPPED_TYPES)
        elif child.type not in SKIPPED_TYPES:
            statements.append(child)
    return statements


def clause_body_of(node: TSNode) -> list[TSNode]:
    """Statements after the ':' of a case or communication clause."""
    body = []
    seen_colon = False
    for child in node.children:
        if not seen_colon:
            seen_colon = child.type == ":"
            continue
        if child.type == "statement_list":
            body.extend(c for c in child.named_children if c.type not in SKIPPED_TYPES)
        elif child.is_named and child.type not in SKIPPED_TYPES:
            body.append(child)
    return body


def link_fallthrough(blocks: list[BasicBlock]) -> None:
    """
    Add the default sequential edge from every block to the next one in line
    order, except for kinds that were wired explicitly or never fall through.
    """
    for current, following in zip(blocks, blocks[1:]):
        if current.kind not in NO_FALLTHROUGH_KINDS:
            current.add_successor(following)


class CfgBuilder:
    """
    Builds the basic-block graph of one compilation unit.

    One instance per tree: the back-references are mutated during the walk,
    so an instance must not be shared between threads.
    """

    def __init__(self, ast: AstTree, registry: BlockRegistry | None = None):
        self._ast = ast
        self._registry = registry if registry is not None else BlockRegistry()
        self._blocks: list[BasicBlock] | None = None
        self._arms = {
            "function_declaration": self._visit_function,
            "method_declaration": self._visit_function,
            "return_statement": self._visit_return,
            "go_statement": self._visit_go,
            "if_statement": self._visit_if,
            "for_statement": self._visit_for,
            "expression_switch_statement": self._visit_switch,
            "type_switch_statement": self._visit_type_switch,
            "select_statement": self._visit_select,
        }

    @property
    def registry(self) -> BlockRegistry:
        return self._registry

    def build(self) -> list[BasicBlock]:
        """
        Walk the tree and return the finished graph.

        Returns:
            Blocks in ascending end-line order, numbered, with successors
        """
        if self._blocks is None:
            self._visit_children(self._ast.root, TraversalState())
            blocks = self._registry.finalize()
            link_fallthrough(blocks)
            self._blocks = blocks
        return self._blocks

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _visit(self, node: TSNode, state: TraversalState) -> None:
        arm = self._arms.get(node.type)
        if arm is not None:
            arm(node, state)
        else:
            self._visit_children(node, state)

    def _visit_children(self, node: TSNode, state: TraversalState) -> None:
        """
        Default arm: continue into the children.

        Nodes without an arm are descended iteratively, so recursion depth
        follows statement nesting rather than expression nesting.
        """
        stack = list(reversed(node.named_children))
        while stack:
            child = stack.pop()
            arm = self._arms.get(child.type)
            if arm is not None:
                arm(child, state)
            else:
                stack.extend(reversed(child.named_children))

    def _add(self, line: int, kind: BlockKind, state: TraversalState) -> BasicBlock:
        return self._registry.get_or_create(line, kind, state.function_name)

    # ------------------------------------------------------------------
    # Arms
    # ------------------------------------------------------------------

    def _visit_function(self, node: TSNode, state: TraversalState) -> None:
        name_node = node.child_by_field_name("name")
        scope = TraversalState(
            function_name=self._ast.get_text(name_node) if name_node else "",
            function_end_line=self._ast.end_line_of(node),
        )

        self._add(self._ast.line_of(node), BlockKind.FUNCTION_ENTRY, scope)

        body = node.child_by_field_name("body")
        if body is None:
            # Declaration without a body (implemented outside Go)
            return

        statements = statements_of(body)

        # Top-level returns are known before the walk reaches them
        for stmt in statements:
            if stmt.type == "return_statement":
                scope.return_target = self._add(self._ast.line_of(stmt), BlockKind.RETURN_STMT, scope)

        implicit_return = None
        if scope.return_target is None:
            implicit_return = self._add(self._ast.end_line_of(node), BlockKind.RETURN_STMT, scope)
            scope.return_target = implicit_return

        for stmt in statements:
            self._visit(stmt, scope)

        if implicit_return is not None:
            # The closing line stays the exit even if a synthetic block landed on it
            self._add(implicit_return.end_line, BlockKind.RETURN_STMT, scope)

        logger.debug(
            "function_walked",
            function=scope.function_name,
            line=self._ast.line_of(node),
            blocks=len(self._registry),
        )

    def _visit_return(self, node: TSNode, state: TraversalState) -> None:
        block = self._add(self._ast.line_of(node), BlockKind.RETURN_STMT, state)
        state.return_target = block

        if state.switch_header is not None:
            state.switch_header.add_successor(block)

        self._visit_children(node, state)

    def _visit_go(self, node: TSNode, state: TraversalState) -> None:
        self._add(self._ast.line_of(node), BlockKind.GO_STATEMENT, state)
        self._visit_children(node, state)

    def _visit_if(self, node: TSNode, state: TraversalState) -> None:
        consequence = node.child_by_field_name("consequence")
        alternative = node.child_by_field_name("alternative")

        if_block = self._add(self._ast.line_of(node), BlockKind.IF_CONDITION, state)

        if alternative is not None:
            else_line = self._ast.line_of(alternative)
            else_end_line = self._ast.end_line_of(alternative)
        else:
            # No else: the false path starts at the closing brace and lands after it
            else_line = self._ast.end_line_of(consequence if consequence is not None else node)
            else_end_line = else_line + 1
            if state.function_end_line and else_end_line > state.function_end_line:
                # A one-line if at the end of a function has no line after it
                else_end_line = state.function_end_line

        else_condition = self._add(else_line, BlockKind.ELSE_CONDITION, state)
        else_body = self._add(else_end_line, BlockKind.ELSE_BODY, state)

        if_block.add_successor(else_body)

        for stmt in statements_of(consequence):
            self._visit(stmt, state)

        if state.return_target is not None:
            else_condition.add_successor(state.return_target)
            else_body.add_successor(state.return_target)

        for field_name in ("initializer", "condition"):
            child = node.child_by_field_name(field_name)
            if child is not None:
                self._visit_children(child, state)

        if alternative is not None:
            self._visit(alternative, state)

    def _visit_for(self, node: TSNode, state: TraversalState) -> None:
        self._visit_header(node, state)
        header = self._add(self._ast.line_of(node), BlockKind.FOR_STATEMENT, state)

        if state.return_target is not None:
            header.add_successor(state.return_target)

        saved_return = state.return_target
        saved_loop = state.loop_header
        saved_marker = state.loop_body_marker

        # Statements in the body flow back to the header, not past the loop
        state.return_target = header
        state.loop_header = header

        for stmt in statements_of(node.child_by_field_name("body")):
            self._visit(stmt, state)

        state.return_target = saved_return

        last = self._registry.last_block
        if last is header and header.kind == BlockKind.FOR_STATEMENT:
            last = self._add(self._ast.end_line_of(node), BlockKind.FOR_BODY, state)
        state.loop_body_marker = last

        if state.loop_body_marker.kind != BlockKind.RETURN_STMT:
            state.loop_body_marker.add_successor(header)

        state.loop_header = saved_loop
        state.loop_body_marker = saved_marker

    def _visit_header(self, node: TSNode, state: TraversalState) -> None:
        """
        Walk the for or range clause, initializer and value of a loop or switch.

        Runs before the header block is registered, so the statement keeps its
        kind on a shared line. Returns inside function literals here do not
        become the statement's return target.
        """
        saved_return = state.return_target
        for child in node.named_children:
            if child.type not in HEADER_SKIPPED_TYPES:
                self._visit(child, state)
        state.return_target = saved_return

    def _visit_switch(self, node: TSNode, state: TraversalState) -> None:
        self._visit_branching(node, state, BlockKind.SWITCH_STATEMENT, BlockKind.CASE_CLAUSE, link_return=True)

    def _visit_type_switch(self, node: TSNode, state: TraversalState) -> None:
        self._visit_branching(node, state, BlockKind.SWITCH_STATEMENT, BlockKind.CASE_CLAUSE, link_return=False)

    def _visit_select(self, node: TSNode, state: TraversalState) -> None:
        self._visit_branching(node, state, BlockKind.SELECT_STATEMENT, BlockKind.COMM_CLAUSE, link_return=False)

    def _visit_branching(
        self,
        node: TSNode,
        state: TraversalState,
        kind: BlockKind,
        clause_kind: BlockKind,
        link_return: bool,
    ) -> None:
        """Shared arm of switch, type switch and select."""
        self._visit_header(node, state)
        header = self._add(self._ast.line_of(node), kind, state)

        if state.loop_header is not None:
            state.loop_header.add_successor(header)
            header.add_successor(state.loop_header)

        if link_return and state.return_target is not None:
            header.add_successor(state.return_target)

        saved_switch = state.switch_header
        state.switch_header = header

        for clause in node.named_children:
            if clause.type in CLAUSE_TYPES:
                self._visit_clause(clause, clause_kind, state)

        state.switch_header = saved_switch

    def _visit_clause(self, node: TSNode, clause_kind: BlockKind, state: TraversalState) -> None:
        body = clause_body_of(node)

        # A clause containing a return or switch is represented by that statement
        notable = next((s for s in body if s.type in CLAUSE_KIND_OVERRIDES), None)
        if notable is not None:
            clause = self._add(self._ast.line_of(notable), CLAUSE_KIND_OVERRIDES[notable.type], state)
        else:
            end_line = self._ast.end_line_of(body[-1] if body else node)
            clause = self._add(end_line, clause_kind, state)

        if state.loop_header is not None:
            clause.add_successor(state.loop_header)

        if state.switch_header is not None:
            state.switch_header.add_successor(clause)

        if state.return_target is not None:
            clause.add_successor(state.return_target)

        saved_switch = state.switch_header
        saved_return = state.return_target

        for stmt in body:
            self._visit(stmt, state)

        state.switch_header = saved_switch
        state.return_target = saved_return

        if state.return_target is None or clause.kind in (BlockKind.RETURN_STMT, BlockKind.SWITCH_STATEMENT):
            return

        # An edge back into a loop already covers the exit
        if not clause.has_successor_of_kind(BlockKind.FOR_STATEMENT):
            clause.add_successor(state.return_target)
