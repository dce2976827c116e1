import logging
from typing import Any, Iterator

from astwalk.abstract_syntax_tree.models import (
    ASTNode,
    AddNode,
    AssignNode,
    CallNode,
    DivNode,
    EQNode,
    FunctionNode,
    GENode,
    GTNode,
    IfThenElseNode,
    IntegerNode,
    InvokeNode,
    LENode,
    LTNode,
    MulNode,
    NENode,
    NodeKind,
    ProgramNode,
    StmtSeqNode,
    SubNode,
    VarNode,
    WhileNode,
)
from astwalk.traversal.errors import (
    depth_error,
    null_child_error,
    recursion_depth_error,
    unknown_kind_error,
)
from astwalk.traversal.observability import (
    NODE_ENTER,
    NODE_ERROR,
    NODE_EXIT,
    TraversalEvent,
    utc_timestamp,
)
from astwalk.traversal.settings import WalkSettings

logger = logging.getLogger("astwalk.traversal")

# Central kind -> handler table. Adding a kind means extending NodeKind and this table.
DISPATCH_TABLE: dict[NodeKind, str] = {kind: f"visit_{kind.value}" for kind in NodeKind}


class Visitor:
    """
    A base class for traversing the Abstract Syntax Tree.

    `walk` reads the node's kind tag and dispatches to the matching `visit_<Kind>`
    handler. Every handler defaults to walking the node's children in declared
    order, so a pass overrides only the kinds it cares about. An override cuts
    off the subtree unless it calls the base handler through `super()`.

    Each tree level costs two Python frames (`walk` and the handler). A tree deep
    enough to exhaust the interpreter stack fails with TraversalDepthError.
    """

    def __init__(self, settings: WalkSettings | None = None) -> None:
        self.settings = settings or WalkSettings()
        self._depth = 0
        self._overflow: tuple[ASTNode, int] | None = None

    @property
    def depth(self) -> int:
        """
        Nesting depth of the handler currently running, 0 when no walk is in progress.
        """
        return self._depth

    def walk(self, node: ASTNode) -> None:
        """
        The entry point for visiting a node. Dispatches to the correct visit method.
        """
        kind = getattr(node, "kind", None)
        if not isinstance(kind, NodeKind):
            error = unknown_kind_error(node)
            if self._depth == 0:
                logger.debug("walk aborted: %s", error)
            raise error

        max_depth = self.settings.max_depth
        if max_depth is not None and self._depth >= max_depth:
            error = depth_error(node, max_depth)
            if self._depth == 0:
                logger.debug("walk aborted: %s", error)
            raise error

        handler = getattr(self, DISPATCH_TABLE[kind])
        self._depth += 1
        try:
            try:
                self.before_visit(node)
                self._emit(NODE_ENTER, node)
                handler(node)
            except RecursionError as exc:
                # Only the outermost frame has stack room left to build a report.
                if self._overflow is None:
                    self._overflow = (node, self._depth)
                if self._depth > 1:
                    raise
                deepest, depth = self._overflow
                error = recursion_depth_error(deepest, depth)
                self._emit(NODE_ERROR, node, error)
                logger.debug("walk aborted in %s handler: %s", kind.value, error)
                raise error from exc
            except Exception as exc:
                self._emit(NODE_ERROR, node, exc)
                if self._depth == 1:
                    logger.debug("walk aborted in %s handler: %s", kind.value, exc)
                raise
            self._emit(NODE_EXIT, node)
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._overflow = None

    def __call__(self, node: ASTNode) -> None:
        self.walk(node)

    def before_visit(self, node: ASTNode) -> None:
        """
        Called once per node after the dispatch checks pass, right before its handler runs.
        """

    # --------------------------------------------------
    # Child helpers
    # --------------------------------------------------

    def child(self, node: ASTNode, field: str) -> Any:
        """
        Returns the required child stored in `field`.
        """
        value = getattr(node, field)
        if value is None and self.settings.check_children:
            raise null_child_error(node, field)
        return value

    def children(self, node: ASTNode, field: str) -> Iterator[Any]:
        """
        Yields every element of the required child sequence stored in `field`, in order.
        """
        values = getattr(node, field)
        if values is None:
            raise null_child_error(node, field)
        for index, value in enumerate(values):
            if value is None and self.settings.check_children:
                raise null_child_error(node, f"{field}[{index}]")
            yield value

    def _emit(self, event: str, node: ASTNode, exc: BaseException | None = None) -> None:
        observability = self.settings.observability
        if observability is None or observability.event_observer is None:
            return
        observability.event_observer(
            TraversalEvent(
                timestamp=utc_timestamp(),
                event=event,
                kind=node.kind.value,
                node_type=type(node).__name__,
                depth=self._depth,
                visitor=type(self).__name__,
                metadata=observability.metadata,
                error_type=type(exc).__name__ if exc is not None else None,
                error_message=str(exc) if exc is not None else None,
            )
        )

    # --------------------------------------------------
    # Top-level and statement nodes
    # --------------------------------------------------

    def visit_Program(self, node: ProgramNode) -> None:
        for func in self.children(node, "funcs"):
            self.walk(func)

    def visit_Function(self, node: FunctionNode) -> None:
        self.walk(self.child(node, "body"))

    def visit_StmtSeq(self, node: StmtSeqNode) -> None:
        for stmt in self.children(node, "stmts"):
            self.walk(stmt)

    def visit_Assign(self, node: AssignNode) -> None:
        self.walk(self.child(node, "var"))
        self.walk(self.child(node, "expr"))

    def visit_IfThenElse(self, node: IfThenElseNode) -> None:
        self.walk(self.child(node, "cond"))
        self.walk(self.child(node, "then_case"))
        if node.else_case is not None:
            self.walk(node.else_case)

    def visit_While(self, node: WhileNode) -> None:
        self.walk(self.child(node, "cond"))
        self.walk(self.child(node, "body"))

    def visit_Invoke(self, node: InvokeNode) -> None:
        self.walk(self.child(node, "expr"))

    # --------------------------------------------------
    # Leaf nodes
    # --------------------------------------------------

    def visit_Call(self, node: CallNode) -> None:
        # Arguments are not walked.
        pass

    def visit_Integer(self, node: IntegerNode) -> None:
        pass

    def visit_Var(self, node: VarNode) -> None:
        pass

    # --------------------------------------------------
    # Binary nodes: lhs, then rhs
    # --------------------------------------------------

    def visit_Add(self, node: AddNode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_Sub(self, node: SubNode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_Mul(self, node: MulNode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_Div(self, node: DivNode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_LT(self, node: LTNode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_LE(self, node: LENode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_GT(self, node: GTNode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_GE(self, node: GENode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_EQ(self, node: EQNode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))

    def visit_NE(self, node: NENode) -> None:
        self.walk(self.child(node, "lhs"))
        self.walk(self.child(node, "rhs"))
