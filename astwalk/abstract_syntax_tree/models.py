from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator

# ==================================================
# Node kinds
# ==================================================

class NodeKind(Enum):
    """
    The closed set of node kinds understood by the traversal layer.
    """
    PROGRAM = "Program"
    FUNCTION = "Function"
    STMT_SEQ = "StmtSeq"
    ASSIGN = "Assign"
    IF_THEN_ELSE = "IfThenElse"
    WHILE = "While"
    INVOKE = "Invoke"
    CALL = "Call"
    INTEGER = "Integer"
    VAR = "Var"
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    LT = "LT"
    LE = "LE"
    GT = "GT"
    GE = "GE"
    EQ = "EQ"
    NE = "NE"

# ==================================================
# Base classes
# ==================================================

@dataclass(frozen=True)
class ASTNode(ABC):
    """
    A generic AST node. Concrete node types set the class-level `kind` tag.
    """
    kind: ClassVar[NodeKind | None] = None

@dataclass(frozen=True)
class StmtNode(ASTNode):
    """
    A base class for all statement nodes in the AST.
    """
    pass

@dataclass(frozen=True)
class ExprNode(ASTNode):
    """
    A base class for all expression nodes in the AST.
    """
    pass

# ==================================================
# Leaf expression nodes
# ==================================================

@dataclass(frozen=True)
class IntegerNode(ExprNode):
    """Represents an integer literal."""
    kind: ClassVar[NodeKind] = NodeKind.INTEGER
    value: int

@dataclass(frozen=True)
class VarNode(ExprNode):
    """Represents a variable reference."""
    kind: ClassVar[NodeKind] = NodeKind.VAR
    name: str

@dataclass(frozen=True)
class CallNode(ExprNode):
    """
    Represents a function call expression.
    The arguments are stored on the node but are not children for traversal purposes.
    """
    kind: ClassVar[NodeKind] = NodeKind.CALL
    name: str
    args: list[ExprNode] = field(default_factory=list)

# ==================================================
# Binary expression nodes
# ==================================================

@dataclass(frozen=True)
class BinaryNode(ExprNode):
    """
    Base class for arithmetic and comparison nodes with a left and right operand.
    """
    lhs: ExprNode
    rhs: ExprNode

@dataclass(frozen=True)
class AddNode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.ADD

@dataclass(frozen=True)
class SubNode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.SUB

@dataclass(frozen=True)
class MulNode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.MUL

@dataclass(frozen=True)
class DivNode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.DIV

@dataclass(frozen=True)
class LTNode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.LT

@dataclass(frozen=True)
class LENode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.LE

@dataclass(frozen=True)
class GTNode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.GT

@dataclass(frozen=True)
class GENode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.GE

@dataclass(frozen=True)
class EQNode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.EQ

@dataclass(frozen=True)
class NENode(BinaryNode):
    kind: ClassVar[NodeKind] = NodeKind.NE

# ==================================================
# Statement nodes
# ==================================================

@dataclass(frozen=True)
class StmtSeqNode(StmtNode):
    """Represents a block of statements executed in order."""
    kind: ClassVar[NodeKind] = NodeKind.STMT_SEQ
    stmts: list[StmtNode] = field(default_factory=list)

@dataclass(frozen=True)
class AssignNode(StmtNode):
    """Represents `var = expr`."""
    kind: ClassVar[NodeKind] = NodeKind.ASSIGN
    var: VarNode
    expr: ExprNode

@dataclass(frozen=True)
class IfThenElseNode(StmtNode):
    """Represents a conditional. The else branch is optional."""
    kind: ClassVar[NodeKind] = NodeKind.IF_THEN_ELSE
    cond: ExprNode
    then_case: StmtNode
    else_case: StmtNode | None = None

@dataclass(frozen=True)
class WhileNode(StmtNode):
    """Represents a pre-tested loop."""
    kind: ClassVar[NodeKind] = NodeKind.WHILE
    cond: ExprNode
    body: StmtNode

@dataclass(frozen=True)
class InvokeNode(StmtNode):
    """Represents an expression statement wrapping a call."""
    kind: ClassVar[NodeKind] = NodeKind.INVOKE
    expr: ExprNode

# ==================================================
# Top-level nodes
# ==================================================

@dataclass(frozen=True)
class FunctionNode(ASTNode):
    """Represents a named routine with a single statement body."""
    kind: ClassVar[NodeKind] = NodeKind.FUNCTION
    name: str
    body: StmtNode

@dataclass(frozen=True)
class ProgramNode(ASTNode):
    """Represents a compilation unit."""
    kind: ClassVar[NodeKind] = NodeKind.PROGRAM
    funcs: list[FunctionNode] = field(default_factory=list)

# ==================================================
# Child layout
# ==================================================

_BINARY_FIELDS = ("lhs", "rhs")

# Walked child fields per kind, in declared order.
CHILD_FIELDS: dict[NodeKind, tuple[str, ...]] = {
    NodeKind.PROGRAM: ("funcs",),
    NodeKind.FUNCTION: ("body",),
    NodeKind.STMT_SEQ: ("stmts",),
    NodeKind.ASSIGN: ("var", "expr"),
    NodeKind.IF_THEN_ELSE: ("cond", "then_case", "else_case"),
    NodeKind.WHILE: ("cond", "body"),
    NodeKind.INVOKE: ("expr",),
    NodeKind.CALL: (),
    NodeKind.INTEGER: (),
    NodeKind.VAR: (),
    NodeKind.ADD: _BINARY_FIELDS,
    NodeKind.SUB: _BINARY_FIELDS,
    NodeKind.MUL: _BINARY_FIELDS,
    NodeKind.DIV: _BINARY_FIELDS,
    NodeKind.LT: _BINARY_FIELDS,
    NodeKind.LE: _BINARY_FIELDS,
    NodeKind.GT: _BINARY_FIELDS,
    NodeKind.GE: _BINARY_FIELDS,
    NodeKind.EQ: _BINARY_FIELDS,
    NodeKind.NE: _BINARY_FIELDS,
}

SEQUENCE_FIELDS = frozenset({"funcs", "stmts"})
OPTIONAL_FIELDS = frozenset({"else_case"})


def iter_children(node: ASTNode) -> Iterator[ASTNode]:
    """
    Yields the walked children of a node in declared order, skipping an absent else branch.
    """
    for attr in CHILD_FIELDS.get(node.kind, ()):
        child = getattr(node, attr)
        if attr in SEQUENCE_FIELDS:
            yield from child
        elif child is not None or attr not in OPTIONAL_FIELDS:
            yield child
