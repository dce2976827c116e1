from astwalk.abstract_syntax_tree.models import (
    ASTNode,
    StmtNode,
    ExprNode,
    NodeKind,
    ProgramNode,
    FunctionNode,
    StmtSeqNode,
    AssignNode,
    IfThenElseNode,
    WhileNode,
    InvokeNode,
    CallNode,
    IntegerNode,
    VarNode,
    BinaryNode,
    AddNode,
    SubNode,
    MulNode,
    DivNode,
    LTNode,
    LENode,
    GTNode,
    GENode,
    EQNode,
    NENode,
    CHILD_FIELDS,
    iter_children,
)

__all__ = [
    "ASTNode",
    "StmtNode",
    "ExprNode",
    "NodeKind",
    "ProgramNode",
    "FunctionNode",
    "StmtSeqNode",
    "AssignNode",
    "IfThenElseNode",
    "WhileNode",
    "InvokeNode",
    "CallNode",
    "IntegerNode",
    "VarNode",
    "BinaryNode",
    "AddNode",
    "SubNode",
    "MulNode",
    "DivNode",
    "LTNode",
    "LENode",
    "GTNode",
    "GENode",
    "EQNode",
    "NENode",
    "CHILD_FIELDS",
    "iter_children",
]
