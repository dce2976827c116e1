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
    iter_children,
)
from astwalk.traversal import (
    Visitor,
    WalkSettings,
    InMemoryEventRecorder,
    ObservabilitySettings,
    TraversalEvent,
    compose_event_observers,
    make_json_event_logger,
    traversal_event_to_dict,
    TraversalError,
    UnknownKindError,
    NullChildError,
    TraversalDepthError,
    UnknownKind,
    NullChild,
)
from astwalk.passes import (
    KindRecorder,
    MaxDepthMeter,
    NodeCounter,
    CallCollector,
    FunctionIndex,
    VariableCollector,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
    "iter_children",
    "Visitor",
    "WalkSettings",
    "InMemoryEventRecorder",
    "ObservabilitySettings",
    "TraversalEvent",
    "compose_event_observers",
    "make_json_event_logger",
    "traversal_event_to_dict",
    "TraversalError",
    "UnknownKindError",
    "NullChildError",
    "TraversalDepthError",
    "UnknownKind",
    "NullChild",
    "KindRecorder",
    "MaxDepthMeter",
    "NodeCounter",
    "CallCollector",
    "FunctionIndex",
    "VariableCollector",
]
