import pytest

from astwalk.abstract_syntax_tree.models import (
    AddNode,
    AssignNode,
    CallNode,
    FunctionNode,
    IfThenElseNode,
    IntegerNode,
    InvokeNode,
    LTNode,
    NodeKind,
    ProgramNode,
    StmtSeqNode,
    VarNode,
    WhileNode,
)
from astwalk.passes.recording import KindRecorder, MaxDepthMeter, NodeCounter
from astwalk.passes.symbols import CallCollector, FunctionIndex, VariableCollector
from astwalk.traversal.errors import TraversalDepthError, UnknownKindError
from astwalk.traversal.settings import WalkSettings


def _counter_program() -> ProgramNode:
    loop = WhileNode(
        cond=LTNode(lhs=VarNode(name="i"), rhs=IntegerNode(value=10)),
        body=StmtSeqNode(stmts=[
            InvokeNode(expr=CallNode(name="log", args=[VarNode(name="i")])),
            AssignNode(var=VarNode(name="i"), expr=AddNode(lhs=VarNode(name="i"), rhs=IntegerNode(value=1))),
        ]),
    )
    main = FunctionNode(name="main", body=StmtSeqNode(stmts=[
        AssignNode(var=VarNode(name="i"), expr=IntegerNode(value=0)),
        loop,
    ]))
    helper = FunctionNode(name="helper", body=InvokeNode(expr=CallNode(name="main")))
    return ProgramNode(funcs=[main, helper])


def test_kind_recorder_records_pre_order():
    recorder = KindRecorder()
    recorder.walk(AddNode(lhs=VarNode(name="a"), rhs=IntegerNode(value=1)))
    assert recorder.kinds == [NodeKind.ADD, NodeKind.VAR, NodeKind.INTEGER]


def test_node_counter_counts_by_kind():
    counter = NodeCounter()
    counter.walk(_counter_program())
    assert counter.count(NodeKind.FUNCTION) == 2
    assert counter.count(NodeKind.VAR) == 4
    assert counter.count(NodeKind.INTEGER) == 3
    assert counter.count(NodeKind.CALL) == 2
    assert counter.count(NodeKind.DIV) == 0
    assert counter.total == 21


def test_max_depth_meter():
    meter = MaxDepthMeter()
    meter.walk(_counter_program())
    # Program > Function > StmtSeq > While > StmtSeq > Assign > Add > Var
    assert meter.deepest == 8


def test_variable_collector_splits_targets_and_reads():
    collector = VariableCollector()
    collector.walk(_counter_program())
    assert collector.names == ["i", "i", "i", "i"]
    assert collector.assigned == ["i", "i"]
    assert collector.read == ["i", "i"]


def test_variable_collector_sees_target_before_value():
    collector = VariableCollector()
    collector.walk(AssignNode(var=VarNode(name="x"), expr=AddNode(lhs=VarNode(name="x"), rhs=VarNode(name="y"))))
    assert collector.names == ["x", "x", "y"]
    assert collector.assigned == ["x"]
    assert collector.read == ["x", "y"]


def test_variable_collector_with_conditionals():
    tree = IfThenElseNode(
        cond=VarNode(name="flag"),
        then_case=AssignNode(var=VarNode(name="a"), expr=VarNode(name="b")),
        else_case=AssignNode(var=VarNode(name="c"), expr=IntegerNode(value=0)),
    )
    collector = VariableCollector()
    collector.walk(tree)
    assert collector.assigned == ["a", "c"]
    assert collector.read == ["flag", "b"]


def test_call_collector_ignores_arguments():
    collector = CallCollector()
    collector.walk(_counter_program())
    assert collector.calls == ["log", "main"]


def test_function_index_does_not_descend():
    program = _counter_program()
    index = FunctionIndex()
    index.walk(program)
    assert list(index.functions) == ["main", "helper"]
    assert index.functions["main"] is program.funcs[0]


def test_function_index_rejects_duplicates():
    body = StmtSeqNode()
    program = ProgramNode(funcs=[FunctionNode(name="f", body=body), FunctionNode(name="f", body=body)])
    with pytest.raises(ValueError, match="defined more than once"):
        FunctionIndex().walk(program)


def test_recorders_skip_nodes_rejected_by_depth_limit():
    tree = AddNode(lhs=VarNode(name="a"), rhs=IntegerNode(value=1))

    counter = NodeCounter(WalkSettings(max_depth=1))
    with pytest.raises(TraversalDepthError):
        counter.walk(tree)
    assert dict(counter.counts) == {NodeKind.ADD: 1}

    recorder = KindRecorder(WalkSettings(max_depth=1))
    with pytest.raises(TraversalDepthError):
        recorder.walk(tree)
    assert recorder.kinds == [NodeKind.ADD]

    meter = MaxDepthMeter(WalkSettings(max_depth=1))
    with pytest.raises(TraversalDepthError):
        meter.walk(tree)
    assert meter.deepest == 1


def test_recorders_skip_unknown_kinds():
    class Untagged:
        pass

    recorder = KindRecorder()
    with pytest.raises(UnknownKindError):
        recorder.walk(AddNode(lhs=VarNode(name="a"), rhs=Untagged()))
    assert recorder.kinds == [NodeKind.ADD, NodeKind.VAR]
