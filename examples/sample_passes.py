from astwalk.abstract_syntax_tree.models import (
    AddNode,
    AssignNode,
    CallNode,
    FunctionNode,
    IfThenElseNode,
    IntegerNode,
    InvokeNode,
    LTNode,
    ProgramNode,
    StmtSeqNode,
    VarNode,
    WhileNode,
)
from astwalk.passes import CallCollector, FunctionIndex, MaxDepthMeter, NodeCounter, VariableCollector


def build_program() -> ProgramNode:
    loop = WhileNode(
        cond=LTNode(lhs=VarNode(name="i"), rhs=VarNode(name="n")),
        body=StmtSeqNode(stmts=[
            IfThenElseNode(
                cond=LTNode(lhs=VarNode(name="i"), rhs=IntegerNode(value=3)),
                then_case=InvokeNode(expr=CallNode(name="log", args=[VarNode(name="i")])),
            ),
            AssignNode(var=VarNode(name="i"), expr=AddNode(lhs=VarNode(name="i"), rhs=IntegerNode(value=1))),
        ]),
    )
    main = FunctionNode(name="main", body=StmtSeqNode(stmts=[
        AssignNode(var=VarNode(name="i"), expr=IntegerNode(value=0)),
        loop,
    ]))
    return ProgramNode(funcs=[main, FunctionNode(name="log", body=StmtSeqNode())])


def main() -> None:
    program = build_program()

    counter = NodeCounter()
    counter.walk(program)
    print("Node counts:", {kind.value: count for kind, count in counter.counts.items()})
    print("Total nodes:", counter.total)

    variables = VariableCollector()
    variables.walk(program)
    print("Assigned:", variables.assigned)
    print("Read:", variables.read)

    calls = CallCollector()
    calls.walk(program)
    print("Calls:", calls.calls)

    index = FunctionIndex()
    index.walk(program)
    print("Functions:", list(index.functions))

    meter = MaxDepthMeter()
    meter.walk(program)
    print("Deepest nesting:", meter.deepest)


if __name__ == "__main__":
    main()
