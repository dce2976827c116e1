import pytest

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
    ProgramNode,
    StmtSeqNode,
    SubNode,
    VarNode,
    WhileNode,
    iter_children,
)


def _all_nodes(root: ASTNode) -> list[ASTNode]:
    """
    Lists every node of a tree in pre-order, independently of the visitor.
    """
    nodes = [root]
    for child in iter_children(root):
        nodes.extend(_all_nodes(child))
    return nodes


@pytest.fixture
def all_nodes():
    return _all_nodes


@pytest.fixture
def counting_program() -> ProgramNode:
    """
    Program[ Function("f", StmtSeq[ Assign(Var("x"), Add(Var("x"), Integer(1))) ]) ]
    """
    return ProgramNode(funcs=[
        FunctionNode(name="f", body=StmtSeqNode(stmts=[
            AssignNode(var=VarNode(name="x"), expr=AddNode(lhs=VarNode(name="x"), rhs=IntegerNode(value=1))),
        ])),
    ])


@pytest.fixture
def counting_loop() -> WhileNode:
    """
    While(LT(Var("i"), Integer(10)), StmtSeq[ Assign(Var("i"), Add(Var("i"), Integer(1))) ])
    """
    return WhileNode(
        cond=LTNode(lhs=VarNode(name="i"), rhs=IntegerNode(value=10)),
        body=StmtSeqNode(stmts=[
            AssignNode(var=VarNode(name="i"), expr=AddNode(lhs=VarNode(name="i"), rhs=IntegerNode(value=1))),
        ]),
    )


@pytest.fixture
def if_without_else() -> IfThenElseNode:
    """
    IfThenElse(EQ(Var("x"), Integer(0)), Assign(Var("y"), Integer(1)), absent)
    """
    return IfThenElseNode(
        cond=EQNode(lhs=VarNode(name="x"), rhs=IntegerNode(value=0)),
        then_case=AssignNode(var=VarNode(name="y"), expr=IntegerNode(value=1)),
    )


@pytest.fixture
def full_program() -> ProgramNode:
    """
    A program that uses every node kind at least once.
    """
    def cmp(node_cls, name: str, value: int):
        return node_cls(lhs=VarNode(name=name), rhs=IntegerNode(value=value))

    gcd_body = StmtSeqNode(stmts=[
        WhileNode(
            cond=cmp(NENode, "b", 0),
            body=StmtSeqNode(stmts=[
                AssignNode(var=VarNode(name="t"), expr=VarNode(name="b")),
                AssignNode(
                    var=VarNode(name="b"),
                    expr=SubNode(
                        lhs=VarNode(name="a"),
                        rhs=MulNode(
                            lhs=DivNode(lhs=VarNode(name="a"), rhs=VarNode(name="b")),
                            rhs=VarNode(name="b"),
                        ),
                    ),
                ),
                AssignNode(var=VarNode(name="a"), expr=VarNode(name="t")),
            ]),
        ),
        InvokeNode(expr=CallNode(name="print", args=[VarNode(name="a")])),
    ])
    classify_body = StmtSeqNode(stmts=[
        IfThenElseNode(
            cond=cmp(LTNode, "n", 0),
            then_case=AssignNode(var=VarNode(name="s"), expr=IntegerNode(value=-1)),
            else_case=IfThenElseNode(
                cond=cmp(GTNode, "n", 0),
                then_case=AssignNode(var=VarNode(name="s"), expr=IntegerNode(value=1)),
                else_case=AssignNode(var=VarNode(name="s"), expr=IntegerNode(value=0)),
            ),
        ),
        IfThenElseNode(
            cond=cmp(LENode, "s", 0),
            then_case=InvokeNode(expr=CallNode(name="warn")),
        ),
        IfThenElseNode(
            cond=cmp(GENode, "s", 1),
            then_case=InvokeNode(expr=CallNode(name="ok")),
        ),
        IfThenElseNode(
            cond=cmp(EQNode, "s", 0),
            then_case=AssignNode(var=VarNode(name="z"), expr=AddNode(lhs=VarNode(name="z"), rhs=IntegerNode(value=1))),
        ),
    ])
    return ProgramNode(funcs=[
        FunctionNode(name="gcd", body=gcd_body),
        FunctionNode(name="classify", body=classify_body),
    ])
