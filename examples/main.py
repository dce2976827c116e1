from astwalk.abstract_syntax_tree.models import (
    AddNode,
    AssignNode,
    FunctionNode,
    IntegerNode,
    ProgramNode,
    StmtSeqNode,
    VarNode,
)
from astwalk.traversal.visitor_pattern import Visitor


class VarCounter(Visitor):
    """
    A pass that only cares about variable references.
    """

    def __init__(self) -> None:
        super().__init__()
        self.count = 0

    def visit_Var(self, node: VarNode) -> None:
        self.count += 1


def main():
    """
    Example usage of the traversal base.
    """
    program = ProgramNode(funcs=[
        FunctionNode(name="f", body=StmtSeqNode(stmts=[
            AssignNode(var=VarNode(name="x"), expr=AddNode(lhs=VarNode(name="x"), rhs=IntegerNode(value=1))),
        ])),
    ])
    counter = VarCounter()
    counter.walk(program)
    print(program)
    print("Var references:", counter.count)

if __name__ == "__main__":
    main()
