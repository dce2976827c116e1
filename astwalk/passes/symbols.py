from astwalk.abstract_syntax_tree.models import AssignNode, CallNode, FunctionNode, VarNode
from astwalk.traversal.settings import WalkSettings
from astwalk.traversal.visitor_pattern import Visitor

# ==================================================
# Name-oriented passes
# ==================================================


class VariableCollector(Visitor):
    """
    Collects variable references in visit order, split into assignment targets and reads.
    """

    def __init__(self, settings: WalkSettings | None = None) -> None:
        super().__init__(settings)
        self.names: list[str] = []
        self.assigned: list[str] = []
        self.read: list[str] = []
        self._target: VarNode | None = None

    def visit_Assign(self, node: AssignNode) -> None:
        self._target = node.var
        try:
            super().visit_Assign(node)
        finally:
            self._target = None

    def visit_Var(self, node: VarNode) -> None:
        self.names.append(node.name)
        # Identity, not equality: `x = x + 1` holds two equal Var nodes.
        if node is self._target:
            self.assigned.append(node.name)
            self._target = None
        else:
            self.read.append(node.name)


class CallCollector(Visitor):
    """
    Records the names of called functions. Call arguments are never inspected.
    """

    def __init__(self, settings: WalkSettings | None = None) -> None:
        super().__init__(settings)
        self.calls: list[str] = []

    def visit_Call(self, node: CallNode) -> None:
        self.calls.append(node.name)


class FunctionIndex(Visitor):
    """
    Maps function names to their nodes without descending into function bodies.
    """

    def __init__(self, settings: WalkSettings | None = None) -> None:
        super().__init__(settings)
        self.functions: dict[str, FunctionNode] = {}

    def visit_Function(self, node: FunctionNode) -> None:
        if node.name in self.functions:
            raise ValueError(f"Function '{node.name}' is defined more than once.")
        self.functions[node.name] = node
