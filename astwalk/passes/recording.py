from collections import Counter

from astwalk.abstract_syntax_tree.models import ASTNode, NodeKind
from astwalk.traversal.settings import WalkSettings
from astwalk.traversal.visitor_pattern import Visitor

# ==================================================
# Generic recording passes
# ==================================================


class KindRecorder(Visitor):
    """
    Records the kind of every node as its handler is entered (pre-order).
    Nodes rejected before dispatch (unknown kind, depth limit) are not recorded.
    """

    def __init__(self, settings: WalkSettings | None = None) -> None:
        super().__init__(settings)
        self.kinds: list[NodeKind] = []

    def before_visit(self, node: ASTNode) -> None:
        self.kinds.append(node.kind)


class NodeCounter(Visitor):
    """
    Counts dispatched nodes per kind.
    """

    def __init__(self, settings: WalkSettings | None = None) -> None:
        super().__init__(settings)
        self.counts: Counter[NodeKind] = Counter()

    def before_visit(self, node: ASTNode) -> None:
        self.counts[node.kind] += 1

    def count(self, kind: NodeKind) -> int:
        return self.counts[kind]

    @property
    def total(self) -> int:
        return sum(self.counts.values())


class MaxDepthMeter(Visitor):
    """
    Measures the deepest nesting level reached by a walk. The root sits at depth 1.
    """

    def __init__(self, settings: WalkSettings | None = None) -> None:
        super().__init__(settings)
        self.deepest = 0

    def before_visit(self, node: ASTNode) -> None:
        self.deepest = max(self.deepest, self.depth)
