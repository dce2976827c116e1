from dotenv import load_dotenv

from astwalk.abstract_syntax_tree.models import AddNode, IntegerNode, VarNode
from astwalk.passes import VariableCollector
from astwalk.traversal.errors import TraversalDepthError
from astwalk.traversal.settings import WalkSettings

def main():
    # Load ASTWALK_MAX_DEPTH / ASTWALK_CHECK_CHILDREN from a .env file if present
    load_dotenv()
    settings = WalkSettings.from_env()
    print("Settings:", settings)

    # Right-nested chain: x + (x + (x + ... 1))
    expr = IntegerNode(value=1)
    for _ in range(200):
        expr = AddNode(lhs=VarNode(name="x"), rhs=expr)

    collector = VariableCollector(settings)
    try:
        collector.walk(expr)
        print("Variables read:", len(collector.read))
    except TraversalDepthError as exc:
        print("Walk stopped:", exc)

if __name__ == "__main__":
    main()
