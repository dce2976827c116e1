import logging

from astwalk.abstract_syntax_tree.models import AddNode, IntegerNode, MulNode
from astwalk.passes import KindRecorder
from astwalk.traversal.observability import (
    InMemoryEventRecorder,
    ObservabilitySettings,
    compose_event_observers,
    make_json_event_logger,
)
from astwalk.traversal.settings import WalkSettings

events_logger = logging.getLogger("astwalk.events")
events_logger.setLevel(logging.INFO)
events_logger.addHandler(logging.StreamHandler())

recorder = InMemoryEventRecorder()
settings = WalkSettings(
    observability=ObservabilitySettings(
        event_observer=compose_event_observers(
            recorder,
            make_json_event_logger(logger=events_logger),
        ),
        metadata={"service": "astwalk-sample"},
    )
)

tree = AddNode(lhs=MulNode(lhs=IntegerNode(value=1), rhs=IntegerNode(value=2)), rhs=IntegerNode(value=3))
visitor = KindRecorder(settings)
visitor.walk(tree)

print("Pre-order kinds:", [kind.value for kind in visitor.kinds])
print("Events recorded:", len(recorder.events))
