from astwalk.traversal.visitor_pattern import DISPATCH_TABLE, Visitor
from astwalk.traversal.settings import WalkSettings
from astwalk.traversal.observability import (
    InMemoryEventRecorder,
    ObservabilitySettings,
    TraversalEvent,
    compose_event_observers,
    make_json_event_logger,
    traversal_event_to_dict,
)
from astwalk.traversal.errors import (
    TraversalError,
    TraversalErrorDetails,
    UnknownKindError,
    NullChildError,
    TraversalDepthError,
    UnknownKind,
    NullChild,
)

__all__ = [
    "DISPATCH_TABLE",
    "Visitor",
    "WalkSettings",
    "InMemoryEventRecorder",
    "ObservabilitySettings",
    "TraversalEvent",
    "compose_event_observers",
    "make_json_event_logger",
    "traversal_event_to_dict",
    "TraversalError",
    "TraversalErrorDetails",
    "UnknownKindError",
    "NullChildError",
    "TraversalDepthError",
    "UnknownKind",
    "NullChild",
]
