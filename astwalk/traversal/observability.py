from dataclasses import dataclass, field
from datetime import datetime, timezone
import json
import logging
from typing import Any, Callable, Mapping

# ==================================================
# Observability Types
# ==================================================

EventObserveHook = Callable[["TraversalEvent"], None]

NODE_ENTER = "node.enter"
NODE_EXIT = "node.exit"
NODE_ERROR = "node.error"


@dataclass(frozen=True)
class ObservabilitySettings:
    """
    Traversal observability settings.
    """

    event_observer: EventObserveHook | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TraversalEvent:
    """
    Structured per-node traversal event payload.
    """

    timestamp: str
    event: str
    kind: str | None
    node_type: str
    depth: int
    visitor: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    error_type: str | None = None
    error_message: str | None = None


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def traversal_event_to_dict(event: TraversalEvent) -> dict[str, Any]:
    """
    Converts a TraversalEvent dataclass into a JSON-safe dictionary.
    """

    return {
        "timestamp": event.timestamp,
        "event": event.event,
        "kind": event.kind,
        "node_type": event.node_type,
        "depth": event.depth,
        "visitor": event.visitor,
        "metadata": dict(event.metadata),
        "error_type": event.error_type,
        "error_message": event.error_message,
    }


def make_json_event_logger(
    *,
    logger: logging.Logger,
    level: int = logging.INFO,
) -> EventObserveHook:
    """
    Builds an EventObserveHook that emits one JSON log line per TraversalEvent.
    """

    def _log_event(event: TraversalEvent) -> None:
        payload = traversal_event_to_dict(event)
        logger.log(level, json.dumps(payload, separators=(",", ":"), sort_keys=True))

    return _log_event


def compose_event_observers(*observers: EventObserveHook) -> EventObserveHook:
    """
    Composes multiple event observers into a single observer.
    """

    def _composed(event: TraversalEvent) -> None:
        for observer in observers:
            observer(event)

    return _composed


class InMemoryEventRecorder:
    """
    Collects traversal events in memory, mostly for tests and debugging.
    """

    def __init__(self) -> None:
        self.events: list[TraversalEvent] = []

    def __call__(self, event: TraversalEvent) -> None:
        self.events.append(event)

    def kinds(self, event: str = NODE_ENTER) -> list[str | None]:
        return [item.kind for item in self.events if item.event == event]

    def clear(self) -> None:
        self.events.clear()
