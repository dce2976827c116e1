from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# ==================================================
# Traversal Errors
# ==================================================


@dataclass(slots=True)
class TraversalErrorDetails:
    """
    Structured metadata attached to every traversal error.
    """

    kind: str | None
    node_type: str
    field: str | None
    message: str


class TraversalError(Exception):
    """
    Base traversal error type. Raised errors abort the whole walk.
    """

    def __init__(self, details: TraversalErrorDetails, node: Any = None) -> None:
        self.details = details
        self.node = node
        super().__init__(f"[{details.node_type}] {self.__class__.__name__}: {details.message}")


class UnknownKindError(TraversalError):
    """
    The dispatcher observed a tag outside the closed kind set.
    """


class NullChildError(TraversalError):
    """
    A required child reference is absent.
    """


class TraversalDepthError(TraversalError):
    """
    The walk nested deeper than the configured maximum depth.
    """


UnknownKind = UnknownKindError
NullChild = NullChildError


def _describe_kind(node: Any) -> str | None:
    kind = getattr(node, "kind", None)
    if kind is None:
        return None
    return str(getattr(kind, "value", kind))


def unknown_kind_error(node: Any) -> UnknownKindError:
    """
    Builds an UnknownKindError identifying the offending node.
    """
    kind = _describe_kind(node)
    if node is None:
        message = "cannot walk None; expected an AST node"
    elif kind is None:
        message = f"node {node!r} carries no kind tag"
    else:
        message = f"unrecognized node kind {kind!r}"
    details = TraversalErrorDetails(
        kind=kind,
        node_type=type(node).__name__,
        field=None,
        message=message,
    )
    return UnknownKindError(details, node)


def null_child_error(node: Any, field: str) -> NullChildError:
    """
    Builds a NullChildError naming the missing child field of `node`.
    """
    kind = _describe_kind(node)
    details = TraversalErrorDetails(
        kind=kind,
        node_type=type(node).__name__,
        field=field,
        message=f"required child '{field}' of {kind} node is absent",
    )
    return NullChildError(details, node)


def depth_error(node: Any, max_depth: int) -> TraversalDepthError:
    details = TraversalErrorDetails(
        kind=_describe_kind(node),
        node_type=type(node).__name__,
        field=None,
        message=f"maximum traversal depth of {max_depth} exceeded",
    )
    return TraversalDepthError(details, node)


def recursion_depth_error(node: Any, depth: int) -> TraversalDepthError:
    """
    Builds a TraversalDepthError for a walk that exhausted the interpreter stack at `node`.
    """
    details = TraversalErrorDetails(
        kind=_describe_kind(node),
        node_type=type(node).__name__,
        field=None,
        message=f"interpreter recursion limit reached at traversal depth {depth}",
    )
    return TraversalDepthError(details, node)
