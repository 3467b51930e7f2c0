"""
remixr/data_models/snapshot.py

Data models for bounded object-graph snapshots.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class SnapshotNodeType(StrEnum):
    """
    Discriminator for snapshot node variants.
    """
    PRIMITIVE = "primitive"
    CALLABLE = "callable"
    COMPOSITE = "composite"
    SENTINEL = "sentinel"


class SentinelKind(StrEnum):
    """
    Reason a node was not expanded.
    """
    MAX_DEPTH = "max_depth"
    CIRCULAR = "circular"
    ACCESS_ERROR = "access_error"


class PrimitiveSnapshot(BaseModel):
    """
    A leaf value copied as-is (str, int, float, bool, None) or a short repr of an opaque leaf.
    """
    type: Literal[SnapshotNodeType.PRIMITIVE] = SnapshotNodeType.PRIMITIVE
    value: str | int | float | bool | None = Field(
        default=None,
        description="The primitive value",
    )

    def depth(self) -> int:
        return 0


class CallableSnapshot(BaseModel):
    """
    Summary of a function, method or class. Closures are not expanded.
    """
    type: Literal[SnapshotNodeType.CALLABLE] = SnapshotNodeType.CALLABLE
    name: str = Field(
        default="anonymous",
        description="The callable's name",
    )
    arity: int | None = Field(
        default=None,
        description="Number of declared positional parameters, if introspectable",
    )
    signature_prefix: str = Field(
        default="",
        description="Short, truncated signature text",
    )

    def depth(self) -> int:
        return 0


class CompositeSnapshot(BaseModel):
    """
    An expanded container: mapping, sequence or object with fields.
    """
    type: Literal[SnapshotNodeType.COMPOSITE] = SnapshotNodeType.COMPOSITE
    container: str = Field(
        default="object",
        description="Type name of the expanded value",
        examples=["dict", "list", "SimpleNamespace"],
    )
    entries: dict[str, SnapshotNode] = Field(
        default_factory=dict,
        description="Child key -> snapshot node, in enumeration order",
    )
    truncated: bool = Field(
        default=False,
        description="Whether keys beyond max_breadth were dropped",
    )

    def depth(self) -> int:
        """Nesting depth of composites below (and including) this node, sentinels excluded."""
        child_depths = [
            child.depth() + 1
            for child in self.entries.values()
            if isinstance(child, CompositeSnapshot)
        ]
        return max(child_depths, default=0)


class SentinelSnapshot(BaseModel):
    """
    Placeholder for a node that could not be safely expanded.
    """
    type: Literal[SnapshotNodeType.SENTINEL] = SnapshotNodeType.SENTINEL
    sentinel: SentinelKind = Field(
        ...,
        description="Why the node was not expanded",
    )
    detail: str | None = Field(
        default=None,
        description="Error message for access errors",
    )

    def depth(self) -> int:
        return 0


# Union of all snapshot node types - discriminated by 'type' field
SnapshotNode = Annotated[
    Union[
        PrimitiveSnapshot,
        CallableSnapshot,
        CompositeSnapshot,
        SentinelSnapshot,
    ],
    Field(discriminator="type"),
]

CompositeSnapshot.model_rebuild()


def iter_sentinels(node: Any) -> list[SentinelSnapshot]:
    """
    Collect all sentinel nodes in a snapshot tree.
    Args:
        node: Root snapshot node.
    Returns:
        Sentinels in depth-first order.
    """
    found: list[SentinelSnapshot] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, SentinelSnapshot):
            found.append(current)
        elif isinstance(current, CompositeSnapshot):
            stack.extend(reversed(list(current.entries.values())))
    return found
