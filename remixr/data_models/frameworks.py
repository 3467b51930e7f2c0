"""
remixr/data_models/frameworks.py

Data models for framework fingerprinting results.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ComponentNode(BaseModel):
    """
    Best-effort component tree node recovered from a framework's internal state.
    Only primitive props/data are kept; functions and objects are elided.
    """
    component_name: str = Field(
        ...,
        description="Component display name",
        examples=["App", "Header", "div"],
    )
    props: dict[str, str | int | float | bool | None] = Field(
        default_factory=dict,
        description="Shallow primitive props or data",
    )
    children: list[ComponentNode] = Field(
        default_factory=list,
    )

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return 1 + sum(child.size() for child in self.children)


ComponentNode.model_rebuild()


class FrameworkMatch(BaseModel):
    """
    One matched framework signature.
    """
    name: str = Field(
        ...,
        description="Signature name",
        examples=["React", "Vue", "jQuery"],
    )
    version: str | None = Field(
        default=None,
        description="Detected version, if extractable",
    )


class FrameworkDetection(BaseModel):
    """
    Result of matching the environment against all configured signatures.
    """
    matched: list[FrameworkMatch] = Field(
        default_factory=list,
    )
    component_trees: dict[str, ComponentNode | None] = Field(
        default_factory=dict,
        description="Framework name -> component tree; None when internal state was not available",
    )

    @property
    def names(self) -> list[str]:
        return [match.name for match in self.matched]
