"""
remixr/data_models/structure.py

Data models for bounded structural (DOM-like) tree extraction.
"""

from __future__ import annotations

from typing import Annotated, Any, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PresentationSample(BaseModel):
    """
    Fixed, small sample of computed presentation properties.
    Missing properties stay None; nothing here is the full style computation.
    """
    display: str | None = None
    visibility: str | None = None
    opacity: str | None = None
    position: str | None = None
    width: str | None = None
    height: str | None = None
    color: str | None = None
    background_color: str | None = None
    font_size: str | None = None
    font_family: str | None = None
    font_weight: str | None = None
    z_index: str | None = Field(
        default=None,
        description="Stacking order",
    )
    padding_top: str | None = None
    padding_bottom: str | None = None
    margin_top: str | None = None
    margin_bottom: str | None = None


class Viewport(BaseModel):
    """
    Viewport size in CSS pixels.
    """
    width: int = Field(
        default=1280,
        ge=0,
    )
    height: int = Field(
        default=800,
        ge=0,
    )

    @property
    def area(self) -> int:
        return self.width * self.height


class Geometry(BaseModel):
    """
    Bounding rectangle of a rendered node, in viewport units.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def area(self) -> float:
        return max(self.width, 0.0) * max(self.height, 0.0)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


class TextLeaf(BaseModel):
    """
    A non-empty, trimmed text node.
    """
    type: Literal["text"] = "text"
    content: str = Field(
        ...,
        description="Trimmed text content",
    )


class StructuralNode(BaseModel):
    """
    A serialized element with its attributes, presentation sample, geometry and children.
    """
    type: Literal["element"] = "element"
    tag: str = Field(
        ...,
        description="Lower-cased tag name",
        examples=["div", "button"],
    )
    element_id: str | None = Field(
        default=None,
        description="The element's id attribute, if any",
    )
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Non data-* attributes",
    )
    data_attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Attributes whose name starts with 'data-'",
    )
    class_list: list[str] = Field(
        default_factory=list,
        description="Ordered, de-duplicated class names",
    )
    presentation: PresentationSample = Field(
        default_factory=PresentationSample,
    )
    geometry: Geometry | None = Field(
        default=None,
        description="Bounding rect; None when the node is detached or unmeasurable",
    )
    children: list[StructuralChild] = Field(
        default_factory=list,
    )

    def depth(self) -> int:
        """Depth of the deepest element below this one (this node is depth 0)."""
        child_depths = [
            child.depth() + 1
            for child in self.children
            if isinstance(child, StructuralNode)
        ]
        return max(child_depths, default=0)

    def iter_elements(self) -> Iterator[StructuralNode]:
        """Yield this element and all descendant elements in document order."""
        for element, _ in self.iter_with_ancestors():
            yield element

    def iter_with_ancestors(self) -> Iterator[tuple[StructuralNode, tuple[StructuralNode, ...]]]:
        """
        Yield (element, ancestors) pairs in document order.
        Ancestors are ordered from the root down to the element's parent.
        """
        stack: list[tuple[StructuralNode, tuple[StructuralNode, ...]]] = [(self, ())]
        while stack:
            element, ancestors = stack.pop()
            yield element, ancestors
            lineage = ancestors + (element,)
            for child in reversed(element.children):
                if isinstance(child, StructuralNode):
                    stack.append((child, lineage))

    def text(self, separator: str = " ") -> str:
        """Concatenated text of all descendant text leaves."""
        parts: list[str] = []
        stack: list[Any] = [self]
        while stack:
            current = stack.pop()
            if isinstance(current, TextLeaf):
                parts.append(current.content)
            elif isinstance(current, StructuralNode):
                stack.extend(reversed(current.children))
        return separator.join(parts)

    def has_class_fragment(self, fragment: str) -> bool:
        """Whether any class contains the fragment (like a [class*=...] selector)."""
        return any(fragment in class_name for class_name in self.class_list)

    def get_attribute(self, name: str) -> str | None:
        if name.startswith("data-"):
            return self.data_attributes.get(name)
        return self.attributes.get(name)


# Union of child node types - discriminated by 'type' field
StructuralChild = Annotated[
    Union[
        StructuralNode,
        TextLeaf,
    ],
    Field(discriminator="type"),
]

StructuralNode.model_rebuild()


class StructuralMarkers(BaseModel):
    """
    Marker attributes and class-name conventions collected from a structural tree.
    Live anchor nodes are kept only when markers are collected from a live source.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    attribute_names: frozenset[str] = Field(
        default_factory=frozenset,
        description="All attribute names seen (including data-* attributes)",
    )
    class_names: frozenset[str] = Field(
        default_factory=frozenset,
        description="All class names seen",
    )
    attribute_values: dict[str, tuple[str, ...]] = Field(
        default_factory=dict,
        description="First few values per attribute name of interest",
    )
    anchors: dict[str, Any] = Field(
        default_factory=dict,
        description="Live nodes by anchor key (e.g. '#root', '[data-reactroot]'); excluded from dumps",
        exclude=True,
    )

    def has_attribute(self, name: str) -> bool:
        return name in self.attribute_names

    def has_attribute_prefix(self, prefix: str) -> bool:
        return any(attr_name.startswith(prefix) for attr_name in self.attribute_names)

    def has_class_fragment(self, fragment: str) -> bool:
        return any(fragment in class_name for class_name in self.class_names)

    def first_value(self, attribute_name: str) -> str | None:
        values = self.attribute_values.get(attribute_name)
        return values[0] if values else None
