"""
remixr/introspection/node_adapters.py

Structural tree providers.

The extractor only talks to the StructuralSource protocol. Two providers ship here:
- DictNodeAdapter: a JSON DOM capture produced by a browser-side script (CDP, Playwright, extension).
- SoupNodeAdapter: a BeautifulSoup element parsed from static HTML; inline styles only, no geometry.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Protocol, runtime_checkable

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from remixr.data_models.structure import Geometry

ELEMENT_NODE = "element"
TEXT_NODE = "text"
OTHER_NODE = "other"


@runtime_checkable
class StructuralSource(Protocol):
    """
    A live node of a hierarchical UI tree. Any member may raise; the extractor guards every read.
    """

    @property
    def node_type(self) -> str: ...

    @property
    def tag_name(self) -> str | None: ...

    @property
    def attributes(self) -> Mapping[str, str]: ...

    @property
    def child_nodes(self) -> Sequence[StructuralSource]: ...

    @property
    def text_content(self) -> str | None: ...

    @property
    def live_node(self) -> Any: ...

    def computed_style(self) -> Mapping[str, str]: ...

    def bounding_rect(self) -> Geometry | None: ...


def kebab_case(name: str) -> str:
    """backgroundColor, background_color -> background-color"""
    return re.sub(r"(?<!^)([A-Z])", r"-\1", name).replace("_", "-").lower()


def parse_inline_style(style: str | None) -> dict[str, str]:
    """
    Parse an inline style attribute into kebab-case property -> value.
    Expands the padding/margin shorthands into their top/bottom longhands and
    reads a plain color out of the background shorthand.
    """
    declarations: dict[str, str] = {}
    if not style:
        return declarations
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        prop = prop.strip().lower()
        value = value.replace("!important", "").strip()
        if not prop or not value:
            continue
        if prop in ("padding", "margin"):
            parts = value.split()
            top = parts[0]
            bottom = parts[2] if len(parts) >= 3 else parts[0]
            declarations[f"{prop}-top"] = top
            declarations[f"{prop}-bottom"] = bottom
        elif prop == "background":
            declarations.setdefault("background-color", value.split()[0] if "(" not in value else value)
        declarations[prop] = value
    return declarations


class DictNodeAdapter:
    """
    Adapter over a JSON DOM capture node.
    Accepts camelCase or kebab-case keys; unknown shapes degrade to OTHER_NODE rather than raising.
    """

    CHILD_KEYS: ClassVar[tuple[str, ...]] = ("children", "childNodes")
    STYLE_KEYS: ClassVar[tuple[str, ...]] = ("computedStyle", "computed_style", "presentation", "style")
    RECT_KEYS: ClassVar[tuple[str, ...]] = ("boundingBox", "bounding_box", "rect", "geometry")

    def __init__(self, data: Mapping[str, Any]) -> None:
        self.data = data

    def __repr__(self) -> str:
        return f"DictNodeAdapter(tag={self.tag_name!r})"

    @property
    def node_type(self) -> str:
        node_type = self.data.get("nodeType")
        if node_type == 1:
            return ELEMENT_NODE
        if node_type == 3:
            return TEXT_NODE
        if node_type is not None:
            return OTHER_NODE
        if self.data.get("type") == "text":
            return TEXT_NODE
        if self.data.get("tag") or self.data.get("tagName"):
            return ELEMENT_NODE
        return OTHER_NODE

    @property
    def tag_name(self) -> str | None:
        tag = self.data.get("tagName") or self.data.get("tag")
        return str(tag).lower() if tag else None

    @property
    def attributes(self) -> Mapping[str, str]:
        attributes = dict(self.data.get("attributes") or {})
        attributes.update(self.data.get("dataAttributes") or self.data.get("data_attributes") or {})
        classes = self.data.get("classes") or self.data.get("class_list")
        if classes and "class" not in attributes:
            attributes["class"] = " ".join(classes)
        element_id = self.data.get("id") or self.data.get("element_id")
        if element_id and "id" not in attributes:
            attributes["id"] = element_id
        return {str(k): "" if v is None else str(v) for k, v in attributes.items()}

    @property
    def child_nodes(self) -> Sequence[DictNodeAdapter]:
        for key in self.CHILD_KEYS:
            children = self.data.get(key)
            if children:
                return [DictNodeAdapter(child) for child in children if isinstance(child, Mapping)]
        return []

    @property
    def text_content(self) -> str | None:
        for key in ("textContent", "content", "text"):
            value = self.data.get(key)
            if isinstance(value, str):
                return value
        return None

    @property
    def live_node(self) -> Any:
        return self.data

    def computed_style(self) -> Mapping[str, str]:
        for key in self.STYLE_KEYS:
            style = self.data.get(key)
            if isinstance(style, Mapping):
                return {kebab_case(str(k)): str(v) for k, v in style.items() if v is not None}
            if isinstance(style, str):
                return parse_inline_style(style)
        return {}

    def bounding_rect(self) -> Geometry | None:
        for key in self.RECT_KEYS:
            rect = self.data.get(key)
            if isinstance(rect, Mapping):
                return Geometry(
                    x=float(rect.get("x", rect.get("left", 0.0)) or 0.0),
                    y=float(rect.get("y", rect.get("top", 0.0)) or 0.0),
                    width=float(rect.get("width", 0.0) or 0.0),
                    height=float(rect.get("height", 0.0) or 0.0),
                )
        return None


class SoupNodeAdapter:
    """
    Adapter over a BeautifulSoup node.
    Only inline styles are known and nothing is measurable, so geometry is always absent.
    """

    # text inside these elements is never rendered as page text
    NON_VISIBLE_TAGS: ClassVar[frozenset[str]] = frozenset({"script", "style", "noscript", "template", "head", "title", "meta"})

    def __init__(self, node: Any) -> None:
        self.node = node

    def __repr__(self) -> str:
        return f"SoupNodeAdapter(tag={self.tag_name!r})"

    @property
    def node_type(self) -> str:
        if isinstance(self.node, Tag):
            return ELEMENT_NODE
        if isinstance(self.node, Comment):
            return OTHER_NODE
        if isinstance(self.node, NavigableString):
            parent = self.node.parent
            if parent is not None and parent.name in self.NON_VISIBLE_TAGS:
                return OTHER_NODE
            # Doctype, CData and friends subclass NavigableString too
            return TEXT_NODE if type(self.node) is NavigableString else OTHER_NODE
        return OTHER_NODE

    @property
    def tag_name(self) -> str | None:
        return self.node.name.lower() if isinstance(self.node, Tag) and self.node.name else None

    @property
    def attributes(self) -> Mapping[str, str]:
        if not isinstance(self.node, Tag):
            return {}
        return {
            name: " ".join(value) if isinstance(value, list) else str(value)
            for name, value in self.node.attrs.items()
        }

    @property
    def child_nodes(self) -> Sequence[SoupNodeAdapter]:
        if not isinstance(self.node, Tag):
            return []
        return [SoupNodeAdapter(child) for child in self.node.children]

    @property
    def text_content(self) -> str | None:
        return str(self.node) if isinstance(self.node, NavigableString) else None

    @property
    def live_node(self) -> Any:
        return self.node

    def computed_style(self) -> Mapping[str, str]:
        if not isinstance(self.node, Tag):
            return {}
        return parse_inline_style(self.node.get("style"))

    def bounding_rect(self) -> Geometry | None:
        return None


def soup_root_from_html(html: str) -> SoupNodeAdapter:
    """
    Parse static HTML and return an adapter over its root element (<html> when present).
    """
    soup = BeautifulSoup(html, "html.parser")
    root = soup.find("html") or soup.find(True) or soup
    return SoupNodeAdapter(root)
