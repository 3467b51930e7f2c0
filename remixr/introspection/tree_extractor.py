"""
remixr/introspection/tree_extractor.py

Bounded serialization of a hierarchical structural tree (tag, attributes,
presentation sample, geometry, children), plus collection of the marker
attributes and class-name conventions used by framework fingerprinting.
"""

from __future__ import annotations

from typing import Any, ClassVar

from remixr.config import Config
from remixr.data_models.structure import (
    Geometry,
    PresentationSample,
    StructuralMarkers,
    StructuralNode,
    TextLeaf,
)
from remixr.introspection.node_adapters import ELEMENT_NODE, TEXT_NODE, StructuralSource
from remixr.utils.exceptions import validate_budget
from remixr.utils.logger import get_logger

logger = get_logger(name=__name__)

DATA_ATTRIBUTE_PREFIX = "data-"


class TreeExtractor:
    """
    Depth-bounded structural tree extractor.
    Every read from the source is guarded; one unreadable node never aborts its siblings.
    """

    # Class attributes _____________________________________________________________________________________________________

    # presentation sample field -> CSS property
    PRESENTATION_PROPERTIES: ClassVar[dict[str, str]] = {
        "display": "display",
        "visibility": "visibility",
        "opacity": "opacity",
        "position": "position",
        "width": "width",
        "height": "height",
        "color": "color",
        "background_color": "background-color",
        "font_size": "font-size",
        "font_family": "font-family",
        "font_weight": "font-weight",
        "z_index": "z-index",
        "padding_top": "padding-top",
        "padding_bottom": "padding-bottom",
        "margin_top": "margin-top",
        "margin_bottom": "margin-bottom",
    }

    # attributes whose values are kept for fingerprinting
    MARKER_VALUE_ATTRIBUTES: ClassVar[frozenset[str]] = frozenset({
        "ng-version", "ng-app", "data-reactroot", "data-v-app", "data-server-rendered",
    })
    MARKER_VALUES_PER_ATTRIBUTE: ClassVar[int] = 3


    # Magic methods ________________________________________________________________________________________________________

    def __init__(self, max_depth: int = Config.TREE_MAX_DEPTH) -> None:
        """
        Initialize TreeExtractor.
        Args:
            max_depth: Elements deeper than this are dropped (the root is depth 0).
        Raises:
            InvalidBudgetError: If max_depth is negative.
        """
        self.max_depth = validate_budget("max_depth", max_depth)
        self._visited: dict[int, Any] = {}
        self._attribute_names: set[str] = set()
        self._class_names: set[str] = set()
        self._attribute_values: dict[str, list[str]] = {}
        self._anchors: dict[str, Any] = {}


    # Static methods _______________________________________________________________________________________________________

    @staticmethod
    def _read_geometry(source: StructuralSource) -> Geometry | None:
        """Best-effort bounding rect; detached or unmeasurable nodes yield None."""
        try:
            rect = source.bounding_rect()
        except Exception:
            return None
        if rect is None:
            return None
        if rect.width == 0 and rect.height == 0 and rect.x == 0 and rect.y == 0:
            # a zero rect at the origin is what detached and display:none nodes report
            return None
        return rect


    # Private methods ______________________________________________________________________________________________________

    def _read_presentation(self, source: StructuralSource) -> PresentationSample:
        try:
            style = source.computed_style() or {}
        except Exception as e:
            logger.debug("Style sample unavailable for %r: %s", source, e)
            return PresentationSample()
        sample: dict[str, str] = {}
        for field_name, css_property in self.PRESENTATION_PROPERTIES.items():
            try:
                value = style.get(css_property)
            except Exception:
                continue
            if value is not None:
                sample[field_name] = str(value)
        return PresentationSample(**sample)

    def _record_markers(self, attributes: dict[str, str], class_list: list[str], live_node: Any) -> None:
        self._attribute_names.update(attributes)
        self._class_names.update(class_list)
        for name in self.MARKER_VALUE_ATTRIBUTES.intersection(attributes):
            values = self._attribute_values.setdefault(name, [])
            if len(values) < self.MARKER_VALUES_PER_ATTRIBUTE:
                values.append(attributes[name])

        anchor_keys: list[str] = []
        element_id = attributes.get("id")
        if element_id in ("root", "app", "__next", "__nuxt"):
            anchor_keys.append(f"#{element_id}")
        for marker_attribute in ("data-reactroot", "data-v-app", "ng-version"):
            if marker_attribute in attributes:
                anchor_keys.append(f"[{marker_attribute}]")
        for anchor_key in anchor_keys:
            # first match in document order wins, like querySelector
            self._anchors.setdefault(anchor_key, live_node)

    def _extract_node(self, source: StructuralSource, depth: int) -> StructuralNode | TextLeaf | None:
        if depth > self.max_depth:
            return None

        try:
            node_type = source.node_type
        except Exception:
            return None

        if node_type == TEXT_NODE:
            try:
                text = (source.text_content or "").strip()
            except Exception:
                return None
            return TextLeaf(content=text) if text else None

        if node_type != ELEMENT_NODE:
            return None

        try:
            live_node = source.live_node
        except Exception:
            live_node = source
        if id(live_node) in self._visited:
            return None
        self._visited[id(live_node)] = live_node

        try:
            tag = (source.tag_name or "unknown").lower()
        except Exception:
            tag = "unknown"

        attributes: dict[str, str] = {}
        data_attributes: dict[str, str] = {}
        try:
            raw_attributes = dict(source.attributes or {})
        except Exception as e:
            logger.debug("Attributes unavailable for <%s>: %s", tag, e)
            raw_attributes = {}
        for name, value in raw_attributes.items():
            name = str(name)
            if name.startswith(DATA_ATTRIBUTE_PREFIX):
                data_attributes[name] = str(value)
            else:
                attributes[name] = str(value)

        class_list = list(dict.fromkeys(attributes.get("class", "").split()))
        self._record_markers({**attributes, **data_attributes}, class_list, live_node)

        node = StructuralNode(
            tag=tag,
            element_id=attributes.get("id") or None,
            attributes=attributes,
            data_attributes=data_attributes,
            class_list=class_list,
            presentation=self._read_presentation(source),
            geometry=self._read_geometry(source),
        )

        if depth == self.max_depth:
            return node

        try:
            children = list(source.child_nodes or [])
        except Exception as e:
            logger.debug("Children unavailable for <%s>: %s", tag, e)
            children = []
        for child in children:
            try:
                serialized = self._extract_node(child, depth + 1)
            except Exception as e:
                logger.debug("Skipping unreadable child of <%s>: %s", tag, e)
                continue
            if serialized is not None:
                node.children.append(serialized)
        return node


    # Public methods _______________________________________________________________________________________________________

    def run(self, root: StructuralSource) -> StructuralNode | None:
        """
        Extract the tree below root. Marker state is reset per run.
        Args:
            root: Root node of the structural tree (usually the document element).
        Returns:
            The root StructuralNode, or None when the root is not an element.
        """
        self._visited = {}
        self._attribute_names = set()
        self._class_names = set()
        self._attribute_values = {}
        self._anchors = {}
        try:
            result = self._extract_node(root, depth=0)
        except Exception as e:
            logger.warning("Structural tree root could not be read: %s", e)
            return None
        finally:
            self._visited = {}
        return result if isinstance(result, StructuralNode) else None

    @property
    def markers(self) -> StructuralMarkers:
        """Markers collected by the last run, including live anchor nodes."""
        return StructuralMarkers(
            attribute_names=frozenset(self._attribute_names),
            class_names=frozenset(self._class_names),
            attribute_values={name: tuple(values) for name, values in self._attribute_values.items()},
            anchors=dict(self._anchors),
        )


def extract_tree(root: StructuralSource, max_depth: int = Config.TREE_MAX_DEPTH) -> StructuralNode | None:
    """
    Bounded serialization of a structural tree.
    Args:
        root: Root node (a StructuralSource, e.g. DictNodeAdapter or SoupNodeAdapter).
        max_depth: Maximum element depth (root is depth 0); default 10.
    Returns:
        The root StructuralNode, or None when the root is not an element.
    Raises:
        InvalidBudgetError: If max_depth is negative.
    """
    return TreeExtractor(max_depth=max_depth).run(root)


def extract_tree_with_markers(
    root: StructuralSource,
    max_depth: int = Config.TREE_MAX_DEPTH,
) -> tuple[StructuralNode | None, StructuralMarkers]:
    """
    Extract the structural tree and the fingerprinting markers in a single walk.
    Returns:
        (tree, markers); markers carry live anchor nodes for internal-state readers.
    """
    extractor = TreeExtractor(max_depth=max_depth)
    tree = extractor.run(root)
    return tree, extractor.markers


def collect_structural_markers(root: StructuralSource, max_depth: int = Config.TREE_MAX_DEPTH) -> StructuralMarkers:
    """Marker attributes, class names and live anchors found within max_depth of root."""
    return extract_tree_with_markers(root, max_depth=max_depth)[1]


def markers_from_tree(tree: StructuralNode | None) -> StructuralMarkers:
    """
    Collect markers from an already serialized tree. No live anchors are available.
    """
    if tree is None:
        return StructuralMarkers()
    attribute_names: set[str] = set()
    class_names: set[str] = set()
    attribute_values: dict[str, list[str]] = {}
    for element in tree.iter_elements():
        attributes = {**element.attributes, **element.data_attributes}
        attribute_names.update(attributes)
        class_names.update(element.class_list)
        for name in TreeExtractor.MARKER_VALUE_ATTRIBUTES.intersection(attributes):
            values = attribute_values.setdefault(name, [])
            if len(values) < TreeExtractor.MARKER_VALUES_PER_ATTRIBUTE:
                values.append(attributes[name])
    return StructuralMarkers(
        attribute_names=frozenset(attribute_names),
        class_names=frozenset(class_names),
        attribute_values={name: tuple(values) for name, values in attribute_values.items()},
    )


def collect_text(tree: StructuralNode | None) -> str:
    """Raw page text: all text leaves joined by newlines."""
    return tree.text(separator="\n") if tree is not None else ""
