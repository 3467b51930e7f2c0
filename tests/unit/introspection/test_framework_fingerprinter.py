"""
tests/unit/introspection/test_framework_fingerprinter.py

Unit tests for framework signatures and internal-state adapters.
"""

from types import SimpleNamespace
from typing import Any

from remixr.data_models.structure import StructuralMarkers
from remixr.introspection.framework_fingerprinter import (
    COMPONENT_TREE_MAX_DEPTH,
    SIGNATURES,
    AbstractSignature,
    ReactSignature,
    VueSignature,
    detect_frameworks,
)
from remixr.introspection.node_adapters import DictNodeAdapter
from remixr.introspection.tree_extractor import extract_tree_with_markers


def fiber(name: Any, props: dict | None = None, children: list | None = None) -> SimpleNamespace:
    """Build a fiber node linked through child/sibling pointers."""
    node = SimpleNamespace(type=name, memoizedProps=props or {}, child=None, sibling=None)
    previous = None
    for child in children or []:
        if previous is None:
            node.child = child
        else:
            previous.sibling = child
        previous = child
    return node


class RaisingMarkers(StructuralMarkers):
    def has_attribute(self, name: str) -> bool:
        raise RuntimeError("markers unavailable")


class TestSignatureRegistry:
    """Test cases for the signature table."""

    def test_all_signatures_registered_once(self) -> None:
        names = [signature.name for signature in SIGNATURES]
        assert names == [
            "React", "Vue", "Angular", "jQuery", "Svelte", "Next.js", "Nuxt.js", "Redux", "Vuex", "MobX",
        ]

    def test_signatures_are_abstract_subclasses(self) -> None:
        assert all(isinstance(signature, AbstractSignature) for signature in SIGNATURES)


class TestDetectFrameworks:
    """Test cases for detect_frameworks."""

    def test_nothing_detected(self) -> None:
        detection = detect_frameworks({}, StructuralMarkers())
        assert detection.matched == []
        assert detection.component_trees == {}

    def test_react_from_global_with_version(self) -> None:
        detection = detect_frameworks({"React": SimpleNamespace(version="18.2.0")})

        assert detection.names == ["React"]
        assert detection.matched[0].version == "18.2.0"
        assert detection.component_trees == {"React": None}

    def test_vue_from_scoped_attribute(self) -> None:
        markers = StructuralMarkers(attribute_names=frozenset({"data-v-7ba5bd90"}))
        detection = detect_frameworks({}, markers)

        assert detection.names == ["Vue"]
        assert detection.matched[0].version is None

    def test_angular_version_from_marker(self) -> None:
        markers = StructuralMarkers(
            attribute_names=frozenset({"ng-version"}),
            attribute_values={"ng-version": ("17.3.1",)},
        )
        detection = detect_frameworks({}, markers)
        assert [(m.name, m.version) for m in detection.matched] == [("Angular", "17.3.1")]

    def test_jquery_version(self) -> None:
        jquery = SimpleNamespace(fn=SimpleNamespace(jquery="3.7.1"))
        detection = detect_frameworks({"$": jquery})
        assert [(m.name, m.version) for m in detection.matched] == [("jQuery", "3.7.1")]

    def test_svelte_from_class(self) -> None:
        markers = StructuralMarkers(class_names=frozenset({"svelte-1xyz9"}))
        assert detect_frameworks({}, markers).names == ["Svelte"]

    def test_meta_frameworks_and_state_management(self) -> None:
        symbols = {
            "__NEXT_DATA__": {"page": "/"},
            "__NUXT__": {},
            "__REDUX_DEVTOOLS_EXTENSION__": object(),
            "$store": object(),
            "__mobxGlobal": object(),
        }
        assert detect_frameworks(symbols).names == ["Next.js", "Nuxt.js", "Redux", "Vuex", "MobX"]

    def test_monotonic_in_inputs(self) -> None:
        """Adding symbols or markers never removes a match."""
        base_symbols = {"React": SimpleNamespace(version="18")}
        base_markers = StructuralMarkers(class_names=frozenset({"svelte-1"}))
        base = set(detect_frameworks(base_symbols, base_markers).names)

        richer = set(detect_frameworks(
            {**base_symbols, "Vue": SimpleNamespace(version="2.7")},
            StructuralMarkers(class_names=frozenset({"svelte-1", "x"}), attribute_names=frozenset({"ng-app"})),
        ).names)

        assert base <= richer
        assert {"Vue", "Angular"} <= richer

    def test_raising_symbol_table_is_no_match(self) -> None:
        """Symbol reads that raise count as absent."""
        class CrossOriginWindow(dict):
            def __getitem__(self, key):
                raise PermissionError("blocked")

        detection = detect_frameworks(CrossOriginWindow(React=1), StructuralMarkers(class_names=frozenset({"svelte-a"})))
        assert detection.names == ["Svelte"]

    def test_raising_predicate_is_no_match(self) -> None:
        """A predicate that raises does not affect other signatures."""
        markers = RaisingMarkers(class_names=frozenset({"svelte-a"}))
        detection = detect_frameworks({"React": SimpleNamespace(version="18")}, markers)
        assert "Svelte" in detection.names

    def test_version_failure_is_isolated(self) -> None:
        """A raising version getter yields None without dropping the match."""
        class ExplodingReact:
            @property
            def version(self) -> str:
                raise RuntimeError("nope")

        detection = detect_frameworks({"React": ExplodingReact()})
        assert detection.names == ["React"]
        assert detection.matched[0].version is None


class TestReactInternalState:
    """Test cases for the React fiber adapter."""

    def test_fiber_walk_from_live_root(self) -> None:
        """Component names and primitive props are recovered from the fiber tree."""
        def Header():
            return None

        root_fiber = fiber(
            SimpleNamespace(name="App"),
            props={"title": "Shop", "onClick": print, "config": {"a": 1}, "count": 3},
            children=[fiber(Header, props={"sticky": True}), fiber("div", props={"className": "main"})],
        )
        container = {"nodeType": 1, "tagName": "DIV", "attributes": {"id": "root"}}
        container["_reactRootContainer"] = SimpleNamespace(_internalRoot=SimpleNamespace(current=root_fiber))

        _, markers = extract_tree_with_markers(DictNodeAdapter({"nodeType": 1, "tagName": "BODY", "children": [container]}))
        detection = detect_frameworks({"React": SimpleNamespace(version="17.0.2")}, markers)

        tree = detection.component_trees["React"]
        assert tree is not None
        assert tree.component_name == "App"
        assert tree.props == {"title": "Shop", "count": 3}
        assert [child.component_name for child in tree.children] == ["Header", "div"]
        assert tree.children[0].props == {"sticky": True}

    def test_react_18_container_key(self) -> None:
        container = {"__reactContainer$abc123": fiber("main")}
        markers = StructuralMarkers(attribute_names=frozenset({"data-reactroot"}), anchors={"#root": container})
        tree = ReactSignature().extract_internal_state({}, markers)
        assert tree.component_name == "main"

    def test_fiber_walk_bounded_and_cycle_safe(self) -> None:
        """A cyclic, very deep fiber chain terminates within the depth budget."""
        nodes = [fiber(f"C{i}") for i in range(20)]
        for parent, child in zip(nodes, nodes[1:]):
            parent.child = child
        nodes[-1].child = nodes[0]
        nodes[3].sibling = nodes[3]

        markers = StructuralMarkers(anchors={"#root": {"_reactInternalFiber": nodes[0]}})
        tree = ReactSignature().extract_internal_state({}, markers)

        depth = 0
        current = tree
        while current.children:
            current = current.children[0]
            depth += 1
        assert depth == COMPONENT_TREE_MAX_DEPTH

    def test_no_anchor_yields_none(self) -> None:
        assert ReactSignature().extract_internal_state({}, StructuralMarkers()) is None


class TestVueInternalState:
    """Test cases for the Vue 2 instance adapter."""

    def test_instance_walk(self) -> None:
        child = SimpleNamespace(**{
            "$options": {"_componentTag": "todo-item"},
            "$data": {"done": False, "_uid": 4},
            "$children": [],
        })
        root = SimpleNamespace(**{
            "$options": {"name": "App"},
            "$data": {"title": "Todos", "items": [1, 2], "_private": 1, "save": print},
            "$children": [child],
        })
        markers = StructuralMarkers(anchors={"#app": {"__vue__": root}})

        tree = VueSignature().extract_internal_state({}, markers)

        assert tree.component_name == "App"
        assert tree.props == {"title": "Todos"}
        assert tree.children[0].component_name == "todo-item"
        assert tree.children[0].props == {"done": False}

    def test_anonymous_component(self) -> None:
        markers = StructuralMarkers(anchors={"#app": {"__vue__": SimpleNamespace()}})
        tree = VueSignature().extract_internal_state({}, markers)
        assert tree.component_name == "Anonymous"
        assert tree.children == []
