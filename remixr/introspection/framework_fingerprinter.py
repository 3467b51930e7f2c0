"""
remixr/introspection/framework_fingerprinter.py

Framework fingerprinting against a symbol table and structural markers.

Each signature is evaluated independently; a predicate that raises counts as
no match. Version and internal-state extraction are independent of each other
and any failure yields None.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from remixr.data_models.frameworks import ComponentNode, FrameworkDetection, FrameworkMatch
from remixr.data_models.structure import StructuralMarkers
from remixr.utils.logger import get_logger

logger = get_logger(name=__name__)

COMPONENT_TREE_MAX_DEPTH = 5
COMPONENT_TREE_MAX_BREADTH = 50
PRIMITIVE_PROP_TYPES: tuple[type, ...] = (str, int, float, bool, type(None))


def _lookup(symbols: Mapping[str, Any], name: str) -> Any:
    """Guarded symbol table read; missing or unreadable names yield None."""
    try:
        return symbols[name]
    except Exception:
        return None


def _has_symbol(symbols: Mapping[str, Any], *names: str) -> bool:
    return any(_lookup(symbols, name) is not None for name in names)


def _read_path(obj: Any, *path: str) -> Any:
    """
    Follow a path of keys/attributes, trying mapping access first and attribute access second.
    Returns None as soon as a step is missing or raises.
    """
    current = obj
    for step in path:
        if current is None:
            return None
        try:
            if isinstance(current, Mapping):
                current = current.get(step)
            else:
                current = getattr(current, step, None)
        except Exception:
            return None
    return current


def _iter_fields(obj: Any) -> list[tuple[str, Any]]:
    """Shallow (name, value) pairs of a mapping or plain object, capped at the breadth budget."""
    try:
        if isinstance(obj, Mapping):
            items = list(obj.items())
        else:
            items = list(vars(obj).items())
    except Exception:
        return []
    return [(str(name), value) for name, value in items[:COMPONENT_TREE_MAX_BREADTH]]


def _primitive_fields(obj: Any, skip_private: bool = False) -> dict[str, Any]:
    """Primitive-valued fields only; functions and objects are elided."""
    fields: dict[str, Any] = {}
    for name, value in _iter_fields(obj):
        if skip_private and name.startswith("_"):
            continue
        if name == "children":
            continue
        if isinstance(value, PRIMITIVE_PROP_TYPES):
            fields[name] = value
    return fields


class AbstractSignature(ABC):
    """
    Abstract base class for framework signatures.
    Every concrete signature is registered on definition and instantiated once in SIGNATURES.
    """

    # Class attributes _____________________________________________________________________________________________________

    _subclasses: ClassVar[list[type[AbstractSignature]]] = []  # list of all concrete signature classes

    name: ClassVar[str]


    # Magic methods ________________________________________________________________________________________________________

    def __init_subclass__(cls: type[AbstractSignature], **kwargs: Any) -> None:
        """
        Add the subclass to the AbstractSignature._subclasses list when the subclass is defined.
        """
        super().__init_subclass__(**kwargs)
        cls._subclasses.append(cls)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


    # Class methods ________________________________________________________________________________________________________

    @classmethod
    def get_all_subclasses(cls: type[AbstractSignature]) -> list[type[AbstractSignature]]:
        """
        Return a copy of the list of all subclasses of AbstractSignature.
        """
        return cls._subclasses.copy()


    # Public methods _______________________________________________________________________________________________________

    @abstractmethod
    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        """
        Whether the environment carries this framework's fingerprint.
        Args:
            symbols: Global symbol table.
            markers: Marker attributes and class names of the structural tree.
        Returns:
            True on a match.
        """
        # not raising NotImplementedError here because this is an abstract method
        pass

    def extract_version(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> str | None:
        """Detected version string, or None when the framework does not expose one."""
        return None

    def extract_internal_state(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> ComponentNode | None:
        """Best-effort component tree from the framework's internal state, or None."""
        return None


class ReactSignature(AbstractSignature):
    """
    React: the React global or server-rendered root markers.
    Internal state is read from the fiber tree hanging off the root container.
    """

    name = "React"

    ROOT_ANCHORS: ClassVar[tuple[str, ...]] = ("#root", "[data-reactroot]", "#__next")
    CONTAINER_KEY_PREFIXES: ClassVar[tuple[str, ...]] = ("__reactContainer$", "__reactFiber$")

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return (
            _has_symbol(symbols, "React")
            or markers.has_attribute("data-reactroot")
            or markers.has_attribute("data-reactid")
        )

    def extract_version(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> str | None:
        version = _read_path(_lookup(symbols, "React"), "version")
        return str(version) if version is not None else None

    def _find_root_fiber(self, container: Any) -> Any:
        for path in (
            ("_reactRootContainer", "_internalRoot", "current"),
            ("_reactInternalFiber",),
            ("_reactInternalInstance",),
        ):
            fiber = _read_path(container, *path)
            if fiber is not None:
                return fiber
        # React 18 stores the fiber under a randomized key
        for key, value in _iter_fields(container):
            if key.startswith(self.CONTAINER_KEY_PREFIXES) and value is not None:
                return value
        return None

    @staticmethod
    def _component_name(fiber: Any) -> str:
        component_type = _read_path(fiber, "type")
        if isinstance(component_type, str):
            return component_type
        for attr_name in ("displayName", "name", "__name__"):
            name = _read_path(component_type, attr_name)
            if isinstance(name, str) and name:
                return name
        return "Anonymous"

    def _walk_fiber(self, fiber: Any, depth: int, visited: dict[int, Any]) -> ComponentNode | None:
        if fiber is None or depth > COMPONENT_TREE_MAX_DEPTH or id(fiber) in visited:
            return None
        visited[id(fiber)] = fiber
        node = ComponentNode(
            component_name=self._component_name(fiber),
            props=_primitive_fields(_read_path(fiber, "memoizedProps")),
        )
        if depth == COMPONENT_TREE_MAX_DEPTH:
            return node
        child = _read_path(fiber, "child")
        for _ in range(COMPONENT_TREE_MAX_BREADTH):
            if child is None or id(child) in visited:
                break
            child_node = self._walk_fiber(child, depth + 1, visited)
            if child_node is not None:
                node.children.append(child_node)
            child = _read_path(child, "sibling")
        return node

    def extract_internal_state(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> ComponentNode | None:
        for anchor in self.ROOT_ANCHORS:
            container = markers.anchors.get(anchor)
            if container is None:
                continue
            fiber = self._find_root_fiber(container)
            if fiber is not None:
                return self._walk_fiber(fiber, depth=0, visited={})
        return None


class VueSignature(AbstractSignature):
    """
    Vue: the Vue global or scoped-style data-v-* attributes.
    Internal state is read from the Vue 2 instance attached to the app root.
    """

    name = "Vue"

    ROOT_ANCHORS: ClassVar[tuple[str, ...]] = ("#app", "[data-v-app]", "#__nuxt")

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return _has_symbol(symbols, "Vue") or markers.has_attribute_prefix("data-v-")

    def extract_version(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> str | None:
        version = _read_path(_lookup(symbols, "Vue"), "version")
        return str(version) if version is not None else None

    def _walk_instance(self, instance: Any, depth: int, visited: dict[int, Any]) -> ComponentNode | None:
        if instance is None or depth > COMPONENT_TREE_MAX_DEPTH or id(instance) in visited:
            return None
        visited[id(instance)] = instance
        name = _read_path(instance, "$options", "name") or _read_path(instance, "$options", "_componentTag") or "Anonymous"
        node = ComponentNode(
            component_name=str(name),
            props=_primitive_fields(_read_path(instance, "$data"), skip_private=True),
        )
        children = _read_path(instance, "$children")
        if isinstance(children, (list, tuple)):
            for child in children[:COMPONENT_TREE_MAX_BREADTH]:
                child_node = self._walk_instance(child, depth + 1, visited)
                if child_node is not None:
                    node.children.append(child_node)
        return node

    def extract_internal_state(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> ComponentNode | None:
        for anchor in self.ROOT_ANCHORS:
            instance = _read_path(markers.anchors.get(anchor), "__vue__")
            if instance is not None:
                return self._walk_instance(instance, depth=0, visited={})
        return None


class AngularSignature(AbstractSignature):
    """Angular (ng-version) and AngularJS (ng-app, window.angular)."""

    name = "Angular"

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return (
            _has_symbol(symbols, "angular", "ng")
            or markers.has_attribute("ng-app")
            or markers.has_attribute("ng-version")
        )

    def extract_version(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> str | None:
        version = markers.first_value("ng-version") or _read_path(_lookup(symbols, "angular"), "version", "full")
        return str(version) if version else None


class JQuerySignature(AbstractSignature):
    name = "jQuery"

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return _has_symbol(symbols, "jQuery", "$")

    def extract_version(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> str | None:
        jquery = _lookup(symbols, "jQuery")
        if jquery is None:
            jquery = _lookup(symbols, "$")
        version = _read_path(jquery, "fn", "jquery")
        return str(version) if version is not None else None


class SvelteSignature(AbstractSignature):
    """Svelte leaves svelte-<hash> scoping classes on compiled elements."""

    name = "Svelte"

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return markers.has_class_fragment("svelte-")


class NextJsSignature(AbstractSignature):
    name = "Next.js"

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return _has_symbol(symbols, "__NEXT_DATA__") or "#__next" in markers.anchors

    def extract_version(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> str | None:
        version = _read_path(_lookup(symbols, "next"), "version")
        return str(version) if version is not None else None


class NuxtJsSignature(AbstractSignature):
    name = "Nuxt.js"

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return _has_symbol(symbols, "__NUXT__", "$nuxt") or "#__nuxt" in markers.anchors


class ReduxSignature(AbstractSignature):
    name = "Redux"

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return _has_symbol(symbols, "__REDUX_DEVTOOLS_EXTENSION__", "Redux")


class VuexSignature(AbstractSignature):
    name = "Vuex"

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return _has_symbol(symbols, "$store", "__VUE_DEVTOOLS_GLOBAL_HOOK__", "Vuex")


class MobXSignature(AbstractSignature):
    name = "MobX"

    def matches(self, symbols: Mapping[str, Any], markers: StructuralMarkers) -> bool:
        return _has_symbol(symbols, "__mobxInstanceCount", "__mobxGlobal", "MobX")


# one immutable instance per signature, in declaration order
SIGNATURES: tuple[AbstractSignature, ...] = tuple(
    signature_class() for signature_class in AbstractSignature.get_all_subclasses()
)


def _guarded(signature: AbstractSignature, step: str, func: Any, *args: Any) -> Any:
    try:
        return func(*args)
    except Exception as e:
        logger.debug("%s %s failed: %s", signature.name, step, e)
        return None


def detect_frameworks(
    symbols: Mapping[str, Any],
    markers: StructuralMarkers | None = None,
    signatures: tuple[AbstractSignature, ...] = SIGNATURES,
) -> FrameworkDetection:
    """
    Match the environment against every signature.
    Args:
        symbols: Global symbol table; reads may raise.
        markers: Markers of the structural tree; collect them from a live source
            (tree_extractor.extract_tree_with_markers) to enable internal-state extraction.
        signatures: Signatures to evaluate; defaults to all registered signatures.
    Returns:
        FrameworkDetection with matched frameworks and a component tree entry per match.
    """
    markers = markers if markers is not None else StructuralMarkers()
    detection = FrameworkDetection()
    for signature in signatures:
        if not _guarded(signature, "match", signature.matches, symbols, markers):
            continue
        version = _guarded(signature, "version extraction", signature.extract_version, symbols, markers)
        component_tree = _guarded(
            signature, "internal state extraction", signature.extract_internal_state, symbols, markers,
        )
        detection.matched.append(FrameworkMatch(name=signature.name, version=version))
        detection.component_trees[signature.name] = component_tree

    logger.debug("🔧 Detected frameworks: %s", detection.names or "none")
    return detection
