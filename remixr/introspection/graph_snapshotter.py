"""
remixr/introspection/graph_snapshotter.py

Bounded, cycle-safe serialization of an arbitrary live object graph.

Every navigation step is guarded: the inspected graph is untrusted, may be
self-referential or arbitrarily wide, and its attribute reads may raise.
"""

from __future__ import annotations

import inspect
from itertools import islice
from collections.abc import Mapping, Set
from typing import Any, ClassVar

from remixr.config import Config
from remixr.data_models.snapshot import (
    CallableSnapshot,
    CompositeSnapshot,
    PrimitiveSnapshot,
    SentinelKind,
    SentinelSnapshot,
    SnapshotNode,
)
from remixr.utils.exceptions import validate_budget
from remixr.utils.logger import get_logger

logger = get_logger(name=__name__)


class GraphSnapshotter:
    """
    Depth-first snapshotter with an explicit depth counter and an identity-keyed visited registry.
    One instance per traversal; instances are not reused across calls.
    """

    # Class attributes _____________________________________________________________________________________________________

    PRIMITIVE_TYPES: ClassVar[tuple[type, ...]] = (str, int, float, bool, type(None))
    SIGNATURE_PREFIX_MAX_CHARS: ClassVar[int] = 100
    OPAQUE_REPR_MAX_CHARS: ClassVar[int] = 200


    # Magic methods ________________________________________________________________________________________________________

    def __init__(self, max_depth: int, max_breadth: int) -> None:
        """
        Initialize GraphSnapshotter.
        Args:
            max_depth: Nodes deeper than this become MAX_DEPTH sentinels (root is depth 0).
            max_breadth: Only the first max_breadth keys of each composite are kept.
        Raises:
            InvalidBudgetError: If either budget is negative.
        """
        self.max_depth = validate_budget("max_depth", max_depth)
        self.max_breadth = validate_budget("max_breadth", max_breadth)
        # id -> object; holding the object keeps its id from being recycled mid-traversal
        self._visited: dict[int, Any] = {}


    # Static methods _______________________________________________________________________________________________________

    @staticmethod
    def _is_callable_leaf(value: Any) -> bool:
        """Functions, methods, builtins and classes are summarized, not expanded."""
        return inspect.isroutine(value) or inspect.isclass(value)

    @staticmethod
    def _summarize_callable(value: Any) -> CallableSnapshot:
        name = getattr(value, "__name__", None) or "anonymous"
        arity: int | None = None
        signature_text = ""
        try:
            signature = inspect.signature(value)
            arity = sum(
                1
                for param in signature.parameters.values()
                if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
            )
            signature_text = f"{name}{signature}"
        except (TypeError, ValueError):
            # builtins without text signatures
            signature_text = f"{name}(...)"
        prefix = "class " if inspect.isclass(value) else "def "
        return CallableSnapshot(
            name=str(name),
            arity=arity,
            signature_prefix=(prefix + signature_text)[:GraphSnapshotter.SIGNATURE_PREFIX_MAX_CHARS],
        )

    @staticmethod
    def _enumerate_keys(value: Any) -> list[Any]:
        """
        Enumerate the child keys of a composite value in a stable order.
        Mapping keys, sequence indices, or instance fields plus public class-level properties.
        """
        if isinstance(value, Mapping):
            return list(value.keys())
        if isinstance(value, (list, tuple)):
            return range(len(value))  # type: ignore[return-value]
        if isinstance(value, (Set, frozenset)):
            return range(len(value))  # type: ignore[return-value]

        keys: list[Any] = []
        instance_dict = getattr(value, "__dict__", None)
        if isinstance(instance_dict, Mapping):
            keys.extend(instance_dict.keys())
        for klass in type(value).__mro__:
            for slot in getattr(klass, "__slots__", ()) or ():
                if isinstance(slot, str) and slot not in keys and slot not in ("__dict__", "__weakref__"):
                    keys.append(slot)
            for attr_name, attr_value in vars(klass).items():
                if isinstance(attr_value, property) and not attr_name.startswith("_") and attr_name not in keys:
                    keys.append(attr_name)
        return keys

    @staticmethod
    def _read_child(value: Any, key: Any, ordered_items: list[Any] | None) -> Any:
        """Read one child; may raise, the caller guards it."""
        if isinstance(value, Mapping):
            return value[key]
        if ordered_items is not None:
            return ordered_items[key]
        return getattr(value, key)


    # Private methods ______________________________________________________________________________________________________

    def _opaque_leaf(self, value: Any) -> PrimitiveSnapshot:
        """A leaf we do not expand (bytes, numbers of other types, objects without fields)."""
        try:
            text = repr(value)
        except Exception as e:
            return PrimitiveSnapshot(value=f"<unrepresentable {type(value).__name__}: {_describe_error(e)}>")
        return PrimitiveSnapshot(value=text[:self.OPAQUE_REPR_MAX_CHARS])

    def _traverse(self, value: Any, depth: int) -> SnapshotNode:
        if depth > self.max_depth:
            return SentinelSnapshot(sentinel=SentinelKind.MAX_DEPTH)

        if isinstance(value, self.PRIMITIVE_TYPES):
            if isinstance(value, float) and value != value:
                return PrimitiveSnapshot(value="NaN")
            return PrimitiveSnapshot(value=value)

        if self._is_callable_leaf(value):
            return self._summarize_callable(value)

        if isinstance(value, (bytes, bytearray, memoryview)):
            return self._opaque_leaf(value)

        if id(value) in self._visited:
            return SentinelSnapshot(sentinel=SentinelKind.CIRCULAR)
        self._visited[id(value)] = value

        try:
            keys = self._enumerate_keys(value)
        except Exception as e:
            logger.debug("Could not enumerate keys of %s: %s", type(value).__name__, e)
            return SentinelSnapshot(sentinel=SentinelKind.ACCESS_ERROR, detail=_describe_error(e))

        if not keys and not isinstance(value, (Mapping, list, tuple, Set, frozenset)):
            return self._opaque_leaf(value)

        ordered_items: list[Any] | None = None
        try:
            if isinstance(value, (list, tuple, Set, frozenset)):
                ordered_items = list(islice(iter(value), self.max_breadth))
        except Exception as e:
            return SentinelSnapshot(sentinel=SentinelKind.ACCESS_ERROR, detail=_describe_error(e))

        kept_keys = keys[:self.max_breadth]
        entries: dict[str, SnapshotNode] = {}
        for key in kept_keys:
            entry_name = _entry_name(key, entries)
            try:
                child = self._read_child(value, key, ordered_items)
            except Exception as e:
                # one failing field never aborts its siblings or ancestors
                entries[entry_name] = SentinelSnapshot(
                    sentinel=SentinelKind.ACCESS_ERROR,
                    detail=_describe_error(e),
                )
                continue
            try:
                entries[entry_name] = self._traverse(child, depth + 1)
            except Exception as e:
                entries[entry_name] = SentinelSnapshot(
                    sentinel=SentinelKind.ACCESS_ERROR,
                    detail=_describe_error(e),
                )

        return CompositeSnapshot(
            container=type(value).__name__,
            entries=entries,
            truncated=len(keys) > len(kept_keys),
        )


    # Public methods _______________________________________________________________________________________________________

    def run(self, root: Any) -> SnapshotNode:
        """
        Snapshot a root value. The visited registry is reset per run.
        Args:
            root: Any live value.
        Returns:
            The root SnapshotNode.
        """
        self._visited = {}
        try:
            return self._traverse(root, depth=0)
        except Exception as e:
            logger.debug("Snapshot root could not be read: %s", e)
            return SentinelSnapshot(sentinel=SentinelKind.ACCESS_ERROR, detail=_describe_error(e))
        finally:
            self._visited = {}


def snapshot(
    root: Any,
    max_depth: int = Config.SNAPSHOT_MAX_DEPTH,
    max_breadth: int = Config.SNAPSHOT_MAX_BREADTH,
) -> SnapshotNode:
    """
    Bounded, cycle-safe snapshot of a live object graph.
    Args:
        root: The value to snapshot.
        max_depth: Maximum composite depth (root is depth 0).
        max_breadth: Maximum number of keys kept per composite.
    Returns:
        A SnapshotNode; never raises for the content of the graph.
    Raises:
        InvalidBudgetError: If a budget is negative.
    """
    return GraphSnapshotter(max_depth=max_depth, max_breadth=max_breadth).run(root)


# well-known globals snapshotted first when present: platform APIs, framework and state-management globals, libraries
WELL_KNOWN_GLOBALS: tuple[str, ...] = (
    "document", "location", "navigator", "performance", "localStorage", "sessionStorage",
    "console", "fetch", "XMLHttpRequest", "WebSocket", "indexedDB", "crypto",
    "React", "ReactDOM", "Vue", "angular", "Angular", "$", "jQuery", "Backbone", "Ember",
    "Redux", "__REDUX_DEVTOOLS_EXTENSION__", "Vuex", "MobX",
    "moment", "lodash", "_", "axios", "gsap", "d3",
)

# native globals never treated as application state
NATIVE_GLOBALS: frozenset[str] = frozenset({
    "window", "self", "top", "parent", "frames", "globalThis", "document", "navigator",
    "location", "history", "screen", "console", "localStorage", "sessionStorage",
    "indexedDB", "caches", "performance", "fetch", "XMLHttpRequest", "WebSocket",
    "Blob", "File", "FileReader", "FormData", "URL", "URLSearchParams",
    "Headers", "Request", "Response", "AbortController", "Event", "CustomEvent",
    "Promise", "Map", "Set", "WeakMap", "WeakSet", "Proxy", "Reflect",
    "Symbol", "Intl", "JSON", "Math", "Date", "RegExp", "Error", "Array",
    "String", "Number", "Boolean", "Object", "Function", "ArrayBuffer",
})
NATIVE_NAME_PREFIXES: tuple[str, ...] = ("webkit", "moz", "on", "HTML", "SVG", "RTC", "IDB", "WebGL", "__")


def _describe_error(error: BaseException) -> str:
    """Short error description that never raises itself."""
    try:
        return f"{type(error).__name__}: {error}"[:200]
    except Exception:
        return type(error).__name__


def _entry_name(key: Any, entries: Mapping[str, Any]) -> str:
    """
    Entry name of a child key, unique within its composite.
    Non-str keys that render like an existing entry ({1: ..., "1": ...}) get their type appended.
    """
    if isinstance(key, str):
        name = key
    else:
        try:
            name = str(key)
        except Exception:
            name = f"<{type(key).__name__}>"
    if name in entries:
        name = f"{name} ({type(key).__name__})"
    candidate, suffix = name, 2
    while candidate in entries:
        candidate = f"{name} #{suffix}"
        suffix += 1
    return candidate


def is_custom_global(name: str, value: Any) -> bool:
    """
    Heuristically determine whether a global is application state rather than a platform API.
    Only composite values qualify; callables and primitives are skipped.
    """
    if not name or name in NATIVE_GLOBALS or name in WELL_KNOWN_GLOBALS:
        return False
    if name.startswith(NATIVE_NAME_PREFIXES):
        return False
    if isinstance(value, GraphSnapshotter.PRIMITIVE_TYPES) or GraphSnapshotter._is_callable_leaf(value):
        return False
    return True


def snapshot_symbol_table(
    symbols: Mapping[str, Any],
    max_depth: int = Config.SNAPSHOT_MAX_DEPTH,
    max_breadth: int = Config.SNAPSHOT_MAX_BREADTH,
    max_custom_globals: int = 20,
) -> SnapshotNode:
    """
    Snapshot a global symbol table: well-known globals first, then up to max_custom_globals application globals.
    The whole table shares one visited registry, so an object reachable from two globals is expanded once.
    Args:
        symbols: Name -> value mapping; reads may raise.
        max_depth: Maximum composite depth below the table itself.
        max_breadth: Maximum keys per composite.
        max_custom_globals: Cap on application globals beyond the well-known list.
    Returns:
        A CompositeSnapshot keyed by global name, with custom globals under "__custom_globals__".
    Raises:
        InvalidBudgetError: If a budget is negative.
    """
    validate_budget("max_custom_globals", max_custom_globals)
    snapshotter = GraphSnapshotter(max_depth=max_depth, max_breadth=max_breadth)
    snapshotter._visited = {}

    try:
        names = list(symbols.keys())
    except Exception as e:
        logger.debug("Could not enumerate symbol table: %s", e)
        return SentinelSnapshot(sentinel=SentinelKind.ACCESS_ERROR, detail=_describe_error(e))

    entries: dict[str, SnapshotNode] = {}
    for name in WELL_KNOWN_GLOBALS:
        if name not in names:
            continue
        try:
            value = symbols[name]
        except Exception as e:
            entries[name] = SentinelSnapshot(sentinel=SentinelKind.ACCESS_ERROR, detail=_describe_error(e))
            continue
        if value is None:
            continue
        try:
            entries[name] = snapshotter._traverse(value, depth=1)
        except Exception as e:
            entries[name] = SentinelSnapshot(sentinel=SentinelKind.ACCESS_ERROR, detail=_describe_error(e))

    custom_entries: dict[str, SnapshotNode] = {}
    for name in names:
        if len(custom_entries) >= max_custom_globals:
            break
        if not isinstance(name, str):
            continue
        try:
            value = symbols[name]
            if not is_custom_global(name, value):
                continue
            custom_entries[name] = snapshotter._traverse(value, depth=2)
        except Exception as e:
            custom_entries[name] = SentinelSnapshot(sentinel=SentinelKind.ACCESS_ERROR, detail=_describe_error(e))
    entries["__custom_globals__"] = CompositeSnapshot(container="custom_globals", entries=custom_entries)

    logger.debug(
        "Symbol table snapshot: %d well-known globals, %d custom globals",
        len(entries) - 1, len(custom_entries),
    )
    return CompositeSnapshot(container=type(symbols).__name__, entries=entries)
