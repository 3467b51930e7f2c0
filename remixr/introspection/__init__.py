"""
remixr/introspection/__init__.py

Bounded, fault-tolerant introspection of live object graphs and structural trees.
"""

from remixr.introspection.contrast import (
    background_chain,
    contrast_ratio,
    luminance,
    resolve_background_chain,
    resolve_effective_background,
)
from remixr.introspection.framework_fingerprinter import SIGNATURES, AbstractSignature, detect_frameworks
from remixr.introspection.graph_snapshotter import GraphSnapshotter, snapshot, snapshot_symbol_table
from remixr.introspection.node_adapters import DictNodeAdapter, SoupNodeAdapter, StructuralSource, soup_root_from_html
from remixr.introspection.tree_extractor import (
    TreeExtractor,
    collect_structural_markers,
    extract_tree,
    extract_tree_with_markers,
    markers_from_tree,
)

__all__ = [
    "AbstractSignature",
    "DictNodeAdapter",
    "GraphSnapshotter",
    "SIGNATURES",
    "SoupNodeAdapter",
    "StructuralSource",
    "TreeExtractor",
    "background_chain",
    "collect_structural_markers",
    "contrast_ratio",
    "detect_frameworks",
    "extract_tree",
    "extract_tree_with_markers",
    "luminance",
    "markers_from_tree",
    "resolve_background_chain",
    "resolve_effective_background",
    "snapshot",
    "snapshot_symbol_table",
    "soup_root_from_html",
]
