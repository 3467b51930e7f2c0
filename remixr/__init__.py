"""
remixr - Read-only introspection and heuristic scoring of rendered web pages.

Usage:
    from remixr import PageInspector, DictNodeAdapter, Viewport

    inspector = PageInspector()
    report = inspector.inspect(
        symbols=window_globals,
        document_root=DictNodeAdapter(dom_capture),
        viewport=Viewport(width=1440, height=900),
        url="https://example.com",
    )
    print(report.frameworks.names)
    print(report.scores["cognitive_load"].score)
"""

__version__ = "0.1.0"

# Public API - High-level interface
from .sdk import PageInspector, inspect

# Core operations
from .introspection.graph_snapshotter import snapshot, snapshot_symbol_table
from .introspection.tree_extractor import extract_tree, extract_tree_with_markers
from .introspection.framework_fingerprinter import detect_frameworks
from .introspection.node_adapters import DictNodeAdapter, SoupNodeAdapter, soup_root_from_html
from .introspection.contrast import contrast_ratio, luminance
from .scoring.features import extract_features
from .scoring.engine import ScoringEngine, score
from .scoring.strategy import analyze_strategy

# Data models - for advanced users
from .data_models.report import Report, ReportMetadata
from .data_models.scoring import Finding, PageFeatures, ScoreReport, ScoreResult, ScoringWeights, Severity
from .data_models.snapshot import SnapshotNode, SentinelKind
from .data_models.structure import StructuralNode, TextLeaf, Viewport
from .data_models.frameworks import ComponentNode, FrameworkDetection
from .data_models.strategy import StrategyReport

# Exceptions
from .utils.exceptions import (
    RemixrError,
    InvalidBudgetError,
    UnsupportedFileFormat,
)

# Core modules (for advanced usage)
from . import data_models
from . import introspection
from . import scoring
from . import utils
