"""
remixr/sdk/inspector.py

Page inspection SDK wrapper.

Contains:
- PageInspector: Runs every introspection stage and assembles a Report
- inspect(): One-shot inspection with default budgets
- Uses: snapshot_symbol_table, TreeExtractor, detect_frameworks, extract_features, ScoringEngine, analyze_strategy
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from remixr.config import Config
from remixr.data_models.frameworks import FrameworkDetection
from remixr.data_models.report import Report, ReportMetadata
from remixr.data_models.scoring import PageFeatures, ScoreReport, ScoringWeights
from remixr.data_models.snapshot import SnapshotNode
from remixr.data_models.strategy import StrategyReport
from remixr.data_models.structure import StructuralMarkers, StructuralNode, Viewport
from remixr.introspection.framework_fingerprinter import detect_frameworks
from remixr.introspection.graph_snapshotter import snapshot_symbol_table
from remixr.introspection.node_adapters import DictNodeAdapter, StructuralSource, soup_root_from_html
from remixr.introspection.tree_extractor import TreeExtractor
from remixr.scoring.engine import ScoringEngine
from remixr.scoring.features import extract_features
from remixr.scoring.strategy import analyze_strategy
from remixr.utils.data_utils import get_text_from_html, get_title_from_html
from remixr.utils.exceptions import validate_budget
from remixr.utils.logger import get_logger

logger = get_logger(name=__name__)


class PageInspector:
    """
    High-level interface for inspecting a page.
    Every stage degrades independently: a failed stage leaves its report section empty.

    Example:
        >>> inspector = PageInspector(tree_max_depth=8)
        >>> report = inspector.inspect(
        ...     symbols=window_globals,
        ...     document_root=DictNodeAdapter(dom_capture),
        ...     viewport=Viewport(width=1440, height=900),
        ... )
        >>> report.scores["cognitive_load"].score
    """

    def __init__(
        self,
        snapshot_max_depth: int = Config.SNAPSHOT_MAX_DEPTH,
        snapshot_max_breadth: int = Config.SNAPSHOT_MAX_BREADTH,
        tree_max_depth: int = Config.TREE_MAX_DEPTH,
        sample_size: int = Config.SAMPLE_SIZE,
        weights: ScoringWeights | None = None,
    ) -> None:
        """
        Initialize the PageInspector.
        Args:
            snapshot_max_depth: Depth budget of the symbol table snapshot.
            snapshot_max_breadth: Breadth budget of the symbol table snapshot.
            tree_max_depth: Depth budget of the structural tree.
            sample_size: Cap on spacing containers sampled by the scorers.
            weights: Numeric scoring heuristics.
        Raises:
            InvalidBudgetError: If any budget is negative.
        """
        self.snapshot_max_depth = validate_budget("snapshot_max_depth", snapshot_max_depth)
        self.snapshot_max_breadth = validate_budget("snapshot_max_breadth", snapshot_max_breadth)
        self.tree_max_depth = validate_budget("tree_max_depth", tree_max_depth)
        self.sample_size = validate_budget("sample_size", sample_size)
        self.engine = ScoringEngine(weights=weights)


    # Static methods _______________________________________________________________________________________________________

    @staticmethod
    def _capture_viewport(capture: Mapping[str, Any]) -> Viewport | None:
        """Viewport of a capture envelope; None (the default viewport) when missing or malformed."""
        viewport_data = capture.get("viewport")
        if viewport_data is None:
            return None
        if not isinstance(viewport_data, Mapping):
            logger.warning("Ignoring malformed capture viewport: %r", viewport_data)
            return None
        try:
            return Viewport.model_validate(dict(viewport_data))
        except ValidationError as e:
            logger.warning("Ignoring invalid capture viewport %r: %d errors", viewport_data, e.error_count())
            return None

    @staticmethod
    def _capture_animation_count(capture: Mapping[str, Any]) -> int:
        """Animation count of a capture envelope; 0 when missing, non-numeric or negative."""
        value = capture.get("animationCount", capture.get("animation_count"))
        if value is None:
            return 0
        try:
            count = int(value)
        except (TypeError, ValueError, OverflowError):
            logger.warning("Ignoring non-numeric capture animation count: %r", value)
            return 0
        if isinstance(value, bool) or count < 0:
            logger.warning("Ignoring invalid capture animation count: %r", value)
            return 0
        return count

    @staticmethod
    def _capture_str(capture: Mapping[str, Any], key: str) -> str | None:
        value = capture.get(key)
        return value if isinstance(value, str) else None


    # Private methods ______________________________________________________________________________________________________

    def _snapshot_stage(self, symbols: Mapping[str, Any] | None) -> SnapshotNode | None:
        if symbols is None:
            return None
        try:
            return snapshot_symbol_table(
                symbols,
                max_depth=self.snapshot_max_depth,
                max_breadth=self.snapshot_max_breadth,
            )
        except Exception as e:
            logger.warning("Symbol table snapshot failed: %s", e)
            return None

    def _tree_stage(self, document_root: StructuralSource | None) -> tuple[StructuralNode | None, StructuralMarkers]:
        if document_root is None:
            return None, StructuralMarkers()
        extractor = TreeExtractor(max_depth=self.tree_max_depth)
        try:
            tree = extractor.run(document_root)
        except Exception as e:
            logger.warning("Structural tree extraction failed: %s", e)
            return None, StructuralMarkers()
        return tree, extractor.markers

    def _framework_stage(self, symbols: Mapping[str, Any] | None, markers: StructuralMarkers) -> FrameworkDetection:
        try:
            return detect_frameworks(symbols or {}, markers)
        except Exception as e:
            logger.warning("Framework detection failed: %s", e)
            return FrameworkDetection()

    def _feature_stage(
        self,
        tree: StructuralNode | None,
        text: str | None,
        viewport: Viewport,
        animation_count: int,
        title: str | None,
    ) -> PageFeatures:
        try:
            return extract_features(
                tree,
                text=text,
                viewport=viewport,
                animation_count=animation_count,
                sample_size=self.sample_size,
                title=title,
            )
        except Exception as e:
            logger.warning("Feature extraction failed, scoring text only: %s", e)
            return PageFeatures(text=text or "", title=title, viewport=viewport)

    def _strategy_stage(self, features: PageFeatures, scores: ScoreReport, url: str | None) -> StrategyReport | None:
        try:
            return analyze_strategy(features, scores, url=url, weights=self.engine.weights)
        except Exception as e:
            logger.warning("Strategy analysis failed: %s", e)
            return None


    # Public methods _______________________________________________________________________________________________________

    def inspect(
        self,
        symbols: Mapping[str, Any] | None,
        document_root: StructuralSource | None,
        viewport: Viewport | None = None,
        url: str | None = None,
        animation_count: int = 0,
        text: str | None = None,
        title: str | None = None,
    ) -> Report:
        """
        Inspect a page.
        Args:
            symbols: Global symbol table (name -> live value); None skips the snapshot.
            document_root: Root of the structural tree; None skips tree extraction.
            viewport: Viewport size; defaults to 1280x800.
            url: Page URL, recorded in the metadata.
            animation_count: Number of animation rules on the page.
            text: Raw page text; derived from the structural tree when None.
            title: Document title; read from the structural tree when None.
        Returns:
            The full Report.
        Raises:
            InvalidBudgetError: If animation_count is negative.
        """
        validate_budget("animation_count", animation_count)
        viewport = viewport or Viewport()
        logger.info("🔧 Inspecting %s", url or "page")

        snapshot = self._snapshot_stage(symbols)
        tree, markers = self._tree_stage(document_root)
        frameworks = self._framework_stage(symbols, markers)
        features = self._feature_stage(tree, text, viewport, animation_count, title)
        scores = self.engine.score(features)
        strategy = self._strategy_stage(features, scores, url)

        logger.info(
            "✅ Inspection finished: %d frameworks, %d metrics",
            len(frameworks.matched), len(scores.metrics),
        )
        return Report(
            metadata=ReportMetadata(url=url, viewport=viewport),
            snapshot=snapshot,
            structural_tree=tree,
            frameworks=frameworks,
            scores=scores,
            strategy=strategy,
        )

    def inspect_html(self, html: str, url: str | None = None, viewport: Viewport | None = None) -> Report:
        """
        Inspect a static HTML page. There is no runtime, so only class/attribute markers are fingerprinted.
        """
        return self.inspect(
            symbols=None,
            document_root=soup_root_from_html(html),
            viewport=viewport,
            url=url,
            text=get_text_from_html(html),
            title=get_title_from_html(html),
        )

    def inspect_capture(self, capture: Mapping[str, Any]) -> Report:
        """
        Inspect a JSON capture produced by a browser-side script.
        The capture is either a bare DOM node or an envelope with
        'document', and optionally 'url', 'viewport', 'symbols', 'animationCount', 'text' and 'title'.
        Malformed envelope fields are logged and replaced by their defaults.
        """
        document = capture.get("document", capture)
        symbols = capture.get("symbols")
        return self.inspect(
            symbols=symbols if isinstance(symbols, Mapping) else None,
            document_root=DictNodeAdapter(document) if isinstance(document, Mapping) else None,
            viewport=self._capture_viewport(capture),
            url=self._capture_str(capture, "url"),
            animation_count=self._capture_animation_count(capture),
            text=self._capture_str(capture, "text"),
            title=self._capture_str(capture, "title"),
        )


def inspect(
    symbols: Mapping[str, Any] | None,
    document_root: StructuralSource | None,
    viewport: Viewport | None = None,
    url: str | None = None,
    animation_count: int = 0,
) -> Report:
    """
    Inspect a page with default budgets. See PageInspector.inspect.
    """
    return PageInspector().inspect(
        symbols=symbols,
        document_root=document_root,
        viewport=viewport,
        url=url,
        animation_count=animation_count,
    )
