"""
remixr/scoring/engine.py

Runs every scorer over one set of page features and assembles the ScoreReport.
"""

from __future__ import annotations

from collections.abc import Sequence

from remixr.data_models.scoring import PageFeatures, ScoreReport, ScoreResult, ScoringWeights
from remixr.scoring import scorers as _scorers  # noqa: F401  registers every built-in scorer
from remixr.scoring.abstract_scorer import AbstractScorer
from remixr.utils.logger import get_logger

logger = get_logger(name=__name__)


def default_scorers(weights: ScoringWeights | None = None) -> list[AbstractScorer]:
    """One instance per registered scorer (four for persuasion, one per category)."""
    instances: list[AbstractScorer] = []
    for scorer_class in AbstractScorer.get_all_subclasses():
        instances.extend(scorer_class.build_instances(weights=weights))
    return instances


class ScoringEngine:
    """
    Scoring engine.
    A scorer that fails unexpectedly degrades to a neutral result; the other metrics are unaffected.
    """

    def __init__(
        self,
        weights: ScoringWeights | None = None,
        scorers: Sequence[AbstractScorer] | None = None,
    ) -> None:
        """
        Initialize the ScoringEngine.
        Args:
            weights: Numeric heuristics shared by the default scorers.
            scorers: Explicit scorers to run instead of the registered defaults.
        """
        self.weights = weights or ScoringWeights()
        self.scorers: list[AbstractScorer] = list(scorers) if scorers is not None else default_scorers(self.weights)

    def score(self, features: PageFeatures) -> ScoreReport:
        """
        Score a page with every configured scorer.
        Args:
            features: Extracted page features.
        Returns:
            ScoreReport keyed by metric name.
        """
        report = ScoreReport()
        for scorer in self.scorers:
            try:
                result = scorer.score(features)
            except Exception as e:
                logger.error("❌ Scorer %s failed, reporting a neutral result: %s", scorer.metric_name, e)
                result = ScoreResult(details={"error": str(e)})
            report.metrics[scorer.metric_name] = result

        logger.debug("✅ Scored %d metrics", len(report.metrics))
        return report


def score(features: PageFeatures, weights: ScoringWeights | None = None) -> ScoreReport:
    """
    Score a page with all built-in scorers.
    Args:
        features: Extracted page features.
        weights: Optional tuned heuristics.
    Returns:
        ScoreReport keyed by metric name.
    """
    return ScoringEngine(weights=weights).score(features)
