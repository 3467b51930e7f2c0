"""
remixr/scoring/scorers/spacing_mood.py

Spacing mood from average vertical padding and margin of sampled containers.
"""

from collections.abc import Sequence

from remixr.data_models.scoring import PageFeatures, ScoreResult, SpacingSample
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score

SPACIOUS = "Spacious"
BALANCED = "Balanced"
DENSE = "Dense"


def average_spacing(samples: Sequence[SpacingSample]) -> tuple[float, float] | None:
    """(average top + bottom padding, average top + bottom margin), or None without samples."""
    if not samples:
        return None
    avg_padding = sum(s.padding_top + s.padding_bottom for s in samples) / len(samples)
    avg_margin = sum(s.margin_top + s.margin_bottom for s in samples) / len(samples)
    return avg_padding, avg_margin


class SpacingMoodScorer(AbstractScorer):
    """
    Averages (padding-top + padding-bottom) and (margin-top + margin-bottom) over the sampled containers.
    >40 Spacious, 20..40 Balanced, <20 Dense. Score is the average padding in px, clamped to [0, 100].
    """

    METRIC_NAME = "spacing_mood"

    def classify(self, avg_padding: float) -> str:
        if avg_padding > self.weights.spacious_threshold:
            return SPACIOUS
        if avg_padding >= self.weights.balanced_threshold:
            return BALANCED
        return DENSE

    def score(self, features: PageFeatures) -> ScoreResult:
        averages = average_spacing(features.spacing_samples)
        if averages is None:
            return ScoreResult(details={"feeling": None, "avg_padding": None, "avg_margin": None, "sample_size": 0})

        avg_padding, avg_margin = averages
        return ScoreResult(
            score=clamp_score(avg_padding),
            details={
                "feeling": self.classify(avg_padding),
                "avg_padding": round(avg_padding, 1),
                "avg_margin": round(avg_margin, 1),
                "sample_size": len(features.spacing_samples),
            },
        )
