"""
remixr/scoring/scorers/interaction_friction.py
"""

from remixr.data_models.scoring import PageFeatures, ScoreResult
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score

# more nav links than this reads as a deep navigation
HIGH_NAVIGATION_LINKS = 20


class InteractionFrictionScorer(AbstractScorer):
    """5 points per form field, 2 per navigation link, saturating at 100."""

    METRIC_NAME = "interaction_friction"

    def score(self, features: PageFeatures) -> ScoreResult:
        raw = (
            self.weights.form_field_weight * features.form_field_count
            + self.weights.nav_link_weight * features.nav_link_count
        )
        return ScoreResult(
            score=clamp_score(raw),
            details={
                "form_complexity": features.form_field_count,
                "nav_links": features.nav_link_count,
                "navigation_depth": "High" if features.nav_link_count > HIGH_NAVIGATION_LINKS else "Optimal",
            },
        )
