"""
remixr/scoring/scorers/cognitive_load.py

Cognitive load: a weighted sum of visible, interactive, animated and manipulative elements.
"""

from remixr.data_models.scoring import PageFeatures, ScoreResult
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score
from remixr.scoring.scorers.dark_patterns import DarkPatternScorer

# density is measured per 100x100 block of viewport
DENSITY_BLOCK_AREA = 100 * 100


class CognitiveLoadScorer(AbstractScorer):
    """
    0.1·visible + 2·interactive + 5·animations + 10·dark patterns, plus a bonus
    when elements per viewport block exceed the density threshold. Saturates at 100.
    """

    METRIC_NAME = "cognitive_load"

    def score(self, features: PageFeatures) -> ScoreResult:
        weights = self.weights
        dark_pattern_count = features.dark_pattern_count
        if dark_pattern_count is None:
            dark_pattern_count = len(DarkPatternScorer(weights=weights).score(features).evidence)

        raw = (
            weights.visible_element_weight * features.visible_element_count
            + weights.interactive_element_weight * features.interactive_element_count
            + weights.animation_weight * features.animation_count
            + weights.dark_pattern_weight * dark_pattern_count
        )

        density: float | None = None
        blocks = features.viewport.area / DENSITY_BLOCK_AREA
        if blocks > 0:
            density = features.element_count / blocks
            if density > weights.density_threshold:
                raw += weights.density_bonus

        return ScoreResult(
            score=clamp_score(raw),
            details={
                "raw_score": round(raw, 2),
                "visible_elements": features.visible_element_count,
                "interactive_elements": features.interactive_element_count,
                "animations": features.animation_count,
                "dark_patterns": dark_pattern_count,
                "density": round(density, 2) if density is not None else None,
            },
        )
