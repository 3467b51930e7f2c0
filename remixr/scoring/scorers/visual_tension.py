"""
remixr/scoring/scorers/visual_tension.py

Left/right visual balance of heavy elements (images, top headings, buttons).
"""

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score


class VisualTensionScorer(AbstractScorer):
    """
    Area-weighted mass on each side of the viewport centre.
    Unbalanced when one side outweighs the other by the imbalance ratio.
    Score is the balance percentage: lighter side over heavier side.
    """

    METRIC_NAME = "visual_tension"

    def score(self, features: PageFeatures) -> ScoreResult:
        centre = features.viewport.width / 2
        left_weight = 0.0
        right_weight = 0.0
        for box in features.weighted_boxes:
            if box.geometry.center_x < centre:
                left_weight += box.geometry.area
            else:
                right_weight += box.geometry.area

        balance = "Balanced"
        dominance = "Center"
        ratio = self.weights.imbalance_ratio
        if left_weight > right_weight * ratio:
            balance, dominance = "Unbalanced", "Left"
        elif right_weight > left_weight * ratio:
            balance, dominance = "Unbalanced", "Right"

        heavier = max(left_weight, right_weight)
        findings = []
        if balance == "Unbalanced":
            findings.append(Finding(category="visual-imbalance", trigger_text=f"{dominance} dominance"))

        return ScoreResult(
            score=clamp_score(100.0 * min(left_weight, right_weight) / heavier) if heavier > 0 else 100.0,
            evidence=findings,
            details={
                "balance": balance,
                "dominance": dominance,
                "left_weight": round(left_weight, 1),
                "right_weight": round(right_weight, 1),
            },
        )
