"""
remixr/scoring/scorers/persuasion.py

Persuasion pattern density. Each category is an independent metric.
"""

import re
from types import MappingProxyType

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult, ScoringWeights
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score
from remixr.utils.data_utils import normalize_text

PERSUASION_PATTERNS: MappingProxyType[str, tuple[re.Pattern[str], ...]] = MappingProxyType({
    "scarcity": tuple(re.compile(p, re.IGNORECASE) for p in (
        r"only \d+ left", r"limited stock", r"almost gone", r"selling fast", r"low stock", r"hurry",
    )),
    "urgency": tuple(re.compile(p, re.IGNORECASE) for p in (
        r"today only", r"ends soon", r"last chance", r"now or never", r"don't miss", r"expires",
    )),
    "authority": tuple(re.compile(p, re.IGNORECASE) for p in (
        r"expert", r"certified", r"approved", r"official", r"verified", r"trusted", r"award",
    )),
    "social_proof": tuple(re.compile(p, re.IGNORECASE) for p in (
        r"\d[\d,]* (?:happy )?(?:customers|reviews|ratings|users)",
        r"people (?:are viewing|bought)",
        r"best[- ]?seller",
        r"most popular",
    )),
})


class PersuasionScorer(AbstractScorer):
    """
    Counts case-insensitive pattern matches of one persuasion category; one finding per occurrence.
    Social proof also counts review/rating/testimonial/customer class markers.
    """

    METRIC_NAME = "persuasion"

    def __init__(self, category: str = "scarcity", weights: ScoringWeights | None = None) -> None:
        """
        Args:
            category: One of PERSUASION_PATTERNS' keys.
            weights: Numeric heuristics.
        Raises:
            ValueError: If the category is unknown.
        """
        if category not in PERSUASION_PATTERNS:
            raise ValueError(f"Unknown persuasion category: {category!r}")
        super().__init__(weights=weights)
        self.category = category

    @classmethod
    def build_instances(cls, weights: ScoringWeights | None = None) -> list[AbstractScorer]:
        return [cls(category=category, weights=weights) for category in PERSUASION_PATTERNS]

    @property
    def metric_name(self) -> str:
        return f"{self.METRIC_NAME}.{self.category}"

    def score(self, features: PageFeatures) -> ScoreResult:
        text = normalize_text(features.text)
        findings: list[Finding] = []
        for pattern in PERSUASION_PATTERNS[self.category]:
            findings.extend(
                Finding(category=self.category, trigger_text=match.group(0))
                for match in pattern.finditer(text)
            )

        marker_count = features.social_proof_marker_count if self.category == "social_proof" else 0
        findings.extend(
            Finding(category=self.category, trigger_text="review/rating/testimonial/customer class")
            for _ in range(marker_count)
        )

        return ScoreResult(
            score=clamp_score(len(findings) * self.weights.persuasion_match_weight),
            evidence=findings,
            details={"count": len(findings), "class_markers": marker_count},
        )
