"""
remixr/scoring/scorers/design_system.py

Design system detection from class-name conventions, with a token-sprawl fallback.
"""

from typing import Callable

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult
from remixr.scoring.abstract_scorer import AbstractScorer

CUSTOM_SYSTEM = "Custom/Unknown"
CHAOS_SYSTEM = "Chaos"

# evaluated in order; a later match overrides an earlier one
DESIGN_SYSTEM_RULES: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("Bootstrap", lambda classes: "btn-primary" in classes or "container-fluid" in classes),
    ("Tailwind", lambda classes: "text-xl" in classes or "p-4" in classes or "flex-row" in classes),
    ("Material UI", lambda classes: "MuiButton" in classes),
    ("Chakra UI / Emotion", lambda classes: "css-" in classes and ("chakra-" in classes or "emotion-" in classes)),
    ("Bulma", lambda classes: "is-primary" in classes and "columns" in classes),
    ("Ant Design", lambda classes: "ant-" in classes),
)

MAX_FONT_SIZES = 20
MAX_COLORS = 25

COHESION_SCORES: dict[str, float] = {CHAOS_SYSTEM: 20.0, CUSTOM_SYSTEM: 60.0}
KNOWN_SYSTEM_COHESION = 90.0


class DesignSystemScorer(AbstractScorer):
    """
    Score is the cohesion of the detected system: 90 for a known system, 60 custom, 20 chaos.
    """

    METRIC_NAME = "design_system"

    def score(self, features: PageFeatures) -> ScoreResult:
        classes = " ".join(features.class_names)
        system = CUSTOM_SYSTEM
        findings: list[Finding] = []
        for name, rule in DESIGN_SYSTEM_RULES:
            if rule(classes):
                system = name
                findings.append(Finding(category="design-system", trigger_text=name))

        font_size_count = len(features.font_sizes)
        color_count = len(features.text_colors)
        if system == CUSTOM_SYSTEM and (font_size_count > MAX_FONT_SIZES or color_count > MAX_COLORS):
            system = CHAOS_SYSTEM
            findings.append(Finding(
                category="token-sprawl",
                trigger_text=f"{font_size_count} font sizes, {color_count} colors",
            ))

        return ScoreResult(
            score=COHESION_SCORES.get(system, KNOWN_SYSTEM_COHESION),
            evidence=findings,
            details={
                "detected": system,
                "tokens": {"font_sizes": font_size_count, "colors": color_count},
            },
        )
