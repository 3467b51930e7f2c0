"""
remixr/scoring/scorers/archetype.py

Brand archetype affinity from keyword frequency and dominant background colors.
"""

import re
from types import MappingProxyType

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult
from remixr.introspection.contrast import parse_color
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score
from remixr.utils.data_utils import normalize_text

# declaration order breaks ties in the ranking
ARCHETYPE_KEYWORDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "innocent": ("pure", "simple", "honest", "trust", "optimistic", "happy", "natural", "authentic"),
    "explorer": ("adventure", "freedom", "discover", "explore", "journey", "experience", "independent", "pioneer"),
    "sage": ("wisdom", "knowledge", "expert", "truth", "insight", "understand", "intelligence", "learn"),
    "hero": ("courage", "brave", "strong", "power", "achieve", "win", "conquer", "champion"),
    "outlaw": ("rebel", "revolution", "break", "disrupt", "challenge", "wild", "radical", "liberate"),
    "magician": ("transform", "magic", "dream", "imagine", "create", "vision", "inspire", "wonder"),
    "regular": ("friend", "belong", "community", "everyday", "reliable", "down-to-earth", "comfortable"),
    "lover": ("passion", "intimate", "sensual", "pleasure", "indulge", "desire", "romance", "beautiful"),
    "jester": ("fun", "enjoy", "play", "laugh", "humor", "entertaining", "lighthearted", "spontaneous"),
    "caregiver": ("care", "nurture", "protect", "compassion", "support", "help", "service", "generous"),
    "creator": ("innovate", "design", "craft", "build", "artistic", "original", "express", "unique"),
    "ruler": ("leader", "control", "power", "prestige", "exclusive", "premium", "luxury", "sophisticated"),
})

ARCHETYPE_PATTERNS: MappingProxyType[str, tuple[re.Pattern[str], ...]] = MappingProxyType({
    archetype: tuple(re.compile(rf"\b{re.escape(keyword)}\w*\b") for keyword in keywords)
    for archetype, keywords in ARCHETYPE_KEYWORDS.items()
})

PERSONALITY_DESCRIPTIONS: MappingProxyType[str, str] = MappingProxyType({
    "innocent": "Pure, optimistic, seeking simplicity and happiness",
    "explorer": "Adventurous, independent, seeking freedom and discovery",
    "sage": "Knowledgeable, thoughtful, seeking truth and wisdom",
    "hero": "Courageous, bold, seeking to prove worth through achievement",
    "outlaw": "Revolutionary, disruptive, challenging the status quo",
    "magician": "Transformative, visionary, turning dreams into reality",
    "regular": "Relatable, down-to-earth, seeking connection and belonging",
    "lover": "Passionate, intimate, seeking pleasure and connection",
    "jester": "Playful, entertaining, bringing joy and spontaneity",
    "caregiver": "Nurturing, compassionate, protecting and caring for others",
    "creator": "Innovative, artistic, expressing imagination and originality",
    "ruler": "Authoritative, prestigious, seeking control and leadership",
})
UNDEFINED_PERSONALITY = "Undefined personality"

# opaque RGB -> archetype receiving the color bonus
COLOR_ARCHETYPES: MappingProxyType[tuple[int, int, int], str] = MappingProxyType({
    (255, 255, 255): "innocent",
    (0, 0, 0): "ruler",
    (255, 0, 0): "hero",
    (0, 0, 255): "sage",
    (0, 255, 0): "caregiver",
    (0, 128, 0): "caregiver",
    (255, 192, 203): "lover",
    (255, 255, 0): "jester",
    (128, 0, 128): "magician",
})

TOP_BACKGROUND_COUNT = 5
RANKING_SIZE = 3


class ArchetypeScorer(AbstractScorer):
    """
    Ranks the twelve brand archetypes. Score is the primary archetype's share of all archetype points.
    """

    METRIC_NAME = "archetype"

    def _color_bonuses(self, backgrounds: list[str]) -> list[tuple[str, str]]:
        bonuses: list[tuple[str, str]] = []
        for background in backgrounds[:TOP_BACKGROUND_COUNT]:
            rgba = parse_color(background)
            if rgba is None or rgba.a == 0.0:
                continue
            archetype = COLOR_ARCHETYPES.get((round(rgba.r), round(rgba.g), round(rgba.b)))
            if archetype is not None:
                bonuses.append((archetype, background))
        return bonuses

    def score(self, features: PageFeatures) -> ScoreResult:
        text = normalize_text(features.text)
        totals: dict[str, float] = dict.fromkeys(ARCHETYPE_KEYWORDS, 0.0)
        findings: list[Finding] = []

        for archetype, patterns in ARCHETYPE_PATTERNS.items():
            for pattern in patterns:
                matches = pattern.findall(text)
                if matches:
                    totals[archetype] += len(matches)
                    findings.append(Finding(category=archetype, trigger_text=f"{matches[0]} x{len(matches)}"))

        for archetype, background in self._color_bonuses(features.dominant_backgrounds):
            totals[archetype] += self.weights.archetype_color_bonus
            findings.append(Finding(category=archetype, trigger_text=f"background {background}"))

        # sorted() is stable, so equal totals keep declaration order
        ranking = sorted(totals.items(), key=lambda item: item[1], reverse=True)[:RANKING_SIZE]
        grand_total = sum(totals.values())
        primary, primary_total = ranking[0]
        has_signal = grand_total > 0

        return ScoreResult(
            score=clamp_score(100.0 * primary_total / grand_total) if has_signal else 0.0,
            evidence=findings,
            details={
                "ranking": [{"archetype": name, "score": total} for name, total in ranking],
                "primary": primary if has_signal else None,
                "personality": PERSONALITY_DESCRIPTIONS[primary] if has_signal else UNDEFINED_PERSONALITY,
                "all_scores": totals,
            },
        )
