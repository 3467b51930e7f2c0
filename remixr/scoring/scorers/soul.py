"""
remixr/scoring/scorers/soul.py

The page's "soul": authenticity against corporate jargon, trust signals,
transparency links, human-centred language, intention and purpose.
"""

import re

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score
from remixr.utils.data_utils import normalize_text

AUTHENTICITY_PHRASES: tuple[str, ...] = (
    "we", "our story", "our mission", "founded", "believe", "values", "about us",
)
CORPORATE_JARGON: tuple[str, ...] = (
    "synergy", "leverage", "paradigm", "ecosystem", "disruptive", "optimize", "stakeholder",
)
HUMAN_WORDS: tuple[str, ...] = ("you", "your", "people", "community", "together", "help", "care")
CORPORATE_WORDS: tuple[str, ...] = ("company", "business", "enterprise", "corporation", "organization", "firm")
TRANSPARENCY_HREF_FRAGMENTS: tuple[str, ...] = ("privacy", "terms", "about")

# first matching phrase group wins
INTENTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Commercial", ("buy", "purchase", "shop")),
    ("Educational", ("learn", "read", "discover")),
    ("Social", ("connect", "share", "community")),
)
DEFAULT_INTENTION = "Informational"

# (purpose, title words, h1 words); first match wins
PURPOSES: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...] = (
    ("Content & Publishing", ("blog",), ("blog",)),
    ("E-commerce", ("shop",), ("shop",)),
    ("Education", ("learn",), ("course",)),
    ("Software/SaaS", ("app",), ("software",)),
)
DEFAULT_PURPOSE = "General Website"

AUTHENTICITY_POINTS = 10
JARGON_AUTHENTICITY_PENALTY = 5
JARGON_CORPORATENESS_POINTS = 10
TRANSPARENCY_POINTS_PER_LINK = 20


def _phrase_pattern(phrases: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(re.escape(phrase) for phrase in phrases) + r")\b")


_HUMAN_PATTERN = _phrase_pattern(HUMAN_WORDS)
_CORPORATE_PATTERN = _phrase_pattern(CORPORATE_WORDS)


def _contains(text: str, phrase: str) -> bool:
    return re.search(rf"\b{re.escape(phrase)}\b", text) is not None


def classify_intention(text: str) -> str:
    for intention, words in INTENTIONS:
        if any(word in text for word in words):
            return intention
    return DEFAULT_INTENTION


def classify_purpose(title: str, h1_text: str) -> str:
    for purpose, title_words, h1_words in PURPOSES:
        if any(word in title for word in title_words) or any(word in h1_text for word in h1_words):
            return purpose
    return DEFAULT_PURPOSE


class SoulScorer(AbstractScorer):
    """
    Phrases and words match on word boundaries; intention and purpose keywords match as substrings.
    Score is the coherence: 100 minus the excess of corporateness over human-centred words, clamped to [0, 100].
    """

    METRIC_NAME = "soul"

    def score(self, features: PageFeatures) -> ScoreResult:
        text = normalize_text(features.text)
        findings: list[Finding] = []

        authenticity = 0
        corporateness = 0
        for phrase in AUTHENTICITY_PHRASES:
            if _contains(text, phrase):
                authenticity += AUTHENTICITY_POINTS
        for jargon in CORPORATE_JARGON:
            if _contains(text, jargon):
                corporateness += JARGON_CORPORATENESS_POINTS
                authenticity -= JARGON_AUTHENTICITY_PENALTY
                findings.append(Finding(category="corporate-jargon", trigger_text=jargon))

        human_centered = len(_HUMAN_PATTERN.findall(text))
        corporateness += len(_CORPORATE_PATTERN.findall(text))

        transparency_links = [
            href for href in features.link_hrefs
            if any(fragment in href.lower() for fragment in TRANSPARENCY_HREF_FRAGMENTS)
        ]
        transparency = min(len(transparency_links) * TRANSPARENCY_POINTS_PER_LINK, 100)

        coherence = max(0, 100 - (corporateness - human_centered))
        return ScoreResult(
            score=clamp_score(coherence),
            evidence=findings,
            details={
                "authenticity": authenticity,
                "corporateness": corporateness,
                "human_centered": human_centered,
                "trust_signals": features.trust_signal_count,
                "transparency_score": transparency,
                "coherence": coherence,
                "intention": classify_intention(text),
                "purpose": classify_purpose(
                    normalize_text(features.title),
                    normalize_text(features.first_h1_text),
                ),
            },
        )
