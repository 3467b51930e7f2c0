"""
remixr/scoring/scorers/tone.py

Readability (Flesch reading ease), keyword-based tone and rhetorical markers.
"""

import re

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score
from remixr.utils.data_utils import normalize_text

POSITIVE_WORDS: frozenset[str] = frozenset({
    "great", "amazing", "wonderful", "excellent", "best", "love", "perfect", "happy",
})
NEGATIVE_WORDS: frozenset[str] = frozenset({
    "bad", "worst", "terrible", "hate", "problem", "issue", "difficult", "hard",
})
IMPERATIVE_VERBS: tuple[str, ...] = (
    "buy", "get", "try", "start", "join", "sign", "click", "download", "learn", "discover",
)
# matched as word prefixes: "excited" also counts "excitedly"
EMOTIONAL_WORDS: tuple[str, ...] = (
    "love", "hate", "fear", "joy", "sad", "angry", "excited", "worried", "happy", "anxious",
)

INCLUSIVE_WE_THRESHOLD = 10
DIRECT_YOU_THRESHOLD = 20
STATISTICS_THRESHOLD = 3

_SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")
_WORD_PATTERN = re.compile(r"[a-z]+(?:'[a-z]+)?")
_SYLLABLE_WORD_PATTERN = re.compile(r"\b[a-z]+\b")
_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")
_IMPERATIVE_PATTERN = re.compile(r"\b(?:" + "|".join(IMPERATIVE_VERBS) + r")\b", re.IGNORECASE)
_EMOTIONAL_PATTERN = re.compile(r"\b(?:" + "|".join(EMOTIONAL_WORDS) + r")\w*\b", re.IGNORECASE)
_WE_PATTERN = re.compile(r"\bwe\b", re.IGNORECASE)
_YOU_PATTERN = re.compile(r"\byou\b", re.IGNORECASE)
_STATISTIC_PATTERN = re.compile(r"\d+%|\d+ times", re.IGNORECASE)


def count_syllables(text: str) -> int:
    """Vowel-group runs per word, at least one per word."""
    return sum(
        max(1, len(_VOWEL_GROUP_PATTERN.findall(word)))
        for word in _SYLLABLE_WORD_PATTERN.findall(text.lower())
    )


def reading_ease(text: str) -> float:
    """
    Flesch reading ease: 206.835 - 1.015 * words/sentences - 84.6 * syllables/words.
    Sentence and word counts are floored at 1.
    """
    sentences = max(1, len([s for s in _SENTENCE_SPLIT_PATTERN.split(text) if s.strip()]))
    words = max(1, len(text.split()))
    return 206.835 - 1.015 * (words / sentences) - 84.6 * (count_syllables(text) / words)


def classify_tone(positive_count: int, negative_count: int) -> str:
    if positive_count > negative_count:
        return "Positive"
    if negative_count > positive_count:
        return "Negative"
    return "Neutral"


def rhetorical_devices(text: str) -> list[str]:
    """Hypotheticals, inclusive language, direct address and statistics, in that order."""
    devices: list[str] = []
    if "imagine if" in normalize_text(text):
        devices.append("Hypothetical")
    if len(_WE_PATTERN.findall(text)) > INCLUSIVE_WE_THRESHOLD:
        devices.append("Inclusive Language")
    if len(_YOU_PATTERN.findall(text)) > DIRECT_YOU_THRESHOLD:
        devices.append("Direct Address")
    if len(_STATISTIC_PATTERN.findall(text)) > STATISTICS_THRESHOLD:
        devices.append("Statistics/Numbers")
    return devices


def rhetoric_details(text: str) -> dict[str, object]:
    return {
        "imperatives": len(_IMPERATIVE_PATTERN.findall(text)),
        "questions": text.count("?"),
        "emotional_words": len(_EMOTIONAL_PATTERN.findall(text)),
        "rhetorical_devices": rhetorical_devices(text),
    }


class ToneScorer(AbstractScorer):
    """
    Score is the reading ease clamped to [0, 100]; text without words is neutral (0).
    Details carry the rhetorical markers: imperatives, questions, emotional words and devices.
    """

    METRIC_NAME = "tone"

    def score(self, features: PageFeatures) -> ScoreResult:
        text = features.text or ""
        tokens = _WORD_PATTERN.findall(normalize_text(text))
        if not tokens:
            return ScoreResult(details={
                "tone": "Neutral",
                "reading_ease": None,
                "word_count": 0,
                **rhetoric_details(text),
            })

        positive = [token for token in tokens if token in POSITIVE_WORDS]
        negative = [token for token in tokens if token in NEGATIVE_WORDS]
        findings = [Finding(category="positive", trigger_text=word) for word in sorted(set(positive))]
        findings.extend(Finding(category="negative", trigger_text=word) for word in sorted(set(negative)))

        ease = reading_ease(text)
        word_count = len(text.split())
        sentence_count = max(1, len([s for s in _SENTENCE_SPLIT_PATTERN.split(text) if s.strip()]))
        return ScoreResult(
            score=clamp_score(ease),
            evidence=findings,
            details={
                "tone": classify_tone(len(positive), len(negative)),
                "reading_ease": round(ease, 1),
                "word_count": word_count,
                "sentence_count": sentence_count,
                "avg_sentence_length": round(word_count / sentence_count, 1),
                "positive_words": len(positive),
                "negative_words": len(negative),
                **rhetoric_details(text),
            },
        )
