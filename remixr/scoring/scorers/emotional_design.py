"""
remixr/scoring/scorers/emotional_design.py

Emotional design: color emotions, typography mood, visual weight,
design personality traits and the emotional intent of calls to action.
"""

import colorsys
from types import MappingProxyType

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult
from remixr.introspection.contrast import RGBA, parse_color
from remixr.scoring.abstract_scorer import AbstractScorer, clamp_score
from remixr.scoring.scorers.spacing_mood import average_spacing
from remixr.utils.data_utils import normalize_text

COLOR_EMOTIONS: MappingProxyType[str, str] = MappingProxyType({
    "red": "Passion, Urgency, Energy",
    "blue": "Trust, Calm, Professional",
    "green": "Growth, Health, Harmony",
    "yellow": "Optimism, Warmth, Attention",
    "purple": "Luxury, Creativity, Wisdom",
    "orange": "Enthusiasm, Confidence, Friendly",
    "black": "Sophistication, Power, Elegance",
    "white": "Purity, Simplicity, Cleanliness",
    "gray": "Neutral, Professional, Balanced",
})

# upper hue bound (degrees, exclusive) -> color family
HUE_FAMILIES: tuple[tuple[float, str], ...] = (
    (15.0, "red"),
    (45.0, "orange"),
    (70.0, "yellow"),
    (170.0, "green"),
    (260.0, "blue"),
    (345.0, "purple"),
    (360.0, "red"),
)

FONT_WEIGHT_KEYWORDS: MappingProxyType[str, int] = MappingProxyType({
    "normal": 400,
    "bold": 700,
    "bolder": 700,
    "lighter": 300,
})

# first matching phrase group wins
CTA_INTENTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Conversion-Focused", ("buy", "shop")),
    ("Discovery-Focused", ("learn", "explore")),
    ("Community-Focused", ("join", "sign up")),
)
DEFAULT_INTENT = "Information-Focused"

IMAGE_HEAVY_RATIO = 0.5
BALANCED_VISUAL_RATIO = 0.2
MINIMALIST_PADDING = 40.0
DENSE_MARGIN = 10.0
VISUAL_IMAGE_COUNT = 20
INTERACTIVE_CLICKABLE_COUNT = 50


def color_family(color: str | RGBA | None) -> str | None:
    """Coarse color family of a CSS color; None when unknown or transparent."""
    rgba = color if isinstance(color, RGBA) else parse_color(color)
    if rgba is None or rgba.a == 0.0:
        return None
    hue, saturation, value = colorsys.rgb_to_hsv(rgba.r / 255.0, rgba.g / 255.0, rgba.b / 255.0)
    if value < 0.2:
        return "black"
    if saturation < 0.15:
        return "white" if value > 0.9 else "gray"
    degrees = hue * 360.0
    for upper_bound, family in HUE_FAMILIES:
        if degrees < upper_bound:
            return family
    return "red"


def parse_font_weight(weight: str | None) -> int:
    """CSS font-weight as a number; unknown values read as normal (400)."""
    if not weight:
        return 400
    value = weight.strip().lower()
    if value in FONT_WEIGHT_KEYWORDS:
        return FONT_WEIGHT_KEYWORDS[value]
    try:
        return int(float(value))
    except ValueError:
        return 400


def typography_mood(font_family: str | None, font_weight: str | None) -> str | None:
    """Mood of the first heading's typography; None when nothing is known about it."""
    if font_family is None and font_weight is None:
        return None
    family = (font_family or "").lower()
    weight = parse_font_weight(font_weight)
    if "serif" in family.replace("sans-serif", ""):
        return "Traditional & Trustworthy"
    if "mono" in family:
        return "Technical & Modern"
    if weight >= 700:
        return "Bold & Confident"
    if weight <= 300:
        return "Elegant & Refined"
    return "Clean & Professional"


def classify_visual_weight(ratio: float) -> str:
    if ratio > IMAGE_HEAVY_RATIO:
        return "Image-Heavy"
    if ratio > BALANCED_VISUAL_RATIO:
        return "Balanced"
    return "Text-Heavy"


def emotional_intent(cta_labels: list[str]) -> str:
    cta_text = " ".join(normalize_text(label) for label in cta_labels)
    for intent, phrases in CTA_INTENTS:
        if any(phrase in cta_text for phrase in phrases):
            return intent
    return DEFAULT_INTENT


class EmotionalDesignScorer(AbstractScorer):
    """
    Visual weight is images per thousand characters of text (at least one thousand).
    Score is that ratio as a percentage, clamped to [0, 100].
    """

    METRIC_NAME = "emotional_design"

    def score(self, features: PageFeatures) -> ScoreResult:
        color_emotions: dict[str, str] = {}
        for background in features.dominant_backgrounds:
            family = color_family(background)
            if family is not None and family not in color_emotions:
                color_emotions[family] = COLOR_EMOTIONS[family]

        ratio = features.image_count / max(len(features.text) / 1000.0, 1.0)

        traits: list[str] = []
        averages = average_spacing(features.spacing_samples)
        if averages is not None and averages[0] > MINIMALIST_PADDING:
            traits.append("Minimalist")
        if features.image_count > VISUAL_IMAGE_COUNT:
            traits.append("Visual")
        if features.clickable_count > INTERACTIVE_CLICKABLE_COUNT:
            traits.append("Interactive")
        if averages is not None and averages[1] < DENSE_MARGIN:
            traits.append("Dense")

        intent = emotional_intent(features.cta_labels)
        findings = [Finding(category="color-emotion", trigger_text=family) for family in color_emotions]
        findings.extend(Finding(category="design-personality", trigger_text=trait) for trait in traits)

        return ScoreResult(
            score=clamp_score(100.0 * ratio),
            evidence=findings,
            details={
                "color_psychology": color_emotions,
                "typography_mood": typography_mood(features.heading_font_family, features.heading_font_weight),
                "visual_weight": classify_visual_weight(ratio),
                "image_text_ratio": round(ratio, 3),
                "design_personality": traits,
                "emotional_intent": intent,
            },
        )
