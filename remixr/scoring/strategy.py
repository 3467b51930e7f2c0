"""
remixr/scoring/strategy.py

Strategic architecture: a second pass over the page features and the score
report that reads conversion, attention and layout signals, lists weaknesses a
competitor could exploit, and derives remix opportunities.
"""

from __future__ import annotations

from remixr.data_models.scoring import PageFeatures, ScoreReport, ScoringWeights
from remixr.data_models.strategy import (
    AttentionSignal,
    ConversionArchitecture,
    EyeTrackPoint,
    LinguisticAnchors,
    Neurodynamics,
    RemixOpportunity,
    StrategyReport,
)
from remixr.utils.data_utils import normalize_text
from remixr.utils.logger import get_logger

logger = get_logger(name=__name__)

LOSS_AVERSION_PHRASES: tuple[str, ...] = ("don't miss", "lose", "wasted", "gone", "expired", "last chance")
AUTHORITY_PHRASES: tuple[str, ...] = ("guaranteed", "certified", "official", "exclusive", "verified")
CLEAR_CTA_WORDS: tuple[str, ...] = ("buy", "get", "start")
TEMPLATE_SYSTEMS: frozenset[str] = frozenset({"Bootstrap", "Tailwind"})

# Z-pattern fixation points as fractions of the viewport
Z_PATTERN: tuple[tuple[float, float, str], ...] = (
    (0.1, 0.1, "Primary Hook"),
    (0.9, 0.1, "Header Action"),
    (0.5, 0.5, "Content Center"),
    (0.9, 0.9, "Final CTA"),
)


def _metric_score(scores: ScoreReport, metric_name: str) -> float:
    result = scores.get(metric_name)
    return result.score if result is not None else 0.0


def _metric_detail(scores: ScoreReport, metric_name: str, key: str) -> object:
    result = scores.get(metric_name)
    return result.details.get(key) if result is not None else None


def analyze_neurodynamics(features: PageFeatures) -> Neurodynamics:
    """Target sizes (Fitts's law), h1/body size hierarchy and a Z-pattern eye-track estimate."""
    average_area = sum(features.cta_areas) / len(features.cta_areas) if features.cta_areas else 0.0
    hierarchy = 0
    if features.h1_font_size and features.body_font_size:
        hierarchy = round(features.h1_font_size / features.body_font_size * 20)
    width, height = features.viewport.width, features.viewport.height
    return Neurodynamics(
        fitts_law_compliance=min(100, round(average_area / 100)),
        visual_hierarchy_score=max(0, hierarchy),
        eye_track_estimation=[
            EyeTrackPoint(x=width * x, y=height * y, importance=importance)
            for x, y, importance in Z_PATTERN
        ],
    )


def analyze_linguistic_anchors(features: PageFeatures) -> LinguisticAnchors:
    text = normalize_text(features.text)
    return LinguisticAnchors(
        authority_anchors=sum(1 for phrase in AUTHORITY_PHRASES if phrase in text),
        loss_aversion=sum(1 for phrase in LOSS_AVERSION_PHRASES if phrase in text),
    )


def analyze_conversion(features: PageFeatures, scores: ScoreReport) -> ConversionArchitecture:
    cta_text = " ".join(normalize_text(label) for label in features.cta_labels)
    dark_patterns = scores.get("dark_patterns")
    return ConversionArchitecture(
        cta_clarity="High" if any(word in cta_text for word in CLEAR_CTA_WORDS) else "Medium",
        friction_score=max(_metric_score(scores, "interaction_friction"), _metric_score(scores, "shadow_patterns")),
        deceptive_triggers=len(dark_patterns.evidence) if dark_patterns is not None else 0,
    )


def analyze_attention(features: PageFeatures) -> list[AttentionSignal]:
    """Modals, autoplaying media and notification banners, omitting absent families."""
    counts = (
        ("modals", features.modal_count),
        ("autoplay-media", features.autoplay_count),
        ("notifications", features.notification_count),
    )
    return [AttentionSignal(type=signal_type, count=count) for signal_type, count in counts if count > 0]


def scan_competitor_weaknesses(
    features: PageFeatures,
    url: str | None = None,
    weights: ScoringWeights | None = None,
) -> list[str]:
    """SEO, accessibility, security and complexity weaknesses visible from the page itself."""
    weights = weights or ScoringWeights()
    weaknesses: list[str] = []
    if features.h1_count == 0:
        weaknesses.append("No H1 Tag (SEO Weakness)")
    elif features.h1_count > 1:
        weaknesses.append("Multiple H1 Tags (SEO Warning)")
    if not features.has_meta_description:
        weaknesses.append("Missing Meta Description")
    if features.images_missing_alt > 0:
        weaknesses.append(f"{features.images_missing_alt} images missing ALT text (A11y/SEO Weakness)")
    if url is not None and url.strip().lower().startswith("http:"):
        weaknesses.append("Non-HTTPS connection (Security/Trust Weakness)")
    if features.element_count > weights.heavy_dom_threshold:
        weaknesses.append(f"High DOM Complexity (>{weights.heavy_dom_threshold} nodes)")
    return weaknesses


def find_remix_opportunities(
    cognitive_burden: float,
    conversion: ConversionArchitecture,
    scores: ScoreReport,
    weights: ScoringWeights,
) -> list[RemixOpportunity]:
    opportunities: list[RemixOpportunity] = []

    if cognitive_burden > weights.cognitive_overload_threshold:
        opportunities.append(RemixOpportunity(
            type="Simplification",
            target="Information Architecture",
            rationale=f"Cognitive load is critical ({cognitive_burden:.0f}/100). Users are drowning in options.",
            action="Slash navigation links by 40% and increase whitespace.",
        ))

    if conversion.friction_score > weights.friction_threshold:
        opportunities.append(RemixOpportunity(
            type="Friction Removal",
            target="Conversion Funnel",
            rationale="Hidden costs or deceptive patterns are creating shadow friction. Trust is eroding.",
            action="Remove confirmshaming patterns and price items transparently upfront.",
        ))

    if _metric_detail(scores, "visual_tension", "balance") == "Unbalanced":
        dominance = _metric_detail(scores, "visual_tension", "dominance")
        opportunities.append(RemixOpportunity(
            type="Rebalancing",
            target="Visual Hierarchy",
            rationale=f"Layout is heavily {dominance}-dominant. The eye is getting stuck.",
            action="Introduce a counter-weight element (image or bold typography) on the opposing side.",
        ))

    design_system = _metric_detail(scores, "design_system", "detected")
    if design_system in TEMPLATE_SYSTEMS:
        opportunities.append(RemixOpportunity(
            type="Brand Differentiation",
            target="UI Framework",
            rationale=f"Site feels generic due to standard {design_system} tokens.",
            action="Override default border radii and inject a custom display typeface to break the template feel.",
        ))
    elif design_system == "Chaos":
        opportunities.append(RemixOpportunity(
            type="Systematization",
            target="Global Styles",
            rationale="Inconsistent spacing and color usage detected. No clear system.",
            action="Define a strict 8pt spacing grid and consolidate the detected colors into a cohesive palette.",
        ))

    return opportunities


def analyze_strategy(
    features: PageFeatures,
    scores: ScoreReport,
    url: str | None = None,
    weights: ScoringWeights | None = None,
) -> StrategyReport:
    """
    Read the strategic architecture of a page.
    Args:
        features: Extracted page features.
        scores: The page's score report; missing metrics read as neutral.
        url: Page URL, used to flag insecure connections.
        weights: Thresholds for remix opportunities and DOM complexity.
    Returns:
        StrategyReport.
    """
    weights = weights or ScoringWeights()
    cognitive_burden = _metric_score(scores, "cognitive_load")
    conversion = analyze_conversion(features, scores)
    strategy = StrategyReport(
        cognitive_burden=cognitive_burden,
        neurodynamics=analyze_neurodynamics(features),
        linguistic_anchors=analyze_linguistic_anchors(features),
        conversion=conversion,
        attention_engineering=analyze_attention(features),
        competitor_weaknesses=scan_competitor_weaknesses(features, url=url, weights=weights),
        remix_opportunities=find_remix_opportunities(cognitive_burden, conversion, scores, weights),
    )
    logger.debug(
        "📊 Strategy: %d weaknesses, %d remix opportunities",
        len(strategy.competitor_weaknesses),
        len(strategy.remix_opportunities),
    )
    return strategy
