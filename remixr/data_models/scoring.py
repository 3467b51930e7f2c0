"""
remixr/data_models/scoring.py

Data models for the heuristic scoring subsystem: features in, findings and scores out.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from remixr.data_models.structure import Geometry, Viewport


class Severity(StrEnum):
    """
    Severity of a finding.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Finding(BaseModel):
    """
    One recorded instance of a detected pattern.
    """
    model_config = ConfigDict(frozen=True)

    category: str = Field(
        ...,
        description="Pattern or category name",
        examples=["scarcity", "forced-continuity", "low-contrast"],
    )
    trigger_text: str = Field(
        ...,
        description="The text (phrase, label, selector) that triggered the finding",
    )
    severity: Severity = Field(
        default=Severity.LOW,
    )


class ScoreResult(BaseModel):
    """
    Output of a single scorer: a bounded score, its evidence and scorer-specific details.
    """
    score: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Normalized score in [0, 100]",
    )
    evidence: list[Finding] = Field(
        default_factory=list,
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Serializable scorer-specific extras (labels, rankings, averages)",
    )


class ScoreReport(BaseModel):
    """
    Metric name -> score result.
    """
    metrics: dict[str, ScoreResult] = Field(
        default_factory=dict,
    )

    def __getitem__(self, metric_name: str) -> ScoreResult:
        return self.metrics[metric_name]

    def __contains__(self, metric_name: object) -> bool:
        return metric_name in self.metrics

    def get(self, metric_name: str) -> ScoreResult | None:
        return self.metrics.get(metric_name)


class SpacingSample(BaseModel):
    """
    Vertical spacing of one sampled container, in pixels.
    """
    tag: str = "div"
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    margin_top: float = 0.0
    margin_bottom: float = 0.0


class ContrastSample(BaseModel):
    """
    A text-bearing node with its text color and the background chain used to resolve its backdrop.
    """
    tag: str = Field(
        ...,
        description="Element tag",
    )
    text: str = Field(
        default="",
        description="Truncated text content, for evidence",
    )
    color: str | None = Field(
        default=None,
        description="Computed text color",
    )
    background_chain: list[str | None] = Field(
        default_factory=list,
        description="Backgrounds of the node and its ancestors, nearest first, document root last",
    )


class WeightedBox(BaseModel):
    """
    A visually heavy element (img, h1, h2, button) with its geometry.
    """
    tag: str
    geometry: Geometry


class PageFeatures(BaseModel):
    """
    Structural and textual features consumed by every scorer.
    Built from a StructuralNode tree by remixr.scoring.features.extract_features, or directly by callers.
    """
    text: str = Field(
        default="",
        description="Raw visible text of the page",
    )
    title: str | None = Field(
        default=None,
        description="Document title",
    )
    viewport: Viewport = Field(
        default_factory=Viewport,
    )

    # counts
    element_count: int = Field(default=0, ge=0)
    visible_element_count: int = Field(default=0, ge=0)
    interactive_element_count: int = Field(default=0, ge=0)
    animation_count: int = Field(default=0, ge=0)
    dark_pattern_count: int | None = Field(
        default=None,
        ge=0,
        description="Precomputed dark pattern count; derived from text when None",
    )
    social_proof_marker_count: int = Field(default=0, ge=0)
    form_field_count: int = Field(default=0, ge=0)
    nav_link_count: int = Field(default=0, ge=0)
    images_missing_alt: int = Field(default=0, ge=0)
    image_count: int = Field(default=0, ge=0)
    clickable_count: int = Field(
        default=0,
        ge=0,
        description="Buttons and links",
    )
    h1_count: int = Field(default=0, ge=0)
    trust_signal_count: int = Field(
        default=0,
        ge=0,
        description="Elements with secure/verified/guarantee/trust class markers",
    )
    modal_count: int = Field(default=0, ge=0)
    notification_count: int = Field(default=0, ge=0)
    autoplay_count: int = Field(
        default=0,
        ge=0,
        description="Autoplaying video and audio elements",
    )
    has_meta_description: bool = False

    # typography
    first_h1_text: str | None = None
    heading_font_family: str | None = Field(
        default=None,
        description="Font family of the first h1/h2/h3",
    )
    heading_font_weight: str | None = Field(
        default=None,
        description="Font weight of the first h1/h2/h3",
    )
    h1_font_size: float | None = Field(default=None, description="Font size of the first h1, px")
    body_font_size: float | None = Field(default=None, description="Font size of the body, px")

    # labels and samples
    interactive_labels: list[str] = Field(default_factory=list)
    button_labels: list[str] = Field(default_factory=list)
    cta_labels: list[str] = Field(
        default_factory=list,
        description="Labels of buttons and .btn elements",
    )
    cta_areas: list[float] = Field(
        default_factory=list,
        description="Areas of measurable buttons and .btn elements, px^2",
    )
    link_hrefs: list[str] = Field(default_factory=list)
    dominant_backgrounds: list[str] = Field(
        default_factory=list,
        description="Most frequent non-transparent backgrounds, most frequent first",
    )
    spacing_samples: list[SpacingSample] = Field(default_factory=list)
    contrast_samples: list[ContrastSample] = Field(default_factory=list)
    class_names: list[str] = Field(default_factory=list)
    font_sizes: list[str] = Field(default_factory=list)
    text_colors: list[str] = Field(default_factory=list)
    weighted_boxes: list[WeightedBox] = Field(default_factory=list)
    hidden_texts: list[str] = Field(
        default_factory=list,
        description="Full text of hidden elements (display:none, visibility:hidden, opacity:0)",
    )
    script_sources: list[str] = Field(default_factory=list)
    data_inputs: list[str] = Field(
        default_factory=list,
        description="Type or name of inputs collecting personal data",
    )


class ScoringWeights(BaseModel):
    """
    Tunable numeric heuristics. Defaults carry no calibration beyond their origin.
    """
    model_config = ConfigDict(frozen=True)

    # cognitive load
    visible_element_weight: float = 0.1
    interactive_element_weight: float = 2.0
    animation_weight: float = 5.0
    dark_pattern_weight: float = 10.0
    density_threshold: float = 10.0  # elements per 100x100 viewport block
    density_bonus: float = 15.0

    # persuasion
    persuasion_match_weight: float = 10.0

    # severity -> points
    high_severity_weight: float = 30.0
    medium_severity_weight: float = 20.0
    low_severity_weight: float = 10.0

    # archetype
    archetype_color_bonus: float = 5.0

    # spacing bands (average top + bottom padding, px)
    spacious_threshold: float = 40.0
    balanced_threshold: float = 20.0

    # interaction friction
    form_field_weight: float = 5.0
    nav_link_weight: float = 2.0

    # visual tension
    imbalance_ratio: float = 1.5

    # strategy: scores above these raise remix opportunities
    cognitive_overload_threshold: float = 70.0
    friction_threshold: float = 50.0
    heavy_dom_threshold: int = 1500

    def severity_weight(self, severity: Severity) -> float:
        return {
            Severity.HIGH: self.high_severity_weight,
            Severity.MEDIUM: self.medium_severity_weight,
            Severity.LOW: self.low_severity_weight,
        }[severity]
