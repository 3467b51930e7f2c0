"""
remixr/data_models/strategy.py

Data models for the strategic read of a page: layout neurodynamics, conversion
architecture, attention engineering, competitor weaknesses and remix opportunities.
"""

from pydantic import BaseModel, Field


class EyeTrackPoint(BaseModel):
    """
    A predicted fixation point, in viewport pixels.
    """
    x: float
    y: float
    importance: str = Field(
        ...,
        examples=["Primary Hook", "Final CTA"],
    )


class Neurodynamics(BaseModel):
    """
    Layout pattern, target sizes and heading hierarchy.
    """
    pattern: str = "Z-Pattern (Standard)"
    fitts_law_compliance: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Average call-to-action area in hundreds of px^2, capped at 100",
    )
    visual_hierarchy_score: int = Field(
        default=0,
        ge=0,
        description="20 x (h1 font size / body font size); 0 when either size is unknown",
    )
    eye_track_estimation: list[EyeTrackPoint] = Field(
        default_factory=list,
    )


class LinguisticAnchors(BaseModel):
    """
    Counts of distinct loss-aversion and authority phrases present in the text.
    """
    authority_anchors: int = Field(default=0, ge=0)
    loss_aversion: int = Field(default=0, ge=0)


class ConversionArchitecture(BaseModel):
    """
    Call-to-action clarity and the friction standing between a visitor and conversion.
    """
    cta_clarity: str = Field(
        default="Medium",
        examples=["High", "Medium"],
    )
    friction_score: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="The higher of the interaction friction and shadow pattern scores",
    )
    deceptive_triggers: int = Field(
        default=0,
        ge=0,
        description="Dark pattern findings",
    )


class AttentionSignal(BaseModel):
    """
    One family of attention-grabbing elements.
    """
    type: str = Field(
        ...,
        examples=["modals", "autoplay-media", "notifications"],
    )
    count: int = Field(..., ge=1)


class RemixOpportunity(BaseModel):
    """
    A concrete redesign opportunity derived from the scores.
    """
    type: str = Field(
        ...,
        examples=["Simplification", "Rebalancing"],
    )
    target: str
    rationale: str
    action: str


class StrategyReport(BaseModel):
    """
    Strategic architecture of a page, aggregated from its features and score report.
    """
    cognitive_burden: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
    )
    neurodynamics: Neurodynamics = Field(
        default_factory=Neurodynamics,
    )
    linguistic_anchors: LinguisticAnchors = Field(
        default_factory=LinguisticAnchors,
    )
    conversion: ConversionArchitecture = Field(
        default_factory=ConversionArchitecture,
    )
    attention_engineering: list[AttentionSignal] = Field(
        default_factory=list,
    )
    competitor_weaknesses: list[str] = Field(
        default_factory=list,
    )
    remix_opportunities: list[RemixOpportunity] = Field(
        default_factory=list,
    )
