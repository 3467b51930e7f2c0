"""
remixr/data_models/report.py

Data models for the top-level inspection report.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from remixr.data_models.frameworks import FrameworkDetection
from remixr.data_models.scoring import ScoreReport
from remixr.data_models.snapshot import SnapshotNode
from remixr.data_models.strategy import StrategyReport
from remixr.data_models.structure import StructuralNode, Viewport


class ReportMetadata(BaseModel):
    """
    Metadata describing when and where a report was produced.
    """
    timestamp: int = Field(
        default_factory=lambda: int(datetime.now().timestamp()),
        description="Unix timestamp (seconds) when the report was produced",
    )
    url: str | None = Field(
        default=None,
        description="The inspected page URL, if known",
    )
    viewport: Viewport = Field(
        default_factory=Viewport,
    )


class Report(BaseModel):
    """
    Full inspection report.
    Every section degrades independently: a failed section is None (or empty), never a missing report.
    """
    metadata: ReportMetadata = Field(
        default_factory=ReportMetadata,
    )
    snapshot: SnapshotNode | None = Field(
        default=None,
        description="Bounded snapshot of the global symbol table",
    )
    structural_tree: StructuralNode | None = Field(
        default=None,
        description="Bounded structural tree of the document",
    )
    frameworks: FrameworkDetection = Field(
        default_factory=FrameworkDetection,
    )
    scores: ScoreReport = Field(
        default_factory=ScoreReport,
    )
    strategy: StrategyReport | None = Field(
        default=None,
        description="Strategic read of the page derived from its features and scores",
    )
