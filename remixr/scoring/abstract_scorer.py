"""
remixr/scoring/abstract_scorer.py

Abstract base class for heuristic scorers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult, ScoringWeights


def clamp_score(value: float) -> float:
    """Clamp a raw score into [0, 100]."""
    return min(100.0, max(0.0, float(value)))


class AbstractScorer(ABC):
    """
    Abstract base class for scorers.
    A scorer is a pure function of PageFeatures; it never raises for page content.
    All concrete scorers (CognitiveLoadScorer, DarkPatternScorer, ArchetypeScorer, ...) inherit from this.
    """

    # Class attributes _____________________________________________________________________________________________________

    _subclasses: ClassVar[list[type[AbstractScorer]]] = []  # list of all subclasses of AbstractScorer

    METRIC_NAME: ClassVar[str]


    # Magic methods ________________________________________________________________________________________________________

    def __init_subclass__(cls: type[AbstractScorer], **kwargs: Any) -> None:
        """
        Add the subclass to the AbstractScorer._subclasses list when the subclass is defined.
        """
        super().__init_subclass__(**kwargs)
        cls._subclasses.append(cls)

    def __init__(self, weights: ScoringWeights | None = None) -> None:
        """
        Initialize the scorer.
        Args:
            weights: Numeric heuristics; library defaults when None.
        """
        self.weights = weights or ScoringWeights()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(metric_name={self.metric_name!r})"


    # Class methods ________________________________________________________________________________________________________

    @classmethod
    def get_all_subclasses(cls: type[AbstractScorer]) -> list[type[AbstractScorer]]:
        """
        Return a copy of the list of all subclasses of AbstractScorer.
        """
        return cls._subclasses.copy()

    @classmethod
    def build_instances(cls, weights: ScoringWeights | None = None) -> list[AbstractScorer]:
        """
        Instances the engine runs by default. One per scorer class unless a scorer covers several metrics.
        """
        return [cls(weights=weights)]


    # Public methods _______________________________________________________________________________________________________

    @property
    def metric_name(self) -> str:
        """Key of this scorer's result in the ScoreReport."""
        return self.METRIC_NAME

    def severity_total(self, findings: list[Finding]) -> float:
        """Sum of severity weights over findings, clamped to [0, 100]."""
        return clamp_score(sum(self.weights.severity_weight(finding.severity) for finding in findings))

    @abstractmethod
    def score(self, features: PageFeatures) -> ScoreResult:
        """
        Score a page.
        Args:
            features: Extracted page features.
        Returns:
            ScoreResult with a score in [0, 100], evidence and details.
        """
        # not raising NotImplementedError here because this is an abstract method
        pass
