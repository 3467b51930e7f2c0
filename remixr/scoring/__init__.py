"""
remixr/scoring/__init__.py

Feature extraction and heuristic scoring.
"""

from remixr.scoring.abstract_scorer import AbstractScorer
from remixr.scoring.engine import ScoringEngine, score
from remixr.scoring.features import extract_features
from remixr.scoring.strategy import analyze_strategy

__all__ = [
    "AbstractScorer",
    "ScoringEngine",
    "analyze_strategy",
    "extract_features",
    "score",
]
