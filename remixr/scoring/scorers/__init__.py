"""
remixr/scoring/scorers/__init__.py

Heuristic scorers, one per metric. Importing this package registers every built-in scorer.
"""

from remixr.scoring.scorers.cognitive_load import CognitiveLoadScorer
from remixr.scoring.scorers.persuasion import PersuasionScorer
from remixr.scoring.scorers.dark_patterns import DarkPatternScorer
from remixr.scoring.scorers.archetype import ArchetypeScorer
from remixr.scoring.scorers.tone import ToneScorer
from remixr.scoring.scorers.spacing_mood import SpacingMoodScorer
from remixr.scoring.scorers.contrast_audit import ContrastAuditScorer
from remixr.scoring.scorers.design_system import DesignSystemScorer
from remixr.scoring.scorers.visual_tension import VisualTensionScorer
from remixr.scoring.scorers.interaction_friction import InteractionFrictionScorer
from remixr.scoring.scorers.shadow_patterns import ShadowPatternScorer
from remixr.scoring.scorers.soul import SoulScorer
from remixr.scoring.scorers.emotional_design import EmotionalDesignScorer

__all__ = [
    "CognitiveLoadScorer",
    "PersuasionScorer",
    "DarkPatternScorer",
    "ArchetypeScorer",
    "ToneScorer",
    "SpacingMoodScorer",
    "ContrastAuditScorer",
    "DesignSystemScorer",
    "VisualTensionScorer",
    "InteractionFrictionScorer",
    "ShadowPatternScorer",
    "SoulScorer",
    "EmotionalDesignScorer",
]
