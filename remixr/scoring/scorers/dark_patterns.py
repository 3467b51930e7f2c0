"""
remixr/scoring/scorers/dark_patterns.py

Dark pattern detection against a fixed phrase table.
"""

from types import MappingProxyType

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult, Severity
from remixr.scoring.abstract_scorer import AbstractScorer
from remixr.utils.data_utils import normalize_text

# pattern -> (trigger phrases, severity)
DARK_PATTERNS: MappingProxyType[str, tuple[tuple[str, ...], Severity]] = MappingProxyType({
    "forced-continuity": (("trial ends", "auto-renew", "automatic renewal", "will be charged"), Severity.HIGH),
    "confirmshaming": (("no thanks", "no, i don't want", "maybe later", "skip this"), Severity.MEDIUM),
    "hidden-costs": (("additional fees", "service charge", "processing fee", "hidden"), Severity.HIGH),
    "bait-and-switch": (("limited time", "exclusive", "members only", "special offer"), Severity.MEDIUM),
    "disguised-ads": (("sponsored", "promoted", "recommended for you"), Severity.LOW),
    "roach-motel": (("easy to subscribe", "cancel anytime", "no commitment"), Severity.HIGH),
    "privacy-zuckering": (("accept all", "agree to all", "allow cookies"), Severity.MEDIUM),
})


class DarkPatternScorer(AbstractScorer):
    """
    One finding per (pattern, phrase) present in the page text or an interactive label.
    Score is the severity-weighted sum of findings, saturating at 100.
    """

    METRIC_NAME = "dark_patterns"

    def score(self, features: PageFeatures) -> ScoreResult:
        haystacks = [normalize_text(features.text)]
        haystacks.extend(normalize_text(label) for label in features.interactive_labels)

        findings: list[Finding] = []
        for pattern, (phrases, severity) in DARK_PATTERNS.items():
            for phrase in phrases:
                if any(phrase in haystack for haystack in haystacks):
                    findings.append(Finding(category=pattern, trigger_text=phrase, severity=severity))

        return ScoreResult(
            score=self.severity_total(findings),
            evidence=findings,
            details={"patterns": sorted({finding.category for finding in findings})},
        )
