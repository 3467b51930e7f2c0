"""
remixr/scoring/scorers/contrast_audit.py

WCAG AA contrast audit of text-bearing nodes against their effective background.
"""

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult, Severity
from remixr.introspection.contrast import (
    WCAG_AA_LARGE_MIN_RATIO,
    WCAG_AA_MIN_RATIO,
    contrast_ratio,
    resolve_background_chain,
)
from remixr.scoring.abstract_scorer import AbstractScorer


class ContrastAuditScorer(AbstractScorer):
    """
    One finding per sampled node below 4.5:1 (HIGH below 3:1). Unknown colors are skipped.
    Score is the percentage of audited nodes that pass; 100 when nothing could be audited.
    """

    METRIC_NAME = "contrast_audit"

    def score(self, features: PageFeatures) -> ScoreResult:
        findings: list[Finding] = []
        audited = 0
        skipped = 0
        for sample in features.contrast_samples:
            background = resolve_background_chain(sample.background_chain)
            ratio = contrast_ratio(sample.color, background)
            if ratio is None:
                skipped += 1
                continue
            audited += 1
            if ratio < WCAG_AA_MIN_RATIO:
                findings.append(Finding(
                    category="low-contrast",
                    trigger_text=f"<{sample.tag}> {sample.text!r} {ratio:.2f}:1",
                    severity=Severity.HIGH if ratio < WCAG_AA_LARGE_MIN_RATIO else Severity.MEDIUM,
                ))

        passed = audited - len(findings)
        return ScoreResult(
            score=100.0 * passed / audited if audited else 100.0,
            evidence=findings,
            details={"audited": audited, "passed": passed, "failed": len(findings), "skipped": skipped},
        )
