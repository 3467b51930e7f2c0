"""
remixr/scoring/scorers/shadow_patterns.py

Hidden manipulations: hidden costs, invisible trackers, personal-data collection,
images excluded from assistive technology, and manipulative buttons.
"""

from remixr.data_models.scoring import Finding, PageFeatures, ScoreResult, Severity
from remixr.scoring.abstract_scorer import AbstractScorer
from remixr.utils.data_utils import normalize_text, truncate

HIDDEN_COST_WORDS: tuple[str, ...] = ("price", "fee", "charge")
TRACKER_FRAGMENTS: tuple[str, ...] = ("analytics", "tracking", "pixel", "tag", "gtag", "fbq", "ga")
PRIVACY_ZUCKERING_LABELS: tuple[str, ...] = ("accept all", "agree to all")
CONFIRMSHAMING_LABELS: tuple[str, ...] = ("maybe later", "no thanks")
FAKE_SOCIAL_PROOF_PHRASES: tuple[str, ...] = ("other people are viewing", "people bought")


class ShadowPatternScorer(AbstractScorer):
    """
    One finding per hidden manipulation. Score is the severity-weighted sum, saturating at 100.
    """

    METRIC_NAME = "shadow_patterns"

    def score(self, features: PageFeatures) -> ScoreResult:
        findings: list[Finding] = []

        for hidden_text in features.hidden_texts:
            if any(word in hidden_text.lower() for word in HIDDEN_COST_WORDS):
                findings.append(Finding(category="hidden-costs", trigger_text=truncate(hidden_text), severity=Severity.HIGH))

        trackers = [
            src for src in features.script_sources
            if any(fragment in src.lower() for fragment in TRACKER_FRAGMENTS)
        ]
        findings.extend(
            Finding(category="invisible-tracker", trigger_text=src[:100], severity=Severity.MEDIUM) for src in trackers
        )

        findings.extend(
            Finding(category="data-collection", trigger_text=data_input) for data_input in features.data_inputs
        )
        findings.extend(
            Finding(category="missing-alt-text", trigger_text="img") for _ in range(features.images_missing_alt)
        )

        for label in features.button_labels:
            normalized = normalize_text(label)
            if any(phrase in normalized for phrase in PRIVACY_ZUCKERING_LABELS):
                findings.append(Finding(category="privacy-zuckering", trigger_text=truncate(label), severity=Severity.MEDIUM))
            if any(phrase in normalized for phrase in CONFIRMSHAMING_LABELS):
                findings.append(Finding(category="confirmshaming", trigger_text=truncate(label), severity=Severity.MEDIUM))

        text = normalize_text(features.text)
        for phrase in FAKE_SOCIAL_PROOF_PHRASES:
            if phrase in text:
                findings.append(Finding(category="fake-social-proof", trigger_text=phrase, severity=Severity.MEDIUM))
        if "limited time" in text and "only" in text:
            findings.append(Finding(category="artificial-scarcity", trigger_text="limited time", severity=Severity.MEDIUM))

        return ScoreResult(
            score=self.severity_total(findings),
            evidence=findings,
            details={
                "hidden_costs": any(finding.category == "hidden-costs" for finding in findings),
                "invisible_trackers": len(trackers),
                "data_collection": list(features.data_inputs),
                "a11y_violations": features.images_missing_alt,
            },
        )
