"""
tests/unit/scoring/test_scorers.py

Unit tests for the built-in heuristic scorers.
"""

import pytest

from remixr.data_models.scoring import (
    ContrastSample,
    PageFeatures,
    ScoringWeights,
    Severity,
    SpacingSample,
    WeightedBox,
)
from remixr.data_models.structure import Geometry, Viewport
from remixr.introspection.contrast import contrast_ratio, resolve_effective_background
from remixr.scoring.abstract_scorer import clamp_score
from remixr.scoring.features import extract_features
from remixr.scoring.scorers import (
    ArchetypeScorer,
    CognitiveLoadScorer,
    ContrastAuditScorer,
    DarkPatternScorer,
    DesignSystemScorer,
    EmotionalDesignScorer,
    InteractionFrictionScorer,
    PersuasionScorer,
    ShadowPatternScorer,
    SoulScorer,
    SpacingMoodScorer,
    ToneScorer,
    VisualTensionScorer,
)
from remixr.scoring.scorers.emotional_design import color_family, parse_font_weight, typography_mood
from remixr.scoring.scorers.soul import classify_purpose
from remixr.scoring.scorers.tone import classify_tone, count_syllables, rhetoric_details, rhetorical_devices


def box(tag: str, x: float, width: float, height: float) -> WeightedBox:
    return WeightedBox(tag=tag, geometry=Geometry(x=x, y=0, width=width, height=height))


class TestClampScore:
    """Test cases for clamp_score."""

    @pytest.mark.parametrize("value,expected", [(-5, 0.0), (0, 0.0), (42.5, 42.5), (100, 100.0), (1e9, 100.0)])
    def test_clamp(self, value: float, expected: float) -> None:
        assert clamp_score(value) == expected


class TestCognitiveLoadScorer:
    """Test cases for CognitiveLoadScorer."""

    def test_empty_page(self) -> None:
        result = CognitiveLoadScorer().score(PageFeatures())
        assert result.score == 0.0
        assert result.details["dark_patterns"] == 0

    def test_saturates_at_100(self) -> None:
        """2000 interactive elements and 50 dark patterns clamp to exactly 100."""
        features = PageFeatures(interactive_element_count=2000, dark_pattern_count=50)
        result = CognitiveLoadScorer().score(features)

        assert result.score == 100.0
        assert result.details["raw_score"] > 100

    def test_weighted_sum(self) -> None:
        features = PageFeatures(
            visible_element_count=100,
            interactive_element_count=5,
            animation_count=2,
            dark_pattern_count=1,
        )
        # 0.1*100 + 2*5 + 5*2 + 10*1
        assert CognitiveLoadScorer().score(features).score == pytest.approx(40.0)

    def test_density_bonus(self) -> None:
        """More than 10 elements per 100x100 block of viewport adds the density bonus."""
        features = PageFeatures(element_count=2000, dark_pattern_count=0)
        result = CognitiveLoadScorer().score(features)

        assert result.score == pytest.approx(15.0)
        assert result.details["density"] == pytest.approx(19.53)

    def test_zero_viewport_has_no_density(self) -> None:
        features = PageFeatures(element_count=50, viewport=Viewport(width=0, height=0), dark_pattern_count=0)
        assert CognitiveLoadScorer().score(features).details["density"] is None

    def test_dark_patterns_derived_from_text(self) -> None:
        result = CognitiveLoadScorer().score(PageFeatures(text="Accept all"))

        assert result.details["dark_patterns"] == 1
        assert result.score == pytest.approx(10.0)

    @pytest.mark.parametrize("field", ["visible_element_count", "interactive_element_count", "animation_count"])
    def test_monotonic(self, field: str) -> None:
        """Increasing any counted input never lowers the score."""
        scorer = CognitiveLoadScorer()
        scores = [
            scorer.score(PageFeatures(dark_pattern_count=0, **{field: count})).score
            for count in (0, 1, 10, 100, 1000)
        ]
        assert scores == sorted(scores)


class TestPersuasionScorer:
    """Test cases for PersuasionScorer."""

    TEXT = "Only 3 left! Buy now, don’t miss out!"

    def test_scarcity(self) -> None:
        result = PersuasionScorer(category="scarcity").score(PageFeatures(text=self.TEXT))

        assert result.score == 10.0
        assert [finding.trigger_text for finding in result.evidence] == ["only 3 left"]

    def test_urgency_with_typographic_apostrophe(self) -> None:
        result = PersuasionScorer(category="urgency").score(PageFeatures(text=self.TEXT))

        assert result.score == 10.0
        assert result.details["count"] == 1

    @pytest.mark.parametrize("category", ["authority", "social_proof"])
    def test_unmatched_categories(self, category: str) -> None:
        assert PersuasionScorer(category=category).score(PageFeatures(text=self.TEXT)).score == 0.0

    def test_one_finding_per_occurrence(self) -> None:
        result = PersuasionScorer(category="scarcity").score(PageFeatures(text="Hurry! Hurry! Selling fast."))
        assert len(result.evidence) == 3
        assert result.score == 30.0

    def test_saturates(self) -> None:
        result = PersuasionScorer(category="scarcity").score(PageFeatures(text="hurry " * 20))
        assert result.score == 100.0

    def test_social_proof_counts_class_markers(self) -> None:
        features = PageFeatures(text="Join 10,000 happy customers", social_proof_marker_count=2)
        result = PersuasionScorer(category="social_proof").score(features)

        assert result.score == 30.0
        assert result.details == {"count": 3, "class_markers": 2}

    def test_class_markers_only_for_social_proof(self) -> None:
        features = PageFeatures(social_proof_marker_count=5)
        assert PersuasionScorer(category="authority").score(features).score == 0.0

    def test_weight_is_tunable(self) -> None:
        scorer = PersuasionScorer(category="scarcity", weights=ScoringWeights(persuasion_match_weight=25.0))
        assert scorer.score(PageFeatures(text="Low stock, hurry")).score == 50.0

    def test_metric_names(self) -> None:
        names = [scorer.metric_name for scorer in PersuasionScorer.build_instances()]
        assert names == ["persuasion.scarcity", "persuasion.urgency", "persuasion.authority", "persuasion.social_proof"]

    def test_unknown_category(self) -> None:
        with pytest.raises(ValueError):
            PersuasionScorer(category="guilt")


class TestDarkPatternScorer:
    """Test cases for DarkPatternScorer."""

    def test_text_and_labels(self) -> None:
        features = PageFeatures(
            text="Your free trial ends soon. Cancel anytime.",
            interactive_labels=["No thanks"],
        )
        result = DarkPatternScorer().score(features)

        assert {(f.category, f.severity) for f in result.evidence} == {
            ("forced-continuity", Severity.HIGH),
            ("roach-motel", Severity.HIGH),
            ("confirmshaming", Severity.MEDIUM),
        }
        # 30 + 30 + 20
        assert result.score == 80.0
        assert result.details["patterns"] == ["confirmshaming", "forced-continuity", "roach-motel"]

    def test_phrase_counted_once(self) -> None:
        """A phrase repeated on the page is one finding."""
        result = DarkPatternScorer().score(PageFeatures(text="sponsored sponsored sponsored"))
        assert len(result.evidence) == 1
        assert result.score == 10.0

    def test_saturates(self) -> None:
        text = "trial ends auto-renew automatic renewal will be charged additional fees service charge"
        assert DarkPatternScorer().score(PageFeatures(text=text)).score == 100.0

    def test_clean_page(self) -> None:
        result = DarkPatternScorer().score(PageFeatures(text="Welcome to our bakery."))
        assert result.score == 0.0
        assert result.evidence == []


class TestArchetypeScorer:
    """Test cases for ArchetypeScorer."""

    def test_dominant_keyword_wins(self) -> None:
        """A keyword repeated 10x over a single other keyword dominates the ranking."""
        result = ArchetypeScorer().score(PageFeatures(text="adventure " * 10 + "wisdom"))

        assert result.details["primary"] == "explorer"
        assert result.details["personality"].startswith("Adventurous")
        assert result.score == pytest.approx(100.0 * 10 / 11)
        assert [entry["archetype"] for entry in result.details["ranking"]] == ["explorer", "sage", "innocent"]

    def test_keyword_prefix_matches(self) -> None:
        result = ArchetypeScorer().score(PageFeatures(text="Transforming dreams"))
        assert result.details["all_scores"]["magician"] == 2.0

    def test_no_signal(self) -> None:
        result = ArchetypeScorer().score(PageFeatures(text="zzz"))

        assert result.score == 0.0
        assert result.details["primary"] is None
        assert result.details["personality"] == "Undefined personality"
        # ties keep declaration order
        assert [entry["archetype"] for entry in result.details["ranking"]] == ["innocent", "explorer", "sage"]

    def test_color_bonus(self) -> None:
        features = PageFeatures(dominant_backgrounds=["rgb(0, 0, 0)", "rgba(255, 0, 0, 0)", "#123456"])
        result = ArchetypeScorer().score(features)

        assert result.details["primary"] == "ruler"
        assert result.details["all_scores"]["ruler"] == 5.0
        assert result.details["all_scores"]["hero"] == 0.0
        assert result.score == 100.0


class TestToneScorer:
    """Test cases for ToneScorer."""

    def test_positive_text(self) -> None:
        result = ToneScorer().score(PageFeatures(text="This is great. I love it!"))

        assert result.details["tone"] == "Positive"
        assert result.details["word_count"] == 6
        assert result.details["sentence_count"] == 2
        assert result.details["positive_words"] == 2
        # very easy text reads above 100 and is clamped
        assert result.score == 100.0
        assert result.details["reading_ease"] > 100

    def test_negative_text(self) -> None:
        result = ToneScorer().score(PageFeatures(text="This is a terrible, difficult problem."))
        assert result.details["tone"] == "Negative"
        assert {f.trigger_text for f in result.evidence} == {"terrible", "difficult", "problem"}

    def test_hard_text_scores_low(self) -> None:
        text = "Internationalization considerations notwithstanding, organizational responsibilities predominate."
        assert ToneScorer().score(PageFeatures(text=text)).score < 30

    @pytest.mark.parametrize("text", ["", "   ", "123 456 !!!"])
    def test_no_words_is_neutral(self, text: str) -> None:
        result = ToneScorer().score(PageFeatures(text=text))

        assert result.score == 0.0
        assert result.details["tone"] == "Neutral"
        assert result.details["reading_ease"] is None

    @pytest.mark.parametrize("word,expected", [("banana", 3), ("the", 1), ("rhythm", 1), ("queue", 1), ("hmm", 1)])
    def test_count_syllables(self, word: str, expected: int) -> None:
        assert count_syllables(word) == expected

    def test_classify_tone_tie(self) -> None:
        assert classify_tone(2, 2) == "Neutral"

    def test_rhetoric_details(self) -> None:
        text = "Imagine if you could buy it today? Get started and try it. We love it, I was so excited!"
        result = ToneScorer().score(PageFeatures(text=text))

        assert result.details["imperatives"] == 3
        assert result.details["questions"] == 1
        assert result.details["emotional_words"] == 2
        assert result.details["rhetorical_devices"] == ["Hypothetical"]
        # rhetoric never changes the tone label
        assert result.details["tone"] == "Positive"

    def test_rhetoric_on_wordless_text(self) -> None:
        details = ToneScorer().score(PageFeatures(text="??")).details

        assert details["tone"] == "Neutral"
        assert details["questions"] == 2
        assert details["imperatives"] == 0

    def test_rhetorical_device_thresholds(self) -> None:
        text = "we " * 11 + "you " * 21 + "50% off, 3 times faster, 20% more, 10% less"

        assert rhetorical_devices(text) == ["Inclusive Language", "Direct Address", "Statistics/Numbers"]
        assert rhetorical_devices("we " * 10 + "you " * 20 + "1% 2% 3%") == []

    def test_emotional_words_match_prefixes(self) -> None:
        assert rhetoric_details("Lovely, fearless and joyful")["emotional_words"] == 3


class TestSpacingMoodScorer:
    """Test cases for SpacingMoodScorer."""

    def test_nested_padded_containers_are_spacious(self, make_node) -> None:
        """Five nested containers with 40px top and bottom padding average 80px."""
        node = make_node("div", padding_top="40px", padding_bottom="40px")
        for _ in range(4):
            node = make_node("div", node, padding_top="40px", padding_bottom="40px")

        result = SpacingMoodScorer().score(extract_features(node))

        assert result.details["feeling"] == "Spacious"
        assert result.details["avg_padding"] == 80.0
        assert result.details["sample_size"] == 5
        assert result.score == 80.0

    @pytest.mark.parametrize(
        "padding,feeling",
        [(5.0, "Dense"), (10.0, "Balanced"), (20.0, "Balanced"), (20.5, "Spacious")],
    )
    def test_bands(self, padding: float, feeling: str) -> None:
        """Bands apply to top + bottom padding: >40 spacious, 20..40 balanced, <20 dense."""
        features = PageFeatures(spacing_samples=[SpacingSample(padding_top=padding, padding_bottom=padding)])
        assert SpacingMoodScorer().score(features).details["feeling"] == feeling

    def test_margins_averaged(self) -> None:
        features = PageFeatures(spacing_samples=[
            SpacingSample(margin_top=10, margin_bottom=10),
            SpacingSample(margin_top=0, margin_bottom=0),
        ])
        assert SpacingMoodScorer().score(features).details["avg_margin"] == 10.0

    def test_no_samples(self) -> None:
        result = SpacingMoodScorer().score(PageFeatures())
        assert result.score == 0.0
        assert result.details["feeling"] is None
        assert result.details["sample_size"] == 0


class TestContrastAuditScorer:
    """Test cases for ContrastAuditScorer."""

    def test_mixed_samples(self) -> None:
        features = PageFeatures(contrast_samples=[
            ContrastSample(tag="p", text="ok", color="rgb(0, 0, 0)", background_chain=[None, "#ffffff"]),
            ContrastSample(tag="p", text="grey", color="#777777", background_chain=["transparent", "#ffffff"]),
            ContrastSample(tag="button", text="faint", color="rgb(200, 200, 200)", background_chain=["#fff"]),
            ContrastSample(tag="span", text="?", color="currentColor", background_chain=["#fff"]),
        ])
        result = ContrastAuditScorer().score(features)

        assert result.details == {"audited": 3, "passed": 1, "failed": 2, "skipped": 1}
        assert result.score == pytest.approx(100.0 / 3)
        assert [f.severity for f in result.evidence] == [Severity.MEDIUM, Severity.HIGH]
        assert all(f.category == "low-contrast" for f in result.evidence)

    def test_transparent_chain_uses_white_canvas(self) -> None:
        features = PageFeatures(contrast_samples=[
            ContrastSample(tag="p", color="#ffffff", background_chain=[None, "rgba(0, 0, 0, 0)"]),
        ])
        result = ContrastAuditScorer().score(features)
        assert result.evidence[0].severity == Severity.HIGH

    def test_nothing_audited(self) -> None:
        assert ContrastAuditScorer().score(PageFeatures()).score == 100.0

    def test_matches_node_resolution(self, make_node) -> None:
        """Audited ratios use the same backdrop as resolving the live node."""
        text = make_node("p", "Dim copy", color="#333333")
        section = make_node("section", text, background_color="rgba(0, 0, 0, 0)")
        root = make_node("html", section, background_color="rgb(0, 0, 0)")
        expected = contrast_ratio("#333333", resolve_effective_background(text, ancestors=[root, section]))

        result = ContrastAuditScorer().score(extract_features(root))

        assert result.evidence[0].trigger_text.endswith(f"{expected:.2f}:1")
        assert result.evidence[0].severity == Severity.HIGH


class TestDesignSystemScorer:
    """Test cases for DesignSystemScorer."""

    @pytest.mark.parametrize(
        "class_names,system",
        [
            (["btn", "btn-primary"], "Bootstrap"),
            (["flex", "p-4"], "Tailwind"),
            (["MuiButton-root"], "Material UI"),
            (["css-1x2y", "chakra-button"], "Chakra UI / Emotion"),
            (["columns", "button", "is-primary"], "Bulma"),
            (["ant-btn"], "Ant Design"),
            (["hero", "card"], "Custom/Unknown"),
        ],
    )
    def test_detection(self, class_names: list[str], system: str) -> None:
        assert DesignSystemScorer().score(PageFeatures(class_names=class_names)).details["detected"] == system

    def test_last_matching_rule_wins(self) -> None:
        result = DesignSystemScorer().score(PageFeatures(class_names=["btn-primary", "p-4"]))

        assert result.details["detected"] == "Tailwind"
        assert len(result.evidence) == 2

    def test_cohesion_scores(self) -> None:
        scorer = DesignSystemScorer()
        assert scorer.score(PageFeatures(class_names=["ant-btn"])).score == 90.0
        assert scorer.score(PageFeatures(class_names=["x"])).score == 60.0

    def test_token_sprawl_is_chaos(self) -> None:
        features = PageFeatures(font_sizes=[f"{size}px" for size in range(10, 31)])
        result = DesignSystemScorer().score(features)

        assert result.details["detected"] == "Chaos"
        assert result.details["tokens"] == {"font_sizes": 21, "colors": 0}
        assert result.score == 20.0

    def test_known_system_not_demoted_by_sprawl(self) -> None:
        features = PageFeatures(class_names=["btn-primary"], text_colors=[f"#0000{i:02x}" for i in range(30)])
        assert DesignSystemScorer().score(features).details["detected"] == "Bootstrap"


class TestVisualTensionScorer:
    """Test cases for VisualTensionScorer."""

    VIEWPORT = Viewport(width=1000, height=800)

    def test_balanced(self) -> None:
        features = PageFeatures(viewport=self.VIEWPORT, weighted_boxes=[box("img", 0, 100, 100), box("img", 600, 100, 100)])
        result = VisualTensionScorer().score(features)

        assert result.details["balance"] == "Balanced"
        assert result.details["dominance"] == "Center"
        assert result.score == 100.0
        assert result.evidence == []

    def test_left_dominance(self) -> None:
        features = PageFeatures(viewport=self.VIEWPORT, weighted_boxes=[box("img", 0, 200, 200), box("button", 600, 100, 100)])
        result = VisualTensionScorer().score(features)

        assert result.details["dominance"] == "Left"
        assert result.details["left_weight"] == 40000.0
        assert result.score == 25.0
        assert result.evidence[0].category == "visual-imbalance"

    def test_right_dominance(self) -> None:
        features = PageFeatures(viewport=self.VIEWPORT, weighted_boxes=[box("h1", 700, 300, 100)])
        result = VisualTensionScorer().score(features)

        assert result.details["balance"] == "Unbalanced"
        assert result.details["dominance"] == "Right"
        assert result.score == 0.0

    def test_nothing_weighted(self) -> None:
        assert VisualTensionScorer().score(PageFeatures()).score == 100.0


class TestInteractionFrictionScorer:
    """Test cases for InteractionFrictionScorer."""

    def test_weighted_sum(self) -> None:
        result = InteractionFrictionScorer().score(PageFeatures(form_field_count=3, nav_link_count=2))

        assert result.score == 19.0
        assert result.details["navigation_depth"] == "Optimal"

    def test_deep_navigation(self) -> None:
        result = InteractionFrictionScorer().score(PageFeatures(nav_link_count=21))

        assert result.details["navigation_depth"] == "High"
        assert result.score == 42.0

    def test_saturates(self) -> None:
        assert InteractionFrictionScorer().score(PageFeatures(form_field_count=30)).score == 100.0


class TestShadowPatternScorer:
    """Test cases for ShadowPatternScorer."""

    def test_clean_page(self) -> None:
        result = ShadowPatternScorer().score(PageFeatures(text="Hello"))

        assert result.score == 0.0
        assert result.details == {
            "hidden_costs": False,
            "invisible_trackers": 0,
            "data_collection": [],
            "a11y_violations": 0,
        }

    def test_hidden_costs(self) -> None:
        result = ShadowPatternScorer().score(PageFeatures(hidden_texts=["Service fee $4.99", "Menu"]))

        assert result.details["hidden_costs"] is True
        assert [f.category for f in result.evidence] == ["hidden-costs"]
        assert result.score == 30.0

    def test_cost_word_past_evidence_cut_off(self, make_node) -> None:
        """A cost word beyond the first 50 characters of hidden text is still found."""
        hidden = "Your order summary and delivery details are below, plus a processing fee"
        tree = make_node("body", make_node("div", hidden, display="none"))

        result = ShadowPatternScorer().score(extract_features(tree))

        assert result.details["hidden_costs"] is True
        assert [f.category for f in result.evidence] == ["hidden-costs"]
        assert result.evidence[0].trigger_text == hidden[:50]

    def test_trackers(self) -> None:
        features = PageFeatures(script_sources=["https://www.google-analytics.com/analytics.js", "/static/app.js"])
        result = ShadowPatternScorer().score(features)

        assert result.details["invisible_trackers"] == 1
        assert result.score == 20.0

    def test_data_collection_and_missing_alt(self) -> None:
        result = ShadowPatternScorer().score(PageFeatures(data_inputs=["email"], images_missing_alt=2))

        assert result.details["data_collection"] == ["email"]
        assert result.details["a11y_violations"] == 2
        # three LOW findings
        assert result.score == 30.0

    def test_manipulative_buttons(self) -> None:
        features = PageFeatures(button_labels=["Accept all cookies", "No thanks, I like paying more", "Save"])
        result = ShadowPatternScorer().score(features)
        assert [f.category for f in result.evidence] == ["privacy-zuckering", "confirmshaming"]

    def test_fake_social_proof_and_artificial_scarcity(self) -> None:
        features = PageFeatures(text="12 other people are viewing this. Limited time only!")
        result = ShadowPatternScorer().score(features)

        assert {f.category for f in result.evidence} == {"fake-social-proof", "artificial-scarcity"}
        assert result.score == 40.0

    def test_saturates(self) -> None:
        features = PageFeatures(
            hidden_texts=["price", "fee", "charge", "extra fee"],
            images_missing_alt=3,
        )
        assert ShadowPatternScorer().score(features).score == 100.0


class TestSoulScorer:
    """Test cases for SoulScorer."""

    def test_human_page(self) -> None:
        text = "We believe in people. Our mission is to help you and your community. Buy today."
        result = SoulScorer().score(PageFeatures(text=text))

        assert result.details["authenticity"] == 30
        assert result.details["human_centered"] == 5
        assert result.details["corporateness"] == 0
        assert result.details["intention"] == "Commercial"
        assert result.evidence == []
        assert result.score == 100.0

    def test_corporate_jargon(self) -> None:
        text = "We leverage synergy across the enterprise ecosystem for every company."
        result = SoulScorer().score(PageFeatures(text=text))

        assert [f.trigger_text for f in result.evidence] == ["synergy", "leverage", "ecosystem"]
        assert all(f.category == "corporate-jargon" for f in result.evidence)
        # three jargon terms plus two corporate words
        assert result.details["corporateness"] == 32
        assert result.details["authenticity"] == -5
        assert result.details["coherence"] == 68
        assert result.score == 68.0

    def test_phrases_match_whole_words(self) -> None:
        """The phrase "we" does not match inside longer words."""
        result = SoulScorer().score(PageFeatures(text="Wedding answers weekly"))
        assert result.details["authenticity"] == 0

    def test_transparency_links(self) -> None:
        features = PageFeatures(link_hrefs=["/privacy", "/Terms-of-Service", "/about", "/blog"])
        assert SoulScorer().score(features).details["transparency_score"] == 60

    def test_transparency_capped(self) -> None:
        features = PageFeatures(link_hrefs=["/privacy"] * 6)
        assert SoulScorer().score(features).details["transparency_score"] == 100

    def test_trust_signals_reported(self) -> None:
        assert SoulScorer().score(PageFeatures(trust_signal_count=2)).details["trust_signals"] == 2

    def test_empty_page(self) -> None:
        result = SoulScorer().score(PageFeatures())

        assert result.score == 100.0
        assert result.details["intention"] == "Informational"
        assert result.details["purpose"] == "General Website"

    @pytest.mark.parametrize(
        "title,h1_text,purpose",
        [
            ("acme blog", "", "Content & Publishing"),
            ("", "shop the sale", "E-commerce"),
            ("", "online course", "Education"),
            ("learn python", "", "Education"),
            ("the app", "", "Software/SaaS"),
            ("", "accounting software", "Software/SaaS"),
            ("home", "welcome", "General Website"),
        ],
    )
    def test_classify_purpose(self, title: str, h1_text: str, purpose: str) -> None:
        assert classify_purpose(title, h1_text) == purpose

    def test_purpose_reads_title_and_heading(self) -> None:
        features = PageFeatures(title="Field Notes", first_h1_text="The Shop")
        assert SoulScorer().score(features).details["purpose"] == "E-commerce"


class TestEmotionalDesignScorer:
    """Test cases for EmotionalDesignScorer."""

    @pytest.mark.parametrize(
        "color,family",
        [
            ("#ff0000", "red"),
            ("#ffa500", "orange"),
            ("#ffff00", "yellow"),
            ("#00ff00", "green"),
            ("rgb(0, 0, 255)", "blue"),
            ("#800080", "purple"),
            ("#000", "black"),
            ("#ffffff", "white"),
            ("#808080", "gray"),
            ("transparent", None),
            ("garbage", None),
        ],
    )
    def test_color_family(self, color: str, family: str | None) -> None:
        assert color_family(color) == family

    @pytest.mark.parametrize(
        "weight,expected",
        [(None, 400), ("bold", 700), ("lighter", 300), ("300", 300), ("700.0", 700), ("heavy", 400)],
    )
    def test_parse_font_weight(self, weight: str | None, expected: int) -> None:
        assert parse_font_weight(weight) == expected

    @pytest.mark.parametrize(
        "family,weight,mood",
        [
            (None, None, None),
            ("Georgia, serif", None, "Traditional & Trustworthy"),
            ("Helvetica, sans-serif", "700", "Bold & Confident"),
            ("Fira Mono", "400", "Technical & Modern"),
            ("Inter", "200", "Elegant & Refined"),
            ("Inter", None, "Clean & Professional"),
        ],
    )
    def test_typography_mood(self, family: str | None, weight: str | None, mood: str | None) -> None:
        assert typography_mood(family, weight) == mood

    def test_full_read(self) -> None:
        features = PageFeatures(
            text="x" * 10000,
            image_count=3,
            dominant_backgrounds=["#ffffff", "rgb(255, 0, 0)", "#fefefe"],
            cta_labels=["Join the club"],
            heading_font_family="Georgia, serif",
            spacing_samples=[SpacingSample(padding_top=30, padding_bottom=30, margin_top=2, margin_bottom=2)],
        )
        result = EmotionalDesignScorer().score(features)

        assert list(result.details["color_psychology"]) == ["white", "red"]
        assert result.details["visual_weight"] == "Balanced"
        assert result.details["image_text_ratio"] == 0.3
        assert result.score == pytest.approx(30.0)
        assert result.details["design_personality"] == ["Minimalist", "Dense"]
        assert result.details["emotional_intent"] == "Community-Focused"
        assert result.details["typography_mood"] == "Traditional & Trustworthy"
        assert [f.category for f in result.evidence] == [
            "color-emotion", "color-emotion", "design-personality", "design-personality",
        ]

    def test_short_text_counts_as_one_thousand_characters(self) -> None:
        result = EmotionalDesignScorer().score(PageFeatures(text="hi", image_count=1))

        assert result.details["visual_weight"] == "Image-Heavy"
        assert result.score == 100.0

    def test_busy_page_traits(self) -> None:
        result = EmotionalDesignScorer().score(PageFeatures(image_count=21, clickable_count=51))
        assert result.details["design_personality"] == ["Visual", "Interactive"]

    @pytest.mark.parametrize(
        "labels,intent",
        [
            (["Buy now"], "Conversion-Focused"),
            (["Explore the range"], "Discovery-Focused"),
            (["Sign up"], "Community-Focused"),
            (["Contact"], "Information-Focused"),
        ],
    )
    def test_emotional_intent(self, labels: list[str], intent: str) -> None:
        assert EmotionalDesignScorer().score(PageFeatures(cta_labels=labels)).details["emotional_intent"] == intent

    def test_empty_page(self) -> None:
        result = EmotionalDesignScorer().score(PageFeatures())

        assert result.score == 0.0
        assert result.details["visual_weight"] == "Text-Heavy"
        assert result.details["color_psychology"] == {}
        assert result.details["design_personality"] == []
        assert result.details["typography_mood"] is None
