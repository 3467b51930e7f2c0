"""
remixr/scoring/features.py

Feature extraction: turns a serialized structural tree (plus raw text) into
the PageFeatures consumed by the scorers. A single pass over the tree.
"""

from __future__ import annotations

import re
from collections import Counter

from remixr.config import Config
from remixr.data_models.scoring import (
    ContrastSample,
    PageFeatures,
    SpacingSample,
    WeightedBox,
)
from remixr.data_models.structure import StructuralNode, Viewport
from remixr.introspection.contrast import background_chain, is_transparent
from remixr.utils.exceptions import validate_budget
from remixr.utils.logger import get_logger

logger = get_logger(name=__name__)

INTERACTIVE_TAGS: frozenset[str] = frozenset({"button", "a", "input", "select", "textarea"})
FORM_FIELD_TAGS: frozenset[str] = frozenset({"input", "select", "textarea"})
SPACING_CONTAINER_TAGS: frozenset[str] = frozenset({"div", "section", "article"})
TEXT_BEARING_TAGS: frozenset[str] = frozenset({
    "p", "span", "a", "h1", "h2", "h3", "h4", "h5", "h6", "button", "li", "label",
})
WEIGHTED_TAGS: frozenset[str] = frozenset({"img", "h1", "h2", "button"})
HEADING_TAGS: frozenset[str] = frozenset({"h1", "h2", "h3"})
AUTOPLAY_TAGS: frozenset[str] = frozenset({"video", "audio"})
SOCIAL_PROOF_CLASS_FRAGMENTS: tuple[str, ...] = ("review", "rating", "testimonial", "customer")
TRUST_CLASS_FRAGMENTS: tuple[str, ...] = ("secure", "verified", "guarantee", "trust")
MODAL_CLASS_FRAGMENTS: tuple[str, ...] = ("modal", "popup", "overlay")
NOTIFICATION_CLASS_FRAGMENTS: tuple[str, ...] = ("notification", "alert", "banner")
PERSONAL_DATA_INPUT_TYPES: frozenset[str] = frozenset({"email", "tel"})
PERSONAL_DATA_NAME_FRAGMENTS: tuple[str, ...] = ("phone",)

CONTRAST_SAMPLE_SIZE = 200
DESIGN_TOKEN_SAMPLE_SIZE = 100
COLOR_SAMPLE_SIZE = 200
DOMINANT_BACKGROUND_COUNT = 5
EVIDENCE_TEXT_MAX_CHARS = 50

_PX_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(px)?\s*$", re.IGNORECASE)


def parse_px(value: str | None) -> float:
    """'12px' -> 12.0; anything unparseable (auto, %, em, None) -> 0.0."""
    if not value:
        return 0.0
    match = _PX_PATTERN.match(value)
    return float(match.group(1)) if match else 0.0


def is_hidden(node: StructuralNode) -> bool:
    """Whether the node's own presentation hides it."""
    presentation = node.presentation
    if (presentation.display or "").strip().lower() == "none":
        return True
    if (presentation.visibility or "").strip().lower() in ("hidden", "collapse"):
        return True
    try:
        return presentation.opacity is not None and float(presentation.opacity) == 0.0
    except ValueError:
        return False


def is_interactive(node: StructuralNode) -> bool:
    if node.tag in INTERACTIVE_TAGS:
        return True
    if "onclick" in node.attributes:
        return True
    return node.attributes.get("role", "").lower() == "button"


def interactive_label(node: StructuralNode) -> str:
    """Visible label of an interactive element: text, then aria-label, value, placeholder, title."""
    text = node.text().strip()
    if text:
        return text
    for attr_name in ("aria-label", "value", "placeholder", "title", "alt"):
        value = node.attributes.get(attr_name, "").strip()
        if value:
            return value
    return ""


def _is_button(node: StructuralNode) -> bool:
    if node.tag == "button":
        return True
    if node.tag == "input" and node.attributes.get("type", "").lower() in ("button", "submit"):
        return True
    return node.attributes.get("role", "").lower() == "button"


def _own_text(node: StructuralNode) -> str:
    """Text of the node's direct text leaves only."""
    return " ".join(child.content for child in node.children if not isinstance(child, StructuralNode)).strip()


def _is_personal_data_input(node: StructuralNode) -> str | None:
    input_type = node.attributes.get("type", "").lower()
    if input_type in PERSONAL_DATA_INPUT_TYPES:
        return input_type
    input_name = node.attributes.get("name", "").lower()
    if any(fragment in input_name for fragment in PERSONAL_DATA_NAME_FRAGMENTS):
        return input_type or input_name
    return None


def _is_call_to_action(node: StructuralNode) -> bool:
    """Buttons plus anything styled as one (.btn)."""
    return _is_button(node) or "btn" in node.class_list


def _has_any_class_fragment(node: StructuralNode, fragments: tuple[str, ...]) -> bool:
    return any(node.has_class_fragment(fragment) for fragment in fragments)


def _font_size(node: StructuralNode) -> float | None:
    return parse_px(node.presentation.font_size) or None


def extract_features(
    tree: StructuralNode | None,
    text: str | None = None,
    viewport: Viewport | None = None,
    animation_count: int = 0,
    dark_pattern_count: int | None = None,
    sample_size: int = Config.SAMPLE_SIZE,
    title: str | None = None,
) -> PageFeatures:
    """
    Extract scoring features from a structural tree.
    Args:
        tree: Root of the serialized structural tree; None yields features with text only.
        text: Raw page text; derived from the tree's text leaves when None.
        viewport: Viewport size; defaults to 1280x800.
        animation_count: Number of animation rules on the page (not derivable from the tree).
        dark_pattern_count: Precomputed dark pattern count; left None to be derived from text.
        sample_size: Cap on spacing containers sampled.
        title: Document title; read from the tree's <title> element when None.
    Returns:
        PageFeatures.
    Raises:
        InvalidBudgetError: If sample_size or animation_count is negative.
    """
    validate_budget("sample_size", sample_size)
    validate_budget("animation_count", animation_count)
    viewport = viewport or Viewport()
    if text is None:
        text = tree.text(separator="\n") if tree is not None else ""

    features = PageFeatures(
        text=text,
        title=title,
        viewport=viewport,
        animation_count=animation_count,
        dark_pattern_count=dark_pattern_count,
    )
    if tree is None:
        return features

    background_counts: Counter[str] = Counter()
    class_names: dict[str, None] = {}
    font_sizes: dict[str, None] = {}
    text_colors: dict[str, None] = {}
    # ids of hidden elements, so descendants of a hidden ancestor count as hidden too
    hidden_ids: set[int] = set()
    heading_seen = False

    for index, (node, ancestors) in enumerate(tree.iter_with_ancestors()):
        features.element_count += 1
        hidden = is_hidden(node) or (bool(ancestors) and id(ancestors[-1]) in hidden_ids)
        if hidden:
            hidden_ids.add(id(node))
            hidden_text = node.text().strip()
            if hidden_text and is_hidden(node):
                # full text: cost words may sit past any evidence cut-off
                features.hidden_texts.append(hidden_text)
        else:
            features.visible_element_count += 1

        if is_interactive(node):
            features.interactive_element_count += 1
            label = interactive_label(node)
            if label:
                features.interactive_labels.append(label)
            if _is_button(node) and label:
                features.button_labels.append(label)
        if node.tag in ("button", "a"):
            features.clickable_count += 1
        if _is_call_to_action(node):
            cta_label = interactive_label(node)
            if cta_label:
                features.cta_labels.append(cta_label)
            if node.geometry is not None:
                features.cta_areas.append(node.geometry.area)

        class_names.update(dict.fromkeys(node.class_list))
        if _has_any_class_fragment(node, SOCIAL_PROOF_CLASS_FRAGMENTS):
            features.social_proof_marker_count += 1
        if _has_any_class_fragment(node, TRUST_CLASS_FRAGMENTS):
            features.trust_signal_count += 1
        if _has_any_class_fragment(node, MODAL_CLASS_FRAGMENTS):
            features.modal_count += 1
        if _has_any_class_fragment(node, NOTIFICATION_CLASS_FRAGMENTS):
            features.notification_count += 1
        if node.tag in AUTOPLAY_TAGS and "autoplay" in node.attributes:
            features.autoplay_count += 1

        if index < COLOR_SAMPLE_SIZE:
            background = node.presentation.background_color
            if not is_transparent(background):
                background_counts[background.strip()] += 1  # type: ignore[union-attr]
        if index < DESIGN_TOKEN_SAMPLE_SIZE:
            if node.presentation.font_size:
                font_sizes[node.presentation.font_size] = None
            if node.presentation.color:
                text_colors[node.presentation.color] = None

        if node.tag in SPACING_CONTAINER_TAGS and len(features.spacing_samples) < sample_size:
            features.spacing_samples.append(SpacingSample(
                tag=node.tag,
                padding_top=parse_px(node.presentation.padding_top),
                padding_bottom=parse_px(node.presentation.padding_bottom),
                margin_top=parse_px(node.presentation.margin_top),
                margin_bottom=parse_px(node.presentation.margin_bottom),
            ))

        if node.tag in TEXT_BEARING_TAGS and len(features.contrast_samples) < CONTRAST_SAMPLE_SIZE:
            own_text = _own_text(node)
            if own_text:
                features.contrast_samples.append(ContrastSample(
                    tag=node.tag,
                    text=own_text[:EVIDENCE_TEXT_MAX_CHARS],
                    color=node.presentation.color,
                    background_chain=background_chain(node, ancestors),
                ))

        if node.tag in WEIGHTED_TAGS and node.geometry is not None:
            features.weighted_boxes.append(WeightedBox(tag=node.tag, geometry=node.geometry))

        if node.tag in HEADING_TAGS and not heading_seen:
            heading_seen = True
            features.heading_font_family = node.presentation.font_family
            features.heading_font_weight = node.presentation.font_weight
        if node.tag == "h1":
            features.h1_count += 1
            if features.h1_count == 1:
                features.first_h1_text = node.text().strip() or None
                features.h1_font_size = _font_size(node)
        elif node.tag == "body" and features.body_font_size is None:
            features.body_font_size = _font_size(node)
        elif node.tag == "title" and features.title is None:
            features.title = node.text().strip() or None
        elif node.tag == "meta" and node.attributes.get("name", "").strip().lower() == "description":
            features.has_meta_description = True

        if node.tag in FORM_FIELD_TAGS and any(ancestor.tag == "form" for ancestor in ancestors):
            features.form_field_count += 1
        if node.tag == "a":
            if any(ancestor.tag == "nav" for ancestor in ancestors):
                features.nav_link_count += 1
            href = node.attributes.get("href", "").strip()
            if href:
                features.link_hrefs.append(href)

        if node.tag == "img":
            features.image_count += 1
            if not node.attributes.get("alt", "").strip():
                features.images_missing_alt += 1
        if node.tag == "script" and node.attributes.get("src"):
            features.script_sources.append(node.attributes["src"])
        if node.tag == "input":
            data_input = _is_personal_data_input(node)
            if data_input:
                features.data_inputs.append(data_input)

    features.dominant_backgrounds = [
        color for color, _ in background_counts.most_common(DOMINANT_BACKGROUND_COUNT)
    ]
    features.class_names = list(class_names)
    features.font_sizes = list(font_sizes)
    features.text_colors = list(text_colors)

    logger.debug(
        "📊 Extracted features: %d elements (%d visible, %d interactive), %d spacing samples, %d contrast samples",
        features.element_count,
        features.visible_element_count,
        features.interactive_element_count,
        len(features.spacing_samples),
        len(features.contrast_samples),
    )
    return features
