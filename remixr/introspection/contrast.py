"""
remixr/introspection/contrast.py

Color-space math: color parsing, WCAG relative luminance, contrast ratio and
effective background resolution over a structural tree.

Unparseable colors yield None ("unknown"); callers skip unknown inputs.
"""

import re
from types import MappingProxyType
from typing import Iterable, NamedTuple, Sequence

from remixr.data_models.structure import StructuralNode

# WCAG AA minimum contrast ratio for body text
WCAG_AA_MIN_RATIO = 4.5
# WCAG AA minimum for large text; used as the high-severity cut-off
WCAG_AA_LARGE_MIN_RATIO = 3.0

# browsers paint an uncolored canvas white
DEFAULT_CANVAS_BACKGROUND = "rgb(255, 255, 255)"

NAMED_COLORS: MappingProxyType[str, str] = MappingProxyType({
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "lime": "#00ff00",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "purple": "#800080",
    "pink": "#ffc0cb",
    "orange": "#ffa500",
    "gray": "#808080",
    "grey": "#808080",
    "silver": "#c0c0c0",
    "navy": "#000080",
    "teal": "#008080",
    "maroon": "#800000",
})

_RGB_FUNCTION_PATTERN = re.compile(r"rgba?\(\s*([^)]*)\)", re.IGNORECASE)
_HEX_PATTERN = re.compile(r"#([0-9a-f]{3,8})", re.IGNORECASE)


class RGBA(NamedTuple):
    """Channels in 0..255, alpha in 0..1."""
    r: float
    g: float
    b: float
    a: float = 1.0


def _parse_channel(token: str) -> float:
    token = token.strip()
    if token.endswith("%"):
        return float(token[:-1]) * 255.0 / 100.0
    return float(token)


def _parse_alpha(token: str) -> float:
    token = token.strip()
    if token.endswith("%"):
        return float(token[:-1]) / 100.0
    return float(token)


def parse_color(color: str | None) -> RGBA | None:
    """
    Parse a CSS color into channels.
    Supports rgb()/rgba() (comma or space separated), #rgb, #rgba, #rrggbb, #rrggbbaa,
    a basic set of named colors and 'transparent'.
    Args:
        color: CSS color string.
    Returns:
        RGBA, or None when the color cannot be parsed.
    """
    if not isinstance(color, str):
        return None
    value = color.strip().lower()
    if not value:
        return None
    if value == "transparent":
        return RGBA(0.0, 0.0, 0.0, 0.0)
    value = NAMED_COLORS.get(value, value)

    match = _RGB_FUNCTION_PATTERN.fullmatch(value)
    if match:
        body = match.group(1).replace("/", " ")
        tokens = [t for t in re.split(r"[\s,]+", body) if t]
        if len(tokens) not in (3, 4):
            return None
        try:
            r, g, b = (min(max(_parse_channel(t), 0.0), 255.0) for t in tokens[:3])
            a = min(max(_parse_alpha(tokens[3]), 0.0), 1.0) if len(tokens) == 4 else 1.0
        except ValueError:
            return None
        return RGBA(r, g, b, a)

    match = _HEX_PATTERN.fullmatch(value)
    if match:
        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) not in (6, 8):
            return None
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
        return RGBA(float(r), float(g), float(b), a)

    return None


def _linearize(channel: float) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def luminance(color: str | RGBA | None) -> float | None:
    """
    WCAG relative luminance of a color.
    Args:
        color: CSS color string or parsed RGBA.
    Returns:
        Luminance in [0, 1], or None if the color is unknown or fully transparent.
    """
    rgba = color if isinstance(color, RGBA) else parse_color(color)
    if rgba is None or rgba.a == 0.0:
        # a transparent color paints nothing; its backdrop decides
        return None
    return 0.2126 * _linearize(rgba.r) + 0.7152 * _linearize(rgba.g) + 0.0722 * _linearize(rgba.b)


def contrast_ratio(foreground: str | RGBA | None, background: str | RGBA | None) -> float | None:
    """
    WCAG contrast ratio between two colors. Symmetric in its arguments.
    Returns:
        Ratio in [1, 21], or None if either color is unknown or fully transparent.
    """
    l1 = luminance(foreground)
    l2 = luminance(background)
    if l1 is None or l2 is None:
        return None
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def is_transparent(color: str | None) -> bool:
    """Whether a background paints nothing (missing, 'transparent' or zero alpha)."""
    if color is None or not color.strip():
        return True
    rgba = parse_color(color)
    return rgba is not None and rgba.a == 0.0


def first_opaque_background(
    backgrounds: Iterable[str | None],
    default: str = DEFAULT_CANVAS_BACKGROUND,
) -> str:
    """
    Return the first background in the chain that paints something.
    Args:
        backgrounds: Backgrounds ordered from the node outward to the document root.
        default: Fallback when every entry is transparent.
    """
    for background in backgrounds:
        if not is_transparent(background):
            return background  # type: ignore[return-value]
    return default


def background_chain(node: StructuralNode, ancestors: Sequence[StructuralNode] = ()) -> list[str | None]:
    """
    Backgrounds of a node and its ancestors, nearest first, document root last.
    Args:
        node: The node whose backdrop is wanted.
        ancestors: Ancestors ordered from the document root down to the node's parent.
    """
    chain = [node.presentation.background_color]
    chain.extend(ancestor.presentation.background_color for ancestor in reversed(ancestors))
    return chain


def resolve_background_chain(
    chain: Iterable[str | None],
    document_background: str | None = None,
) -> str:
    """
    Effective background of a node given its background chain (see background_chain).
    Args:
        chain: Backgrounds from the node outward to the document root.
        document_background: Fallback used when the whole chain is transparent; defaults to the white canvas.
    Returns:
        The effective background color string.
    """
    return first_opaque_background(chain, default=document_background or DEFAULT_CANVAS_BACKGROUND)


def resolve_effective_background(
    node: StructuralNode,
    ancestors: Sequence[StructuralNode] = (),
    document_background: str | None = None,
) -> str:
    """
    Walk from a node up through its ancestors until a non-transparent background is found.
    Args:
        node: The node whose backdrop is wanted.
        ancestors: Ancestors ordered from the document root down to the node's parent.
        document_background: Fallback used when the whole chain is transparent;
            defaults to the white canvas.
    Returns:
        The effective background color string.
    """
    return resolve_background_chain(background_chain(node, ancestors), document_background)
