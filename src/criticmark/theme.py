"""Theme palettes and the companion stylesheet.

Colors are held in explicit, immutable palettes, one per color scheme, and
handed to whatever needs them (stylesheet generation, editor decorations).
There is no module-level "current theme": callers pick a palette with
palette_for() whenever the scheme changes.

Contract:
For every annotation kind the dark-scheme text color is strictly brighter
(by weighted luma 0.299R + 0.587G + 0.114B) than the light-scheme one, and
the light and dark backgrounds differ.

Usage:
    >>> from criticmark.catalog import AnnotationKind
    >>> from criticmark.theme import ColorScheme, decoration_colors
    >>> decoration_colors(ColorScheme.DARK)[AnnotationKind.ADDITION]
    '#00dd00'

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from importlib import resources
from types import MappingProxyType

from criticmark.catalog import CATALOG, AnnotationKind


class ColorScheme(Enum):
    """Editor/preview color scheme."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True, slots=True)
class KindColors:
    """Text color (``#rrggbb``) and background (any CSS color) for one kind."""

    color: str
    background: str


ThemePalette = Mapping[AnnotationKind, KindColors]

LIGHT_PALETTE: ThemePalette = MappingProxyType(
    {
        AnnotationKind.ADDITION: KindColors("#008800", "rgba(0, 136, 0, 0.1)"),
        AnnotationKind.DELETION: KindColors("#cc0000", "rgba(204, 0, 0, 0.1)"),
        AnnotationKind.SUBSTITUTION: KindColors("#dd6600", "rgba(221, 102, 0, 0.1)"),
        AnnotationKind.COMMENT: KindColors("#0066cc", "rgba(0, 102, 204, 0.1)"),
        AnnotationKind.HIGHLIGHT: KindColors("#9933aa", "rgba(153, 51, 170, 0.15)"),
    }
)

DARK_PALETTE: ThemePalette = MappingProxyType(
    {
        AnnotationKind.ADDITION: KindColors("#00dd00", "rgba(0, 221, 0, 0.15)"),
        AnnotationKind.DELETION: KindColors("#ff4444", "rgba(255, 68, 68, 0.15)"),
        AnnotationKind.SUBSTITUTION: KindColors("#ff9944", "rgba(255, 153, 68, 0.15)"),
        AnnotationKind.COMMENT: KindColors("#5599ff", "rgba(85, 153, 255, 0.15)"),
        AnnotationKind.HIGHLIGHT: KindColors("#cc66dd", "rgba(204, 102, 221, 0.25)"),
    }
)

# Per-kind declarations beyond color and background
_EXTRA_DECLARATIONS: dict[AnnotationKind, tuple[str, ...]] = {
    AnnotationKind.ADDITION: ("text-decoration: underline;",),
    AnnotationKind.DELETION: ("text-decoration: line-through;",),
    AnnotationKind.SUBSTITUTION: (),
    AnnotationKind.COMMENT: ("font-style: italic;",),
    AnnotationKind.HIGHLIGHT: (),
}


def palette_for(scheme: ColorScheme) -> ThemePalette:
    """Return the palette for a color scheme."""
    match scheme:
        case ColorScheme.LIGHT:
            return LIGHT_PALETTE
        case ColorScheme.DARK:
            return DARK_PALETTE


def decoration_colors(scheme: ColorScheme) -> dict[AnnotationKind, str]:
    """Return a fresh ``{kind: color}`` map for editor decorations."""
    palette = palette_for(scheme)
    return {spec.kind: palette[spec.kind].color for spec in CATALOG}


def luma(hex_color: str) -> float:
    """Perceived brightness of a ``#rrggbb`` color (0–255).

    Raises:
        ValueError: If the color is not a 6-digit hex string

    Example:
        >>> luma("#ffffff")
        255.0
    """
    value = hex_color.removeprefix("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb color, got {hex_color!r}")
    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return (r * 299 + g * 587 + b * 114) / 1000


def _custom_properties(namespace: str, palette: ThemePalette, indent: str) -> list[str]:
    lines = []
    for spec in CATALOG:
        colors = palette[spec.kind]
        lines.append(f"{indent}--{namespace}-{spec.kind.value}-color: {colors.color};")
        lines.append(f"{indent}--{namespace}-{spec.kind.value}-bg: {colors.background};")
    return lines


def render_stylesheet(
    namespace: str,
    light: ThemePalette = LIGHT_PALETTE,
    dark: ThemePalette = DARK_PALETTE,
) -> str:
    """Generate the preview stylesheet for a class namespace.

    Args:
        namespace: CSS class prefix (e.g. "criticmarkup")
        light: Default palette
        dark: Palette applied under ``prefers-color-scheme: dark``

    Returns:
        CSS text

    """
    lines = [f"/* {namespace} annotation styles */", "", ":root {"]
    lines += _custom_properties(namespace, light, "  ")
    lines += ["}", "", "@media (prefers-color-scheme: dark) {", "  :root {"]
    lines += _custom_properties(namespace, dark, "    ")
    lines += ["  }", "}"]

    for spec in CATALOG:
        kind = spec.kind.value
        lines += [
            "",
            f".{namespace}-{kind} {{",
            f"  color: var(--{namespace}-{kind}-color);",
            f"  background-color: var(--{namespace}-{kind}-bg);",
        ]
        lines += [f"  {decl}" for decl in _EXTRA_DECLARATIONS[spec.kind]]
        lines.append("}")

    return "\n".join(lines) + "\n"


def load_stylesheet(namespace: str) -> str:
    """Return the shipped stylesheet for a namespace.

    Falls back to render_stylesheet() for namespaces without a shipped file.
    """
    resource = resources.files("criticmark") / "media" / f"{namespace}.css"
    if resource.is_file():
        return resource.read_text(encoding="utf-8")
    return render_stylesheet(namespace)


__all__ = [
    "ColorScheme",
    "DARK_PALETTE",
    "KindColors",
    "LIGHT_PALETTE",
    "ThemePalette",
    "decoration_colors",
    "load_stylesheet",
    "luma",
    "palette_for",
    "render_stylesheet",
]
