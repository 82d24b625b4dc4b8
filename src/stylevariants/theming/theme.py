"""Theme resolution: built-in token tables merged with caller overrides.

Precedence for every table: caller value > built-in default.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from stylevariants.theming import tokens

__all__ = [
    "DEFAULT_THEME",
    "ColorScheme",
    "ResolvedTheme",
    "ThemeError",
    "ThemeInput",
    "extend_theme",
    "resolve_theme",
]


class ThemeError(ValueError):
    """Raised when a theme input is inconsistent."""


@dataclass(frozen=True)
class ColorScheme:
    """Semantic colours for light (``default``) and ``dark`` mode.

    Both sides must define exactly the same colour names.
    """

    default: dict[str, str] = field(default_factory=dict)
    dark: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        missing_in_dark = sorted(set(self.default) - set(self.dark))
        missing_in_default = sorted(set(self.dark) - set(self.default))
        if missing_in_dark:
            raise ThemeError(
                f"'dark' is missing colors that exist in 'default': {', '.join(missing_in_dark)}"
            )
        if missing_in_default:
            raise ThemeError(
                f"'default' is missing colors that exist in 'dark': {', '.join(missing_in_default)}"
            )


@dataclass(frozen=True)
class ThemeInput:
    """Caller-declared tokens.  Every table is optional."""

    colors: ColorScheme | None = None
    spacing: Mapping[str, Any] | None = None
    font_sizes: Mapping[str, Any] | None = None
    radii: Mapping[str, Any] | None = None
    shadows: Mapping[str, Any] | None = None
    z_index: Mapping[str, Any] | None = None
    opacity: Mapping[str, Any] | None = None
    line_heights: Mapping[str, Any] | None = None
    font_weights: Mapping[str, Any] | None = None
    letter_spacing: Mapping[str, Any] | None = None
    border_widths: Mapping[str, Any] | None = None
    max_widths: Mapping[str, Any] | None = None
    durations: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ResolvedTheme:
    """Flat token tables handed to configuration builders.

    ``colors`` holds the light-mode colours: the built-in palette overlaid with
    the caller's semantic colours.
    """

    colors: Mapping[str, str] = field(default_factory=lambda: tokens.PALETTE)
    spacing: Mapping[str, Any] = field(default_factory=lambda: tokens.SPACING)
    font_sizes: Mapping[str, Any] = field(default_factory=lambda: tokens.FONT_SIZES)
    radii: Mapping[str, Any] = field(default_factory=lambda: tokens.RADII)
    shadows: Mapping[str, Any] = field(default_factory=lambda: tokens.SHADOWS)
    z_index: Mapping[str, Any] = field(default_factory=lambda: tokens.Z_INDEX)
    opacity: Mapping[str, Any] = field(default_factory=lambda: tokens.OPACITY)
    line_heights: Mapping[str, Any] = field(default_factory=lambda: tokens.LINE_HEIGHTS)
    font_weights: Mapping[str, Any] = field(default_factory=lambda: tokens.FONT_WEIGHTS)
    letter_spacing: Mapping[str, Any] = field(default_factory=lambda: tokens.LETTER_SPACING)
    border_widths: Mapping[str, Any] = field(default_factory=lambda: tokens.BORDER_WIDTHS)
    max_widths: Mapping[str, Any] = field(default_factory=lambda: tokens.MAX_WIDTHS)
    durations: Mapping[str, Any] = field(default_factory=lambda: tokens.DURATIONS)
    scheme: ColorScheme | None = None

    def dark_colors(self) -> dict[str, str]:
        """Return the palette overlaid with the scheme's dark colours."""
        dark = self.scheme.dark if self.scheme else {}
        return {**tokens.PALETTE, **dark}

    def table(self, name: str) -> Mapping[str, Any]:
        """Look up a token table by field name (``"spacing"``, ``"radii"``...)."""
        if name not in _TABLE_NAMES:
            raise KeyError(name)
        return getattr(self, name)


_TABLE_NAMES = frozenset(f.name for f in fields(ResolvedTheme)) - {"scheme"}

DEFAULT_THEME = ResolvedTheme()


def resolve_theme(theme: ThemeInput | None = None) -> ResolvedTheme:
    """Merge caller tokens over the built-in tables."""
    if theme is None:
        return DEFAULT_THEME

    updates: dict[str, Any] = {}
    for name in _TABLE_NAMES:
        if name == "colors":
            continue
        override = getattr(theme, name)
        if override:
            updates[name] = {**getattr(DEFAULT_THEME, name), **override}

    if theme.colors is not None:
        updates["colors"] = {**tokens.PALETTE, **theme.colors.default}
        updates["scheme"] = theme.colors

    return replace(DEFAULT_THEME, **updates)


def extend_theme(**overrides: Mapping[str, Any]) -> ResolvedTheme:
    """Return the default theme with whole tables replaced.

    Example::

        theme = extend_theme(colors={**tokens.PALETTE, "brand": "#FF6B6B"})
    """
    unknown = set(overrides) - _TABLE_NAMES
    if unknown:
        raise ThemeError(f"Unknown token table(s): {', '.join(sorted(unknown))}")
    return replace(DEFAULT_THEME, **overrides)
