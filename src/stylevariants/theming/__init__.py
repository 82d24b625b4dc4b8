"""Theming: token tables, theme resolution and the theme-aware factory."""

from stylevariants.theming.factory import Factory, create_factory, define_config
from stylevariants.theming.theme import (
    DEFAULT_THEME,
    ColorScheme,
    ResolvedTheme,
    ThemeError,
    ThemeInput,
    extend_theme,
    resolve_theme,
)

__all__ = [
    "Factory",
    "create_factory",
    "define_config",
    "DEFAULT_THEME",
    "ColorScheme",
    "ResolvedTheme",
    "ThemeError",
    "ThemeInput",
    "extend_theme",
    "resolve_theme",
]
