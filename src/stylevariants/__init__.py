"""Stylevariants -- slot/variant style resolution with per-configuration caching."""

__version__ = "0.1.0"

from stylevariants.engine import (  # noqa: E402
    CachePartition,
    CacheRegistry,
    StyleResolver,
    canonicalize,
    clear_style_cache,
    compose_slot,
    declare,
)
from stylevariants.matching import match_compound, match_variant  # noqa: E402
from stylevariants.model import CompoundRule, Config  # noqa: E402
from stylevariants.styles import merge_styles, normalize_value  # noqa: E402
from stylevariants.theming import (  # noqa: E402
    DEFAULT_THEME,
    ColorScheme,
    Factory,
    ResolvedTheme,
    ThemeInput,
    create_factory,
    extend_theme,
)
from stylevariants.utils import SPACING_UTILS, expand_style, expand_util  # noqa: E402

__all__ = [
    "__version__",
    # model
    "Config",
    "CompoundRule",
    # resolution
    "declare",
    "StyleResolver",
    "compose_slot",
    "match_variant",
    "match_compound",
    "canonicalize",
    "CachePartition",
    "CacheRegistry",
    "clear_style_cache",
    # theming
    "create_factory",
    "Factory",
    "ThemeInput",
    "ColorScheme",
    "ResolvedTheme",
    "DEFAULT_THEME",
    "extend_theme",
    # utils
    "expand_util",
    "expand_style",
    "SPACING_UTILS",
    "merge_styles",
    "normalize_value",
]
