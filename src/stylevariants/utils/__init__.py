from stylevariants.utils.expander import (
    UtilTable,
    expand_base,
    expand_compound_variants,
    expand_config,
    expand_style,
    expand_util,
    expand_variants,
)
from stylevariants.utils.presets import SPACING_UTILS

__all__ = [
    "UtilTable",
    "expand_util",
    "expand_style",
    "expand_base",
    "expand_variants",
    "expand_compound_variants",
    "expand_config",
    "SPACING_UTILS",
]
