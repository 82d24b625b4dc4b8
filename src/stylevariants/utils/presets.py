"""Ready-made util tables."""

from __future__ import annotations

from types import MappingProxyType

SPACING_UTILS = MappingProxyType({
    # Margin shortcuts
    "mx": lambda value: {"marginLeft": value, "marginRight": value},
    "my": lambda value: {"marginTop": value, "marginBottom": value},
    # Padding shortcuts
    "px": lambda value: {"paddingLeft": value, "paddingRight": value},
    "py": lambda value: {"paddingTop": value, "paddingBottom": value},
    # Square sizing
    "size": lambda value: {"width": value, "height": value},
})
