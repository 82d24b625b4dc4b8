"""Theme-aware factory: shared utils and tokens, separate caches."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

from stylevariants.engine.cache import CacheRegistry
from stylevariants.engine.resolver import StyleResolver
from stylevariants.model.config import Config
from stylevariants.styles import StyleMapping
from stylevariants.theming.theme import ColorScheme, ResolvedTheme, ThemeInput, resolve_theme
from stylevariants.utils.expander import UtilTable, expand_style, expand_util

__all__ = ["ConfigBuilder", "Factory", "create_factory", "define_config"]

logger = logging.getLogger(__name__)


def define_config(**fields: Any) -> Config:
    """Build a :class:`Config` from keyword arguments.

    Handed to configuration builders so they can write
    ``define_config(slots=["root"], base={...})``.
    """
    return Config(**fields)


ConfigBuilder = Callable[[Callable[..., Config], ResolvedTheme], Config]


class Factory:
    """Declares configurations that share a util table and a theme.

    Each declared configuration gets its own cache partition from the
    factory's registry, so two configurations never see each other's results.
    """

    def __init__(
        self,
        theme: ThemeInput | None = None,
        utils: Mapping[str, Callable[[Any], StyleMapping]] | None = None,
    ) -> None:
        self._utils: UtilTable = MappingProxyType(dict(utils or {}))
        self._theme = resolve_theme(theme)
        self._registry = CacheRegistry()
        logger.debug("Created factory: utils=%s", ",".join(self._utils) or "-")

    @property
    def theme(self) -> ResolvedTheme:
        return self._theme

    @property
    def tokens(self) -> ResolvedTheme:
        """Alias of :attr:`theme`."""
        return self._theme

    @property
    def color_scheme(self) -> ColorScheme | None:
        return self._theme.scheme

    @property
    def utils(self) -> UtilTable:
        return self._utils

    @property
    def registry(self) -> CacheRegistry:
        return self._registry

    # --- declaration ----------------------------------------------------------

    def declare(self, config: Config) -> StyleResolver:
        """Declare a configuration object; utils are expanded right away."""
        label = ",".join(config.slots)
        return StyleResolver(
            config,
            utils=self._utils,
            partition=self._registry.allocate(label),
        )

    def declare_from_factory(self, build: ConfigBuilder) -> StyleResolver:
        """Declare the configuration returned by ``build(define_config, theme)``.

        The builder runs once, with the resolved theme, so styles can reference
        tokens directly::

            card = factory.declare_from_factory(lambda define, t: define(
                slots=["root"],
                base={"root": {"backgroundColor": t.colors["primary"]}},
            ))
        """
        return self.declare(build(define_config, self._theme))

    # --- ad-hoc expansion -----------------------------------------------------

    def expand_util(self, name: str, value: Any) -> StyleMapping:
        return expand_util(name, value, self._utils)

    def expand_style(self, style: Mapping[str, Any] | None) -> StyleMapping:
        return expand_style(style, self._utils)

    def clear_cache(self) -> None:
        """Empty the cache of every configuration declared by this factory."""
        self._registry.clear()


def create_factory(
    theme: ThemeInput | None = None,
    utils: Mapping[str, Callable[[Any], StyleMapping]] | None = None,
) -> Factory:
    """Create a theme-aware factory.

    Example::

        factory = create_factory(
            theme=ThemeInput(colors=ColorScheme(
                default={"primary": "#007AFF"},
                dark={"primary": "#0A84FF"},
            )),
            utils=SPACING_UTILS,
        )
        button = factory.declare(Config(
            slots=("root",),
            base={"root": {"px": 16, "backgroundColor": factory.tokens.colors["primary"]}},
        ))
    """
    return Factory(theme=theme, utils=utils)
