"""Tests for the style resolver and plain declaration."""

import gc
import logging

import pytest

from stylevariants.engine import resolver as resolver_module
from stylevariants.engine.resolver import StyleResolver, clear_style_cache, declare
from stylevariants.model.config import CompoundRule, Config


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _size_config(**overrides) -> Config:
    """Slots ["root"], base padding 8, size sm/lg, default sm."""
    defaults = dict(
        slots=["root"],
        base={"root": {"padding": 8}},
        variants={"size": {"sm": {"root": {"padding": 4}}, "lg": {"root": {"padding": 16}}}},
        default_variants={"size": "sm"},
    )
    defaults.update(overrides)
    return Config(**defaults)


def _button_config() -> Config:
    return Config(
        slots=("root", "label"),
        base={"root": {"padding": 8}, "label": {"fontSize": 14}},
        variants={
            "size": {"sm": {"root": {"padding": 4}}, "lg": {"root": {"padding": 16}}},
            "tone": {"primary": {"root": {"backgroundColor": "blue"}, "label": {"color": "white"}}},
            "disabled": {True: {"root": {"opacity": 0.5}}, False: {"root": {"opacity": 1}}},
        },
        default_variants={"size": "sm", "disabled": False},
        compound_variants=[
            {"size": "lg", "tone": "primary", "css": {"label": {"fontWeight": "700"}}},
            {"disabled": True, "css": {"label": {"color": "gray"}}},
        ],
    )


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestSizeScenario:
    def test_defaults(self):
        resolve = declare(_size_config())
        assert resolve() == {"root": {"padding": 4}}

    def test_explicit_value(self):
        resolve = declare(_size_config())
        assert resolve({"size": "lg"}) == {"root": {"padding": 16}}

    def test_undeclared_value_falls_back_to_base(self):
        resolve = declare(_size_config())
        assert resolve({"size": "xl"}) == {"root": {"padding": 8}}


class TestUtilScenario:
    def test_util_expanded_at_declaration(self):
        utils = {"px": lambda v: {"paddingLeft": v, "paddingRight": v}}
        resolve = StyleResolver(Config(slots=["root"], base={"root": {"px": 10}}), utils=utils)
        assert resolve()["root"] == {"paddingLeft": 10, "paddingRight": 10}

    def test_util_called_once_per_declaration(self):
        calls = []

        def px(value):
            calls.append(value)
            return {"paddingLeft": value, "paddingRight": value}

        resolve = StyleResolver(Config(slots=["root"], base={"root": {"px": 10}}), utils={"px": px})
        resolve()
        resolve({"x": "1"})
        resolve({"x": "2"})
        assert calls == [10]


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestDeterminism:
    def test_same_selection_returns_identical_object(self):
        resolve = declare(_button_config())
        first = resolve({"size": "lg", "tone": "primary"})
        second = resolve({"tone": "primary", "size": "lg"})
        assert first is second

    def test_equal_after_cache_clear(self):
        resolve = declare(_button_config())
        first = resolve({"size": "lg"})
        clear_style_cache()
        second = resolve({"size": "lg"})
        assert first == second
        assert first is not second


class TestDefaultOverlay:
    def test_empty_none_and_no_arg_agree(self):
        resolve = declare(_button_config())
        assert resolve({}) is resolve(None)
        assert resolve() is resolve({})

    def test_explicit_default_value_shares_cache_entry(self):
        resolve = declare(_button_config())
        assert resolve() is resolve({"size": "sm"})


class TestExplicitNone:
    def test_none_without_default(self):
        resolve = declare(_button_config())
        assert resolve({"tone": None}) is resolve({})

    def test_none_with_default(self):
        resolve = declare(_button_config())
        assert resolve({"size": None})["root"]["padding"] == 4

    def test_keyword_none(self):
        resolve = declare(_button_config())
        assert resolve(size=None) is resolve()


class TestPrecedence:
    def test_compound_beats_variant_beats_base(self):
        config = Config(
            slots=["root"],
            base={"root": {"padding": 8}},
            variants={"big": {"true": {"root": {"padding": 24}}}},
            compound_variants=[CompoundRule(conditions={"big": True}, css={"root": {"padding": 32}})],
        )
        resolve = declare(config)
        assert resolve({"big": True})["root"]["padding"] == 32

    def test_compound_rules_in_order(self):
        result = declare(_button_config())({"size": "lg", "tone": "primary", "disabled": True})
        assert result["label"] == {"fontSize": 14, "color": "gray", "fontWeight": "700"}


class TestBooleanVariants:
    def test_default_false_matches(self):
        assert declare(_button_config())()["root"]["opacity"] == 1

    def test_true_matches(self):
        assert declare(_button_config())(disabled=True)["root"]["opacity"] == 0.5

    def test_string_and_bool_share_entry(self):
        resolve = declare(_button_config())
        assert resolve(disabled=True) is resolve(disabled="true")


class TestSelectionArguments:
    def test_keywords(self):
        resolve = declare(_button_config())
        assert resolve(size="lg") is resolve({"size": "lg"})

    def test_keywords_overlay_mapping(self):
        resolve = declare(_button_config())
        assert resolve({"size": "sm"}, size="lg")["root"]["padding"] == 16

    def test_effective_selection(self):
        resolve = declare(_button_config())
        assert resolve.effective_selection({"tone": "primary", "size": None}) == {
            "size": "sm",
            "disabled": False,
            "tone": "primary",
        }


class TestResolvedShape:
    def test_every_slot_present(self):
        result = declare(_button_config())()
        assert list(result) == ["root", "label"]

    def test_no_slots(self):
        assert declare(Config(slots=[]))() == {}

    def test_unknown_variant_in_selection_is_harmless(self):
        resolve = declare(_button_config())
        assert resolve({"shape": "round"}) == resolve()


# ---------------------------------------------------------------------------
# Declaration-time behaviour
# ---------------------------------------------------------------------------


class TestDeclaration:
    def test_slots_copied(self):
        slots = ["root"]
        resolve = declare(Config(slots=slots, base={"root": {"padding": 1}}))
        slots.append("label")
        assert resolve.slots == ("root",)
        assert list(resolve()) == ["root"]

    def test_compound_rules_copied(self):
        rules = [CompoundRule(conditions={}, css={"root": {"margin": 1}})]
        resolve = declare(Config(slots=["root"], compound_variants=rules))
        rules.append(CompoundRule(conditions={}, css={"root": {"margin": 2}}))
        assert resolve()["root"] == {"margin": 1}

    def test_each_declaration_has_own_partition(self):
        a = declare(_size_config())
        b = declare(_size_config(base={"root": {"padding": 99}}))
        assert a.partition is not b.partition
        assert a({"size": "xl"})["root"]["padding"] == 8
        assert b({"size": "xl"})["root"]["padding"] == 99

    def test_cache_populated(self):
        resolve = declare(_size_config())
        resolve()
        resolve(size="lg")
        assert len(resolve.partition) == 2

    def test_cache_miss_logged(self, caplog):
        resolve = declare(_size_config())
        with caplog.at_level(logging.DEBUG, logger="stylevariants.engine.resolver"):
            resolve(size="lg")
            resolve(size="lg")
        misses = [r for r in caplog.records if "cache miss" in r.getMessage()]
        assert len(misses) == 1

    def test_released_resolver_leaves_registry(self):
        gc.collect()
        before = len(resolver_module._default_registry)
        resolve = declare(_size_config())
        resolve(size="lg")
        assert len(resolver_module._default_registry) == before + 1
        del resolve
        gc.collect()
        assert len(resolver_module._default_registry) == before

    def test_clear_style_cache_after_release(self):
        kept = declare(_size_config())
        kept()
        released = declare(_size_config())
        released()
        del released
        gc.collect()
        clear_style_cache()
        assert len(kept.partition) == 0


class TestReadOnlyResults:
    def test_slot_style_rejects_assignment(self):
        resolve = declare(_size_config())
        with pytest.raises(TypeError):
            resolve()["root"]["padding"] = 99
        assert resolve()["root"] == {"padding": 4}

    def test_result_rejects_new_slot(self):
        resolve = declare(_size_config())
        with pytest.raises(TypeError):
            resolve()["label"] = {}
        assert list(resolve()) == ["root"]

    def test_copy_is_editable(self):
        resolve = declare(_size_config())
        root = dict(resolve()["root"])
        root["padding"] = 99
        assert resolve()["root"]["padding"] == 4
