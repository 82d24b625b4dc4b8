"""Tests for the Config and CompoundRule dataclasses."""

from stylevariants.engine.resolver import declare
from stylevariants.model.config import CompoundRule, Config


class TestConfigSlots:
    def test_list_becomes_tuple(self):
        assert Config(slots=["root", "label"]).slots == ("root", "label")

    def test_single_slot_name_kept_whole(self):
        assert Config(slots="root").slots == ("root",)

    def test_single_slot_name_resolves(self):
        resolve = declare(Config(slots="root", base={"root": {"padding": 8}}))
        assert list(resolve()) == ["root"]
        assert resolve()["root"] == {"padding": 8}

    def test_none_means_no_slots(self):
        assert Config(slots=None).slots == ()


class TestCompoundRuleForms:
    def test_flat_dict_converted(self):
        config = Config(
            slots=["root"],
            compound_variants=[{"size": "lg", "css": {"root": {"margin": 2}}}],
        )
        (rule,) = config.compound_variants
        assert rule == CompoundRule(conditions={"size": "lg"}, css={"root": {"margin": 2}})

    def test_rule_without_css(self):
        assert CompoundRule.from_dict({"size": "lg"}).css == {}


class TestFromDict:
    def test_camel_case_keys(self):
        config = Config.from_dict(
            {
                "slots": ["root"],
                "variants": {"size": {"lg": {"root": {"padding": 16}}}},
                "defaultVariants": {"size": "lg"},
                "compoundVariants": [{"size": "lg", "css": {"root": {"margin": 1}}}],
            }
        )
        assert config.default_variants == {"size": "lg"}
        assert config.compound_variants[0].conditions == {"size": "lg"}

    def test_snake_case_keys(self):
        config = Config.from_dict({"slots": "root", "default_variants": {"size": "sm"}})
        assert config.slots == ("root",)
        assert config.default_variants == {"size": "sm"}

    def test_variant_names_in_declaration_order(self):
        config = Config(slots=["root"], variants={"tone": {}, "size": {}})
        assert config.variant_names == ["tone", "size"]
