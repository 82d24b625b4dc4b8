from stylevariants.matching.compound import match_compound, rule_matches
from stylevariants.matching.variants import match_variant

__all__ = ["match_variant", "match_compound", "rule_matches"]
