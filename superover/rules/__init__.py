from superover.rules.outcome_rules import (
    OUTCOME_RULES,
    RULE_TABLE,
    DEFAULT_OUTCOME,
    OutcomeRule,
    lookup_outcome,
    get_outcome_rule,
    rule_statistics,
)
from superover.rules.realism_rules import (
    REALISM_OVERRIDES,
    RealismOverride,
    find_override,
    is_unrealistic_combination,
    realistic_alternatives,
)
from superover.rules.commentary_rules import COMMENTARY_RULES, commentary_for, get_commentary_rule

__all__ = [
    "OUTCOME_RULES",
    "RULE_TABLE",
    "DEFAULT_OUTCOME",
    "OutcomeRule",
    "lookup_outcome",
    "get_outcome_rule",
    "rule_statistics",
    "REALISM_OVERRIDES",
    "RealismOverride",
    "find_override",
    "is_unrealistic_combination",
    "realistic_alternatives",
    "COMMENTARY_RULES",
    "commentary_for",
    "get_commentary_rule",
]
