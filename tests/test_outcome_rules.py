"""
Tests for the vocabularies, the rule table and the realism overrides.

Run with: pytest tests/test_outcome_rules.py -v
"""
import pytest

from superover.errors import InputValidationError
from superover.models.cricket import BowlingType, Outcome, ShotTiming, ShotType
from superover.rules.commentary_rules import COMMENTARY_RULES, commentary_for
from superover.rules.outcome_rules import (
    DEFAULT_OUTCOME,
    OUTCOME_RULES,
    RULE_TABLE,
    get_outcome_rule,
    lookup_outcome,
    rule_statistics,
    rules_for_bowling_type,
    rules_for_shot_type,
    supported_bowling_types,
)
from superover.rules.realism_rules import (
    REALISM_OVERRIDES,
    find_override,
    is_unrealistic_combination,
    realistic_alternatives,
)


class TestVocabularies:
    """Closed enums and name lookup"""

    def test_vocabulary_sizes(self):
        assert len(BowlingType) == 10
        assert len(ShotType) == 10
        assert len(ShotTiming) == 4
        assert len(Outcome) == 8

    def test_lookup_ignores_case_and_spacing(self):
        assert BowlingType.from_name("leg  cutter") is BowlingType.LEG_CUTTER
        assert ShotType.from_name("coverdrive") is ShotType.COVER_DRIVE
        assert ShotTiming.from_name(" PERFECT ") is ShotTiming.PERFECT

    def test_unknown_name_raises_validation_error(self):
        with pytest.raises(InputValidationError) as exc:
            ShotType.from_name("Hook")
        assert "Invalid shot type: Hook" in str(exc.value)

    def test_lookup_returns_none_for_unknown(self):
        assert BowlingType.lookup("Googly") is None


class TestOutcome:
    """Outcome decomposes into runs or the wicket marker, never both"""

    @pytest.mark.parametrize("outcome", list(Outcome))
    def test_exactly_one_of_runs_or_wicket(self, outcome):
        if outcome.is_wicket:
            assert outcome.runs == 0
        else:
            assert 0 <= outcome.runs <= 6

    @pytest.mark.parametrize("text,expected", [
        ("0 runs", Outcome.DOT),
        ("1 run", Outcome.ONE),
        ("4 runs", Outcome.FOUR),
        ("6 runs", Outcome.SIX),
        ("1 wicket", Outcome.WICKET),
        ("1 runs", Outcome.ONE),
    ])
    def test_from_text(self, text, expected):
        assert Outcome.from_text(text) is expected

    @pytest.mark.parametrize("text", ["7 runs", "2 wickets", "four", ""])
    def test_from_text_rejects_garbage(self, text):
        with pytest.raises(InputValidationError):
            Outcome.from_text(text)

    def test_run_values(self):
        assert [o.runs for o in Outcome if not o.is_wicket] == [0, 1, 2, 3, 4, 5, 6]


class TestRuleTable:
    """Static rule table"""

    def test_rule_keys_are_unique(self):
        pairs = [(r.bowling_type, r.shot_type) for r in OUTCOME_RULES]
        assert len(pairs) == len(set(pairs))

    def test_every_rule_covers_all_timings(self):
        assert len(RULE_TABLE) == len(OUTCOME_RULES) * 4

    def test_table_is_partial(self):
        assert len(RULE_TABLE) < 10 * 10 * 4

    @pytest.mark.parametrize("bowling,shot,timing,expected", [
        (BowlingType.BOUNCER, ShotType.PULL, ShotTiming.PERFECT, Outcome.SIX),
        (BowlingType.BOUNCER, ShotType.PULL, ShotTiming.LATE, Outcome.WICKET),
        (BowlingType.YORKER, ShotType.STRAIGHT, ShotTiming.EARLY, Outcome.WICKET),
        (BowlingType.PACE, ShotType.STRAIGHT, ShotTiming.GOOD, Outcome.THREE),
        (BowlingType.OFF_CUTTER, ShotType.LONG_ON, ShotTiming.PERFECT, Outcome.SIX),
    ])
    def test_known_outcomes(self, bowling, shot, timing, expected):
        assert lookup_outcome(bowling, shot, timing) is expected

    def test_missing_combination_returns_none(self):
        assert lookup_outcome(BowlingType.BOUNCER, ShotType.FLICK, ShotTiming.GOOD) is None
        assert get_outcome_rule(BowlingType.YORKER, ShotType.COVER_DRIVE) is None

    def test_default_outcome_is_single(self):
        assert DEFAULT_OUTCOME is Outcome.ONE

    def test_rules_by_bowling_and_shot(self):
        bouncer = rules_for_bowling_type(BowlingType.BOUNCER)
        assert {r.shot_type for r in bouncer} == {
            ShotType.PULL, ShotType.UPPER_CUT, ShotType.STRAIGHT, ShotType.SWEEP,
        }
        assert all(r.shot_type is ShotType.SCOOP for r in rules_for_shot_type(ShotType.SCOOP))

    def test_statistics(self):
        stats = rule_statistics()
        assert stats["total_rules"] == len(OUTCOME_RULES)
        assert stats["total_outcomes"] == len(RULE_TABLE)
        assert stats["bowling_type_count"] == len(supported_bowling_types()) == 10


class TestRealismOverrides:
    """Implausible pairings and their forced outcomes"""

    def test_forced_outcomes_are_dot_or_wicket(self):
        for override in REALISM_OVERRIDES:
            assert override.forced_outcome in (Outcome.DOT, Outcome.WICKET)

    def test_override_keys_are_unique(self):
        pairs = [(o.bowling_type, o.shot_type) for o in REALISM_OVERRIDES]
        assert len(pairs) == len(set(pairs))

    def test_bouncer_sweep_goes_over_the_stumps(self):
        override = find_override(BowlingType.BOUNCER, ShotType.SWEEP)
        assert override.forced_outcome is Outcome.DOT
        assert not override.hits_stumps

    def test_yorker_sweep_hits_the_stumps(self):
        override = find_override(BowlingType.YORKER, ShotType.SWEEP)
        assert override.forced_outcome is Outcome.WICKET
        assert override.hits_stumps

    def test_realistic_pairing_has_no_override(self):
        assert not is_unrealistic_combination(BowlingType.BOUNCER, ShotType.PULL)
        assert find_override(BowlingType.BOUNCER, ShotType.PULL) is None

    @pytest.mark.parametrize("bowling", list(BowlingType))
    def test_alternatives_are_realistic(self, bowling):
        alternatives = realistic_alternatives(bowling)
        assert len(alternatives) == 3
        for shot in alternatives:
            assert not is_unrealistic_combination(bowling, shot)


class TestCommentaryRules:
    """One commentary line per outcome bucket"""

    def test_every_outcome_has_commentary(self):
        assert {r.outcome for r in COMMENTARY_RULES} == set(Outcome)

    def test_known_lines(self):
        assert commentary_for(Outcome.WICKET) == "It's a wicket!"
        assert commentary_for(Outcome.SIX) == "That's massive and out of the ground."
        assert commentary_for(Outcome.DOT) == "Dot ball, no run."
