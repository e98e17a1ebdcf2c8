"""
Outcome rules: what each (delivery, shot) pairing yields for every timing.
Grouped by bowling family. The table is partial; combinations that are not
listed resolve to DEFAULT_OUTCOME.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from superover.models.cricket import BowlingType, Outcome, ShotTiming, ShotType

B = BowlingType
S = ShotType
O = Outcome

DEFAULT_OUTCOME = Outcome.ONE


@dataclass(frozen=True)
class OutcomeRule:
    bowling_type: BowlingType
    shot_type: ShotType
    early: Outcome
    good: Outcome
    perfect: Outcome
    late: Outcome

    def outcome_for(self, timing: ShotTiming) -> Outcome:
        return {
            ShotTiming.EARLY: self.early,
            ShotTiming.GOOD: self.good,
            ShotTiming.PERFECT: self.perfect,
            ShotTiming.LATE: self.late,
        }[timing]

    @property
    def timing_outcomes(self) -> Dict[ShotTiming, Outcome]:
        return {t: self.outcome_for(t) for t in ShotTiming}


FAST_BOWLING_RULES = [
    # Bouncer
    OutcomeRule(B.BOUNCER, S.PULL, early=O.TWO, good=O.FOUR, perfect=O.SIX, late=O.WICKET),
    OutcomeRule(B.BOUNCER, S.UPPER_CUT, early=O.ONE, good=O.FOUR, perfect=O.SIX, late=O.WICKET),
    OutcomeRule(B.BOUNCER, S.STRAIGHT, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.BOUNCER, S.SWEEP, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    # Yorker
    OutcomeRule(B.YORKER, S.STRAIGHT, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.YORKER, S.FLICK, early=O.ONE, good=O.THREE, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.YORKER, S.SCOOP, early=O.WICKET, good=O.FOUR, perfect=O.SIX, late=O.WICKET),
    # Pace
    OutcomeRule(B.PACE, S.STRAIGHT, early=O.ONE, good=O.THREE, perfect=O.FOUR, late=O.TWO),
    OutcomeRule(B.PACE, S.COVER_DRIVE, early=O.ONE, good=O.THREE, perfect=O.FOUR, late=O.TWO),
    OutcomeRule(B.PACE, S.PULL, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.PACE, S.SQUARE_CUT, early=O.ONE, good=O.THREE, perfect=O.FOUR, late=O.TWO),
    OutcomeRule(B.PACE, S.LONG_ON, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
]

SWING_BOWLING_RULES = [
    # Inswinger
    OutcomeRule(B.INSWINGER, S.FLICK, early=O.ONE, good=O.THREE, perfect=O.FOUR, late=O.TWO),
    OutcomeRule(B.INSWINGER, S.STRAIGHT, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.INSWINGER, S.LEG_GLANCE, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.INSWINGER, S.PULL, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    # Outswinger
    OutcomeRule(B.OUTSWINGER, S.COVER_DRIVE, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OUTSWINGER, S.PULL, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OUTSWINGER, S.SWEEP, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OUTSWINGER, S.STRAIGHT, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.OUTSWINGER, S.SQUARE_CUT, early=O.ONE, good=O.THREE, perfect=O.FOUR, late=O.TWO),
    OutcomeRule(B.OUTSWINGER, S.UPPER_CUT, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OUTSWINGER, S.LONG_ON, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
]

SPIN_BOWLING_RULES = [
    # Off Break
    OutcomeRule(B.OFF_BREAK, S.SWEEP, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OFF_BREAK, S.UPPER_CUT, early=O.WICKET, good=O.THREE, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OFF_BREAK, S.STRAIGHT, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.OFF_BREAK, S.LEG_GLANCE, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.OFF_BREAK, S.COVER_DRIVE, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OFF_BREAK, S.PULL, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    # Doosra
    OutcomeRule(B.DOOSRA, S.SCOOP, early=O.WICKET, good=O.FOUR, perfect=O.SIX, late=O.WICKET),
    OutcomeRule(B.DOOSRA, S.SWEEP, early=O.WICKET, good=O.THREE, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.DOOSRA, S.LEG_GLANCE, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.DOOSRA, S.STRAIGHT, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.DOOSRA, S.COVER_DRIVE, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.DOOSRA, S.FLICK, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
]

VARIATION_BOWLING_RULES = [
    # Slower Ball
    OutcomeRule(B.SLOWER_BALL, S.SQUARE_CUT, early=O.WICKET, good=O.THREE, perfect=O.FOUR, late=O.TWO),
    OutcomeRule(B.SLOWER_BALL, S.COVER_DRIVE, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.SLOWER_BALL, S.LONG_ON, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.SLOWER_BALL, S.STRAIGHT, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.SLOWER_BALL, S.PULL, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.SLOWER_BALL, S.SWEEP, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    # Leg Cutter
    OutcomeRule(B.LEG_CUTTER, S.LEG_GLANCE, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.LEG_CUTTER, S.FLICK, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.LEG_CUTTER, S.STRAIGHT, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.LEG_CUTTER, S.SQUARE_CUT, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.TWO),
    OutcomeRule(B.LEG_CUTTER, S.COVER_DRIVE, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    # Off Cutter
    OutcomeRule(B.OFF_CUTTER, S.LONG_ON, early=O.ONE, good=O.THREE, perfect=O.SIX, late=O.TWO),
    OutcomeRule(B.OFF_CUTTER, S.SQUARE_CUT, early=O.WICKET, good=O.THREE, perfect=O.FOUR, late=O.TWO),
    OutcomeRule(B.OFF_CUTTER, S.COVER_DRIVE, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OFF_CUTTER, S.STRAIGHT, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.OFF_CUTTER, S.PULL, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OFF_CUTTER, S.SWEEP, early=O.ONE, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
    OutcomeRule(B.OFF_CUTTER, S.SCOOP, early=O.WICKET, good=O.THREE, perfect=O.SIX, late=O.WICKET),
    OutcomeRule(B.OFF_CUTTER, S.LEG_GLANCE, early=O.ONE, good=O.TWO, perfect=O.THREE, late=O.WICKET),
    OutcomeRule(B.OFF_CUTTER, S.UPPER_CUT, early=O.WICKET, good=O.TWO, perfect=O.FOUR, late=O.WICKET),
]

OUTCOME_RULES: List[OutcomeRule] = (
    FAST_BOWLING_RULES + SWING_BOWLING_RULES + SPIN_BOWLING_RULES + VARIATION_BOWLING_RULES
)

# (bowling, shot) -> rule, built once at import
_RULES_BY_PAIR: Dict[Tuple[BowlingType, ShotType], OutcomeRule] = {
    (r.bowling_type, r.shot_type): r for r in OUTCOME_RULES
}

# (bowling, shot, timing) -> outcome
RULE_TABLE: Dict[Tuple[BowlingType, ShotType, ShotTiming], Outcome] = {
    (r.bowling_type, r.shot_type, timing): outcome
    for r in OUTCOME_RULES
    for timing, outcome in r.timing_outcomes.items()
}


def lookup_outcome(
    bowling_type: BowlingType, shot_type: ShotType, timing: ShotTiming
) -> Optional[Outcome]:
    return RULE_TABLE.get((bowling_type, shot_type, timing))


def get_outcome_rule(bowling_type: BowlingType, shot_type: ShotType) -> Optional[OutcomeRule]:
    return _RULES_BY_PAIR.get((bowling_type, shot_type))


def rules_for_bowling_type(bowling_type: BowlingType) -> List[OutcomeRule]:
    return [r for r in OUTCOME_RULES if r.bowling_type is bowling_type]


def rules_for_shot_type(shot_type: ShotType) -> List[OutcomeRule]:
    return [r for r in OUTCOME_RULES if r.shot_type is shot_type]


def supported_bowling_types() -> List[BowlingType]:
    """Bowling types with at least one rule, in enum order"""
    covered = {r.bowling_type for r in OUTCOME_RULES}
    return [b for b in BowlingType if b in covered]


def supported_shot_types() -> List[ShotType]:
    covered = {r.shot_type for r in OUTCOME_RULES}
    return [s for s in ShotType if s in covered]


def rule_statistics() -> dict:
    bowling_types = supported_bowling_types()
    return {
        "total_rules": len(OUTCOME_RULES),
        "total_outcomes": len(RULE_TABLE),
        "bowling_type_count": len(bowling_types),
        "shot_type_count": len(supported_shot_types()),
        "average_rules_per_bowling_type": round(len(OUTCOME_RULES) / len(bowling_types)),
    }
