"""
Realism overrides for physically implausible delivery/shot pairings.
The forced outcome depends on whether the ball would go on to hit the stumps
once the batter has committed to the wrong shot.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from superover.models.cricket import BowlingType, Outcome, ShotType

B = BowlingType
S = ShotType


@dataclass(frozen=True)
class RealismOverride:
    bowling_type: BowlingType
    shot_type: ShotType
    forced_outcome: Outcome
    reason: str
    alternative_suggestion: str = ""

    @property
    def hits_stumps(self) -> bool:
        return self.forced_outcome.is_wicket


REALISM_OVERRIDES = [
    RealismOverride(
        B.BOUNCER, S.SWEEP, Outcome.DOT,
        reason="You cannot sweep a bouncer - the ball is too high",
        alternative_suggestion="Try Pull or UpperCut instead",
    ),
    RealismOverride(
        B.YORKER, S.SWEEP, Outcome.WICKET,
        reason="Sweeping a yorker is extremely difficult and risky",
        alternative_suggestion="Try Straight or Flick instead",
    ),
    RealismOverride(
        B.DOOSRA, S.SCOOP, Outcome.WICKET,
        reason="Scooping a doosra is extremely risky and rarely attempted",
        alternative_suggestion="Try Flick or LegGlance instead",
    ),
    RealismOverride(
        B.BOUNCER, S.LEG_GLANCE, Outcome.DOT,
        reason="Leg glancing a bouncer is very difficult due to the height",
        alternative_suggestion="Try Pull or UpperCut instead",
    ),
    RealismOverride(
        B.YORKER, S.UPPER_CUT, Outcome.WICKET,
        reason="Upper cutting a yorker is nearly impossible",
        alternative_suggestion="Try Straight or Flick instead",
    ),
    RealismOverride(
        B.PACE, S.SCOOP, Outcome.WICKET,
        reason="Scooping a fast pace ball is extremely risky",
        alternative_suggestion="Try Straight or CoverDrive instead",
    ),
    RealismOverride(
        B.LEG_CUTTER, S.SCOOP, Outcome.DOT,
        reason="Scooping a leg cutter is very difficult",
        alternative_suggestion="Try Flick or LegGlance instead",
    ),
    RealismOverride(
        B.SLOWER_BALL, S.UPPER_CUT, Outcome.WICKET,
        reason="Upper cutting a slower ball is counterproductive",
        alternative_suggestion="Try Straight or SquareCut instead",
    ),
]

_OVERRIDES_BY_PAIR: Dict[Tuple[BowlingType, ShotType], RealismOverride] = {
    (o.bowling_type, o.shot_type): o for o in REALISM_OVERRIDES
}

REALISTIC_ALTERNATIVES: Dict[BowlingType, List[ShotType]] = {
    B.BOUNCER: [S.PULL, S.UPPER_CUT, S.STRAIGHT],
    B.YORKER: [S.STRAIGHT, S.FLICK, S.LEG_GLANCE],
    B.PACE: [S.STRAIGHT, S.COVER_DRIVE, S.SQUARE_CUT],
    B.INSWINGER: [S.FLICK, S.LEG_GLANCE, S.STRAIGHT],
    B.OUTSWINGER: [S.COVER_DRIVE, S.SQUARE_CUT, S.STRAIGHT],
    B.OFF_BREAK: [S.SWEEP, S.LEG_GLANCE, S.FLICK],
    B.LEG_CUTTER: [S.LEG_GLANCE, S.FLICK, S.STRAIGHT],
    B.OFF_CUTTER: [S.SQUARE_CUT, S.COVER_DRIVE, S.STRAIGHT],
    B.SLOWER_BALL: [S.STRAIGHT, S.SQUARE_CUT, S.COVER_DRIVE],
    B.DOOSRA: [S.FLICK, S.LEG_GLANCE, S.SWEEP],
}


def find_override(bowling_type: BowlingType, shot_type: ShotType) -> Optional[RealismOverride]:
    return _OVERRIDES_BY_PAIR.get((bowling_type, shot_type))


def is_unrealistic_combination(bowling_type: BowlingType, shot_type: ShotType) -> bool:
    return (bowling_type, shot_type) in _OVERRIDES_BY_PAIR


def realistic_alternatives(bowling_type: BowlingType) -> List[ShotType]:
    return REALISTIC_ALTERNATIVES.get(bowling_type, [S.STRAIGHT, S.COVER_DRIVE, S.FLICK])
