"""
Outcome prediction strategies.

Every strategy answers the same question - what happens when this delivery
meets this shot with this timing - and can be swapped on the OutcomeEngine
at runtime. The rule-based strategy is deterministic; the probabilistic one
draws from a random source and may differ between calls.
"""
import logging
import random
from abc import ABC, abstractmethod
from typing import Dict, Optional

from superover.errors import ConfigurationError, OutcomePredictionError
from superover.models.cricket import BowlingType, Outcome, ShotTiming, ShotType
from superover.rules.outcome_rules import DEFAULT_OUTCOME, RULE_TABLE, get_outcome_rule

logger = logging.getLogger(__name__)


class OutcomeStrategy(ABC):
    strategy_id: str = ""
    name: str = ""
    description: str = ""

    @abstractmethod
    def predict(self, bowling_type: BowlingType, shot_type: ShotType, timing: ShotTiming) -> Outcome:
        ...

    @abstractmethod
    def is_valid_combination(self, bowling_type: BowlingType, shot_type: ShotType) -> bool:
        ...

    def info(self) -> dict:
        return {"id": self.strategy_id, "name": self.name, "description": self.description}


class RuleBasedOutcomeStrategy(OutcomeStrategy):
    """Looks the combination up in the rule table; misses score DEFAULT_OUTCOME"""

    strategy_id = "rule-based"
    name = "Rule-Based Strategy"
    description = (
        "Uses predefined rules to predict outcomes from bowling type, "
        "shot type and timing combinations."
    )

    def __init__(self, rule_table: Optional[Dict] = None, default_outcome: Outcome = DEFAULT_OUTCOME):
        self._rules = RULE_TABLE if rule_table is None else rule_table
        self.default_outcome = default_outcome

    def predict(self, bowling_type: BowlingType, shot_type: ShotType, timing: ShotTiming) -> Outcome:
        try:
            outcome = self._rules.get((bowling_type, shot_type, timing))
        except TypeError as e:
            raise OutcomePredictionError(
                f"Failed to predict outcome for {bowling_type} + {shot_type} + {timing}",
                {"bowling_type": bowling_type, "shot_type": shot_type, "timing": timing, "error": str(e)},
            ) from e

        if outcome is None:
            logger.debug("No rule for %s + %s + %s, using %s", bowling_type, shot_type, timing, self.default_outcome)
            return self.default_outcome
        return outcome

    def is_valid_combination(self, bowling_type: BowlingType, shot_type: ShotType) -> bool:
        if self._rules is RULE_TABLE:
            return get_outcome_rule(bowling_type, shot_type) is not None
        return any((bowling_type, shot_type, t) in self._rules for t in ShotTiming)

    @property
    def total_rules(self) -> int:
        return len(self._rules)

    def available_combinations(self) -> list[str]:
        return [f"{b}|{s}|{t}" for b, s, t in self._rules]


class ProbabilisticOutcomeStrategy(OutcomeStrategy):
    """
    Weighs timing quality, bowling difficulty and shot risk, then draws.

    wicket_p  = (1 - timing) * difficulty * risk
    success_p = timing * (1 - difficulty * 0.5) * (1 - risk * 0.3)

    A draw below wicket_p * 0.3 is a wicket; otherwise
    runs_p = success_p * (risk + 0.3) picks the run bucket.
    """

    strategy_id = "probabilistic"
    name = "Probabilistic Strategy"
    description = (
        "Uses probability-based calculations considering timing quality, "
        "bowling difficulty, and shot risk to predict outcomes."
    )

    TIMING_QUALITY = {
        ShotTiming.EARLY: 0.6,
        ShotTiming.GOOD: 0.8,
        ShotTiming.PERFECT: 1.0,
        ShotTiming.LATE: 0.4,
    }

    BOWLING_DIFFICULTY = {
        BowlingType.BOUNCER: 0.8,
        BowlingType.YORKER: 0.9,
        BowlingType.PACE: 0.6,
        BowlingType.OFF_BREAK: 0.7,
        BowlingType.INSWINGER: 0.7,
        BowlingType.OUTSWINGER: 0.7,
        BowlingType.SLOWER_BALL: 0.8,
        BowlingType.LEG_CUTTER: 0.8,
        BowlingType.OFF_CUTTER: 0.8,
        BowlingType.DOOSRA: 0.9,
    }

    SHOT_RISK = {
        ShotType.STRAIGHT: 0.3,
        ShotType.SWEEP: 0.6,
        ShotType.FLICK: 0.4,
        ShotType.COVER_DRIVE: 0.5,
        ShotType.LEG_GLANCE: 0.4,
        ShotType.PULL: 0.7,
        ShotType.LONG_ON: 0.8,
        ShotType.SCOOP: 0.9,
        ShotType.SQUARE_CUT: 0.6,
        ShotType.UPPER_CUT: 0.8,
    }

    DEFAULT_TIMING_QUALITY = 0.5
    DEFAULT_BOWLING_DIFFICULTY = 0.7
    DEFAULT_SHOT_RISK = 0.5

    # (threshold, outcome), checked top down
    RUN_THRESHOLDS = [
        (0.9, Outcome.SIX),
        (0.8, Outcome.FOUR),
        (0.6, Outcome.THREE),
        (0.4, Outcome.TWO),
    ]

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.timing_quality = dict(self.TIMING_QUALITY)
        self.bowling_difficulty = dict(self.BOWLING_DIFFICULTY)
        self.shot_risk = dict(self.SHOT_RISK)

    def probabilities(self, bowling_type: BowlingType, shot_type: ShotType, timing: ShotTiming) -> Dict[str, float]:
        t = self.timing_quality.get(timing, self.DEFAULT_TIMING_QUALITY)
        b = self.bowling_difficulty.get(bowling_type, self.DEFAULT_BOWLING_DIFFICULTY)
        s = self.shot_risk.get(shot_type, self.DEFAULT_SHOT_RISK)

        wicket_p = (1 - t) * b * s
        success_p = t * (1 - b * 0.5) * (1 - s * 0.3)
        return {
            "timing_quality": t,
            "bowling_difficulty": b,
            "shot_risk": s,
            "wicket": wicket_p,
            "success": success_p,
            "runs": success_p * (s + 0.3),
        }

    def predict(self, bowling_type: BowlingType, shot_type: ShotType, timing: ShotTiming) -> Outcome:
        try:
            probs = self.probabilities(bowling_type, shot_type, timing)
            if self.rng.random() < probs["wicket"] * 0.3:
                return Outcome.WICKET
            return self._runs_bucket(probs["runs"])
        except (TypeError, ValueError, ArithmeticError) as e:
            raise OutcomePredictionError(
                f"Failed to predict outcome using probabilistic strategy for "
                f"{bowling_type} + {shot_type} + {timing}",
                {"bowling_type": bowling_type, "shot_type": shot_type, "timing": timing, "error": str(e)},
            ) from e

    def _runs_bucket(self, runs_p: float) -> Outcome:
        for threshold, outcome in self.RUN_THRESHOLDS:
            if runs_p > threshold:
                return outcome
        return Outcome.ONE

    def is_valid_combination(self, bowling_type: BowlingType, shot_type: ShotType) -> bool:
        return bowling_type in self.bowling_difficulty and shot_type in self.shot_risk

    def set_timing_quality(self, timing: ShotTiming, value: float):
        self.timing_quality[timing] = _check_weight("Timing multiplier", value)

    def set_bowling_difficulty(self, bowling_type: BowlingType, value: float):
        self.bowling_difficulty[bowling_type] = _check_weight("Bowling difficulty", value)

    def set_shot_risk(self, shot_type: ShotType, value: float):
        self.shot_risk[shot_type] = _check_weight("Shot risk", value)


def _check_weight(label: str, value: float) -> float:
    if not 0 <= value <= 1:
        raise ConfigurationError(f"{label} must be between 0 and 1", {"value": value})
    return value
