"""
Super Over simulation.

A six-ball chase with two wickets in hand. The batter supplies six
(shot, timing) calls up front; the bowling card for each ball comes from a
fixed sequence or a freshly randomised one. The innings stops as soon as the
target is reached or the second wicket falls, and any remaining shot calls
are discarded without being evaluated.
"""
import enum
import logging
import random
from typing import List, Optional, Sequence

from superover.constants import (
    BATTING_ORDER,
    MAX_RANDOM_TARGET,
    MAX_WICKETS,
    MIN_RANDOM_TARGET,
    TARGET_RUNS,
    TOTAL_BALLS,
)
from superover.engine.commentary_engine import CommentaryEngine
from superover.engine.outcome_engine import OutcomeEngine
from superover.errors import ConfigurationError, InputValidationError, SuperOverError
from superover.models.cricket import BowlingType, ShotTiming, ShotType
from superover.models.results import (
    InningsState,
    MatchResult,
    SimulationState,
    SuperOverBall,
    SuperOverResult,
)
from superover.models.schemas import ShotInput
from superover.rules.realism_rules import find_override

logger = logging.getLogger(__name__)

# The bowler's six cards, in the order bowled when not randomised
SUPER_OVER_BOWLING_CARDS = (
    BowlingType.BOUNCER,
    BowlingType.INSWINGER,
    BowlingType.OUTSWINGER,
    BowlingType.LEG_CUTTER,
    BowlingType.OFF_CUTTER,
    BowlingType.SLOWER_BALL,
)


class BowlingMode(enum.Enum):
    FIXED = "fixed"          # cards in order, by ball position
    SHUFFLED = "shuffled"    # fresh permutation of the six cards
    SAMPLED = "sampled"      # six distinct types drawn from all ten


class TargetMode(enum.Enum):
    FIXED = "fixed"
    RANDOM = "random"


def _parse_mode(mode_cls, value):
    if isinstance(value, mode_cls):
        return value
    try:
        return mode_cls(str(value).lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown {mode_cls.__name__}: {value}",
            {"value": value, "valid": [m.value for m in mode_cls]},
        ) from None


def determine_match_result(scored_runs: int, target_runs: int, wickets_lost: int) -> MatchResult:
    if scored_runs >= target_runs and wickets_lost < MAX_WICKETS:
        return MatchResult.WON
    return MatchResult.LOST


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def calculate_margin(
    scored_runs: int,
    target_runs: int,
    wickets_lost: int,
    balls_played: int,
    match_result: MatchResult,
) -> str:
    """
    Won without losing a wicket: balls to spare.
    Won after losing a wicket: wickets in hand.
    Lost all wickets: wickets lost. Ran out of balls: runs short.
    """
    if match_result is MatchResult.WON:
        if wickets_lost == 0:
            return _plural(TOTAL_BALLS - balls_played, "ball")
        return _plural(MAX_WICKETS - wickets_lost, "wicket")

    if wickets_lost >= MAX_WICKETS:
        return _plural(wickets_lost, "wicket")
    return _plural(target_runs - scored_runs, "run")


class SuperOverSimulator:
    def __init__(
        self,
        outcome_engine: OutcomeEngine,
        commentary_engine: Optional[CommentaryEngine] = None,
        bowling_mode=BowlingMode.FIXED,
        target_mode=TargetMode.FIXED,
        target_runs: Optional[int] = None,
        rng: Optional[random.Random] = None,
        batting_order: Sequence[str] = BATTING_ORDER,
    ):
        if len(batting_order) < 2:
            raise ConfigurationError("Super Over needs at least two batters", {"batting_order": list(batting_order)})
        if target_runs is not None and target_runs < 1:
            raise ConfigurationError("Target must be at least 1 run", {"target_runs": target_runs})

        self.outcome_engine = outcome_engine
        self.commentary_engine = commentary_engine or CommentaryEngine()
        self.bowling_mode = _parse_mode(BowlingMode, bowling_mode)
        self.target_mode = _parse_mode(TargetMode, target_mode)
        self.target_runs = target_runs
        self.rng = rng or random.Random()
        self.batting_order = tuple(batting_order)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def generate_target(self) -> int:
        if self.target_runs is not None:
            return self.target_runs
        if self.target_mode is TargetMode.RANDOM:
            return self.rng.randint(MIN_RANDOM_TARGET, MAX_RANDOM_TARGET)
        return TARGET_RUNS

    def generate_bowling_cards(self) -> tuple:
        if self.bowling_mode is BowlingMode.SHUFFLED:
            deck = self.rng.sample(SUPER_OVER_BOWLING_CARDS, len(SUPER_OVER_BOWLING_CARDS))
            return tuple(deck[i % len(deck)] for i in range(TOTAL_BALLS))
        if self.bowling_mode is BowlingMode.SAMPLED:
            return tuple(self.rng.sample(list(BowlingType), TOTAL_BALLS))
        return SUPER_OVER_BOWLING_CARDS

    def setup_innings(self) -> InningsState:
        """Fresh chase state with openers at the crease"""
        return InningsState(
            target_runs=self.generate_target(),
            bowling_cards=self.generate_bowling_cards(),
            striker=self.batting_order[0],
            non_striker=self.batting_order[1],
        )

    # ------------------------------------------------------------------
    # Ball by ball
    # ------------------------------------------------------------------

    def bowl_ball(self, innings: InningsState, shot: ShotInput) -> SuperOverBall:
        if innings.is_innings_complete:
            innings.state = SimulationState.COMPLETED
            raise SuperOverError(
                "Super Over innings is already complete",
                {"balls_played": innings.balls_played, "wickets_lost": innings.wickets_lost},
            )
        innings.state = SimulationState.IN_PROGRESS

        ball_number = innings.balls_played + 1
        bowling_type = innings.next_bowling_card()
        outcome = self.outcome_engine.predict_outcome(bowling_type, shot.shot_type, shot.shot_timing)
        on_strike = innings.striker

        override = find_override(bowling_type, shot.shot_type)
        if override is not None:
            effect = "ball hits stumps" if override.hits_stumps else "ball misses stumps"
            innings.notes.append(f"Ball {ball_number}: {override.reason} - {effect}")

        if outcome.is_wicket:
            innings.wickets_lost += 1
            # New batter takes strike; non-striker stays put
            if innings.next_batter_index < len(self.batting_order):
                innings.striker = self.batting_order[innings.next_batter_index]
                innings.next_batter_index += 1
        else:
            innings.scored_runs += outcome.runs
            if outcome.runs % 2 == 1:
                innings.swap_strike()

        ball = SuperOverBall(
            ball_number=ball_number,
            bowling_type=bowling_type,
            shot_type=shot.shot_type,
            shot_timing=shot.shot_timing,
            outcome=outcome,
            striker=on_strike,
            commentary=self.commentary_engine.commentary_text(outcome),
        )
        innings.balls.append(ball)
        logger.debug(
            "Ball %d: %s to %s, %s %s -> %s (%d/%d)",
            ball_number, bowling_type, on_strike, shot.shot_timing, shot.shot_type,
            outcome, innings.scored_runs, innings.wickets_lost,
        )

        if innings.is_innings_complete:
            innings.state = SimulationState.COMPLETED
        return ball

    def finish(self, innings: InningsState) -> SuperOverResult:
        innings.state = SimulationState.COMPLETED
        match_result = determine_match_result(innings.scored_runs, innings.target_runs, innings.wickets_lost)
        margin = calculate_margin(
            innings.scored_runs,
            innings.target_runs,
            innings.wickets_lost,
            innings.balls_played,
            match_result,
        )
        return SuperOverResult(
            target_runs=innings.target_runs,
            scored_runs=innings.scored_runs,
            wickets_lost=innings.wickets_lost,
            balls_played=innings.balls_played,
            balls=tuple(innings.balls),
            match_result=match_result,
            margin=margin,
            notes=tuple(innings.notes),
        )

    # ------------------------------------------------------------------
    # Whole over
    # ------------------------------------------------------------------

    def simulate(self, shots: Sequence) -> SuperOverResult:
        """
        Play the Super Over for exactly six shot calls.

        Each call is a ShotInput or a (ShotType, ShotTiming) pair. Raises
        InputValidationError before any ball is bowled if the calls are
        malformed; other failures are raised as SuperOverError.
        """
        shot_inputs = self.validate_shots(shots)

        try:
            innings = self.setup_innings()
            for shot in shot_inputs:
                self.bowl_ball(innings, shot)
                if innings.is_innings_complete:
                    break
            result = self.finish(innings)
        except Exception as e:
            logger.exception("Super Over simulation failed")
            raise SuperOverError(
                f"Failed to process Super Over: {e}",
                {"shot_inputs": [(s.shot_type, s.shot_timing) for s in shot_inputs]},
            ) from e

        logger.info(
            "Super Over %s by %s (%d/%d chasing %d in %d balls)",
            result.match_result.value, result.margin, result.scored_runs,
            result.wickets_lost, result.target_runs, result.balls_played,
        )
        return result

    @staticmethod
    def validate_shots(shots: Sequence) -> List[ShotInput]:
        if shots is None or len(shots) != TOTAL_BALLS:
            actual = 0 if shots is None else len(shots)
            raise InputValidationError(
                f"Super Over requires exactly {TOTAL_BALLS} shot inputs, got {actual}",
                {"expected": TOTAL_BALLS, "actual": actual},
            )

        validated = []
        errors = []
        for i, shot in enumerate(shots, start=1):
            if isinstance(shot, ShotInput):
                validated.append(shot)
            elif (
                isinstance(shot, (tuple, list))
                and len(shot) == 2
                and isinstance(shot[0], ShotType)
                and isinstance(shot[1], ShotTiming)
            ):
                validated.append(ShotInput(shot_type=shot[0], shot_timing=shot[1]))
            else:
                errors.append(f"Ball {i}: expected (shot type, shot timing), got {shot!r}")

        if errors:
            raise InputValidationError("\n".join(errors), {"errors": errors})
        return validated
