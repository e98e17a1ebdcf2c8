"""
Super Over match state and result records
"""
import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

from superover.constants import MAX_WICKETS, TOTAL_BALLS
from superover.models.cricket import BowlingType, Outcome, ShotTiming, ShotType


class MatchResult(enum.Enum):
    WON = "won"
    LOST = "lost"


class SimulationState(enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class SuperOverBall:
    """One delivery of the Super Over"""
    ball_number: int
    bowling_type: BowlingType
    shot_type: ShotType
    shot_timing: ShotTiming
    outcome: Outcome
    striker: str
    commentary: str = ""

    @property
    def runs(self) -> int:
        return self.outcome.runs

    @property
    def is_wicket(self) -> bool:
        return self.outcome.is_wicket


@dataclass(frozen=True)
class SuperOverResult:
    """Final state of a simulated Super Over"""
    target_runs: int
    scored_runs: int
    wickets_lost: int
    balls_played: int
    balls: Tuple[SuperOverBall, ...]
    match_result: MatchResult
    margin: str
    notes: Tuple[str, ...] = ()

    @property
    def won(self) -> bool:
        return self.match_result is MatchResult.WON

    @property
    def balls_remaining(self) -> int:
        return TOTAL_BALLS - self.balls_played


@dataclass
class InningsState:
    """Mutable chase state, owned by a single simulation run"""
    target_runs: int
    bowling_cards: Tuple[BowlingType, ...]
    striker: str
    non_striker: str
    next_batter_index: int = 2  # 0 and 1 are openers
    scored_runs: int = 0
    wickets_lost: int = 0
    balls: list = field(default_factory=list)
    notes: list = field(default_factory=list)
    state: SimulationState = SimulationState.NOT_STARTED

    @property
    def balls_played(self) -> int:
        return len(self.balls)

    @property
    def all_out(self) -> bool:
        return self.wickets_lost >= MAX_WICKETS

    @property
    def target_reached(self) -> bool:
        return self.scored_runs >= self.target_runs and not self.all_out

    @property
    def is_innings_complete(self) -> bool:
        if self.all_out:
            return True
        if self.target_reached:
            return True
        if self.balls_played >= TOTAL_BALLS:
            return True
        return False

    def swap_strike(self):
        self.striker, self.non_striker = self.non_striker, self.striker

    def next_bowling_card(self) -> Optional[BowlingType]:
        if self.balls_played >= len(self.bowling_cards):
            return None
        return self.bowling_cards[self.balls_played]
