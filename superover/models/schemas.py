"""
Pydantic models for validated inputs and serialisable results
"""
from typing import List, Optional

from pydantic import BaseModel, field_validator

from superover.models.cricket import BowlingType, Outcome, ShotTiming, ShotType
from superover.models.results import SuperOverResult


class ShotInput(BaseModel):
    """A batter's shot for one Super Over ball"""
    shot_type: ShotType
    shot_timing: ShotTiming

    model_config = {"frozen": True}

    @field_validator("shot_type", mode="before")
    @classmethod
    def _shot_by_name(cls, v):
        return ShotType.from_name(v) if isinstance(v, str) else v

    @field_validator("shot_timing", mode="before")
    @classmethod
    def _timing_by_name(cls, v):
        return ShotTiming.from_name(v) if isinstance(v, str) else v


class CricketInput(ShotInput):
    """A full delivery: what was bowled and how it was played"""
    bowling_type: BowlingType

    @field_validator("bowling_type", mode="before")
    @classmethod
    def _bowling_by_name(cls, v):
        return BowlingType.from_name(v) if isinstance(v, str) else v

    def as_tuple(self):
        return self.bowling_type, self.shot_type, self.shot_timing


# Result Schemas
class PredictionResponse(BaseModel):
    bowling_type: str
    shot_type: str
    shot_timing: str
    outcome: str
    commentary: Optional[str] = None


class BallResponse(BaseModel):
    ball_number: int
    bowling_type: str
    shot_type: str
    shot_timing: str
    outcome: str
    runs: int
    is_wicket: bool
    striker: str
    commentary: str


class SuperOverResponse(BaseModel):
    target_runs: int
    scored_runs: int
    wickets_lost: int
    balls_played: int
    match_result: str
    margin: str
    balls: List[BallResponse]
    notes: List[str] = []

    @classmethod
    def from_result(cls, result: SuperOverResult) -> "SuperOverResponse":
        return cls(
            target_runs=result.target_runs,
            scored_runs=result.scored_runs,
            wickets_lost=result.wickets_lost,
            balls_played=result.balls_played,
            match_result=result.match_result.value,
            margin=result.margin,
            balls=[
                BallResponse(
                    ball_number=b.ball_number,
                    bowling_type=b.bowling_type.value,
                    shot_type=b.shot_type.value,
                    shot_timing=b.shot_timing.value,
                    outcome=b.outcome.value,
                    runs=b.runs,
                    is_wicket=b.is_wicket,
                    striker=b.striker,
                    commentary=b.commentary,
                )
                for b in result.balls
            ],
            notes=list(result.notes),
        )


def prediction_response(
    cricket_input: CricketInput, outcome: Outcome, commentary: Optional[str] = None
) -> PredictionResponse:
    return PredictionResponse(
        bowling_type=cricket_input.bowling_type.value,
        shot_type=cricket_input.shot_type.value,
        shot_timing=cricket_input.shot_timing.value,
        outcome=outcome.value,
        commentary=commentary,
    )
