from superover.models.cricket import BowlingType, ShotType, ShotTiming, Outcome
from superover.models.results import (
    MatchResult,
    SimulationState,
    SuperOverBall,
    SuperOverResult,
    InningsState,
)
from superover.models.schemas import CricketInput, ShotInput, SuperOverResponse

__all__ = [
    "BowlingType",
    "ShotType",
    "ShotTiming",
    "Outcome",
    "MatchResult",
    "SimulationState",
    "SuperOverBall",
    "SuperOverResult",
    "InningsState",
    "CricketInput",
    "ShotInput",
    "SuperOverResponse",
]
