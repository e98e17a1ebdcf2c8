from superover.engine.strategies import (
    OutcomeStrategy,
    RuleBasedOutcomeStrategy,
    ProbabilisticOutcomeStrategy,
)
from superover.engine.outcome_engine import OutcomeEngine
from superover.engine.commentary_engine import CommentaryEngine
from superover.engine.predictor import SingleBallPredictor, BallCommentaryService
from superover.engine.super_over import SuperOverSimulator, BowlingMode, TargetMode

__all__ = [
    "OutcomeStrategy",
    "RuleBasedOutcomeStrategy",
    "ProbabilisticOutcomeStrategy",
    "OutcomeEngine",
    "CommentaryEngine",
    "SingleBallPredictor",
    "BallCommentaryService",
    "SuperOverSimulator",
    "BowlingMode",
    "TargetMode",
]
