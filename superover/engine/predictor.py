"""
Per-ball services: outcomes only, or outcomes with commentary.
Neither keeps state between calls.
"""
from typing import Iterable, List, Tuple

from superover.engine.commentary_engine import CommentaryEngine
from superover.engine.outcome_engine import OutcomeEngine
from superover.models.cricket import Outcome
from superover.models.schemas import CricketInput


class SingleBallPredictor:
    """Maps each delivery to its outcome, preserving input order"""

    def __init__(self, outcome_engine: OutcomeEngine):
        self.outcome_engine = outcome_engine

    def predict(self, cricket_input: CricketInput) -> Outcome:
        return self.outcome_engine.predict_outcome(*cricket_input.as_tuple())

    def predict_all(self, inputs: Iterable[CricketInput]) -> List[Outcome]:
        return [self.predict(i) for i in inputs]


class BallCommentaryService:
    """Outcome plus its commentary line for each delivery"""

    def __init__(self, outcome_engine: OutcomeEngine, commentary_engine: CommentaryEngine):
        self.outcome_engine = outcome_engine
        self.commentary_engine = commentary_engine

    def commentate(self, cricket_input: CricketInput) -> Tuple[str, Outcome]:
        outcome = self.outcome_engine.predict_outcome(*cricket_input.as_tuple())
        return self.commentary_engine.commentary_text(outcome), outcome

    def commentate_all(self, inputs: Iterable[CricketInput]) -> List[Tuple[str, Outcome]]:
        return [self.commentate(i) for i in inputs]
