"""
Service container - builds and wires the engine, services and formatters
"""
import logging
import random
from typing import Dict, Iterable, List, Optional

from superover.config import Settings, get_settings
from superover.engine.commentary_engine import CommentaryEngine
from superover.engine.outcome_engine import OutcomeEngine
from superover.engine.predictor import BallCommentaryService, SingleBallPredictor
from superover.engine.strategies import (
    OutcomeStrategy,
    ProbabilisticOutcomeStrategy,
    RuleBasedOutcomeStrategy,
)
from superover.engine.super_over import SuperOverSimulator
from superover.errors import ConfigurationError
from superover.formatters import CommentaryFormatter, OutcomeFormatter, SuperOverFormatter
from superover.models.cricket import Outcome
from superover.models.results import SuperOverResult
from superover.parsers.input_parser import CricketInputParser, SuperOverParser

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    One container per process or test. Strategies are created once and the
    engine's active strategy is switched by id.
    """

    def __init__(self, settings: Optional[Settings] = None, **overrides):
        self.settings = settings or get_settings()
        seed = overrides.get("seed", self.settings.SEED)
        self.rng = random.Random(seed)

        self.strategies: Dict[str, OutcomeStrategy] = {
            RuleBasedOutcomeStrategy.strategy_id: RuleBasedOutcomeStrategy(),
            ProbabilisticOutcomeStrategy.strategy_id: ProbabilisticOutcomeStrategy(rng=self.rng),
        }

        self.input_parser = CricketInputParser()
        self.super_over_parser = SuperOverParser()
        self.outcome_formatter = OutcomeFormatter()
        self.commentary_formatter = CommentaryFormatter()
        self.super_over_formatter = SuperOverFormatter(team=self.settings.TEAM, bowler=self.settings.BOWLER)

        self._current_strategy_id = None
        self.outcome_engine = OutcomeEngine()
        self.set_strategy(overrides.get("strategy", self.settings.STRATEGY))

        self.commentary_engine = CommentaryEngine()
        self.predictor = SingleBallPredictor(self.outcome_engine)
        self.commentary_service = BallCommentaryService(self.outcome_engine, self.commentary_engine)
        self.simulator = SuperOverSimulator(
            self.outcome_engine,
            commentary_engine=self.commentary_engine,
            bowling_mode=overrides.get("bowling_mode", self.settings.BOWLING_MODE),
            target_mode=overrides.get("target_mode", self.settings.TARGET_MODE),
            target_runs=overrides.get("target_runs"),
            rng=self.rng,
        )
        logger.debug(
            "Services ready: strategy=%s bowling=%s target=%s seed=%s",
            self._current_strategy_id, self.simulator.bowling_mode.value,
            self.simulator.target_mode.value, seed,
        )

    # Strategy management

    def set_strategy(self, strategy_id: str):
        strategy = self.strategies.get(strategy_id)
        if strategy is None:
            raise ConfigurationError(
                f"Unknown strategy: {strategy_id}",
                {"strategy": strategy_id, "available": self.list_strategies()},
            )
        self.outcome_engine.set_strategy(strategy)
        self._current_strategy_id = strategy_id

    @property
    def current_strategy_id(self) -> str:
        return self._current_strategy_id

    def list_strategies(self) -> List[str]:
        return list(self.strategies)

    def strategy_info(self, strategy_id: Optional[str] = None) -> dict:
        strategy_id = strategy_id or self._current_strategy_id
        strategy = self.strategies.get(strategy_id)
        if strategy is None:
            raise ConfigurationError(f"Unknown strategy: {strategy_id}", {"strategy": strategy_id})
        return strategy.info()

    # Line-oriented entry points used by the CLI

    def predict_lines(self, lines: Iterable[str]) -> List[Outcome]:
        return self.predictor.predict_all(self.input_parser.parse_lines(lines))

    def commentate_lines(self, lines: Iterable[str]) -> list:
        return self.commentary_service.commentate_all(self.input_parser.parse_lines(lines))

    def simulate_lines(self, lines: Iterable[str]) -> SuperOverResult:
        return self.simulator.simulate(self.super_over_parser.parse_lines(lines))


SAMPLE_INPUTS = {
    "predict": ["Bouncer Pull Perfect", "Yorker Straight Early", "Pace Straight Good"],
    "commentary": ["Bouncer Pull Late"],
    "super-over": [
        "Straight Perfect",
        "Flick Early",
        "Sweep Good",
        "LegGlance Good",
        "SquareCut Late",
        "CoverDrive Perfect",
    ],
}
