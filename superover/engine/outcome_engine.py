"""
Outcome Engine - realism overrides first, then the active strategy
"""
import logging
from typing import Optional

from superover.engine.strategies import OutcomeStrategy
from superover.errors import ConfigurationError, OutcomePredictionError
from superover.models.cricket import BowlingType, Outcome, ShotTiming, ShotType
from superover.rules.realism_rules import find_override

logger = logging.getLogger(__name__)


class OutcomeEngine:
    """
    Predicts the outcome of a single ball.

    Implausible delivery/shot pairings are settled by the realism overrides
    for every timing, without consulting the strategy. Everything else is
    delegated to the currently active strategy, which can be swapped with
    set_strategy().
    """

    def __init__(self, strategy: Optional[OutcomeStrategy] = None):
        self._strategy = strategy

    def predict_outcome(self, bowling_type: BowlingType, shot_type: ShotType, timing: ShotTiming) -> Outcome:
        if self._strategy is None:
            raise ConfigurationError(
                "No outcome strategy configured",
                {"bowling_type": bowling_type, "shot_type": shot_type, "timing": timing},
            )

        override = find_override(bowling_type, shot_type)
        if override is not None:
            logger.debug("Realism override for %s + %s: %s", bowling_type, shot_type, override.forced_outcome)
            return override.forced_outcome

        try:
            return self._strategy.predict(bowling_type, shot_type, timing)
        except OutcomePredictionError as e:
            e.context.setdefault("strategy", self._strategy.name)
            raise
        except ConfigurationError:
            raise
        except Exception as e:
            logger.debug("Strategy %s failed for %s + %s + %s", self._strategy.name, bowling_type, shot_type, timing)
            raise OutcomePredictionError(
                f"Unexpected error during outcome prediction: {e}",
                {
                    "bowling_type": bowling_type,
                    "shot_type": shot_type,
                    "timing": timing,
                    "strategy": self._strategy.name,
                },
            ) from e

    def set_strategy(self, strategy: OutcomeStrategy):
        if strategy is None:
            raise ConfigurationError("Strategy cannot be None")
        logger.info("Outcome strategy set to %s", strategy.name)
        self._strategy = strategy

    @property
    def current_strategy(self) -> Optional[OutcomeStrategy]:
        return self._strategy

    def is_valid_combination(self, bowling_type: BowlingType, shot_type: ShotType) -> bool:
        if self._strategy is None:
            return False
        return self._strategy.is_valid_combination(bowling_type, shot_type)

    def strategy_info(self) -> dict:
        if self._strategy is None:
            raise ConfigurationError("No outcome strategy configured")
        return {"name": self._strategy.name, "description": self._strategy.description}
