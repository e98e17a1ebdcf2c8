"""
Error hierarchy for the outcome engine and Super Over simulator
"""
from typing import Any, Dict, Optional


class CricketError(Exception):
    """Base error carrying a machine-readable code and diagnostic context"""

    code = "CRICKET_ERROR"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict:
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "context": {k: _plain(v) for k, v in self.context.items()},
        }


class InputValidationError(CricketError):
    code = "INPUT_VALIDATION_ERROR"


class OutcomePredictionError(CricketError):
    code = "OUTCOME_PREDICTION_ERROR"


class CommentaryGenerationError(CricketError):
    code = "COMMENTARY_GENERATION_ERROR"


class SuperOverError(CricketError):
    code = "SUPER_OVER_ERROR"


class ConfigurationError(CricketError):
    code = "CONFIGURATION_ERROR"


def _plain(value):
    """Make enum members and tuples JSON friendly"""
    if hasattr(value, "value"):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value
