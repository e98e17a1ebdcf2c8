"""
Closed vocabularies: delivery types, shots, timings and ball outcomes.
Enum values are the display names used in input and output text.
"""
import enum
import re

from superover.errors import InputValidationError


class _NamedEnum(enum.Enum):
    """Enum looked up by its display name, ignoring case and spacing"""

    @classmethod
    def from_name(cls, name: str):
        key = _normalise(name)
        for member in cls:
            if _normalise(member.value) == key:
                return member
        raise InputValidationError(
            f"Invalid {cls._label()}: {name}",
            {"value": name, "valid": [m.value for m in cls]},
        )

    @classmethod
    def lookup(cls, name: str):
        """Like from_name but returns None for unknown names"""
        key = _normalise(name)
        for member in cls:
            if _normalise(member.value) == key:
                return member
        return None

    @classmethod
    def names(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def _label(cls) -> str:
        return "value"

    def __str__(self) -> str:
        return self.value


def _normalise(name: str) -> str:
    return " ".join(name.split()).lower()


class BowlingType(_NamedEnum):
    BOUNCER = "Bouncer"
    INSWINGER = "Inswinger"
    OUTSWINGER = "Outswinger"
    LEG_CUTTER = "Leg Cutter"
    OFF_CUTTER = "Off Cutter"
    SLOWER_BALL = "Slower Ball"
    YORKER = "Yorker"
    PACE = "Pace"
    OFF_BREAK = "Off Break"
    DOOSRA = "Doosra"

    @classmethod
    def _label(cls) -> str:
        return "bowling type"


class ShotType(_NamedEnum):
    STRAIGHT = "Straight"
    FLICK = "Flick"
    LONG_ON = "Long On"
    SQUARE_CUT = "SquareCut"
    SWEEP = "Sweep"
    COVER_DRIVE = "CoverDrive"
    PULL = "Pull"
    SCOOP = "Scoop"
    LEG_GLANCE = "LegGlance"
    UPPER_CUT = "UpperCut"

    @classmethod
    def _label(cls) -> str:
        return "shot type"


class ShotTiming(_NamedEnum):
    EARLY = "Early"
    GOOD = "Good"
    PERFECT = "Perfect"
    LATE = "Late"

    @classmethod
    def _label(cls) -> str:
        return "shot timing"


_OUTCOME_PATTERN = re.compile(r"^\s*(\d+)\s+(runs?|wickets?)\s*$", re.IGNORECASE)


class Outcome(_NamedEnum):
    DOT = "0 runs"
    ONE = "1 run"
    TWO = "2 runs"
    THREE = "3 runs"
    FOUR = "4 runs"
    FIVE = "5 runs"
    SIX = "6 runs"
    WICKET = "1 wicket"

    @property
    def is_wicket(self) -> bool:
        return self is Outcome.WICKET

    @property
    def runs(self) -> int:
        """Runs scored off the ball; a wicket scores nothing"""
        if self.is_wicket:
            return 0
        return int(self.value.split()[0])

    @classmethod
    def from_runs(cls, runs: int) -> "Outcome":
        for member in cls:
            if not member.is_wicket and member.runs == runs:
                return member
        raise InputValidationError(f"No outcome for {runs} runs", {"runs": runs})

    @classmethod
    def from_text(cls, text: str) -> "Outcome":
        """
        Decompose an outcome string into a run count or the wicket marker.
        Accepts '4 runs', '1 run', '1 wicket' (and tolerates '1 runs').
        """
        match = _OUTCOME_PATTERN.match(text)
        if not match:
            raise InputValidationError(f"Invalid outcome: {text}", {"value": text})
        count, kind = int(match.group(1)), match.group(2).lower()
        if kind.startswith("wicket"):
            if count != 1:
                raise InputValidationError(f"Invalid outcome: {text}", {"value": text})
            return cls.WICKET
        return cls.from_runs(count)

    @classmethod
    def _label(cls) -> str:
        return "outcome"

