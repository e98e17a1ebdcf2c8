"""
Text input parsing.

Lines look like "Bouncer Pull Perfect" for a single delivery and
"Straight Perfect" for a Super Over shot call. Bowling and shot names may
span two words ("Leg Cutter", "Long On"); matching ignores case and extra
whitespace.
"""
import difflib
from typing import Iterable, List, Optional, Tuple

from pydantic import ValidationError

from superover.constants import TOTAL_BALLS
from superover.errors import InputValidationError
from superover.models.cricket import BowlingType, ShotTiming, ShotType
from superover.models.schemas import CricketInput, ShotInput

MAX_TERM_WORDS = 2


def suggestions(word: str, vocabulary: Iterable[str], limit: int = 3) -> List[str]:
    """Close matches for a mistyped term"""
    by_lower = {v.lower(): v for v in vocabulary}
    matches = difflib.get_close_matches(word.lower(), list(by_lower), n=limit, cutoff=0.6)
    return [by_lower[m] for m in matches]


def _extract_term(words: List[str], enum_cls) -> Tuple[Optional[object], List[str]]:
    """Longest leading run of words naming a member of enum_cls"""
    for size in range(min(MAX_TERM_WORDS, len(words)), 0, -1):
        member = enum_cls.lookup(" ".join(words[:size]))
        if member is not None:
            return member, words[size:]
    return None, words


def _unknown(label: str, word: str, enum_cls) -> InputValidationError:
    hints = suggestions(word, enum_cls.names())
    message = f"Invalid {label}: {word}"
    if hints:
        message += f" (did you mean {', '.join(hints)}?)"
    return InputValidationError(message, {"value": word, "suggestions": hints})


def _non_empty(lines: Iterable[str]) -> List[str]:
    return [line for line in lines if line and line.strip()]


class SuperOverParser:
    """Parses '<shot> <timing>' lines"""

    def parse(self, line: str) -> ShotInput:
        words = (line or "").split()
        if not words:
            raise InputValidationError("Input cannot be empty")

        shot_type, rest = _extract_term(words, ShotType)
        if shot_type is None:
            raise _unknown("shot type", words[0], ShotType)
        timing = _parse_timing(rest, line)
        return _build(ShotInput, shot_type=shot_type, shot_timing=timing)

    def parse_lines(self, lines: Iterable[str]) -> List[ShotInput]:
        entries = _non_empty(lines)
        if len(entries) != TOTAL_BALLS:
            raise InputValidationError(
                f"Super Over requires exactly {TOTAL_BALLS} shot inputs, got {len(entries)}",
                {"expected": TOTAL_BALLS, "actual": len(entries)},
            )
        return _parse_all(self.parse, entries, "Ball")

    def validate(self, line: str) -> bool:
        try:
            self.parse(line)
        except InputValidationError:
            return False
        return True

    @staticmethod
    def valid_shot_types() -> List[str]:
        return ShotType.names()

    @staticmethod
    def valid_shot_timings() -> List[str]:
        return ShotTiming.names()


class CricketInputParser(SuperOverParser):
    """Parses '<bowling> <shot> <timing>' lines"""

    def parse(self, line: str) -> CricketInput:
        words = (line or "").split()
        if not words:
            raise InputValidationError("Input cannot be empty")
        if len(words) < 3:
            raise InputValidationError(
                f"Invalid input format: {line.strip()}. Expected: \"bowling_type shot_type timing\"",
                {"value": line},
            )

        bowling_type, rest = _extract_term(words, BowlingType)
        if bowling_type is None:
            raise _unknown("bowling type", words[0], BowlingType)

        if not rest:
            raise InputValidationError("Missing shot type", {"value": line})
        shot_type, rest = _extract_term(rest, ShotType)
        if shot_type is None:
            raise _unknown("shot type", words[len(words) - len(rest)], ShotType)

        timing = _parse_timing(rest, line)
        return _build(CricketInput, bowling_type=bowling_type, shot_type=shot_type, shot_timing=timing)

    def parse_lines(self, lines: Iterable[str]) -> List[CricketInput]:
        entries = _non_empty(lines)
        if not entries:
            raise InputValidationError("No valid inputs found")
        return _parse_all(self.parse, entries, "Line")

    @staticmethod
    def valid_bowling_types() -> List[str]:
        return BowlingType.names()


def _parse_timing(rest: List[str], line: str) -> ShotTiming:
    if not rest:
        raise InputValidationError("Missing shot timing", {"value": line})
    if len(rest) > 1:
        raise InputValidationError(f"Too many words in input: {' '.join(rest)}", {"value": line})
    timing = ShotTiming.lookup(rest[0])
    if timing is None:
        raise _unknown("shot timing", rest[0], ShotTiming)
    return timing


def _build(model, **fields):
    try:
        return model(**fields)
    except ValidationError as e:
        raise InputValidationError(str(e), {"fields": fields}) from e


def _parse_all(parse, entries: List[str], label: str) -> list:
    parsed = []
    errors = []
    for i, entry in enumerate(entries, start=1):
        try:
            parsed.append(parse(entry))
        except InputValidationError as e:
            errors.append(f"{label} {i}: {e.message}")

    if errors:
        raise InputValidationError("\n".join(errors), {"errors": errors})
    return parsed
