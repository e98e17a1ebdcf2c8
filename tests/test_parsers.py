"""
Tests for the text input parsers and output formatters.

Run with: pytest tests/test_parsers.py -v
"""
import pytest

from superover.engine.commentary_engine import CommentaryEngine
from superover.errors import CommentaryGenerationError, InputValidationError
from superover.formatters import CommentaryFormatter, OutcomeFormatter, SuperOverFormatter
from superover.models.cricket import BowlingType, Outcome, ShotTiming, ShotType
from superover.models.results import MatchResult, SuperOverBall, SuperOverResult
from superover.models.schemas import CricketInput, ShotInput
from superover.parsers.input_parser import CricketInputParser, SuperOverParser, suggestions


@pytest.fixture
def parser():
    return CricketInputParser()


@pytest.fixture
def super_over_parser():
    return SuperOverParser()


class TestCricketInputParser:
    """'<bowling> <shot> <timing>' lines"""

    def test_simple_line(self, parser):
        parsed = parser.parse("Bouncer Pull Perfect")
        assert isinstance(parsed, CricketInput)
        assert parsed.as_tuple() == (BowlingType.BOUNCER, ShotType.PULL, ShotTiming.PERFECT)

    def test_multi_word_names(self, parser):
        parsed = parser.parse("Leg Cutter Long On Late")
        assert parsed.as_tuple() == (BowlingType.LEG_CUTTER, ShotType.LONG_ON, ShotTiming.LATE)

    def test_case_and_whitespace_are_ignored(self, parser):
        parsed = parser.parse("  slower   ball  coverdrive  GOOD ")
        assert parsed.as_tuple() == (BowlingType.SLOWER_BALL, ShotType.COVER_DRIVE, ShotTiming.GOOD)

    def test_unknown_shot_suggests_close_match(self, parser):
        with pytest.raises(InputValidationError) as exc:
            parser.parse("Bouncer Pul Perfect")
        assert exc.value.message.startswith("Invalid shot type: Pul")
        assert "Pull" in exc.value.context["suggestions"]

    def test_unknown_bowling_type(self, parser):
        with pytest.raises(InputValidationError) as exc:
            parser.parse("Googly Flick Good")
        assert "Invalid bowling type: Googly" in exc.value.message

    def test_unknown_timing(self, parser):
        with pytest.raises(InputValidationError) as exc:
            parser.parse("Bouncer Pull Sideways")
        assert "Invalid shot timing: Sideways" in exc.value.message

    @pytest.mark.parametrize("line", ["", "   ", "Bouncer Pull"])
    def test_too_short(self, parser, line):
        with pytest.raises(InputValidationError):
            parser.parse(line)

    def test_too_many_words(self, parser):
        with pytest.raises(InputValidationError) as exc:
            parser.parse("Bouncer Pull Perfect Again")
        assert "Too many words" in exc.value.message

    def test_parse_lines_skips_blanks_and_keeps_order(self, parser):
        parsed = parser.parse_lines(["Bouncer Pull Perfect", "", "Yorker Straight Early"])
        assert [p.bowling_type for p in parsed] == [BowlingType.BOUNCER, BowlingType.YORKER]

    def test_parse_lines_reports_every_bad_line(self, parser):
        with pytest.raises(InputValidationError) as exc:
            parser.parse_lines(["Bouncer Pull Perfect", "Bouncer Hook Perfect", "Pace Drive Good"])
        errors = exc.value.context["errors"]
        assert len(errors) == 2
        assert errors[0].startswith("Line 2:")
        assert errors[1].startswith("Line 3:")

    def test_parse_lines_needs_input(self, parser):
        with pytest.raises(InputValidationError) as exc:
            parser.parse_lines(["", "  "])
        assert exc.value.message == "No valid inputs found"

    def test_validate(self, parser):
        assert parser.validate("Doosra Sweep Good")
        assert not parser.validate("Doosra Sweep")

    def test_vocabulary_listings(self, parser):
        assert "Leg Cutter" in parser.valid_bowling_types()
        assert "LegGlance" in parser.valid_shot_types()
        assert parser.valid_shot_timings() == ["Early", "Good", "Perfect", "Late"]


class TestSuperOverParser:
    """'<shot> <timing>' lines, six per Super Over"""

    def test_parse(self, super_over_parser):
        parsed = super_over_parser.parse("long on late")
        assert isinstance(parsed, ShotInput)
        assert (parsed.shot_type, parsed.shot_timing) == (ShotType.LONG_ON, ShotTiming.LATE)

    def test_parse_six_lines(self, super_over_parser):
        lines = ["Straight Perfect", "Flick Early", "Sweep Good", "LegGlance Good", "SquareCut Late", "CoverDrive Perfect"]
        parsed = super_over_parser.parse_lines(lines)
        assert [p.shot_type for p in parsed] == [
            ShotType.STRAIGHT, ShotType.FLICK, ShotType.SWEEP,
            ShotType.LEG_GLANCE, ShotType.SQUARE_CUT, ShotType.COVER_DRIVE,
        ]

    @pytest.mark.parametrize("count", [5, 7])
    def test_wrong_count(self, super_over_parser, count):
        with pytest.raises(InputValidationError) as exc:
            super_over_parser.parse_lines(["Straight Good"] * count)
        assert exc.value.message == f"Super Over requires exactly 6 shot inputs, got {count}"

    def test_bad_ball_is_numbered(self, super_over_parser):
        lines = ["Straight Good"] * 2 + ["Hook Good"] + ["Straight Good"] * 3
        with pytest.raises(InputValidationError) as exc:
            super_over_parser.parse_lines(lines)
        assert exc.value.message.startswith("Ball 3: Invalid shot type: Hook")

    def test_missing_timing(self, super_over_parser):
        with pytest.raises(InputValidationError) as exc:
            super_over_parser.parse("Straight")
        assert exc.value.message == "Missing shot timing"


class TestSuggestions:
    def test_close_match(self):
        assert suggestions("yorkr", BowlingType.names()) == ["Yorker"]

    def test_no_match(self):
        assert suggestions("zzz", BowlingType.names()) == []


class TestCommentaryEngine:
    def test_commentary_for_each_outcome(self):
        engine = CommentaryEngine()
        for outcome in Outcome:
            assert engine.commentary_text(outcome)
            assert engine.commentary_type(outcome)

    def test_rejects_non_outcome(self):
        with pytest.raises(CommentaryGenerationError):
            CommentaryEngine().commentary_text("6 runs")

    def test_format_commentary_type(self):
        assert CommentaryEngine.format_commentary_type("just-over-fielder") == "Just Over Fielder"


class TestFormatters:
    def test_outcome_formatter(self):
        assert OutcomeFormatter().format_multiple([Outcome.SIX, Outcome.WICKET]) == ["6 runs", "1 wicket"]

    def test_commentary_formatter(self):
        line = CommentaryFormatter().format(("It's a wicket!", Outcome.WICKET))
        assert line == "It's a wicket! - 1 wicket"

    def test_super_over_transcript(self):
        ball = SuperOverBall(
            ball_number=1,
            bowling_type=BowlingType.BOUNCER,
            shot_type=ShotType.PULL,
            shot_timing=ShotTiming.PERFECT,
            outcome=Outcome.SIX,
            striker="Rahul Dravid",
            commentary="That's massive and out of the ground.",
        )
        result = SuperOverResult(
            target_runs=6,
            scored_runs=6,
            wickets_lost=0,
            balls_played=1,
            balls=(ball,),
            match_result=MatchResult.WON,
            margin="5 balls",
        )
        lines = SuperOverFormatter().format(result).splitlines()

        assert lines[0] == "INDIA needs 6 runs to win"
        assert "Brett Lee bowled Bouncer ball," in lines
        assert "Rahul Dravid played Perfect Pull shot" in lines
        assert "That's massive and out of the ground. - 6 runs" in lines
        assert lines[-2] == "INDIA scored: 6 runs"
        assert lines[-1] == "INDIA won by 5 balls"

    def test_custom_team_and_bowler(self):
        formatter = SuperOverFormatter(team="AUSTRALIA", bowler="Anil Kumble")
        result = SuperOverResult(
            target_runs=20, scored_runs=0, wickets_lost=2, balls_played=0,
            balls=(), match_result=MatchResult.LOST, margin="2 wickets",
        )
        assert formatter.format_match_summary(result) == [
            "AUSTRALIA scored: 0 runs",
            "AUSTRALIA lost by 2 wickets",
        ]
