"""
Plain-text output for predictions, commentary and Super Over transcripts
"""
from typing import List, Sequence, Tuple

from superover.constants import DEFAULT_BOWLER, DEFAULT_TEAM
from superover.models.cricket import Outcome
from superover.models.results import SuperOverBall, SuperOverResult


class OutcomeFormatter:
    def format(self, outcome: Outcome) -> str:
        return outcome.value

    def format_multiple(self, outcomes: Sequence[Outcome]) -> List[str]:
        return [self.format(o) for o in outcomes]


class CommentaryFormatter:
    def format(self, item: Tuple[str, Outcome]) -> str:
        commentary, outcome = item
        return f"{commentary} - {outcome.value}"

    def format_multiple(self, items: Sequence[Tuple[str, Outcome]]) -> List[str]:
        return [self.format(i) for i in items]


class SuperOverFormatter:
    def __init__(self, team: str = DEFAULT_TEAM, bowler: str = DEFAULT_BOWLER):
        self.team = team
        self.bowler = bowler

    def format(self, result: SuperOverResult) -> str:
        lines = [f"{self.team} needs {result.target_runs} runs to win", ""]
        lines.extend(self.format_ball_by_ball(result.balls))
        lines.extend(self.format_match_summary(result))
        return "\n".join(lines)

    def format_ball(self, ball: SuperOverBall) -> List[str]:
        return [
            f"{self.bowler} bowled {ball.bowling_type.value} ball,",
            f"{ball.striker} played {ball.shot_timing.value} {ball.shot_type.value} shot",
            f"{ball.commentary} - {ball.outcome.value}",
        ]

    def format_ball_by_ball(self, balls: Sequence[SuperOverBall]) -> List[str]:
        lines = []
        for ball in balls:
            lines.extend(self.format_ball(ball))
            lines.append("")
        return lines

    def format_match_summary(self, result: SuperOverResult) -> List[str]:
        return [
            f"{self.team} scored: {result.scored_runs} runs",
            f"{self.team} {result.match_result.value} by {result.margin}",
        ]
