"""
Commentary lines, one per outcome bucket
"""
from dataclasses import dataclass
from typing import Dict

from superover.models.cricket import Outcome


@dataclass(frozen=True)
class CommentaryRule:
    outcome: Outcome
    commentary_type: str
    text: str


COMMENTARY_RULES = [
    CommentaryRule(Outcome.DOT, "dot-ball", "Dot ball, no run."),
    CommentaryRule(Outcome.WICKET, "wicket", "It's a wicket!"),
    CommentaryRule(Outcome.ONE, "single-run", "Quick single taken."),
    CommentaryRule(Outcome.TWO, "excellent-running", "Excellent running between the wickets."),
    CommentaryRule(Outcome.THREE, "just-over-fielder", "Just over the fielder."),
    CommentaryRule(Outcome.FOUR, "excellent-line-length", "Excellent line and length."),
    CommentaryRule(Outcome.FIVE, "excellent-boundary-effort", "Excellent effort on the boundary."),
    CommentaryRule(Outcome.SIX, "massive-out-ground", "That's massive and out of the ground."),
]

DEFAULT_COMMENTARY = CommentaryRule(Outcome.FOUR, "excellent-line-length", "Excellent line and length.")

_RULES_BY_OUTCOME: Dict[Outcome, CommentaryRule] = {r.outcome: r for r in COMMENTARY_RULES}


def get_commentary_rule(outcome: Outcome) -> CommentaryRule:
    return _RULES_BY_OUTCOME.get(outcome, DEFAULT_COMMENTARY)


def commentary_for(outcome: Outcome) -> str:
    return get_commentary_rule(outcome).text
