"""
Commentary Engine - turns an outcome into a line of commentary
"""
from superover.errors import CommentaryGenerationError
from superover.models.cricket import Outcome
from superover.rules.commentary_rules import get_commentary_rule


class CommentaryEngine:
    def commentary_type(self, outcome: Outcome) -> str:
        return self._rule(outcome).commentary_type

    def commentary_text(self, outcome: Outcome) -> str:
        return self._rule(outcome).text

    @staticmethod
    def format_commentary_type(commentary_type: str) -> str:
        """'just-over-fielder' -> 'Just Over Fielder'"""
        return " ".join(word.capitalize() for word in commentary_type.split("-"))

    def _rule(self, outcome: Outcome):
        if not isinstance(outcome, Outcome):
            raise CommentaryGenerationError(
                f"Failed to generate commentary for outcome: {outcome}",
                {"outcome": outcome},
            )
        return get_commentary_rule(outcome)
