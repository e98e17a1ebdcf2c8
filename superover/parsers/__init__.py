from superover.parsers.input_parser import CricketInputParser, SuperOverParser, suggestions

__all__ = ["CricketInputParser", "SuperOverParser", "suggestions"]
