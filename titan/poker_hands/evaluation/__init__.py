from titan.poker_hands.evaluation.types import (
    ResourceError,
    EvaluationConfig,
    MatchResult,
    EvaluationSummary
)
from titan.poker_hands.evaluation.match_report import (
    TeeWriter,
    MatchReport
)
from titan.poker_hands.evaluation.evaluation_driver import (
    EvaluationDriver
)
