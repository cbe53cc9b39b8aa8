from titan.poker_hands.hand_evaluator.types import (
    HandCategory,
    MatchOutcome,
    EvaluatedHand
)
from titan.poker_hands.hand_evaluator.hand_analyzer import (
    HandAnalyzer
)
from titan.poker_hands.hand_evaluator.hand_comparator import (
    HandComparator
)
