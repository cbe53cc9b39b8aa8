from __future__ import annotations
import typing
from titan.poker_hands.hand_evaluator.types import (
    EvaluatedHand,
    MatchOutcome
)



class HandComparator:

    @classmethod
    def sign(cls, x: int) -> int:
        return (x > 0) - (x < 0)

    @classmethod
    def compare_values(cls, a_values: typing.Tuple[int, ...], b_values: typing.Tuple[int, ...]) -> int:
        for a_value, b_value in zip(a_values, b_values):
            if a_value != b_value:
                return cls.sign(a_value - b_value)
        # longer group wins once the shorter one runs out
        return cls.sign(len(a_values) - len(b_values))

    @classmethod
    def compare(cls, a: EvaluatedHand, b: EvaluatedHand) -> int:
        if a.category() != b.category():
            return cls.sign(a.category().ordinal() - b.category().ordinal())
        result = cls.compare_values(a.play_values(), b.play_values())
        if result != 0:
            return result
        return cls.compare_values(a.kicker_values(), b.kicker_values())

    @classmethod
    def outcome(cls, player: EvaluatedHand, opponent: EvaluatedHand) -> MatchOutcome:
        return MatchOutcome.create_from_comparison(cls.compare(player, opponent))
