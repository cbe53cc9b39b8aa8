from __future__ import annotations
import typing
from titan.poker_hands.hand_evaluator import (
    EvaluatedHand
)
from titan.poker_hands.evaluation.types import (
    MatchResult,
    EvaluationSummary
)



class TeeWriter:
    """Writes the same text to several open text streams"""

    __slots__ = ('_streams',)

    def __init__(self, streams: typing.Tuple[typing.TextIO, ...]):
        self._streams = tuple(streams)

    def streams(self) -> typing.Tuple[typing.TextIO, ...]:
        return self._streams

    def write(self, text: str):
        for stream in self.streams():
            stream.write(text)

    def write_line(self, text: str):
        self.write(text + '\n')

    def flush(self):
        for stream in self.streams():
            stream.flush()


class MatchReport:

    HAND_COLUMN_WIDTH = 50

    @classmethod
    def format_evaluated_hand(cls, evaluated_hand: EvaluatedHand) -> str:
        return f"Score = {evaluated_hand.category().ordinal()}, {evaluated_hand}"

    @classmethod
    def format_result(cls, match_result: MatchResult) -> str:
        record = match_result.record()
        player_column = f"{record.player_hand()}  {cls.format_evaluated_hand(match_result.player_evaluation())}"
        opponent_column = f"{record.opponent_hand()}  {cls.format_evaluated_hand(match_result.opponent_evaluation())}"
        return f"{player_column.ljust(cls.HAND_COLUMN_WIDTH)}  |  {opponent_column.ljust(cls.HAND_COLUMN_WIDTH)}  =>  {match_result.outcome().label()}"

    @classmethod
    def format_summary(cls, summary: EvaluationSummary) -> str:
        return f"Player won {summary.num_player_wins()} times!"
