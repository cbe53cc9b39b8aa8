from __future__ import annotations
import typing
from titan.poker_hands.cards import (
    Hand
)



class PokerHandsException(Exception):
    pass


class MalformedRecordError(PokerHandsException, ValueError):

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"Malformed record on line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


class HandRecord:

    __slots__ = (   '_line_number',
                    '_player_hand',
                    '_opponent_hand'  )

    def __init__(self, line_number: int, player_hand: Hand, opponent_hand: Hand):
        self._line_number = line_number
        self._player_hand = player_hand
        self._opponent_hand = opponent_hand

    def line_number(self) -> int:
        return self._line_number

    def player_hand(self) -> Hand:
        return self._player_hand

    def opponent_hand(self) -> Hand:
        return self._opponent_hand

    def __eq__(self, other):
        return (    (type(self) == type(other)) and
                    (self.line_number() == other.line_number()) and
                    (self.player_hand() == other.player_hand()) and
                    (self.opponent_hand() == other.opponent_hand())  )

    def __repr__(self):
        return f"HandRecord({self.line_number()}, {self.player_hand()!r}, {self.opponent_hand()!r})"

    def __str__(self):
        return f"{self.player_hand()} | {self.opponent_hand()}"
