from __future__ import annotations
import typing
import enum
from titan.poker_hands.cards import (
    RankCodec
)



class HandCategory(enum.Enum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def ordinal(self) -> int:
        return self.value

    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    def __str__(self):
        return self.label()


_CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.PAIR: 'Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
    HandCategory.ROYAL_FLUSH: 'Royal Flush',
}


class MatchOutcome(enum.Enum):
    PLAYER_WINS = 1
    DRAW = 0
    OPPONENT_WINS = -1

    def label(self) -> str:
        if self == MatchOutcome.PLAYER_WINS:
            return 'Player wins'
        elif self == MatchOutcome.OPPONENT_WINS:
            return 'Opponent wins'
        return 'Draw'

    @classmethod
    def create_from_comparison(cls, comparison: int) -> MatchOutcome:
        if comparison > 0:
            return cls.PLAYER_WINS
        elif comparison < 0:
            return cls.OPPONENT_WINS
        return cls.DRAW


class EvaluatedHand:
    """Category of a five card hand plus the values used to break ties

    `play_values` are the values making up the category pattern (the paired
    cards, or all five cards for straights and flushes), `kicker_values` are
    the remaining unpaired values. Both are kept sorted in descending order.
    """

    __slots__ = (   '_category',
                    '_play_values',
                    '_kicker_values'  )

    def __init__(self, category: HandCategory, play_values: typing.Iterable[int], kicker_values: typing.Iterable[int]):
        self._category = category
        self._play_values = tuple(sorted((int(v) for v in play_values), reverse=True))
        self._kicker_values = tuple(sorted((int(v) for v in kicker_values), reverse=True))

    def category(self) -> HandCategory:
        return self._category

    def play_values(self) -> typing.Tuple[int, ...]:
        return self._play_values

    def kicker_values(self) -> typing.Tuple[int, ...]:
        return self._kicker_values

    def play_symbols(self) -> typing.Tuple[str, ...]:
        return tuple(RankCodec.encode(v) for v in self.play_values())

    def kicker_symbols(self) -> typing.Tuple[str, ...]:
        return tuple(RankCodec.encode(v) for v in self.kicker_values())

    def sort_key(self) -> typing.Tuple[int, typing.Tuple[int, ...], typing.Tuple[int, ...]]:
        return (self.category().ordinal(), self.play_values(), self.kicker_values())

    def __eq__(self, other):
        return (    (type(self) == type(other)) and
                    (self.sort_key() == other.sort_key())  )

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()

    def __hash__(self):
        return hash(self.sort_key())

    def __repr__(self):
        return f"EvaluatedHand({self.category().name}, {self.play_values()}, {self.kicker_values()})"

    def __str__(self):
        return f"{self.category().label()} [{' '.join(self.play_symbols())}] ({' '.join(self.kicker_symbols())})"
