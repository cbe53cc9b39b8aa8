from __future__ import annotations
import typing
import numpy as np
from numpy import typing as npt
from titan.poker_hands.cards import (
    RankCodec,
    Hand
)
from titan.poker_hands.hand_evaluator.types import (
    HandCategory,
    EvaluatedHand
)



class HandAnalyzer:

    # descending multiset of non-zero bucket counts
    CATEGORY_BY_COUNT_PATTERN = {
        (1, 1, 1, 1, 1): HandCategory.HIGH_CARD,
        (2, 1, 1, 1): HandCategory.PAIR,
        (2, 2, 1): HandCategory.TWO_PAIR,
        (3, 1, 1): HandCategory.THREE_OF_A_KIND,
        (3, 2): HandCategory.FULL_HOUSE,
        (4, 1): HandCategory.FOUR_OF_A_KIND,
    }
    PAIR_UNITS_BY_COUNT = {0: 0, 1: 0, 2: 1, 3: 3, 4: 6}
    ROYAL_VALUES = tuple(RankCodec.decode(symbol) for symbol in ('T', 'J', 'Q', 'K', 'A'))

    @classmethod
    def value_array(cls, hand: Hand) -> npt.NDArray[np.int32]:
        return np.array(hand.values(), dtype=np.int32)

    @classmethod
    def value_histogram(cls, hand: Hand) -> npt.NDArray[np.int64]:
        return np.bincount(cls.value_array(hand), minlength=RankCodec.NUM_RANKS)

    @classmethod
    def count_pattern(cls, histogram: npt.NDArray[np.int64]) -> typing.Tuple[int, ...]:
        return tuple(sorted((int(count) for count in histogram if count > 0), reverse=True))

    @classmethod
    def pair_units(cls, histogram: npt.NDArray[np.int64]) -> int:
        """Number of distinct card pairs sharing a value

        This is the duplicate encoding the category table used to be keyed
        on (3 units for a triple, 6 for a quad). Only used for diagnostics.
        """
        return sum(cls.PAIR_UNITS_BY_COUNT[int(count)] for count in histogram)

    @classmethod
    def is_straight(cls, hand: Hand) -> bool:
        # aces are high only, no wheel
        return bool(np.all(np.diff(np.sort(cls.value_array(hand))) == 1))

    @classmethod
    def is_flush(cls, hand: Hand) -> bool:
        return len(set(hand.suit_symbols())) == 1

    @classmethod
    def is_royal(cls, hand: Hand) -> bool:
        return tuple(sorted(hand.values())) == cls.ROYAL_VALUES

    @classmethod
    def evaluate_pattern(cls, histogram: npt.NDArray[np.int64]) -> EvaluatedHand:
        count_pattern = cls.count_pattern(histogram)
        try:
            category = cls.CATEGORY_BY_COUNT_PATTERN[count_pattern]
        except KeyError:
            raise ValueError(f"Cannot classify value counts `{count_pattern}`")
        play_counts = np.where(histogram > 1, histogram, 0)
        return EvaluatedHand(   category=category,
                                play_values=np.repeat(np.arange(RankCodec.NUM_RANKS), play_counts),
                                kicker_values=np.flatnonzero(histogram == 1)  )

    @classmethod
    def gen_candidate_evaluations(cls, hand: Hand) -> typing.Iterator[EvaluatedHand]:
        yield cls.evaluate_pattern(cls.value_histogram(hand))
        is_straight = cls.is_straight(hand)
        is_flush = cls.is_flush(hand)
        if is_straight:
            yield EvaluatedHand(HandCategory.STRAIGHT, hand.values(), ())
        if is_flush:
            yield EvaluatedHand(HandCategory.FLUSH, hand.values(), ())
        if is_straight and is_flush:
            yield EvaluatedHand(HandCategory.STRAIGHT_FLUSH, hand.values(), ())
            if cls.is_royal(hand):
                yield EvaluatedHand(HandCategory.ROYAL_FLUSH, hand.values(), ())

    @classmethod
    def evaluate(cls, hand: Hand) -> EvaluatedHand:
        return max(cls.gen_candidate_evaluations(hand),
                    key=lambda evaluated_hand: evaluated_hand.category().ordinal())
