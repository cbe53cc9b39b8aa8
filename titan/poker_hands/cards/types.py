from __future__ import annotations
import typing
from titan.poker_hands.cards.rank_codec import (
    RankCodec
)



class Card(tuple):
    def __new__ (cls, rank_symbol: str, suit_symbol: str):
        return super().__new__(cls, (rank_symbol, RankCodec.decode(rank_symbol), suit_symbol))

    def __getnewargs__(self):
        return (self.rank_symbol(), self.suit_symbol())

    def rank_symbol(self) -> str:
        return self[0]

    def value(self) -> int:
        return self[1]

    def suit_symbol(self) -> str:
        return self[2]

    def is_valid(self) -> bool:
        return RankCodec.is_valid_value(self.value())

    def __repr__(self):
        return f"Card({self.rank_symbol()!r}, {self.suit_symbol()!r})"

    def __str__(self):
        return f"{self.rank_symbol()}{self.suit_symbol()}"

    def __eq__(self, other):
        return (    (type(self) == type(other)) and
                    (tuple(self) == tuple(other))    )

    def __hash__(self):
        return hash((type(self), tuple(self)))

    @classmethod
    def create_from_string(cls, some_string: str) -> Card:
        """Build a card from a two character token such as `TD`

        Any pair of characters is accepted. An unknown rank symbol is kept
        as-is with the codec's invalid value, see `is_valid()`.
        """
        if len(some_string) != 2:
            raise ValueError(f"Invalid card token `{some_string}`, expected <rank><suit>")
        return cls(some_string[0], some_string[1])


class Hand(tuple):

    NUM_CARDS = 5
    MAX_CARDS_PER_VALUE = 4

    def __new__ (cls, cards: typing.Tuple[Card, ...]):
        if type(cards) != tuple:
            raise ValueError((  f"Invalid cards type `{type(cards)}` for " +
                                f"Hand. Should be a tuple of Card values."  ))
        if len(cards) != cls.NUM_CARDS:
            raise ValueError(f"A Hand needs exactly {cls.NUM_CARDS} cards, got {len(cards)}")
        for card in cards:
            if not card.is_valid():
                raise ValueError(f"Invalid rank symbol `{card.rank_symbol()}` in card `{card}`")
        values = [card.value() for card in cards]
        for value in set(values):
            if values.count(value) > cls.MAX_CARDS_PER_VALUE:
                raise ValueError(f"Too many cards of rank `{RankCodec.encode(value)}` in a single Hand")
        return super().__new__(cls, cards)

    def __getnewargs__(self):
        return (tuple(self),)

    def cards(self) -> typing.Tuple[Card, ...]:
        return tuple(self)

    def values(self) -> typing.Tuple[int, ...]:
        return tuple(card.value() for card in self)

    def suit_symbols(self) -> typing.Tuple[str, ...]:
        return tuple(card.suit_symbol() for card in self)

    def __repr__(self):
        return 'Hand(' + ','.join((repr(card) for card in self)) + ')'

    def __str__(self):
        return ' '.join((str(card) for card in self))

    def __eq__(self, other):
        return (    (type(self) == type(other)) and
                    (tuple(self) == tuple(other))   )

    def __hash__(self):
        return hash(tuple(self))

    @classmethod
    def create_from_string(cls, some_string: str) -> Hand:
        return cls(tuple(Card.create_from_string(token) for token in some_string.split()))
