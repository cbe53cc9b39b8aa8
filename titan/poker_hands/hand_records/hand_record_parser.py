from __future__ import annotations
import typing
import re
from titan.poker_hands.cards import (
    Card,
    Hand
)
from titan.poker_hands.hand_records.types import (
    HandRecord,
    MalformedRecordError
)

class HandRecordParser:

    # suits are opaque tokens, any non-blank character is accepted
    CARD = r'[2-9TJQKA]\S'
    CARD_PATTERN = re.compile(r'^' + CARD + r'$')
    NUM_TOKENS = 2 * Hand.NUM_CARDS


    @classmethod
    def is_blank(cls, line: str) -> bool:
        return not line.strip()

    @classmethod
    def parse_tokens(cls, line: str, line_number: int) -> typing.Tuple[str, ...]:
        tokens = tuple(line.split())
        if len(tokens) != cls.NUM_TOKENS:
            raise MalformedRecordError(line_number, f"expected {cls.NUM_TOKENS} card tokens, got {len(tokens)}")
        for token in tokens:
            if not cls.CARD_PATTERN.match(token):
                raise MalformedRecordError(line_number, f"invalid card token `{token}`")
        return tokens

    @classmethod
    def parse_record(cls, line: str, line_number: int = 1) -> HandRecord:
        cards = tuple(Card.create_from_string(token)
                        for token in cls.parse_tokens(line, line_number))
        try:
            player_hand = Hand(cards[:Hand.NUM_CARDS])
            opponent_hand = Hand(cards[Hand.NUM_CARDS:])
        except ValueError as e:
            raise MalformedRecordError(line_number, str(e)) from e
        return HandRecord(  line_number=line_number,
                            player_hand=player_hand,
                            opponent_hand=opponent_hand  )
