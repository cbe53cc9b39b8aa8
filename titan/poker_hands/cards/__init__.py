from titan.poker_hands.cards.rank_codec import (
    RankCodec
)
from titan.poker_hands.cards.types import (
    Card,
    Hand
)
