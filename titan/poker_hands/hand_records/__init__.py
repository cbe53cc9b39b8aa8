from titan.poker_hands.hand_records.types import (
    PokerHandsException,
    MalformedRecordError,
    HandRecord
)
from titan.poker_hands.hand_records.hand_record_parser import (
    HandRecordParser
)
from titan.poker_hands.hand_records.hand_record_file import (
    HandRecordFile
)
