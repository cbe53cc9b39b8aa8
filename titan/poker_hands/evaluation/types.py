from __future__ import annotations
import typing
import json
import logging
from titan.poker_hands.hand_records import (
    PokerHandsException,
    HandRecord
)
from titan.poker_hands.hand_evaluator import (
    EvaluatedHand,
    MatchOutcome
)



class ResourceError(PokerHandsException):
    pass


class EvaluationConfig:

    DEFAULT_INPUT_PATH = 'poker.txt'
    DEFAULT_OUTPUT_PATH = 'csis.txt'
    LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

    __slots__ = (   '_input_path',
                    '_output_path',
                    '_report_records',
                    '_event_log_path',
                    '_log_level'  )

    def __init__(self, input_path: str = DEFAULT_INPUT_PATH,
                        output_path: str = DEFAULT_OUTPUT_PATH,
                        report_records: bool = True,
                        event_log_path: typing.Optional[str] = None,
                        log_level: str = 'INFO'):
        if log_level not in self.LOG_LEVELS:
            raise ValueError(f"Invalid log_level `{log_level}`, should be one of {self.LOG_LEVELS}")
        self._input_path = str(input_path)
        self._output_path = str(output_path)
        self._report_records = bool(report_records)
        self._event_log_path = (str(event_log_path) if event_log_path is not None else None)
        self._log_level = log_level

    def input_path(self) -> str:
        return self._input_path

    def output_path(self) -> str:
        return self._output_path

    def report_records(self) -> bool:
        return self._report_records

    def event_log_path(self) -> typing.Optional[str]:
        return self._event_log_path

    def log_level(self) -> str:
        return self._log_level

    def logging_level(self) -> int:
        return getattr(logging, self.log_level())

    def __eq__(self, other):
        return (    (type(self) == type(other)) and
                    (self.serialize_to_dict() == other.serialize_to_dict())  )

    def serialize_to_dict(self) -> dict:
        return {
            'input_path': self.input_path(),
            'output_path': self.output_path(),
            'report_records': self.report_records(),
            'event_log_path': self.event_log_path(),
            'log_level': self.log_level()
        }

    @classmethod
    def create_from_dict(cls, some_dict: dict) -> EvaluationConfig:
        unknown_keys = set(some_dict) - {'input_path', 'output_path', 'report_records', 'event_log_path', 'log_level'}
        if unknown_keys:
            raise ValueError(f"Unknown keys {sorted(unknown_keys)} for {cls.__name__}")
        return cls( input_path=some_dict.get('input_path', cls.DEFAULT_INPUT_PATH),
                    output_path=some_dict.get('output_path', cls.DEFAULT_OUTPUT_PATH),
                    report_records=some_dict.get('report_records', True),
                    event_log_path=some_dict.get('event_log_path'),
                    log_level=some_dict.get('log_level', 'INFO')  )

    @classmethod
    def create_from_json_file(cls, config_file_path: str) -> EvaluationConfig:
        with open(config_file_path, 'r') as f:
            return cls.create_from_dict(json.loads(f.read()))


class MatchResult:

    __slots__ = (   '_record',
                    '_player_evaluation',
                    '_opponent_evaluation',
                    '_outcome'  )

    def __init__(self, record: HandRecord, player_evaluation: EvaluatedHand,
                                            opponent_evaluation: EvaluatedHand,
                                            outcome: MatchOutcome):
        self._record = record
        self._player_evaluation = player_evaluation
        self._opponent_evaluation = opponent_evaluation
        self._outcome = outcome

    def record(self) -> HandRecord:
        return self._record

    def player_evaluation(self) -> EvaluatedHand:
        return self._player_evaluation

    def opponent_evaluation(self) -> EvaluatedHand:
        return self._opponent_evaluation

    def outcome(self) -> MatchOutcome:
        return self._outcome

    def player_won(self) -> bool:
        return self.outcome() == MatchOutcome.PLAYER_WINS

    def serialize_to_dict(self) -> dict:
        return {
            'line_number': self.record().line_number(),
            'player_category': self.player_evaluation().category().name,
            'opponent_category': self.opponent_evaluation().category().name,
            'outcome': self.outcome().name
        }


class EvaluationSummary:

    __slots__ = (   '_num_player_wins',
                    '_num_opponent_wins',
                    '_num_draws',
                    '_num_malformed'  )

    def __init__(self, num_player_wins: int = 0, num_opponent_wins: int = 0,
                                                num_draws: int = 0, num_malformed: int = 0):
        self._num_player_wins = num_player_wins
        self._num_opponent_wins = num_opponent_wins
        self._num_draws = num_draws
        self._num_malformed = num_malformed

    def num_player_wins(self) -> int:
        return self._num_player_wins

    def num_opponent_wins(self) -> int:
        return self._num_opponent_wins

    def num_draws(self) -> int:
        return self._num_draws

    def num_malformed(self) -> int:
        return self._num_malformed

    def num_records(self) -> int:
        return self.num_player_wins() + self.num_opponent_wins() + self.num_draws()

    def add_result(self, match_result: MatchResult):
        if match_result.outcome() == MatchOutcome.PLAYER_WINS:
            self._num_player_wins += 1
        elif match_result.outcome() == MatchOutcome.OPPONENT_WINS:
            self._num_opponent_wins += 1
        else:
            self._num_draws += 1

    def add_malformed(self):
        self._num_malformed += 1

    def __eq__(self, other):
        return (    (type(self) == type(other)) and
                    (self.serialize_to_dict() == other.serialize_to_dict())  )

    def serialize_to_dict(self) -> dict:
        return {
            'num_records': self.num_records(),
            'num_player_wins': self.num_player_wins(),
            'num_opponent_wins': self.num_opponent_wins(),
            'num_draws': self.num_draws(),
            'num_malformed': self.num_malformed()
        }
