import logging
import json
import pathlib
import pytest
from titan.poker_hands.hand_evaluator import (
    HandCategory,
    MatchOutcome
)
from titan.poker_hands.hand_records import (
    HandRecordParser
)
from titan.poker_hands.evaluation import (
    ResourceError,
    EvaluationConfig,
    EvaluationSummary,
    EvaluationDriver,
    MatchReport,
    TeeWriter
)


logger = logging.getLogger(__name__)


EXAMPLE_LINES = (
    '5H 5C 6S 7S KD 2C 3S 8S 8D TD\n',
    '5D 8C 9S JS AC 2C 5C 7D 8S QH\n',
    '2D 9C AS AH AC 3D 6D 7D TD QD\n',
    '4D 6S 9H QH QC 3D 6D 7H QD QS\n',
    '2C 3S 4D 5H 6C 7H 7D 7S 8C 9C\n',
)

# full reference input, only checked when it is shipped next to the tests
CANONICAL_HANDS_PATH = pathlib.Path(__file__).parent / 'data' / 'poker.txt'
CANONICAL_PLAYER_WINS = 376


def write_hands_file(path: pathlib.Path, lines) -> pathlib.Path:
    path.write_text(''.join(lines))
    return path


def test_evaluate_record():
    record = HandRecordParser.parse_record(EXAMPLE_LINES[2], 3)
    match_result = EvaluationDriver.evaluate_record(record)
    assert match_result.record() == record
    assert match_result.player_evaluation().category() == HandCategory.THREE_OF_A_KIND
    assert match_result.opponent_evaluation().category() == HandCategory.FLUSH
    assert match_result.outcome() == MatchOutcome.OPPONENT_WINS
    assert not match_result.player_won()
    assert match_result.serialize_to_dict() == {
        'line_number': 3,
        'player_category': 'THREE_OF_A_KIND',
        'opponent_category': 'FLUSH',
        'outcome': 'OPPONENT_WINS'
    }


def test_evaluate_lines():
    summary = EvaluationDriver.evaluate_lines(EXAMPLE_LINES)
    assert summary.num_player_wins() == 3
    assert summary.num_opponent_wins() == 2
    assert summary.num_draws() == 0
    assert summary.num_malformed() == 0
    assert summary.num_records() == 5


def test_malformed_lines_are_skipped():
    lines = EXAMPLE_LINES[:2] + ('5H 5C 6S\n', '\n', 'XH 5C 6S 7S KD 2C 3S 8S 8D TD\n') + EXAMPLE_LINES[2:]
    summary = EvaluationDriver.evaluate_lines(lines)
    assert summary.num_records() == 5
    assert summary.num_player_wins() == 3
    assert summary.num_malformed() == 2


def test_undecodable_line_is_skipped(tmp_path):
    input_path = tmp_path / 'poker.txt'
    input_path.write_bytes(EXAMPLE_LINES[0].encode() + b'\xff\xfe garbage\n' + EXAMPLE_LINES[1].encode())
    output_path = tmp_path / 'csis.txt'
    config = EvaluationConfig(input_path=input_path, output_path=output_path, report_records=False)
    summary = EvaluationDriver(config).run()
    assert summary.num_malformed() == 1
    assert summary.num_player_wins() == 1
    assert summary.num_records() == 2
    assert output_path.read_text() == 'Player won 1 times!\n'


def test_draws_are_not_player_wins():
    summary = EvaluationDriver.evaluate_lines(['TS JS QS KS AS TH JH QH KH AH\n'])
    assert summary.num_draws() == 1
    assert summary.num_player_wins() == 0


def test_summary_counting():
    summary = EvaluationSummary()
    for match_result in EvaluationDriver.gen_match_results(enumerate(EXAMPLE_LINES, start=1), summary):
        assert summary.num_records() == match_result.record().line_number()
    assert summary == EvaluationSummary(num_player_wins=3, num_opponent_wins=2)
    assert summary.serialize_to_dict()['num_records'] == 5


def test_format_result():
    match_result = EvaluationDriver.evaluate_record(HandRecordParser.parse_record(EXAMPLE_LINES[0]))
    line = MatchReport.format_result(match_result)
    assert line.startswith('5H 5C 6S 7S KD  Score = 1, Pair [5 5] (K 7 6)')
    assert '|  2C 3S 8S 8D TD  Score = 1, Pair [8 8] (T 3 2)' in line
    assert line.endswith('=>  Opponent wins')
    assert MatchReport.format_summary(EvaluationSummary(num_player_wins=376)) == 'Player won 376 times!'


def test_tee_writer(tmp_path):
    first_path = tmp_path / 'first.txt'
    second_path = tmp_path / 'second.txt'
    with open(first_path, 'w') as first, open(second_path, 'w') as second:
        writer = TeeWriter((first, second))
        writer.write_line('hello')
        writer.write('world')
    assert first_path.read_text() == 'hello\nworld'
    assert second_path.read_text() == 'hello\nworld'


def test_run(tmp_path, capsys):
    input_path = write_hands_file(tmp_path / 'poker.txt', EXAMPLE_LINES)
    output_path = tmp_path / 'csis.txt'
    config = EvaluationConfig(input_path=input_path, output_path=output_path)
    summary = EvaluationDriver(config).run()
    assert summary.num_player_wins() == 3
    output_lines = output_path.read_text().splitlines()
    assert len(output_lines) == 6
    assert output_lines[-1] == 'Player won 3 times!'
    assert output_lines[0].endswith('Opponent wins')
    assert capsys.readouterr().out.splitlines() == output_lines


def test_run_without_record_report(tmp_path, capsys):
    input_path = write_hands_file(tmp_path / 'poker.txt', EXAMPLE_LINES)
    output_path = tmp_path / 'csis.txt'
    config = EvaluationConfig(input_path=input_path, output_path=output_path, report_records=False)
    EvaluationDriver(config).run()
    assert output_path.read_text() == 'Player won 3 times!\n'
    assert capsys.readouterr().out == 'Player won 3 times!\n'


def test_run_with_missing_input(tmp_path):
    config = EvaluationConfig(input_path=tmp_path / 'missing.txt', output_path=tmp_path / 'csis.txt')
    with pytest.raises(ResourceError):
        EvaluationDriver(config).run()
    assert not (tmp_path / 'csis.txt').exists()


def test_run_with_unwritable_output(tmp_path):
    input_path = write_hands_file(tmp_path / 'poker.txt', EXAMPLE_LINES)
    config = EvaluationConfig(input_path=input_path, output_path=tmp_path / 'missing_dir' / 'csis.txt')
    with pytest.raises(ResourceError):
        EvaluationDriver(config).run()


def test_run_with_invalid_compressed_input(tmp_path):
    input_path = write_hands_file(tmp_path / 'poker.txt.gz', EXAMPLE_LINES)
    config = EvaluationConfig(input_path=input_path, output_path=tmp_path / 'csis.txt')
    with pytest.raises(ResourceError):
        EvaluationDriver(config).run()
    assert not (tmp_path / 'csis.txt').exists()


@pytest.mark.skipif(not CANONICAL_HANDS_PATH.is_file(), reason="canonical hands file not available")
def test_canonical_hands(tmp_path, capsys):
    config = EvaluationConfig(input_path=CANONICAL_HANDS_PATH, output_path=tmp_path / 'csis.txt', report_records=False)
    summary = EvaluationDriver(config).run()
    assert summary.num_records() == 1000
    assert summary.num_malformed() == 0
    assert summary.num_player_wins() == CANONICAL_PLAYER_WINS


def test_config():
    config = EvaluationConfig()
    assert config.input_path() == 'poker.txt'
    assert config.output_path() == 'csis.txt'
    assert config.report_records()
    assert config.event_log_path() is None
    assert config.logging_level() == logging.INFO
    assert EvaluationConfig.create_from_dict(config.serialize_to_dict()) == config
    assert EvaluationConfig.create_from_dict({'log_level': 'DEBUG'}).logging_level() == logging.DEBUG
    with pytest.raises(ValueError):
        EvaluationConfig.create_from_dict({'input_file': 'poker.txt'})
    with pytest.raises(ValueError):
        EvaluationConfig(log_level='LOUD')


def test_config_from_json_file(tmp_path):
    config_path = tmp_path / 'config.json'
    config_path.write_text(json.dumps({'input_path': 'hands.txt', 'report_records': False}))
    config = EvaluationConfig.create_from_json_file(config_path)
    assert config.input_path() == 'hands.txt'
    assert config.output_path() == EvaluationConfig.DEFAULT_OUTPUT_PATH
    assert not config.report_records()
