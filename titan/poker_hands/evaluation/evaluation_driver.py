from __future__ import annotations
import sys
import typing
from titan.poker_hands.hand_evaluator import (
    HandAnalyzer,
    HandComparator
)
from titan.poker_hands.hand_records import (
    HandRecord,
    HandRecordFile,
    HandRecordParser,
    MalformedRecordError
)
from titan.poker_hands.evaluation.types import (
    ResourceError,
    EvaluationConfig,
    MatchResult,
    EvaluationSummary
)
from titan.poker_hands.evaluation.match_report import (
    TeeWriter,
    MatchReport
)
from titan.poker_hands.evaluation_logging import (
    EvaluationLogging
)


logger = EvaluationLogging.get_logger(__name__)



class EvaluationDriver:

    __slots__ = ('_config',)

    def __init__(self, config: EvaluationConfig):
        self._config = config

    def config(self) -> EvaluationConfig:
        return self._config

    @classmethod
    def evaluate_record(cls, record: HandRecord) -> MatchResult:
        player_evaluation = HandAnalyzer.evaluate(record.player_hand())
        opponent_evaluation = HandAnalyzer.evaluate(record.opponent_hand())
        return MatchResult( record=record,
                            player_evaluation=player_evaluation,
                            opponent_evaluation=opponent_evaluation,
                            outcome=HandComparator.outcome(player_evaluation, opponent_evaluation)  )

    @classmethod
    def gen_match_results(cls, numbered_lines: typing.Iterable[typing.Tuple[int, str]],
                                summary: EvaluationSummary) -> typing.Iterator[MatchResult]:
        """Evaluate every line, skipping the malformed ones

        `summary` is updated in place as results are generated.
        """
        for line_number, line in numbered_lines:
            try:
                record = HandRecordParser.parse_record(line, line_number)
            except MalformedRecordError as e:
                logger.warning(f"Skipping line {e.line_number}: {e.reason}")
                logger.event({  'type': 'record_skipped',
                                'line_number': e.line_number,
                                'reason': e.reason  })
                summary.add_malformed()
                continue
            match_result = cls.evaluate_record(record)
            logger.event(dict(type='record_evaluated', **match_result.serialize_to_dict()))
            summary.add_result(match_result)
            yield match_result

    @classmethod
    def evaluate_lines(cls, lines: typing.Iterable[str]) -> EvaluationSummary:
        summary = EvaluationSummary()
        for _ in cls.gen_match_results(HandRecordFile.gen_numbered_lines(lines), summary):
            pass
        return summary

    def run(self) -> EvaluationSummary:
        input_path = self.config().input_path()
        output_path = self.config().output_path()
        try:
            input_obj = HandRecordFile(input_path).open()
        except (OSError, EOFError) as e:
            raise ResourceError(f"Could not open `{input_path}` for input: {e}") from e
        with input_obj:
            try:
                output_obj = open(output_path, 'w')
            except OSError as e:
                raise ResourceError(f"Could not open `{output_path}` for output: {e}") from e
            with output_obj:
                logger.info(f"Evaluating hands from `{input_path}` into `{output_path}`")
                writer = TeeWriter((sys.stdout, output_obj))
                summary = EvaluationSummary()
                try:
                    for match_result in self.gen_match_results(HandRecordFile.gen_numbered_lines(input_obj), summary):
                        if self.config().report_records():
                            writer.write_line(MatchReport.format_result(match_result))
                except (OSError, EOFError) as e:
                    raise ResourceError(f"Could not read `{input_path}`: {e}") from e
                writer.write_line(MatchReport.format_summary(summary))
                writer.flush()
        logger.event(dict(type='run_completed', **summary.serialize_to_dict()))
        if summary.num_malformed() > 0:
            logger.warning(f"Skipped {summary.num_malformed()} malformed line(s) in `{input_path}`")
        return summary
