from __future__ import annotations
import typing
import pathlib
import logging
import argparse
from titan.poker_hands.evaluation import (
    ResourceError,
    EvaluationConfig,
    EvaluationDriver
)
from titan.poker_hands.evaluation_logging import (
    EvaluationLogging
)


logger = logging.getLogger(__name__)



class ArgValidator:

    @classmethod
    def ensure_valid_config_path(cls, config_path: typing.Optional[str]):
        if config_path is None:
            return
        assert pathlib.Path(config_path).is_file(), f"config_path `{config_path}` is not a file !"

    @classmethod
    def ensure_distinct_paths(cls, config: EvaluationConfig):
        assert (pathlib.Path(config.input_path()).resolve() != pathlib.Path(config.output_path()).resolve()), \
            f"The output-path should not be the same as the input-path !"


class EvaluationScript:

    @classmethod
    def create_config(cls, args: argparse.Namespace) -> EvaluationConfig:
        if args.config_path is not None:
            config_dict = EvaluationConfig.create_from_json_file(args.config_path).serialize_to_dict()
        else:
            config_dict = EvaluationConfig().serialize_to_dict()
        # command line flags win over the config file
        if args.input_path is not None:
            config_dict['input_path'] = args.input_path
        if args.output_path is not None:
            config_dict['output_path'] = args.output_path
        if args.event_log_path is not None:
            config_dict['event_log_path'] = args.event_log_path
        if args.quiet:
            config_dict['report_records'] = False
        if args.verbose:
            config_dict['log_level'] = 'DEBUG'
        return EvaluationConfig.create_from_dict(config_dict)

    @classmethod
    def evaluate(cls, config: EvaluationConfig) -> int:
        try:
            summary = EvaluationDriver(config).run()
        except ResourceError as e:
            logger.error(str(e))
            return 1
        logger.info(f"Evaluated {summary.num_records()} records, player won {summary.num_player_wins()}")
        return 0


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate Poker Hands")
    parser.add_argument("-i", "--input-path", type=str, default=None, required=False, help=f"Path to the hands file (default `{EvaluationConfig.DEFAULT_INPUT_PATH}`)")
    parser.add_argument("-o", "--output-path", type=str, default=None, required=False, help=f"Path to the results file (default `{EvaluationConfig.DEFAULT_OUTPUT_PATH}`)")
    parser.add_argument("-c", "--config-path", type=str, default=None, required=False, help="Path to a JSON evaluation config")
    parser.add_argument("--event-log-path", type=str, default=None, required=False, help="Path to write JSON event logs to")
    parser.add_argument("-q", "--quiet", action='store_true', default=False, required=False, help="Only write the final tally")
    parser.add_argument("-v", "--verbose", action='store_true', default=False, required=False, help="Enable debug logging")
    return parser


def main(argv: typing.Optional[typing.List[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)

    try:
        ArgValidator.ensure_valid_config_path(args.config_path)
        config = EvaluationScript.create_config(args)
        ArgValidator.ensure_distinct_paths(config)
    except Exception as e:
        print(f"Failed due to exception: {e}")
        raise

    # configure the logger
    EvaluationLogging.setup(level=config.logging_level(),
                            event_log_file_path=config.event_log_path())

    return EvaluationScript.evaluate(config)


if __name__ == "__main__"   :
    raise SystemExit(main())
