import sys
import logging
import json
import time
import typing

class _Encoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, (set, frozenset)):
            return tuple(o)
        return super().default(o)

class _JsonLogEntry:
    __slots__ = ('_fields',)

    def __init__(self, fields: dict):
        self._fields = fields

    def fields(self) -> dict:
        return self._fields

    def __str__(self):
        return _Encoder().encode(self._fields)


class _JsonEntryFilter(logging.Filter):
    def filter(self, record):
        return type(record.msg) == _JsonLogEntry


class _TextEntryFilter(logging.Filter):
    def filter(self, record):
        return type(record.msg) == str

class EvaluationLogger:

    __slots__ = ('_logger',)

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @classmethod
    def timestamp(cls):
        return int(time.time()*1000)

    def name(self) -> str:
        return self._logger.name

    def debug(self, msg, *args, **kwargs):
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        self._logger.error(msg, *args, **kwargs)

    def event(self, event_fields: dict):
        self._logger.info(_JsonLogEntry({   'source': self._logger.name,
                                            'timestamp': self.timestamp(),
                                            'event': event_fields     }))


class EvaluationLogging:

    TEXT_LOG_FORMAT = "${asctime}:${levelname}:${name}:${message}"

    _cache = {}

    @classmethod
    def get_logger(cls, logger_name) -> EvaluationLogger:
        try:
            return cls._cache[logger_name]
        except KeyError:
            result = EvaluationLogger(logging.getLogger(logger_name))
            cls._cache[logger_name] = result
            return result

    @classmethod
    def clear_handlers(cls):
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

    @classmethod
    def setup(cls, level: int = logging.INFO, event_log_file_path: typing.Optional[str] = None):
        """Text logs go to stderr, stdout is reserved for the match report.

        Event entries are only kept when `event_log_file_path` is given.
        """
        cls.clear_handlers()
        # normal logs
        txt_log_handler = logging.StreamHandler(sys.stderr)
        txt_log_handler.addFilter(_TextEntryFilter())
        txt_log_handler.setFormatter(logging.Formatter(cls.TEXT_LOG_FORMAT, style='$'))
        root_logger = logging.getLogger()
        root_logger.addHandler(txt_log_handler)
        # event log
        if event_log_file_path is not None:
            event_log_handler = logging.FileHandler(event_log_file_path, mode='w')
            event_log_handler.addFilter(_JsonEntryFilter())
            event_log_handler.setFormatter(logging.Formatter("${message}", style='$'))
            root_logger.addHandler(event_log_handler)
        root_logger.setLevel(level)
