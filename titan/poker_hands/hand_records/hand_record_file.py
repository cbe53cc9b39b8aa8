import typing
import io
import gzip
from titan.poker_hands.hand_records.hand_record_parser import (
    HandRecordParser
)



class HandRecordFile:

    # undecodable bytes become U+FFFD so the line fails card validation
    DECODE_ERRORS = 'replace'

    def __init__(self, record_file_path: str):
        self._record_file_path = str(record_file_path)

    def record_file_path(self) -> str:
        return self._record_file_path

    def is_compressed(self) -> bool:
        return self.record_file_path().endswith('.gz')

    def open(self) -> typing.TextIO:
        if not self.is_compressed():
            return open(self.record_file_path(), 'r', errors=self.DECODE_ERRORS)
        binary_obj = gzip.open(self.record_file_path(), 'rb')
        try:
            # gzip reads lazily, check the header now
            binary_obj.peek(1)
        except (OSError, EOFError):
            binary_obj.close()
            raise
        return io.TextIOWrapper(binary_obj, errors=self.DECODE_ERRORS)

    @classmethod
    def gen_numbered_lines(cls, file_obj: typing.Iterable[str]) -> typing.Iterator[typing.Tuple[int, str]]:
        for line_number, line in enumerate(file_obj, start=1):
            if not HandRecordParser.is_blank(line):
                yield (line_number, line)
