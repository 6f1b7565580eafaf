"""
Sequential scan of a FASTQ stream. Lines are grouped four at a time into records, every record
is validated and the bad ones are counted and, optionally, copied with a diagnostic line to an
error output.

A bad record does not stop the scan. Running out of input in the middle of a record, or any
failure to read or write, does.
"""

__all__ = ["iter_records", "scan_fastq", "write_diagnostic"]

import logging
import zlib

from typing import Iterable, Iterator, TextIO

from ..common import LINES_PER_RECORD, DIAGNOSTIC_LABEL, DIAGNOSTIC_END
from .errors import FastqIOError, FastqValidationError, IncompleteRecordError
from .record import FastqRecord
from .validator import validate_record

_LOG = logging.getLogger(__name__)


def _read_line(lines: Iterator[str]) -> str | None:
    """
    Next line without its terminator, or None at the end of the input.
    """
    try:
        line = next(lines)
    except StopIteration:
        return None
    # EOFError and zlib.error come from truncated or corrupt gzip input
    except (OSError, EOFError, zlib.error, UnicodeDecodeError) as exc:
        raise FastqIOError(exc) from exc

    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def iter_records(lines: Iterable[str]) -> Iterator[tuple[int, FastqRecord]]:
    """
    Group lines into records.

    :param lines: Any iterable of text lines, typically an open file handle.
    :return: Pairs of (header line number, record). Header line numbers start at 1 and go up by 4.

    Raises
    ------
    IncompleteRecordError
        If the input ends after a header but before the record's fourth line. The error carries
        the number of the first missing line.
    FastqIOError
        If reading from the input fails.
    """
    line_iter = iter(lines)
    line_num = 0

    while True:
        header = _read_line(line_iter)
        if header is None:
            return
        line_num += 1

        body = []
        for offset in range(1, LINES_PER_RECORD):
            line = _read_line(line_iter)
            if line is None:
                raise IncompleteRecordError(line_num + offset)
            body.append(line)

        yield line_num, FastqRecord(header, *body)
        line_num += LINES_PER_RECORD - 1


def write_diagnostic(error_sink: TextIO, error: FastqValidationError, record: FastqRecord):
    """
    Write one diagnostic block: the error, the four raw record lines and an end marker.

    :param error_sink: Open text handle for the error output.
    :param error: The validation error found for the record.
    :param record: The offending record.
    """
    block = [f"{DIAGNOSTIC_LABEL}: {error!r}", *record.lines(), DIAGNOSTIC_END]
    try:
        for line in block:
            error_sink.write(f"{line}\n")
    except (OSError, UnicodeEncodeError) as exc:
        raise FastqIOError(exc) from exc


def scan_fastq(lines: Iterable[str], error_sink: TextIO | None = None) -> tuple[int, int]:
    """
    Validate every record in a stream of FASTQ lines.

    :param lines: The input lines, e.g. an open file handle.
    :param error_sink: Optional open text handle that receives a diagnostic block per bad record.
    :return: (number of records, number of invalid records)

    Raises
    ------
    IncompleteRecordError
        If the input stops in the middle of a record.
    FastqIOError
        If reading the input or writing the error output fails.
    """
    record_count = 0
    error_count = 0

    for line_num, record in iter_records(lines):
        record_count += 1
        try:
            validate_record(record, line_num)
        except FastqValidationError as err:
            error_count += 1
            _LOG.debug(f"Invalid record at line {line_num}: {err}")
            if error_sink is not None:
                write_diagnostic(error_sink, err, record)

    _LOG.debug(f"Scanned {record_count} records, {error_count} invalid")
    return record_count, error_count
