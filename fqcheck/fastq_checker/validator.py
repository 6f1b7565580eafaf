"""
Structural checks for a single FASTQ record
"""

__all__ = ["validate_record"]

from ..common import HEADER_PREFIX, SEPARATOR_PREFIX
from .errors import InvalidHeaderError, InvalidSeparatorError, LengthMismatchError
from .record import FastqRecord


def validate_record(record: FastqRecord, line_num: int) -> None:
    """
    Check one record, raising on the first rule it breaks.

    The rules are checked in a fixed order (header, separator, then lengths) and only the
    first failure is reported, so the reported line number is deterministic.

    Lengths are compared as decoded characters, not bytes.

    :param record: The record to check.
    :param line_num: 1-based line number of the record's header.

    Raises
    ------
    InvalidHeaderError
        If the header does not start with '@' (reports line_num).
    InvalidSeparatorError
        If the separator does not start with '+' (reports line_num + 2).
    LengthMismatchError
        If the sequence and quality lengths differ (reports line_num + 3).
    """
    if not record.header.startswith(HEADER_PREFIX):
        raise InvalidHeaderError(line_num)

    if not record.separator.startswith(SEPARATOR_PREFIX):
        raise InvalidSeparatorError(line_num + 2)

    seq_len = len(record.sequence)
    qual_len = len(record.quality)
    if seq_len != qual_len:
        raise LengthMismatchError(seq_len, qual_len, line_num + 3)
