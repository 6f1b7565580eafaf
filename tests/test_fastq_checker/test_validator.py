import pytest

from fqcheck.fastq_checker.errors import (
    FastqValidationError,
    InvalidHeaderError,
    InvalidSeparatorError,
    LengthMismatchError,
)
from fqcheck.fastq_checker.record import FastqRecord
from fqcheck.fastq_checker.validator import validate_record


def test_valid_record_passes():
    record = FastqRecord("@r1", "ACGT", "+", "!!!!")
    assert validate_record(record, 1) is None


def test_separator_may_repeat_the_header():
    record = FastqRecord("@r1 extra words", "ACGTN", "+r1 extra words", "IIIII")
    assert validate_record(record, 5) is None


def test_empty_sequence_and_quality_are_valid():
    assert validate_record(FastqRecord("@r1", "", "+", ""), 1) is None


@pytest.mark.parametrize("header", ["r1", "", " @r1", ">r1"])
def test_invalid_header_reports_header_line(header):
    with pytest.raises(InvalidHeaderError) as ei:
        validate_record(FastqRecord(header, "ACGT", "+", "!!!!"), 41)
    assert ei.value.line_num == 41
    assert isinstance(ei.value, FastqValidationError)


@pytest.mark.parametrize("separator", ["-", "", " +", "@r1"])
def test_invalid_separator_reports_header_plus_two(separator):
    with pytest.raises(InvalidSeparatorError) as ei:
        validate_record(FastqRecord("@r1", "ACGT", separator, "!!!!"), 9)
    assert ei.value.line_num == 11


def test_length_mismatch_reports_both_lengths():
    with pytest.raises(LengthMismatchError) as ei:
        validate_record(FastqRecord("@r1", "ACGT", "+", "!!"), 1)
    err = ei.value
    assert (err.seq_len, err.qual_len, err.line_num) == (4, 2, 4)


def test_quality_longer_than_sequence():
    with pytest.raises(LengthMismatchError) as ei:
        validate_record(FastqRecord("@r1", "AC", "+", "!!!!!"), 13)
    assert (ei.value.seq_len, ei.value.qual_len, ei.value.line_num) == (2, 5, 16)


def test_header_error_wins_over_separator_error():
    with pytest.raises(InvalidHeaderError) as ei:
        validate_record(FastqRecord("r1", "ACGT", "-", "!!"), 1)
    assert ei.value.line_num == 1


def test_separator_error_wins_over_length_error():
    with pytest.raises(InvalidSeparatorError):
        validate_record(FastqRecord("@r1", "ACGT", "-", "!!"), 1)


def test_lengths_are_counted_in_characters_not_bytes():
    # 'é' is two bytes in utf-8 but a single character
    assert validate_record(FastqRecord("@r1", "ACGT", "+", "é!!!"), 1) is None

    with pytest.raises(LengthMismatchError) as ei:
        validate_record(FastqRecord("@r1", "ACGT", "+", "éé"), 1)
    assert ei.value.qual_len == 2


def test_record_is_not_modified():
    record = FastqRecord("r1", "ACGT", "+", "!!")
    with pytest.raises(InvalidHeaderError):
        validate_record(record, 1)
    assert record == FastqRecord("r1", "ACGT", "+", "!!")
