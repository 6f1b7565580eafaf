from fqcheck.fastq_checker.errors import (
    FastqError,
    FastqIOError,
    FastqValidationError,
    IncompleteRecordError,
    InvalidHeaderError,
    InvalidSeparatorError,
    LengthMismatchError,
)
from fqcheck.fastq_checker.record import FastqRecord


def test_error_hierarchy():
    for err in (InvalidHeaderError(1), InvalidSeparatorError(3), LengthMismatchError(4, 2, 4)):
        assert isinstance(err, FastqValidationError)
        assert isinstance(err, FastqError)
    for err in (FastqIOError(OSError("boom")), IncompleteRecordError(2)):
        assert isinstance(err, FastqError)
        assert not isinstance(err, FastqValidationError)


def test_debug_forms():
    assert repr(InvalidHeaderError(1)) == "InvalidHeaderError(line_num=1)"
    assert repr(InvalidSeparatorError(7)) == "InvalidSeparatorError(line_num=7)"
    assert repr(LengthMismatchError(4, 2, 4)) == "LengthMismatchError(seq_len=4, qual_len=2, line_num=4)"
    assert repr(IncompleteRecordError(4)) == "IncompleteRecordError(line_num=4)"


def test_messages_name_the_line():
    assert "line 1" in str(InvalidHeaderError(1))
    assert "'+'" in str(InvalidSeparatorError(3))
    assert "(4)" in str(LengthMismatchError(4, 2, 4)) and "(2)" in str(LengthMismatchError(4, 2, 4))
    assert "line 4" in str(IncompleteRecordError(4))


def test_io_error_keeps_cause():
    cause = FileNotFoundError("no such file")
    err = FastqIOError(cause)
    assert err.cause is cause
    assert "no such file" in str(err)


def test_record_lines_and_equality():
    record = FastqRecord("@r1", "ACGT", "+", "!!!!")
    assert record.lines() == ("@r1", "ACGT", "+", "!!!!")
    assert record == FastqRecord("@r1", "ACGT", "+", "!!!!")
    assert record != FastqRecord("@r2", "ACGT", "+", "!!!!")
    assert "ACGT" in repr(record)
