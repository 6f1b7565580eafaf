"""
Errors raised while reading and checking a FASTQ file.

Two families exist. FastqIOError and IncompleteRecordError are fatal: they stop the scan
and propagate to the caller. The FastqValidationError subclasses describe a single bad
record; the scanner counts them and moves on to the next record.

str() of an error gives a readable message, repr() gives the compact debug form that is
written to the error output.
"""

__all__ = [
    "FastqError",
    "FastqIOError",
    "IncompleteRecordError",
    "FastqValidationError",
    "InvalidHeaderError",
    "InvalidSeparatorError",
    "LengthMismatchError",
]


class FastqError(Exception):
    """
    Base class for everything the checker raises.
    """


class FastqIOError(FastqError):
    """
    A read or write on the underlying files failed.

    :param cause: The exception raised by the I/O layer
    """
    def __init__(self, cause: BaseException):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return f"I/O error: {self.cause}"

    def __repr__(self):
        return f"FastqIOError({self.cause!r})"


class IncompleteRecordError(FastqError):
    """
    The input ended part way through a record.

    :param line_num: 1-based number of the line that was expected but missing
    """
    def __init__(self, line_num: int):
        super().__init__(line_num)
        self.line_num = line_num

    def __str__(self):
        return f"Incomplete record: input ended before line {self.line_num}"

    def __repr__(self):
        return f"IncompleteRecordError(line_num={self.line_num})"


class FastqValidationError(FastqError):
    """
    A record is structurally malformed. Not fatal for the scan.

    :param line_num: 1-based number of the offending line
    """
    def __init__(self, line_num: int):
        super().__init__(line_num)
        self.line_num = line_num

    def __repr__(self):
        return f"{type(self).__name__}(line_num={self.line_num})"


class InvalidHeaderError(FastqValidationError):
    def __str__(self):
        return f"Header line (line {self.line_num}) does not start with '@'"


class InvalidSeparatorError(FastqValidationError):
    def __str__(self):
        return f"Separator line (line {self.line_num}) does not start with '+'"


class LengthMismatchError(FastqValidationError):
    """
    Sequence and quality lines differ in length.

    :param seq_len: Length of the sequence line
    :param qual_len: Length of the quality line
    :param line_num: 1-based number of the quality line
    """
    def __init__(self, seq_len: int, qual_len: int, line_num: int):
        super().__init__(line_num)
        self.args = (seq_len, qual_len, line_num)
        self.seq_len = seq_len
        self.qual_len = qual_len

    def __str__(self):
        return (f"Sequence length ({self.seq_len}) does not match quality length ({self.qual_len}) "
                f"(line {self.line_num})")

    def __repr__(self):
        return f"LengthMismatchError(seq_len={self.seq_len}, qual_len={self.qual_len}, line_num={self.line_num})"
