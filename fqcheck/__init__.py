"""
fqcheck: structural validation of FASTQ files
"""

__version__ = "1.0.0"

from .fastq_checker import (
    FastqError,
    FastqIOError,
    IncompleteRecordError,
    FastqValidationError,
    InvalidHeaderError,
    InvalidSeparatorError,
    LengthMismatchError,
    FastqRecord,
    validate_record,
    iter_records,
    scan_fastq,
    check_fastq_file,
)
