"""
Runner for the check task
"""

__all__ = ["check_fastq_file", "check_fastq_runner"]

import logging

from pathlib import Path

from ..common import open_input, open_output
from .errors import FastqIOError
from .options import CheckOptions
from .scanner import scan_fastq

_LOG = logging.getLogger(__name__)


def check_fastq_file(input_path: str | Path, error_output_path: str | Path | None = None) -> tuple[int, int]:
    """
    Check a FASTQ file, optionally writing every invalid record to an error output.

    The input may be plain text or gzip/bgzip compressed. The error output is created (or
    truncated) whenever a path is given, even if no record turns out to be invalid.

    :param input_path: Path to the FASTQ file.
    :param error_output_path: Optional path for the diagnostic output.
    :return: (number of records, number of invalid records)

    Raises
    ------
    FastqIOError
        If a file cannot be opened, read, written or closed.
    IncompleteRecordError
        If the file ends in the middle of a record.
    """
    try:
        with open_input(input_path) as input_handle:
            if error_output_path is None:
                return scan_fastq(input_handle)
            with open_output(error_output_path) as error_handle:
                return scan_fastq(input_handle, error_handle)
    except OSError as exc:
        raise FastqIOError(exc) from exc


def check_fastq_runner(input_file: str | None,
                       error_output: str | None = None,
                       config: str | None = None,
                       overwrite: bool = False) -> tuple[int, int]:
    """
    Run the check task from the command line and report the result.

    :param input_file: The FASTQ file to check.
    :param error_output: Where to write the invalid records, if anywhere.
    :param config: Optional yaml config file supplying any of the above.
    :param overwrite: Replace an existing error output file.
    :return: (number of records, number of invalid records)
    """
    options = CheckOptions.from_cli(input_file, error_output, config, overwrite)

    _LOG.info(f'Checking FASTQ file: {options.input_file}')
    record_count, error_count = check_fastq_file(options.input_file, options.error_output)

    _LOG.info('Check complete.')
    _LOG.info(f'Total records processed: {record_count}')
    if error_count == 0:
        _LOG.info('No errors found.')
    else:
        _LOG.info(f'Found {error_count} invalid records.')
        if options.error_output is not None:
            _LOG.info(f'Invalid records written to: {options.error_output}')

    return record_count, error_count
