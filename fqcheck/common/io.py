"""
Functions related to system I/O
"""

__all__ = [
    "is_compressed",
    "open_input",
    "open_output",
    "validate_input_path",
    "validate_output_path"
]

import codecs
import contextlib
import gzip
import logging
import os
import sys

from pathlib import Path
from typing import Callable, Iterator, TextIO
from Bio import bgzf

_LOG = logging.getLogger(__name__)


def is_compressed(file: str | Path) -> bool:
    """
    Determine if file is compressed.

    At the moment, function is only able to correctly identify files which were
    gzip compressed (BGZF files are gzip files too).

    :param file: Path to a file.

    :return: True if file is compressed, False otherwise.

    Note
    ----
    To determine if the file is gzipped, the function reads the first two bytes of the input file. If these
    bytes are ``1f 8b``, the file is considered to be gzipped as it is highly
    unlikely that an ordinary text files start with those two bytes.
    """
    with open(file, "rb") as buffer:
        magic_number = buffer.read(2)
    if magic_number == b"\x1f\x8b":
        return True
    return False


@contextlib.contextmanager
def open_input(path: str | Path) -> Iterator[TextIO]:
    """
    Opens a file for reading.

    Besides regular text-based files, the function also handles gzipped and bgzipped files.
    Lines are split on "\n" only, so a stray "\r" stays part of the line it is in.

    :param path: The path to the input file.
    :return: The handle to the text file with input data.
    """
    open_: Callable[..., TextIO]
    if is_compressed(path):
        # gzip reads multi-member streams, which covers BGZF as well
        open_ = gzip.open
    else:
        open_ = open
    handle = open_(path, "rt", encoding="utf-8", newline="\n")
    try:
        yield handle
    finally:
        handle.close()


@contextlib.contextmanager
def open_output(path: str | Path, mode: str = 'wt') -> Iterator[TextIO]:
    """
    Opens a file for writing.

    If the directory containing the file does not exist, it will be created
    automatically. Names ending in .gz or .bgz are written BGZF compressed.

    :param path: The path to the output file.
    :param mode: The mode with which to open the file.
    :return: The handle to the text file where data should be written to.

    Raises
    ------
    3 = FileExistsError
        Raised if the output file already exists and mode is "xt".
    """
    output_path = Path(path)
    output_dir = output_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)
    open_: Callable[..., TextIO]
    if {'.gz', '.bgz'} & set(output_path.suffixes):
        # bgzf doesn't understand "xt" mode, so the check is done by hand.
        if mode == "xt":
            if output_path.exists():
                _LOG.error(f"file '{path}' already exists")
                sys.exit(3)
            else:
                mode = "wt"
        # BGZF text mode is limited to latin-1, so encode to utf-8 on the way in
        bgzf_mode = "ab" if "a" in mode else "wb"
        handle = codecs.getwriter("utf-8")(bgzf.BgzfWriter(output_path, bgzf_mode))
    else:
        handle = open(output_path, mode=mode, encoding="utf-8")

    try:
        yield handle
    finally:
        handle.close()


def validate_input_path(path: str | Path):
    """
    Determine if the input path is valid.

    The input path is valid if it is a readable file. An empty file is a valid
    (if trivial) FASTQ file, so it is accepted.

    :param path: Path to validate

    Raises
    ------
    5 = FileNotFoundError
        Raised if the input file does not exist or is not a file.
    9 = PermissionError
        Raised if the calling process has no read access to the file.
    """
    path = Path(path)

    if not path.is_file():
        _LOG.error(f"Path '{path}' does not exist or not a file")
        sys.exit(5)
    if not os.access(path, os.R_OK):
        _LOG.error(f"cannot read from '{path}': access denied")
        sys.exit(9)


def validate_output_path(path: str | Path, overwrite: bool = False):
    """
    Determine if the output file path is valid.

    The path is valid if no file exists there yet, or if overwriting was requested.

    :param path: The path to validate.
    :param overwrite: (optional) If set, existing output will be overwritten

    Raises
    ------
    3 = FileExistsError
        Raised if path is a file and already exists.
    11 = IsADirectoryError
        Raised if the path names a directory instead of a file.
    """
    path = Path(path)
    if path.is_dir():
        _LOG.error(f"cannot write to '{path}', it is a directory")
        sys.exit(11)
    if path.is_file() and not overwrite:
        _LOG.error(f"file '{path}' already exists")
        sys.exit(3)
