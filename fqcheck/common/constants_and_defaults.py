"""
Constants describing the FASTQ record layout and the diagnostic output
"""

__all__ = [
    "LINES_PER_RECORD",
    "HEADER_PREFIX",
    "SEPARATOR_PREFIX",
    "DIAGNOSTIC_LABEL",
    "DIAGNOSTIC_END",
]

# header, sequence, separator, quality
LINES_PER_RECORD = 4

HEADER_PREFIX = "@"
SEPARATOR_PREFIX = "+"

# Each failing record in the error output is introduced by the label and closed by the end marker
DIAGNOSTIC_LABEL = "错误"
DIAGNOSTIC_END = "---"
