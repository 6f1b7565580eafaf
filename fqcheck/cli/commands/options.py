"""
Definitions of shared subcommand options.
"""

__all__ = ["config_option", "input_option", "output_group"]

from .base import Group, Option

input_option = Option(
    "-i",
    "--input",
    dest="input_file",
    type=str,
    default=None,
    help="Path to the FASTQ file to check (plain or gzipped)."
)

config_option = Option(
    "-c",
    "--config",
    dest="config",
    type=str,
    default=None,
    help="Optional yaml config file. Values given on the command line take precedence."
)

output_group = Group("output", description="Where to write the invalid records")
output_group.add_argument(
    "-o",
    "--output",
    dest="output",
    type=str,
    default=None,
    help="Path to the error output file. Will create directories if not present. "
         "Names ending in .gz or .bgz are written compressed."
)
output_group.add_argument(
    "--overwrite",
    dest="overwrite",
    action="store_true",
    default=False,
    help="Set this flag to overwrite an existing error output file."
)
