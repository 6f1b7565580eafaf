"""
Command line interface for checking FASTQ files
"""

import argparse

from ...fastq_checker import check_fastq_runner
from .base import BaseCommand
from .options import config_option, input_option, output_group


class Command(BaseCommand):
    """
    Check that a FASTQ file is made of well-formed four-line records. Headers must start with '@',
        separators with '+', and each quality line must be as long as its sequence.

    Invalid records are counted and, if an output file is given, written there together with the reason
        they failed. A file that ends in the middle of a record stops the check with an error.
    """

    name = "check"
    description = "Check the structure of a FASTQ file."
    options = [input_option, config_option]

    def add_arguments(self, parser: argparse.ArgumentParser):
        """
        Add the command's arguments to its parser

        :param parser: The parser to add arguments to.
        """
        output_group.add_to_parser(parser)

    def execute(self, arguments: argparse.Namespace):
        """
        Execute the command.

        :param arguments: The namespace with arguments and their values.
        """
        check_fastq_runner(arguments.input_file, arguments.output, arguments.config, arguments.overwrite)
