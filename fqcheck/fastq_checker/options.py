"""
The options class for a check run. Values come from the command line and, optionally, a yaml
config file read with pyyaml. Command line values take precedence over the config file.

The config file may contain any of these keys:

    input_file: path/to/reads.fastq
    error_output: path/to/bad_records.txt
    overwrite_output: false

Problems found here are user errors, so they are logged and the process exits, the same way
the path checks in fqcheck.common.io behave.
"""

__all__ = ["CheckOptions"]

import logging
import sys

import yaml

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from pathlib import Path
from types import SimpleNamespace
from typing import Any

from ..common import validate_input_path, validate_output_path

_LOG = logging.getLogger(__name__)

# Keys accepted in the config file and the type each value must have
OPTION_DEFS: dict[str, type] = {
    'input_file': Path,
    'error_output': Path,
    'overwrite_output': bool,
}


class CheckOptions(SimpleNamespace):
    """
    class representing the options of a check run

    :param input_file: Path to the FASTQ file to check
    :param error_output: Path to write the invalid records to. None to only count them.
    :param overwrite_output: If true, an existing error output file will be replaced
    """

    def __init__(self,
                 input_file: Path | None = None,
                 error_output: Path | None = None,
                 overwrite_output: bool = False,
                 **kwargs: Any):
        super().__init__(**kwargs)
        self.input_file: Path | None = input_file
        self.error_output: Path | None = error_output
        self.overwrite_output: bool = overwrite_output

    @staticmethod
    def from_cli(input_file: str | Path | None,
                 error_output: str | Path | None = None,
                 config_file: str | Path | None = None,
                 overwrite: bool = False):
        """
        Build the options for a run, merging the command line over the config file.

        :param input_file: Input FASTQ given on the command line, if any
        :param error_output: Error output given on the command line, if any
        :param config_file: Optional yaml config file
        :param overwrite: True if --overwrite was given
        :return: The checked CheckOptions object
        """
        base_options = CheckOptions()

        if config_file:
            validate_input_path(config_file)
            base_options.__dict__.update(base_options.read_yaml(Path(config_file)))

        if input_file is not None:
            base_options.input_file = Path(input_file)
        if error_output is not None:
            base_options.error_output = Path(error_output)
        if overwrite:
            base_options.overwrite_output = True

        base_options.check_options()
        base_options.log_configuration()
        return base_options

    @staticmethod
    def read_yaml(config_yaml: Path) -> dict[str, Any]:
        """
        Read the config file and type check each entry against OPTION_DEFS.

        :param config_yaml: Path to the yaml file
        :return: Dictionary of the values that were set in the file
        """
        with open(config_yaml, 'r', encoding='utf-8') as config_handle:
            config = yaml.load(config_handle, Loader=Loader)

        # An empty file loads as None
        if config is None:
            return {}
        if not isinstance(config, dict):
            _LOG.error(f"Config file {config_yaml} must contain key: value pairs")
            sys.exit(1)

        values = {}
        for key, value in config.items():
            if key not in OPTION_DEFS:
                _LOG.warning(f"Unknown config key `{key}`, ignoring.")
                continue
            type_of_var = OPTION_DEFS[key]
            if value is None or value == ".":
                _LOG.debug(f"No value entered for `{key}`, skipping.")
                continue

            if type_of_var == Path:
                if not isinstance(value, str):
                    _LOG.error(f"Incorrect type for value entered for {key}: {type_of_var} (found: {value})")
                    sys.exit(1)
                value = Path(value)
            elif not isinstance(value, type_of_var):
                _LOG.error(f"Incorrect type for value entered for {key}: {type_of_var} (found: {value})")
                sys.exit(1)

            values[key] = value
        return values

    def check_options(self):
        """
        Sanity checks on the merged options.
        """
        if self.input_file is None:
            _LOG.error("No input file given, use -i or set `input_file` in the config")
            sys.exit(1)
        validate_input_path(self.input_file)

        if self.error_output is not None:
            if self.error_output.resolve() == self.input_file.resolve():
                _LOG.error("The error output cannot be the input file")
                sys.exit(1)
            validate_output_path(self.error_output, self.overwrite_output)

    def log_configuration(self):
        """
        Log the configuration of the run.
        """
        _LOG.info('Run Configuration...')
        _LOG.info(f'Input FASTQ: {self.input_file}')
        if self.error_output is not None:
            _LOG.info(f'Writing invalid records to {self.error_output}')
        else:
            _LOG.debug('No error output requested, invalid records will only be counted')
