"""Building blocks for fqcheck subcommands."""

__all__ = ["BaseCommand", "Group", "Option"]

import abc
import argparse
from typing import Any


class Option:
    """
    An argument definition that can be shared between subcommands

    :param args: Either a name or a list of options strings, e.g., 'foo' or '-f', '--foo'
    :param kwargs: Any named argument accepted by argparse.add_argument()
    """

    def __init__(self, *args: str, **kwargs: Any):
        self.args: tuple[str, ...] = args
        self.kwargs: dict[str, Any] = kwargs

    def add_to_parser(self, parser: argparse.ArgumentParser | argparse._ArgumentGroup):
        """
        Add the option to a parser or to an argument group

        :param parser: The parser or group to add the argument to
        """
        parser.add_argument(*self.args, **self.kwargs)


class Group:
    """
    A reusable argument group.

    :param name: Name of the group, shown as a heading in the help text.
    :param description: Description of the group.
    """
    def __init__(self, name: str | None = None, description: str | None = None):
        self.name = name
        self.description = description
        self.options: list[Option] = []

    def add_argument(self, *args: Any, **kwargs: Any):
        """
        Add an argument to the group

        :param args: Either an Option, or a name or list of option strings
        :param kwargs: Any named argument accepted by argparse.add_argument()
        """
        if args and isinstance(args[0], Option):
            self.options.append(args[0])
        else:
            self.options.append(Option(*args, **kwargs))

    def add_to_parser(self, parser: argparse.ArgumentParser):
        """
        Add the group to an argument parser.

        :param parser: Argument parser to add the group to.
        """
        group = parser.add_argument_group(title=self.name, description=self.description)
        for option in self.options:
            option.add_to_parser(group)


class BaseCommand(abc.ABC):
    """
    A CLI subcommand

    All subcommands should inherit from this base class

    :param parser: The subcommand's own argument parser.
    """
    name: str | None = None
    """
    Name of the subcommand.
    """

    description: str | None = None
    """
    The subcommand's help string. If not given, __doc__ will be used.
    """

    options: list[Option] | None = None
    """
    Shared options added before the command's own arguments.
    """
    def __init__(self, parser: argparse.ArgumentParser):
        for opt in self.options or []:
            opt.add_to_parser(parser)
        self.add_arguments(parser)

    @abc.abstractmethod
    def add_arguments(self, parser: argparse.ArgumentParser):
        """
        Add arguments to the subcommand's argument parser.

        :param parser: The parser to add arguments to
        """

    @abc.abstractmethod
    def execute(self, arguments: argparse.Namespace):
        """
        Execute the command.

        :param arguments: The namespace with arguments and their values.
        """

    @classmethod
    def register_to(cls, subparsers: argparse._SubParsersAction, name: str | None = None):
        """
        Create the subcommand's parser and hook the command up to it.

        The parser's defaults carry the handler and the command name, which is how the
        main entry point finds the command to run.

        :param subparsers: argparse object representing subparsers.
        :param name: Name of the subcommand. Defaults to the class attribute 'name'.
        """
        cmd_name = name or cls.name
        help_text = cls.description or cls.__doc__
        parser = subparsers.add_parser(cmd_name, description=help_text, help=help_text)
        command = cls(parser)
        parser.set_defaults(cmd_handler=command.execute, cmd_name=cmd_name)
