import argparse
from typing import Callable, Iterable


class ProArgument:
    def __init__(self, name: str, help: str, **kwargs):
        self.name = name
        self.help = help
        self.additional_args = kwargs

    def register(self, parser: argparse.ArgumentParser):
        parser.add_argument(self.name, help=self.help, **self.additional_args)


class ProCommand:
    """A subcommand of the ubuntu-advantage CLI.

    action is called as action(args, cfg=cfg) and its return value is used
    as the exit code.
    """

    def __init__(
        self,
        name: str,
        help: str,
        description: str,
        action: Callable = lambda *args, **kwargs: None,
        preserve_description: bool = False,
        arguments: Iterable[ProArgument] = (),
    ):
        self.name = name
        self.help = help
        self.description = description
        self.action = action
        self.preserve_description = preserve_description
        self.arguments = arguments

    def register(self, subparsers: argparse._SubParsersAction):
        self.parser = subparsers.add_parser(
            self.name,
            help=self.help,
            description=self.description,
        )
        if self.preserve_description:
            self.parser.formatter_class = argparse.RawDescriptionHelpFormatter

        for argument in self.arguments:
            argument.register(self.parser)

        self.parser.set_defaults(action=self.action)
