"""Client to toggle the Ubuntu ESM repository on a machine."""

import argparse
import logging
import sys

from uaesm import exceptions, log, messages, util, version
from uaesm.cli.disable_esm import disable_esm_command
from uaesm.cli.enable_esm import enable_esm_command
from uaesm.cli.is_esm_enabled import is_esm_enabled_command
from uaesm.config import UAConfig
from uaesm.defaults import CONFIG_DEFAULTS
from uaesm.log import get_user_or_root_log_file_path

LOG = logging.getLogger(util.replace_top_level_logger_name(__name__))

NAME = "ubuntu-advantage"

COMMANDS = [
    enable_esm_command,
    disable_esm_command,
    is_esm_enabled_command,
]


def get_parser():
    parser = argparse.ArgumentParser(
        prog=NAME, description=messages.CLI_DESCRIPTION
    )
    parser.add_argument(
        "--debug", action="store_true", help=messages.CLI_ROOT_DEBUG
    )
    parser.add_argument(
        "--version",
        action="version",
        version=version.get_version(),
        help=messages.CLI_ROOT_VERSION.format(name=NAME),
    )

    subparsers = parser.add_subparsers(
        title=messages.CLI_AVAILABLE_COMMANDS,
        dest="command",
        metavar="<command>",
    )
    subparsers.required = True

    for command in COMMANDS:
        command.register(subparsers)

    return parser


def main_error_handler(func):
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            LOG.error("KeyboardInterrupt")
            print(messages.CLI_INTERRUPT_RECEIVED, file=sys.stderr)
            sys.exit(1)
        except exceptions.UbuntuAdvantageError as exc:
            LOG.error(exc.msg)
            print(exc.msg, file=sys.stderr)
            sys.exit(exc.exit_code)
        except Exception as e:
            LOG.exception("Unhandled exception, please file a bug")
            print(
                messages.UNEXPECTED_ERROR.format(
                    error_msg=str(e),
                    log_path=get_user_or_root_log_file_path(
                        CONFIG_DEFAULTS["log_file"]
                    ),
                ).msg,
                file=sys.stderr,
            )
            sys.exit(1)

    return wrapper


@main_error_handler
def main(sys_argv=None):
    if not sys_argv:
        sys_argv = sys.argv

    cfg = UAConfig()
    log.setup_cli_logging(cfg.log_level, cfg.log_file)

    parser = get_parser()
    cli_arguments = sys_argv[1:]
    if not cli_arguments:
        parser.print_usage(file=sys.stderr)
        sys.exit(1)

    args = parser.parse_args(args=cli_arguments)
    if args.debug:
        log.setup_debug_console_logging(sys.stderr)

    LOG.debug("Executed with sys.argv: %r" % sys_argv)
    cfg.warn_about_invalid_keys()

    return args.action(args, cfg=cfg)


if __name__ == "__main__":
    sys.exit(main())
