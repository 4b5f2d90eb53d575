import logging

from uaesm import entitlements, messages, util
from uaesm.cli import cli_util
from uaesm.cli.commands import ProArgument, ProCommand
from uaesm.config import UAConfig

LOG = logging.getLogger(util.replace_top_level_logger_name(__name__))


@cli_util.assert_root
def action_enable_esm(args, *, cfg: UAConfig, **kwargs) -> int:
    """Enable the ESM repository with the token given on the command line.

    The token is validated by the entitlement, so a missing token is
    reported with the same error as a malformed one.
    """
    esm = entitlements.entitlement_factory("esm", cfg=cfg)
    esm.enable(args.token)
    LOG.info("Enabled %s", esm.name)
    return 0


enable_esm_command = ProCommand(
    "enable-esm",
    help=messages.CLI_ENABLE_ESM,
    description=messages.CLI_ENABLE_ESM_DESC,
    action=action_enable_esm,
    preserve_description=True,
    arguments=[
        ProArgument(
            "token",
            help=messages.CLI_ENABLE_ESM_TOKEN,
            action="store",
            nargs="?",
            default=None,
        ),
    ],
)
