import logging

from uaesm import entitlements, messages, util
from uaesm.cli import cli_util
from uaesm.cli.commands import ProCommand
from uaesm.config import UAConfig

LOG = logging.getLogger(util.replace_top_level_logger_name(__name__))


@cli_util.assert_root
def action_disable_esm(args, *, cfg: UAConfig, **kwargs) -> int:
    esm = entitlements.entitlement_factory("esm", cfg=cfg)
    esm.disable()
    LOG.info("Disabled %s", esm.name)
    return 0


disable_esm_command = ProCommand(
    "disable-esm",
    help=messages.CLI_DISABLE_ESM,
    description=messages.CLI_DISABLE_ESM_DESC,
    action=action_disable_esm,
    preserve_description=True,
)
