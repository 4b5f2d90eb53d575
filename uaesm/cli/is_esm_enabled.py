from uaesm import entitlements, messages
from uaesm.cli.commands import ProCommand
from uaesm.config import UAConfig


def action_is_esm_enabled(args, *, cfg: UAConfig, **kwargs) -> int:
    # Silent on purpose: the answer is the exit code
    esm = entitlements.entitlement_factory("esm", cfg=cfg)
    return 0 if esm.is_enabled() else 1


is_esm_enabled_command = ProCommand(
    "is-esm-enabled",
    help=messages.CLI_IS_ESM_ENABLED,
    description=messages.CLI_IS_ESM_ENABLED_DESC,
    action=action_is_esm_enabled,
    preserve_description=True,
)
