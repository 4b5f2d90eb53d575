from typing import List, Optional, Type  # noqa: F401

from uaesm.config import UAConfig
from uaesm.entitlements.esm import ESMEntitlement
from uaesm.entitlements.repo import RepoEntitlement

ENTITLEMENT_CLASSES = [
    ESMEntitlement,
]  # type: List[Type[RepoEntitlement]]


def entitlement_factory(
    name: str, cfg: Optional[UAConfig] = None
) -> RepoEntitlement:
    """Returns a RepoEntitlement instance for the given name.

    :param name: The name of the entitlement
    :param cfg: UAConfig instance

    :return: An instance of the entitlement class
    :raise KeyError: When the name doesn't match any known entitlement
    """
    for entitlement_cls in ENTITLEMENT_CLASSES:
        if name == entitlement_cls.name:
            return entitlement_cls(cfg)
    raise KeyError(name)
