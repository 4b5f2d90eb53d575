from typing import Tuple

from uaesm import apt, defaults
from uaesm.entitlements import repo


class ESMEntitlement(repo.RepoEntitlement):

    name = "esm"
    title = "Extended Security Maintenance"
    label = "ESM"
    repo_url = defaults.ESM_REPO_URL
    repo_key_file = defaults.ESM_KEYRING_FILE
    supported_series = defaults.ESM_SUPPORTED_SERIES

    @property
    def repo_list_file(self) -> str:
        return self.cfg.esm_repo_list

    @property
    def dependencies(self) -> Tuple[apt.Dependency, ...]:
        return (
            ("apt-transport-https", self.cfg.apt_method_https),
            ("ca-certificates", self.cfg.ca_certificates),
        )
