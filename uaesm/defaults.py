"""
Project-wide default settings

These are in their own file so they can be imported by setup.py before we have
any of our dependencies installed.
"""

import os

# Base directories
UAC_ETC_PATH = "/etc/ubuntu-advantage"
DEFAULT_LOG_DIR = "/var/log"
APT_SOURCES_LIST_DIR = "/etc/apt/sources.list.d"

# Relative paths
CONFIG_FILE = "uaclient.conf"
DEFAULT_LOG_FILE_BASE_NAME = "ubuntu-advantage"
USER_CACHE_SUBDIR = "ubuntu-advantage"

DEFAULT_CONFIG_FILE = os.path.join(UAC_ETC_PATH, CONFIG_FILE)
DEFAULT_LOG_PREFIX = os.path.join(DEFAULT_LOG_DIR, DEFAULT_LOG_FILE_BASE_NAME)

# ESM
ESM_REPO_URL = "https://esm.ubuntu.com/ubuntu"
ESM_SUPPORTED_SERIES = ("precise",)
ESM_KEYRING_FILE = "ubuntu-esm-keyring.gpg"
ESM_REPO_LIST_TMPL = os.path.join(
    APT_SOURCES_LIST_DIR, "ubuntu-esm-{series}.list"
)

# APT
KEYRINGS_DIR = "/usr/share/keyrings"
APT_KEYS_DIR = "/etc/apt/trusted.gpg.d"
APT_AUTH_FILE = "/etc/apt/auth.conf"
APT_HELPER = "/usr/lib/apt/apt-helper"
APT_METHOD_HTTPS_FILE = "/usr/lib/apt/methods/https"
CA_CERTIFICATES_FILE = "/usr/sbin/update-ca-certificates"

DEFAULT_LOG_FORMAT = (
    "%(asctime)s - %(filename)s:(%(lineno)d) [%(levelname)s]: %(message)s"
)

CONFIG_DEFAULTS = {
    "log_level": "debug",
    "log_file": "{}.log".format(DEFAULT_LOG_PREFIX),
    "esm_repo_list": ESM_REPO_LIST_TMPL,
    "keyrings_dir": KEYRINGS_DIR,
    "apt_keys_dir": APT_KEYS_DIR,
    "apt_auth_file": APT_AUTH_FILE,
    "apt_helper": APT_HELPER,
    "apt_method_https": APT_METHOD_HTTPS_FILE,
    "ca_certificates": CA_CERTIFICATES_FILE,
}

CONFIG_FIELD_ENVVAR_ALLOWLIST = [
    "ua_log_file",
    "ua_log_level",
    "ua_series",
    "ua_esm_repo_list",
    "ua_keyrings_dir",
    "ua_apt_keys_dir",
    "ua_apt_auth_file",
    "ua_apt_helper",
    "ua_apt_method_https",
    "ua_ca_certificates",
]

ROOT_READABLE_MODE = 0o600
WORLD_READABLE_MODE = 0o644
