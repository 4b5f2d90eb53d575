import logging

import mock
import pytest

from uaesm.config import UAConfig


@pytest.fixture(scope="session", autouse=True)
def _subp():
    """
    A fixture that mocks system._subp for all tests.
    If a test needs the actual _subp, this fixture yields it,
    so just add an argument to the test named "_subp".
    """
    from uaesm.system import _subp

    original = _subp
    with mock.patch(
        "uaesm.system._subp", return_value=("mockstdout", "mockstderr")
    ):
        yield original


@pytest.fixture(scope="session", autouse=True)
def util_we_are_currently_root():
    """
    A fixture that mocks util.we_are_currently_root for all tests.
    Default to true as most tests need it to be true.
    """
    from uaesm.util import we_are_currently_root

    original = we_are_currently_root
    with mock.patch("uaesm.util.we_are_currently_root", return_value=True):
        yield original


@pytest.fixture
def logging_sandbox():
    # Monkeypatch a replacement root logger, so that our changes to logging
    # configuration don't persist outside of the test
    root_logger = logging.RootLogger(logging.WARNING)

    with mock.patch.object(logging, "root", root_logger):
        with mock.patch.object(logging.Logger, "root", root_logger):
            with mock.patch.object(
                logging.Logger, "manager", logging.Manager(root_logger)
            ):
                yield


@pytest.fixture
def FakeConfig(tmpdir):
    """A UAConfig whose paths all live under tmpdir.

    Any key can be overridden through cfg_overrides.
    """

    class _FakeConfig(UAConfig):
        def __init__(self, cfg_overrides=None, series="precise") -> None:
            cfg = {
                "log_file": tmpdir.join("ubuntu-advantage.log").strpath,
                "esm_repo_list": tmpdir.join(
                    "ubuntu-esm-{series}.list"
                ).strpath,
                "keyrings_dir": tmpdir.join("keyrings").strpath,
                "apt_keys_dir": tmpdir.join("trusted.gpg.d").strpath,
                "apt_auth_file": tmpdir.join("auth.conf").strpath,
                "apt_helper": tmpdir.join("apt-helper").strpath,
                "apt_method_https": tmpdir.join("https").strpath,
                "ca_certificates": tmpdir.join("ca-certificates.crt").strpath,
            }
            cfg.update(cfg_overrides or {})
            super().__init__(cfg, series=series)

    return _FakeConfig
