# Test helpers.

import io
import os
from collections import namedtuple
from pathlib import Path

import mock
from fixtures import TempDir, TestWithFixtures

from uaesm.cli import main
from uaesm.system import _subp

ProcessResult = namedtuple('ProcessResult', ['returncode', 'stdout', 'stderr'])

ESM_REPO_LIST_CONTENT = (
    'deb https://esm.ubuntu.com/ubuntu {series} main\n'
    '# deb-src https://esm.ubuntu.com/ubuntu {series} main\n')


class UbuntuAdvantageTest(TestWithFixtures):

    SERIES = None

    def setUp(self):
        super(UbuntuAdvantageTest, self).setUp()
        self.tempdir = self.useFixture(TempDir())
        self.is_root = True
        self.bin_dir = Path(self.tempdir.join('bin'))
        self.keyrings_dir = Path(self.tempdir.join('keyrings'))
        self.trusted_gpg_dir = Path(self.tempdir.join('trusted.gpg.d'))
        self.apt_auth_file = Path(self.tempdir.join('auth.conf'))
        self.esm_repo_list = Path(self.tempdir.join('ubuntu-esm.list'))
        self.log_file = Path(self.tempdir.join('ubuntu-advantage.log'))
        self.apt_helper = self.bin_dir / 'apt-helper'
        self.apt_method_https = self.bin_dir / 'apt-method-https'
        self.ca_certificates = self.bin_dir / 'update-ca-certificates'
        # setup directories and files
        self.bin_dir.mkdir()
        self.keyrings_dir.mkdir()
        self.trusted_gpg_dir.mkdir()
        (self.keyrings_dir / 'ubuntu-esm-keyring.gpg').write_text('GPG key')
        self.make_fake_binary('apt-get')
        self.make_fake_binary('apt-helper')
        self.make_fake_binary('apt-method-https')
        self.make_fake_binary('update-ca-certificates')

    def make_fake_binary(self, binary, command='true'):
        """Create a script to fake a binary in path."""
        path = self.bin_dir / binary
        path.write_text('#!/bin/sh\n{}\n'.format(command))
        path.chmod(0o755)

    def read_file(self, path):
        """Return the content of a file with path relative to the test dir."""
        with open(self.tempdir.join(path)) as fh:
            return fh.read()

    def setup_esm(self, enabled=False):
        """Setup the ESM repository list file."""
        if enabled:
            self.esm_repo_list.write_text(
                ESM_REPO_LIST_CONTENT.format(series=self.SERIES))
        elif self.esm_repo_list.exists():
            self.esm_repo_list.unlink()

    def script(self, *args):
        """Run the ubuntu-advantage command line in process.

        Every path the tool touches points inside the test directory and
        subprocesses find the fake binaries first in PATH.
        """
        path = os.pathsep.join([str(self.bin_dir), os.environ['PATH']])
        env = {
            'PATH': path,
            'XDG_CACHE_HOME': self.tempdir.join('cache'),
            'UA_CONFIG_FILE': self.tempdir.join('uaclient.conf'),
            'UA_LOG_FILE': str(self.log_file),
            'UA_ESM_REPO_LIST': str(self.esm_repo_list),
            'UA_KEYRINGS_DIR': str(self.keyrings_dir),
            'UA_APT_KEYS_DIR': str(self.trusted_gpg_dir),
            'UA_APT_AUTH_FILE': str(self.apt_auth_file),
            'UA_APT_HELPER': str(self.apt_helper),
            'UA_APT_METHOD_HTTPS': str(self.apt_method_https),
            'UA_CA_CERTIFICATES': str(self.ca_certificates)}
        if self.SERIES:
            env['UA_SERIES'] = self.SERIES
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch.dict(os.environ, env), \
                mock.patch('uaesm.system._subp', _subp), \
                mock.patch(
                    'uaesm.util.we_are_currently_root',
                    return_value=self.is_root), \
                mock.patch('sys.stdout', stdout), \
                mock.patch('sys.stderr', stderr):
            try:
                returncode = main(['ubuntu-advantage'] + list(args))
            except SystemExit as e:
                returncode = 0 if e.code is None else e.code
        return ProcessResult(returncode, stdout.getvalue(), stderr.getvalue())
