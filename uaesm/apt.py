import logging
import os
import re
import subprocess
import tempfile
from typing import List, Optional, Sequence, Tuple

from uaesm import defaults, exceptions, messages, system, util

LOG = logging.getLogger(util.replace_top_level_logger_name(__name__))

APT_HELPER_TIMEOUT = 60.0  # 60 second timeout used for apt-helper call
APT_GET_OPTIONS = ["-y", "-o", "Dpkg::Options::=--force-confold"]
APT_GET_ENV = {"DEBIAN_FRONTEND": "noninteractive"}

# Each dependency is a package name and a file the package ships; the
# package is considered installed when the file exists.
Dependency = Tuple[str, str]

RE_UNAUTHORIZED = r"401\s+unauthorized|httperror401"
RE_FAILED_FETCH = r"Failed to fetch\s+\S+\s+(?P<error>.+)"


def run_apt_get(args: List[str]) -> str:
    """Run apt-get non-interactively, keeping existing conffiles.

    :param args: the apt-get subcommand and its arguments.

    :return: stdout of the apt-get call.
    :raise DependencyInstallError: relaying the apt-get stderr on failure.
    """
    try:
        out, _err = system.subp(
            ["apt-get"] + APT_GET_OPTIONS + args,
            capture=True,
            override_env_vars=APT_GET_ENV,
        )
    except exceptions.ProcessExecutionError as e:
        raise exceptions.DependencyInstallError(
            stderr=(e.stderr or str(e)).strip()
        )
    return out


def install_missing_dependencies(dependencies: Sequence[Dependency]) -> bool:
    """Install any dependency whose marker file is missing.

    When anything is installed, the package lists are refreshed afterwards.

    :return: True if any package was installed.
    """
    installed = False
    for package, marker_file in dependencies:
        if os.path.exists(marker_file):
            LOG.debug("Dependency %s is already installed", package)
            continue
        print(
            messages.INSTALLING_MISSING_DEPENDENCY.format(package=package),
            end="",
            flush=True,
        )
        _run_step(["install", package])
        installed = True
    if installed:
        print(messages.UPDATING_PACKAGE_LISTS, end="", flush=True)
        _run_step(["update"])
    return installed


def _run_step(args: List[str]) -> None:
    try:
        run_apt_get(args)
    except exceptions.DependencyInstallError:
        print(messages.STEP_ERROR)
        raise
    print(messages.STEP_OK)


def _credentials_url(repo_url: str, username: str, password: str) -> str:
    protocol, repo_path = repo_url.split("://")
    return "{}://{}:{}@{}/".format(
        protocol, username, password, repo_path.rstrip("/")
    )


def _parse_token_check_error(output: str) -> Optional[str]:
    """Return the reason of a failed fetch reported by apt-helper."""
    for line in output.splitlines():
        match = re.search(RE_FAILED_FETCH, line)
        if match:
            return match.group("error").strip()
    return None


def check_token(
    apt_helper: str, repo_url: str, username: str, password: str
) -> None:
    """Validate the credentials against repo_url using apt-helper.

    The check is skipped when apt-helper is not available.

    @raises: InvalidToken when the repository rejects the credentials,
        TokenCheckFailed on any other error.
    """
    print(messages.CHECKING_TOKEN, end="", flush=True)
    if not system.is_exe(apt_helper):
        LOG.debug("%s not found, skipping token check", apt_helper)
        print(messages.STEP_SKIPPED)
        return
    try:
        with tempfile.TemporaryDirectory() as tmpd:
            system.subp(
                [
                    apt_helper,
                    "download-file",
                    _credentials_url(repo_url, username, password),
                    os.path.join(tmpd, "index"),
                ],
                capture=True,
                timeout=APT_HELPER_TIMEOUT,
            )
    except exceptions.ProcessExecutionError as e:
        print(messages.STEP_ERROR)
        output = "\n".join(part for part in (e.stdout, e.stderr) if part)
        if re.search(RE_UNAUTHORIZED, output, re.IGNORECASE):
            raise exceptions.InvalidToken()
        error = _parse_token_check_error(output) or output.strip() or str(e)
        raise exceptions.TokenCheckFailed(error=error)
    except subprocess.TimeoutExpired:
        print(messages.STEP_ERROR)
        raise exceptions.TokenCheckFailed(
            error=messages.E_TOKEN_CHECK_TIMEOUT.format(
                timeout=APT_HELPER_TIMEOUT, url=repo_url
            )
        )
    print(messages.STEP_OK)


def _auth_machine(repo_url: str) -> str:
    _protocol, repo_path = repo_url.split("://")
    if not repo_path.endswith("/"):  # ensure trailing slash
        repo_path += "/"
    return repo_path


def add_apt_auth_conf_entry(
    apt_auth_file: str, repo_url: str, login: str, password: str
) -> None:
    """Add or replace an apt auth line in apt's auth.conf file."""
    repo_path = _auth_machine(repo_url)
    if os.path.exists(apt_auth_file):
        orig_content = system.load_file(apt_auth_file)
    else:
        orig_content = ""
    repo_auth_line = (
        "machine {repo_path} login {login} password {password}".format(
            repo_path=repo_path, login=login, password=password
        )
    )
    added_new_auth = False
    new_lines = []
    for line in orig_content.splitlines():
        if not added_new_auth:
            split_line = line.split()
            if len(split_line) >= 2 and split_line[0] == "machine":
                curr_line_repo = split_line[1]
                if curr_line_repo == repo_path:
                    # Replace old auth with new auth at same line
                    new_lines.append(repo_auth_line)
                    added_new_auth = True
                    continue
                if repo_path.startswith(curr_line_repo):
                    # Insert our repo before.
                    # We are a more specific apt repo match
                    new_lines.append(repo_auth_line)
                    added_new_auth = True
        new_lines.append(line)
    if not added_new_auth:
        new_lines.append(repo_auth_line)
    new_lines.append("")
    system.write_file(
        apt_auth_file, "\n".join(new_lines), mode=defaults.ROOT_READABLE_MODE
    )


def remove_repo_from_apt_auth_file(apt_auth_file: str, repo_url: str) -> None:
    """Remove a repo from the shared apt auth file"""
    if not os.path.exists(apt_auth_file):
        return
    repo_path = _auth_machine(repo_url)
    apt_auth = system.load_file(apt_auth_file)
    lines = [
        line
        for line in apt_auth.splitlines(keepends=True)
        if line.split()[:2] != ["machine", repo_path]
    ]
    if not any(line.strip() for line in lines):
        system.ensure_file_absent(apt_auth_file)
    else:
        system.write_file(
            apt_auth_file, "".join(lines), mode=defaults.ROOT_READABLE_MODE
        )
