"""
Client version related functions
"""
import os.path

from uaesm.exceptions import ProcessExecutionError
from uaesm.system import subp

__VERSION__ = "10"
PACKAGED_VERSION = "@@PACKAGED_VERSION@@"


def get_version() -> str:
    """Return the packaged version as a string

    PACKAGED_VERSION is set at package build time. In a git checkout
    `git describe` gives the version with the commit offset from the last
    tag; otherwise __VERSION__ is used.
    """
    if not PACKAGED_VERSION.startswith("@@PACKAGED_VERSION"):
        return PACKAGED_VERSION
    topdir = os.path.dirname(os.path.dirname(__file__))
    if os.path.exists(os.path.join(topdir, ".git")):
        cmd = ["git", "describe", "--abbrev=8", "--match=[0-9]*", "--long"]
        try:
            out, _ = subp(cmd)
            return out.strip()
        except ProcessExecutionError:
            pass
    return __VERSION__
