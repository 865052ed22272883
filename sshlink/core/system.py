"""
Local executable discovery
"""
import os
import sys
import ntpath
import shutil
import platform
from functools import lru_cache
from typing import Mapping, Optional

from .constants import MOSH_EXE, MOSH_EXE_POSIX, SSH_EXE_POSIX, OPENSSH_RELATIVE_PATH


def is_windows() -> bool:
    return platform.system().lower() == "windows"


def windows_ssh_path(system_root: str, is_64bit_os: bool, is_64bit_process: bool) -> str:
    """
    Compose the path of the OpenSSH client bundled with Windows.

    A 32-bit process on a 64-bit OS is redirected away from System32,
    so it has to go through the Sysnative alias instead.
    """
    if is_64bit_os and not is_64bit_process:
        folder = ntpath.join(system_root, "Sysnative")
    else:
        folder = ntpath.join(system_root, "System32")

    return ntpath.join(folder, OPENSSH_RELATIVE_PATH)


def _is_64bit_os(environ: Mapping[str, str]) -> bool:
    # Set only for a 32-bit process running under WOW64
    if environ.get("PROCESSOR_ARCHITEW6432"):
        return True
    return platform.machine().endswith("64")


@lru_cache(maxsize=None)
def locate_ssh_executable() -> str:
    """
    Locate the local SSH client.

    Computed once per process; the result only depends on the OS and
    the interpreter architecture.
    """
    if is_windows():
        return windows_ssh_path(
            os.environ.get("SystemRoot", "C:\\Windows"),
            is_64bit_os=_is_64bit_os(os.environ),
            is_64bit_process=sys.maxsize > 2 ** 32,
        )

    return shutil.which(SSH_EXE_POSIX) or SSH_EXE_POSIX


def mosh_executable_name(windows: Optional[bool] = None) -> str:
    """Mosh client name, resolved through PATH by the launcher"""
    if windows is None:
        windows = is_windows()
    return MOSH_EXE if windows else MOSH_EXE_POSIX
