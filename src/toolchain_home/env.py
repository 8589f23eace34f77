"""
Environment context threaded through every resolution.

The resolvers never touch ``os.environ`` directly. They receive an ``Env``,
which answers four questions: which platform rules apply, what a variable
holds, where the process runs, and what home the OS account record names.

- ``OsEnv`` reads the live process. ``OS_ENV`` is the shared instance.
- ``StaticEnv`` holds an injected snapshot so callers (and tests) can resolve
  paths without mutating real process state.

Reads of the live environment are not snapshotted or locked; a concurrent
external mutation of the process environment during a call is an OS-level race.
"""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath
from typing import Mapping, Optional, Union

logger = logging.getLogger(__name__)

WINDOWS = "nt"
POSIX = "posix"


class Env(ABC):
    """Source of environment facts used by the resolvers."""

    platform: str = os.name

    @abstractmethod
    def var(self, name: str) -> Optional[str]:
        pass

    @abstractmethod
    def current_dir(self) -> PurePath:
        pass

    @abstractmethod
    def account_home(self) -> Optional[str]:
        """Home directory recorded for the current OS account, if any."""
        pass

    def path(self, value: Union[str, PurePath]) -> PurePath:
        """Build a path using this environment's separator and absoluteness rules."""
        return Path(value)


class OsEnv(Env):
    """Env backed by the running process."""

    platform = WINDOWS if os.name == WINDOWS else POSIX

    def var(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def current_dir(self) -> Path:
        return Path(os.getcwd())

    def account_home(self) -> Optional[str]:
        if self.platform == WINDOWS:
            return _known_folder_profile()
        return _passwd_home()

    def __repr__(self) -> str:
        return f"OsEnv(platform={self.platform!r})"


@dataclass(frozen=True)
class StaticEnv(Env):
    """
    Env built from an explicit snapshot.

    Paths come out as ``PureWindowsPath`` for "nt" and ``PurePosixPath`` for
    "posix" regardless of the host, so either platform resolves anywhere.

    Args:
        variables: Environment variables visible to the resolvers
        cwd: Working directory for relative overrides
        platform: "nt" or "posix"
        user_home: What the account record lookup returns (None for no record)
    """
    variables: Mapping[str, str] = field(default_factory=dict)
    cwd: Union[str, PurePath] = "/"
    platform: str = POSIX
    user_home: Optional[str] = None

    def var(self, name: str) -> Optional[str]:
        return self.variables.get(name)

    def current_dir(self) -> PurePath:
        return self.path(self.cwd)

    def account_home(self) -> Optional[str]:
        return self.user_home

    def path(self, value: Union[str, PurePath]) -> PurePath:
        flavor = PureWindowsPath if self.platform == WINDOWS else PurePosixPath
        return flavor(os.fspath(value))


def _passwd_home() -> Optional[str]:
    # Imported lazily: pwd does not exist on Windows.
    import pwd

    try:
        record = pwd.getpwuid(os.geteuid())
    except KeyError:
        logger.debug(f"No passwd record for euid {os.geteuid()}")
        return None
    return record.pw_dir or None


def _known_folder_profile() -> Optional[str]:
    """Ask the shell for FOLDERID_Profile via SHGetKnownFolderPath."""
    import ctypes
    from ctypes import wintypes

    class GUID(ctypes.Structure):
        _fields_ = [
            ("Data1", wintypes.DWORD),
            ("Data2", wintypes.WORD),
            ("Data3", wintypes.WORD),
            ("Data4", ctypes.c_ubyte * 8),
        ]

    # {5E6C858F-0E22-4760-9AFE-EA3317B67173}
    folder_id = GUID(
        0x5E6C858F, 0x0E22, 0x4760,
        (ctypes.c_ubyte * 8)(0x9A, 0xFE, 0xEA, 0x33, 0x17, 0xB6, 0x71, 0x73),
    )
    path_ptr = ctypes.c_wchar_p()
    hresult = ctypes.windll.shell32.SHGetKnownFolderPath(
        ctypes.byref(folder_id), 0, None, ctypes.byref(path_ptr)
    )
    try:
        if hresult != 0:
            logger.debug(f"SHGetKnownFolderPath failed with HRESULT {hresult:#x}")
            return None
        return path_ptr.value or None
    finally:
        ctypes.windll.ole32.CoTaskMemFree(path_ptr)


OS_ENV = OsEnv()
