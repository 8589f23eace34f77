from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Callable, Dict, Optional

from .env import OS_ENV, POSIX, WINDOWS, Env

logger = logging.getLogger(__name__)


def _non_empty(value: Optional[str]) -> Optional[str]:
    return value if value else None


def windows_home_strategy(env: Env) -> Optional[str]:
    """
    Profile directory of the current Windows account.

    Uses USERPROFILE, then the FOLDERID_Profile known folder. HOME is never
    read: POSIX emulation shells (MSYS, Cygwin, Git Bash) set it to their own
    directory, and the answer must not depend on the launching shell.
    """
    profile = _non_empty(env.var("USERPROFILE"))
    if profile is not None:
        logger.debug("Home directory taken from USERPROFILE")
        return profile
    logger.debug("USERPROFILE unset, asking for the profile known folder")
    return _non_empty(env.account_home())


def unix_home_strategy(env: Env) -> Optional[str]:
    """HOME if non-empty (verbatim, not checked for existence), else the passwd record."""
    home = _non_empty(env.var("HOME"))
    if home is not None:
        logger.debug("Home directory taken from HOME")
        return home
    logger.debug("HOME unset or empty, falling back to the passwd record")
    return _non_empty(env.account_home())


HomeStrategy = Callable[[Env], Optional[str]]

_STRATEGIES: Dict[str, HomeStrategy] = {
    WINDOWS: windows_home_strategy,
    POSIX: unix_home_strategy,
}


def home_dir_with_env(env: Env) -> Optional[PurePath]:
    """
    Determine the user's home directory from an explicit environment.

    Never consults tool override variables and never raises for a missing home:
    absence is returned as None.

    Args:
        env: Environment to read; its platform selects the strategy

    Returns:
        Home directory path, or None when none can be determined
    """
    try:
        strategy = _STRATEGIES[env.platform]
    except KeyError:
        raise ValueError(f"Unsupported platform {env.platform!r}") from None

    home = strategy(env)
    if home is None:
        logger.debug(f"No home directory found on platform {env.platform!r}")
        return None
    return env.path(home)


def home_dir() -> Optional[PurePath]:
    """Determine the current user's home directory from the running process."""
    return home_dir_with_env(OS_ENV)
