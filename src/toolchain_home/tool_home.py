"""
Tool home directories derived from the user's home.

Each dependent tool keeps its state in one root directory. The root is the
value of the tool's override variable when that is set to a non-empty string,
otherwise ``<home>/<default subdir>``:

    CARGO_HOME  -> ~/.cargo
    RUSTUP_HOME -> ~/.rustup

An empty override counts as unset. A relative override is joined onto the
working directory, not onto the home directory. Nothing is created or checked
on disk, and nothing is cached: every call re-reads the environment.
"""

import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional, Union

from ._home import home_dir_with_env
from .env import OS_ENV, Env
from .exceptions import HomeDirectoryNotFound

logger = logging.getLogger(__name__)

PathLike = Union[str, PurePath]


@dataclass(frozen=True)
class ToolHomeConfig:
    """Override variable and default home subdirectory for one tool."""
    env_var: str
    default_subdir: str


CARGO = ToolHomeConfig(env_var="CARGO_HOME", default_subdir=".cargo")
RUSTUP = ToolHomeConfig(env_var="RUSTUP_HOME", default_subdir=".rustup")


def resolve_tool_home(
    config: ToolHomeConfig,
    env: Env,
    cwd: Optional[PathLike] = None
) -> PurePath:
    """
    Resolve a tool's home directory.

    Args:
        config: Which tool to resolve
        env: Environment to read variables and home from
        cwd: Working directory for a relative override. Defaults to
             ``env.current_dir()``, which is only read when needed.

    Returns:
        The override path (joined onto cwd if relative), or home/default_subdir

    Raises:
        HomeDirectoryNotFound: No override is set and no home directory exists
    """
    override = env.var(config.env_var)
    if override:
        path = env.path(override)
        if not path.is_absolute():
            base = env.path(cwd) if cwd is not None else env.current_dir()
            path = base / path
        logger.debug(f"{config.env_var} override in effect: {path}")
        return path

    home = home_dir_with_env(env)
    if home is None:
        raise HomeDirectoryNotFound(config.env_var, platform=env.platform)
    return home / config.default_subdir


def cargo_home() -> PurePath:
    return resolve_tool_home(CARGO, OS_ENV)


def cargo_home_with_cwd(cwd: PathLike) -> PurePath:
    return resolve_tool_home(CARGO, OS_ENV, cwd)


def cargo_home_with_env(env: Env) -> PurePath:
    return resolve_tool_home(CARGO, env)


def rustup_home() -> PurePath:
    return resolve_tool_home(RUSTUP, OS_ENV)


def rustup_home_with_cwd(cwd: PathLike) -> PurePath:
    return resolve_tool_home(RUSTUP, OS_ENV, cwd)


def rustup_home_with_env(env: Env) -> PurePath:
    return resolve_tool_home(RUSTUP, env)
