"""
toolchain-home: shell-independent home and tool-home directory resolution.

Resolves the current user's home directory the same way no matter which shell
launched the process, and derives the CARGO_HOME / RUSTUP_HOME roots from it.
"""

__version__ = "0.1.0"

from ._home import (
    home_dir,
    home_dir_with_env,
    unix_home_strategy,
    windows_home_strategy,
)
from .env import Env, OsEnv, StaticEnv, OS_ENV
from .tool_home import (
    CARGO,
    RUSTUP,
    ToolHomeConfig,
    resolve_tool_home,
    cargo_home,
    cargo_home_with_cwd,
    cargo_home_with_env,
    rustup_home,
    rustup_home_with_cwd,
    rustup_home_with_env,
)
from .layout import CargoHomeLayout
from .exceptions import HomeResolutionError, HomeDirectoryNotFound

__all__ = [
    # Home directory
    "home_dir",
    "home_dir_with_env",
    "unix_home_strategy",
    "windows_home_strategy",
    # Environment
    "Env",
    "OsEnv",
    "StaticEnv",
    "OS_ENV",
    # Tool homes
    "CARGO",
    "RUSTUP",
    "ToolHomeConfig",
    "resolve_tool_home",
    "cargo_home",
    "cargo_home_with_cwd",
    "cargo_home_with_env",
    "rustup_home",
    "rustup_home_with_cwd",
    "rustup_home_with_env",
    # Layout
    "CargoHomeLayout",
    # Exceptions
    "HomeResolutionError",
    "HomeDirectoryNotFound",
]
