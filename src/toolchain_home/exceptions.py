"""Exceptions for toolchain-home."""

from typing import Optional


class HomeResolutionError(Exception):
    """Base exception for home-directory resolution errors."""
    pass


class HomeDirectoryNotFound(HomeResolutionError):
    """
    Raised when a tool home has no override and no home directory was found.

    Attributes:
        env_var: Name of the override variable that was checked (e.g. CARGO_HOME)
        platform: "nt" or "posix"; picks which home source the message names
    """

    def __init__(
        self,
        env_var: Optional[str] = None,
        message: Optional[str] = None,
        platform: str = "posix"
    ):
        self.env_var = env_var
        self.platform = platform
        if message is None:
            if platform == "nt":
                message = (
                    "couldn't find your home directory. This probably means that "
                    "USERPROFILE was not set and the profile folder is unavailable."
                )
            else:
                message = (
                    "couldn't find your home directory. "
                    "This probably means that $HOME was not set."
                )
            if env_var:
                message += f" Set {env_var} to choose a location explicitly."
        super().__init__(message)
