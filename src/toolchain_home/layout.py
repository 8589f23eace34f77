"""Well-known locations inside the cargo home. Pure joins, nothing is created."""

import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional

from .env import OS_ENV, Env
from .tool_home import cargo_home_with_env

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CargoHomeLayout:
    """Directory layout rooted at a resolved cargo home."""
    root: PurePath

    @classmethod
    def from_env(cls, env: Optional[Env] = None) -> "CargoHomeLayout":
        """Resolve the cargo home (may raise HomeDirectoryNotFound) and wrap it."""
        root = cargo_home_with_env(env or OS_ENV)
        logger.debug(f"Cargo home layout rooted at {root}")
        return cls(root)

    @property
    def git_path(self) -> PurePath:
        return self.root / "git"

    @property
    def registry_index_path(self) -> PurePath:
        return self.root / "registry" / "index"

    @property
    def registry_cache_path(self) -> PurePath:
        return self.root / "registry" / "cache"

    @property
    def registry_source_path(self) -> PurePath:
        return self.root / "registry" / "src"

    @property
    def config_path(self) -> PurePath:
        return self.root / "config"

    @property
    def credentials_path(self) -> PurePath:
        return self.root / "credentials"
