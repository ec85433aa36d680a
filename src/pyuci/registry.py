from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from threading import RLock

from .errors import UciError
from .model import UciConfig
from .paths import config_dir
from .storage import load_config, save_config

__all__ = ["UciRegistry"]

logger = logging.getLogger(__name__)


class UciRegistry:
    """Caller-owned cache of packages loaded from one directory.

    Packages stay cached until :meth:`unload`, :meth:`clear` or
    :meth:`revert`; :meth:`load` with ``force_reload=True`` re-reads the file.
    """

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = config_dir(directory)
        self._configs: dict[str, UciConfig] = {}
        self._lock = RLock()

    def __contains__(self, package: str) -> bool:
        with self._lock:
            return package in self._configs

    def packages(self) -> list[str]:
        with self._lock:
            return list(self._configs)

    def load(self, package: str, *, force_reload: bool = False) -> UciConfig:
        with self._lock:
            config = self._configs.get(package)
            if config is None or force_reload:
                config = load_config(package, self.directory)
                self._configs[package] = config
                logger.debug("cached package %s", package)
            return config

    def get(self, package: str) -> UciConfig | None:
        with self._lock:
            return self._configs.get(package)

    def add(self, config: UciConfig) -> None:
        with self._lock:
            self._configs[config.package] = config

    def unload(self, package: str) -> bool:
        with self._lock:
            return self._configs.pop(package, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._configs.clear()

    def commit(self) -> list[str]:
        """Save every modified package and return their names."""
        saved: list[str] = []
        with self._lock:
            for name, config in self._configs.items():
                if not config.modified:
                    continue
                save_config(config, self.directory)
                saved.append(name)
        return saved

    def revert(self, packages: Iterable[str] | None = None) -> None:
        """Drop local changes to *packages* (all when ``None``) and reload them."""
        with self._lock:
            names = list(self._configs) if packages is None else list(packages)
            for name in names:
                self._configs.pop(name, None)
                try:
                    self._configs[name] = load_config(name, self.directory)
                except UciError as exc:
                    logger.warning("Failed to reload package %s: %s", name, exc)
