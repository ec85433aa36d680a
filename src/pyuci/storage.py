from __future__ import annotations

import logging
from pathlib import Path

from .errors import UciIOError
from .model import UciConfig
from .paths import package_path

__all__ = ["load_config", "read_text", "save_config", "write_text"]

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise UciIOError(f"cannot read {path}: {exc}") from exc


def write_text(path: Path, text: str) -> None:
    """Write *text* to *path* through a temporary file and an atomic replace."""
    path = Path(path)
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8") as fh:
            fh.write(text)
        tmp.replace(path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise UciIOError(f"cannot write {path}: {exc}") from exc


def load_config(package: str, directory: str | Path | None = None) -> UciConfig:
    """Read ``<directory>/<package>`` and parse it into a :class:`UciConfig`."""
    path = package_path(package, directory)
    config = UciConfig.from_text(package, read_text(path))
    logger.debug("loaded %s from %s", package, path)
    return config


def save_config(config: UciConfig, directory: str | Path | None = None) -> Path:
    path = package_path(config.package, directory)
    write_text(path, config.to_text())
    config.modified = False
    logger.debug("saved %s to %s", config.package, path)
    return path
