from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir as _uc

__all__ = ["DEFAULT_CONFIG_DIR", "ENV_CONFIG_DIR", "config_dir", "package_path", "user_config_dir"]

DEFAULT_CONFIG_DIR = Path("/etc/config")
ENV_CONFIG_DIR = "PYUCI_CONFIG_DIR"

# ---------------------------------------------------------------------------
# Directory resolution
# ---------------------------------------------------------------------------

def user_config_dir(app_name: str = "pyuci") -> Path:
    return Path(_uc(appname=app_name)).resolve()


def config_dir(directory: str | Path | None = None) -> Path:
    """Return the directory holding UCI package files.

    Resolution order: *directory*, ``$PYUCI_CONFIG_DIR``, ``/etc/config`` when
    present, then the per-user config directory.
    """
    if directory:
        return Path(directory).expanduser().resolve()
    env = os.getenv(ENV_CONFIG_DIR)
    if env:
        return Path(env).expanduser().resolve()
    if DEFAULT_CONFIG_DIR.is_dir():
        return DEFAULT_CONFIG_DIR
    return user_config_dir()


def package_path(package: str, directory: str | Path | None = None) -> Path:
    """Return the file backing *package*; names may not escape the directory."""
    stripped = package.strip()
    if (
        not stripped
        or stripped != package
        or "/" in package
        or "\\" in package
        or package in (".", "..")
    ):
        raise ValueError(f"invalid package name: {package!r}")
    return config_dir(directory) / package
