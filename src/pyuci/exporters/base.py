from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..model import UciConfig
from ..tree import Scalar

TYPE_KEY = ".type"
NAME_KEY = ".name"


def to_mapping(config: UciConfig) -> dict[str, dict[str, Any]]:
    """Return sections keyed by name or selector, in document order.

    Scalars map to strings and lists to lists of strings; the section type and
    name are stored under ``.type`` and ``.name``.
    """
    out: dict[str, dict[str, Any]] = {}
    for section in config.iter_sections():
        entry: dict[str, Any] = {TYPE_KEY: section.section_type}
        if section.name is not None:
            entry[NAME_KEY] = section.name
        for name, value in section.options.items():
            entry[name] = value.value if isinstance(value, Scalar) else list(value.values)
        key = config.section_name(section)
        if key in out:
            # duplicate name: the later section is keyed by its selector
            key = f"@{section.section_type}[{config.document.index_of(section)}]"
        out[key] = entry
    return out


class BaseExporter(ABC):
    """Abstract base exporter."""

    format: str = ""

    @abstractmethod
    def export(self, config: UciConfig) -> str:
        pass
