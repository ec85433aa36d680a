from __future__ import annotations

import tomlkit

from ..model import UciConfig
from . import register_exporter
from .base import BaseExporter, to_mapping


@register_exporter
class TomlExporter(BaseExporter):
    """TOML export, one table per section."""

    format = "toml"

    def export(self, config: UciConfig) -> str:
        doc = tomlkit.document()
        for key, entry in to_mapping(config).items():
            table = tomlkit.table()
            for name, value in entry.items():
                if isinstance(value, list):
                    arr = tomlkit.array()
                    for item in value:
                        arr.append(item)
                    table[name] = arr
                else:
                    table[name] = value
            doc[key] = table
        return tomlkit.dumps(doc)
