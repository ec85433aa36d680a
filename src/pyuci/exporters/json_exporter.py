from __future__ import annotations

import json

from ..model import UciConfig
from . import register_exporter
from .base import BaseExporter, to_mapping


@register_exporter
class JsonExporter(BaseExporter):
    """JSON export; section order is preserved."""

    format = "json"

    def export(self, config: UciConfig) -> str:
        return json.dumps(to_mapping(config), indent=2, ensure_ascii=False) + "\n"
