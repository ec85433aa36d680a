from __future__ import annotations

from ..model import UciConfig
from . import register_exporter
from .base import BaseExporter


@register_exporter
class UciExporter(BaseExporter):
    format = "uci"

    def export(self, config: UciConfig) -> str:
        return config.to_text()
