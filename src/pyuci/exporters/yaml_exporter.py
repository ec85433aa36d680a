from __future__ import annotations

from ..errors import ExportError
from ..model import UciConfig
from . import register_exporter
from .base import BaseExporter, to_mapping


@register_exporter
class YamlExporter(BaseExporter):
    """YAML export."""

    format = "yaml"

    def _require_yaml(self):
        try:
            import yaml  # type: ignore
        except ModuleNotFoundError as exc:
            raise ExportError("PyYAML is required for YAML export") from exc
        return yaml

    def export(self, config: UciConfig) -> str:
        yaml = self._require_yaml()
        return yaml.safe_dump(
            to_mapping(config), sort_keys=False, allow_unicode=True, default_flow_style=False
        )
