"""Exporter registry and factory."""
from __future__ import annotations

from .base import BaseExporter

_REGISTRY: dict[str, type[BaseExporter]] = {}

def register_exporter(exporter: type[BaseExporter]) -> type[BaseExporter]:
    """Register an exporter class and return it for decorator use."""
    _REGISTRY[exporter.format] = exporter
    return exporter

def get_exporter(fmt: str) -> BaseExporter:
    exporter_cls = _REGISTRY.get(fmt.lower())
    if exporter_cls is None:
        raise ValueError(f"No exporter for {fmt}")
    return exporter_cls()

def available_formats() -> list[str]:
    return sorted(_REGISTRY)

# register default exporters
from . import json_exporter, toml_exporter, uci_exporter, yaml_exporter  # noqa: F401,E402
