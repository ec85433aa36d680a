"""Render a :class:`~pyuci.tree.ConfigDocument` as canonical UCI text."""
from __future__ import annotations

import re

from .tree import ConfigDocument, ListValues, Scalar, Section

__all__ = ["quote", "serialize", "serialize_section"]

_BARE_RX = re.compile(r"[A-Za-z0-9_.:@/+-]+")


def quote(value: str) -> str:
    """Return *value* single-quoted, escaping backslashes and quotes."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _word(value: str) -> str:
    # Section types and option names stay bare unless they would not lex back.
    return value if _BARE_RX.fullmatch(value) else quote(value)


def serialize_section(section: Section) -> list[str]:
    header = f"config {_word(section.section_type)}"
    if section.name is not None:
        header += f" {quote(section.name)}"
    lines = [header]
    for name, value in section.options.items():
        if isinstance(value, Scalar):
            lines.append(f"\toption {_word(name)} {quote(value.value)}")
        elif isinstance(value, ListValues):
            lines.extend(f"\tlist {_word(name)} {quote(v)}" for v in value.values)
    return lines


def serialize(document: ConfigDocument) -> str:
    """Return UCI text for *document*; sections are separated by a blank line."""
    lines: list[str] = []
    for section in document.sections:
        if lines:
            lines.append("")
        lines.extend(serialize_section(section))
    return "\n".join(lines) + "\n" if lines else ""
