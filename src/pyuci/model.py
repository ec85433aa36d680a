from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Sequence

from .errors import InvalidSelectorError, NotFoundError
from .parser import parse
from .serializer import serialize
from .tree import ConfigDocument, Section

__all__ = ["UciConfig", "is_bool_value", "parse_selector"]

_SELECTOR_RX = re.compile(r"@([^@\[\]]+)\[(-?\d+)\]")

_TRUE_VALUES = frozenset({"1", "on", "true", "yes", "enabled"})


def is_bool_value(value: str) -> bool:
    """Return ``True`` for the UCI spellings of a true boolean."""
    return value in _TRUE_VALUES


def parse_selector(selector: str) -> tuple[str, int]:
    """Split an ``@type[index]`` selector into ``(type, index)``."""
    match = _SELECTOR_RX.fullmatch(selector)
    if match is None:
        raise InvalidSelectorError(
            f"invalid section selector {selector!r}: expected '@type[index]'"
        )
    return match.group(1), int(match.group(2))


class UciConfig:
    """Query and mutation API over one parsed package.

    Sections are addressed by name or, for anonymous ones, by an
    ``@type[index]`` selector.  Lookups that find nothing raise
    :class:`~pyuci.errors.NotFoundError`.
    """

    def __init__(self, package: str, document: ConfigDocument | None = None) -> None:
        self.document = document if document is not None else ConfigDocument()
        self.document.package = package
        self.modified = False

    @classmethod
    def from_text(cls, package: str, text: str) -> UciConfig:
        return cls(package, parse(text, package))

    def __repr__(self) -> str:
        return f"UciConfig({self.package!r}, sections={len(self.document)})"

    # ------------------------------------------------------------------
    # Package
    # ------------------------------------------------------------------

    @property
    def package(self) -> str:
        return self.document.package

    def get_package(self) -> str:
        return self.document.package

    def set_package(self, package: str) -> None:
        self.document.package = package
        self.modified = True

    def to_text(self) -> str:
        return serialize(self.document)

    # ------------------------------------------------------------------
    # Section resolution
    # ------------------------------------------------------------------

    def section_name(self, section: Section) -> str:
        """Return *section*'s name, or its selector when anonymous."""
        if section.name is not None:
            return section.name
        return f"@{section.section_type}[{self.document.index_of(section)}]"

    def _describe(self, section: Section) -> tuple[str, str]:
        return section.section_type, self.section_name(section)

    def _lookup(self, name: str) -> Section | None:
        if not name.startswith("@"):
            return self.document.find(name)
        sec_type, index = parse_selector(name)
        matches = self.document.of_type(sec_type)
        if index < 0:
            index += len(matches)
        if 0 <= index < len(matches):
            return matches[index]
        return None

    def resolve(self, name: str) -> Section:
        section = self._lookup(name)
        if section is None:
            raise NotFoundError(f"section {name!r} not found")
        return section

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_section(self, name: str) -> tuple[str, str]:
        """Return ``(type, name)`` of the first section matching *name*."""
        return self._describe(self.resolve(name))

    def get_option(self, section: str, option: str) -> tuple[str, list[str]]:
        """Return ``(option, values)``; a scalar comes back as one value."""
        value = self.resolve(section).get(option)
        if value is None:
            raise NotFoundError(f"option {section}.{option} not found")
        return option, list(value.values)

    def get_option_first(self, section: str, option: str) -> tuple[str, str | None]:
        name, values = self.get_option(section, option)
        return name, values[0] if values else None

    def get_option_last(self, section: str, option: str) -> tuple[str, str | None]:
        name, values = self.get_option(section, option)
        return name, values[-1] if values else None

    def get_bool(self, section: str, option: str) -> bool:
        _, value = self.get_option_last(section, option)
        return value is not None and is_bool_value(value)

    def get_all_options(self, section: str) -> list[tuple[str, list[str]]]:
        sec = self.resolve(section)
        return [(name, list(value.values)) for name, value in sec.options.items()]

    def get_all_sections(self) -> list[tuple[str, str]]:
        return [self._describe(s) for s in self.document]

    def get_all(self, section_type: str) -> list[tuple[str, str]]:
        return [self._describe(s) for s in self.document.of_type(section_type)]

    def get_section_first(self, section_type: str) -> tuple[str, str] | None:
        matches = self.document.of_type(section_type)
        return self._describe(matches[0]) if matches else None

    def get_section_last(self, section_type: str) -> tuple[str, str] | None:
        matches = self.document.of_type(section_type)
        return self._describe(matches[-1]) if matches else None

    def iter_sections(self, section_type: str | None = None) -> Iterator[Section]:
        for section in list(self.document):
            if section_type is None or section.section_type == section_type:
                yield section

    def for_each(self, section_type: str, func: Callable[[Section], None]) -> None:
        for section in self.iter_sections(section_type):
            func(section)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_section(self, section_type: str, name: str | None = None) -> str:
        """Add a section and return its name or anonymous selector.

        A named section that already exists keeps its options when the type
        matches; otherwise it is replaced by an empty section of the new type.
        """
        if not section_type:
            raise ValueError("section type may not be empty")
        if name and name.startswith("@"):
            raise InvalidSelectorError(f"section name {name!r} may not start with '@'")
        if name:
            existing = self.document.find(name)
            if existing is not None:
                if existing.section_type == section_type:
                    return name
                self.document.remove(existing)
            self.document.add(Section(section_type, name))
            self.modified = True
            return name
        section = self.document.add(Section(section_type))
        self.modified = True
        return self.section_name(section)

    def set_option(self, section: str, option: str, value: str | Sequence[str]) -> None:
        """Set *option* in *section*.

        A string, or a sequence holding one value, sets a scalar; a longer
        sequence replaces the option with a list.
        """
        sec = self.resolve(section)
        values = [value] if isinstance(value, str) else list(value)
        if not values:
            raise ValueError(f"no value given for {section}.{option}")
        if len(values) == 1:
            sec.set_scalar(option, values[0])
        else:
            sec.set_list(option, values)
        self.modified = True

    def add_list(self, section: str, option: str, value: str) -> None:
        """Append *value* to list *option*, replacing a scalar held there."""
        self.resolve(section).append_list(option, value)
        self.modified = True

    def del_option(self, section: str, option: str) -> bool:
        sec = self._lookup(section)
        if sec is None or not sec.remove(option):
            return False
        self.modified = True
        return True

    def del_section(self, section: str) -> bool:
        sec = self._lookup(section)
        if sec is None:
            return False
        self.document.remove(sec)
        self.modified = True
        return True

    def del_all(self, section_type: str) -> int:
        before = len(self.document.sections)
        self.document.sections = [
            s for s in self.document.sections if s.section_type != section_type
        ]
        removed = before - len(self.document.sections)
        if removed:
            self.modified = True
        return removed

