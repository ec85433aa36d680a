"""In-memory representation of a parsed UCI package."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

__all__ = ["ConfigDocument", "ListValues", "OptionValue", "Scalar", "Section"]


@dataclass(frozen=True)
class Scalar:
    """Value set by an ``option`` statement."""

    value: str

    @property
    def values(self) -> list[str]:
        return [self.value]


@dataclass
class ListValues:
    """Values accumulated by ``list`` statements, in appearance order."""

    values: list[str] = field(default_factory=list)


OptionValue = Union[Scalar, ListValues]


@dataclass
class Section:
    section_type: str
    name: str | None = None
    options: dict[str, OptionValue] = field(default_factory=dict)

    @property
    def anonymous(self) -> bool:
        return self.name is None

    def get(self, option: str) -> OptionValue | None:
        return self.options.get(option)

    def set_scalar(self, option: str, value: str) -> None:
        # Replaces a list under the same key; the key keeps its position.
        self.options[option] = Scalar(value)

    def set_list(self, option: str, values: Iterable[str]) -> None:
        self.options[option] = ListValues(list(values))

    def append_list(self, option: str, value: str) -> None:
        current = self.options.get(option)
        if isinstance(current, ListValues):
            current.values.append(value)
        else:
            self.options[option] = ListValues([value])

    def remove(self, option: str) -> bool:
        return self.options.pop(option, None) is not None


@dataclass
class ConfigDocument:
    """Ordered sections of one package.

    Section names are not unique; :meth:`find` returns the first match.
    """

    package: str = ""
    sections: list[Section] = field(default_factory=list)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def add(self, section: Section) -> Section:
        self.sections.append(section)
        return section

    def find(self, name: str) -> Section | None:
        for section in self.sections:
            if section.name is not None and section.name == name:
                return section
        return None

    def of_type(self, section_type: str) -> list[Section]:
        return [s for s in self.sections if s.section_type == section_type]

    def index_of(self, section: Section) -> int:
        """Return the position of *section* among sections of its type."""
        for idx, candidate in enumerate(self.of_type(section.section_type)):
            if candidate is section:
                return idx
        raise ValueError("section does not belong to this document")

    def remove(self, section: Section) -> None:
        for idx, candidate in enumerate(self.sections):
            if candidate is section:
                del self.sections[idx]
                return
        raise ValueError("section does not belong to this document")
