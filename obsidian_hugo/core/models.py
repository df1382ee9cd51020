"""Data models for Obsidian Hugo."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union


class ExportError(Exception):
    """Base class for errors raised by the exporter."""


class ConfigurationError(ExportError):
    """Source or destination roots cannot be resolved."""


@dataclass(frozen=True)
class Scalar:
    """A single-string front matter value."""
    value: str


@dataclass(frozen=True)
class ListValue:
    """An ordered list of strings from front matter."""
    items: Tuple[str, ...] = ()

    def append(self, item: str) -> "ListValue":
        """Return a new list with item added at the end."""
        return ListValue(self.items + (item,))


PropertyValue = Union[Scalar, ListValue]
PropertyMap = Dict[str, PropertyValue]


@dataclass
class NoteContext:
    """Cheapest possible note reference - just location.

    Content is read fresh on every export attempt, never cached.
    """
    path: Path
    relative_path: Path

    def read_lines(self) -> List[str]:
        """Read the file and split it into lines without terminators."""
        with open(self.path, 'r', encoding='utf-8', errors='replace') as f:
            return [line.rstrip('\r\n') for line in f]


class ExportStatus(Enum):
    """Terminal state of a single export attempt."""
    NO_FRONTMATTER = "no-frontmatter"
    NOT_PUBLISHABLE = "not-publishable"
    UP_TO_DATE = "up-to-date"
    EXPORTED = "exported"


@dataclass
class ExportResult:
    """Result of exporting one note."""
    source: Path
    destination: Path
    status: ExportStatus
    copied_assets: List[Path] = field(default_factory=list)

    @property
    def exported(self) -> bool:
        return self.status is ExportStatus.EXPORTED


class ChangeKind(Enum):
    """Kinds of filesystem change notifications."""
    MODIFIED = "modified"
    CREATED = "created"
    DELETED = "deleted"
    MOVED = "moved"


@dataclass(frozen=True)
class ChangeEvent:
    """A change notification for one or more paths."""
    kind: ChangeKind
    paths: Tuple[Path, ...]

    @classmethod
    def modified(cls, *paths: Union[str, Path]) -> "ChangeEvent":
        return cls(ChangeKind.MODIFIED, tuple(Path(p) for p in paths))


def get_scalar(props: PropertyMap, key: str) -> Optional[str]:
    """Return the scalar value for key, or None if missing or a list."""
    value = props.get(key)
    if isinstance(value, Scalar):
        return value.value
    return None
