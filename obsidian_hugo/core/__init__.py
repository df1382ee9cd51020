"""Core components for Obsidian Hugo."""

from obsidian_hugo.core.models import (
    ChangeEvent,
    ChangeKind,
    ConfigurationError,
    ExportError,
    ExportResult,
    ExportStatus,
    ListValue,
    NoteContext,
    PropertyMap,
    PropertyValue,
    Scalar,
)
from obsidian_hugo.core.discovery import VaultDiscovery, is_publishable, parse_frontmatter
from obsidian_hugo.core.processor import ContentProcessor
from obsidian_hugo.core.exporter import Exporter, needs_export
from obsidian_hugo.core.watcher import WatchdogEventSource, WatchLoop

__all__ = [
    "ChangeEvent",
    "ChangeKind",
    "ConfigurationError",
    "ExportError",
    "ExportResult",
    "ExportStatus",
    "ListValue",
    "NoteContext",
    "PropertyMap",
    "PropertyValue",
    "Scalar",
    "VaultDiscovery",
    "is_publishable",
    "parse_frontmatter",
    "ContentProcessor",
    "Exporter",
    "needs_export",
    "WatchdogEventSource",
    "WatchLoop",
]
