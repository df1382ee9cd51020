"""
Obsidian Hugo - Mirror an Obsidian vault into a Hugo site

A small exporter that copies publishable Obsidian notes into a Hugo
content tree with support for:
- Publish filtering through "publish: web" frontmatter
- Wikilink and image reference conversion
- Incremental re-export of changed notes
- Watching the vault for changes
"""

from obsidian_hugo.core.models import (
    ChangeEvent,
    ChangeKind,
    ConfigurationError,
    ExportError,
    ExportResult,
    ExportStatus,
    ListValue,
    NoteContext,
    Scalar,
)
from obsidian_hugo.core.discovery import VaultDiscovery, is_publishable, parse_frontmatter
from obsidian_hugo.core.processor import ContentProcessor
from obsidian_hugo.core.exporter import Exporter, needs_export
from obsidian_hugo.core.watcher import WatchdogEventSource, WatchLoop
from obsidian_hugo.transforms.links import to_url

__version__ = "0.1.0"

__all__ = [
    "ChangeEvent",
    "ChangeKind",
    "ConfigurationError",
    "ExportError",
    "ExportResult",
    "ExportStatus",
    "ListValue",
    "NoteContext",
    "Scalar",
    "VaultDiscovery",
    "is_publishable",
    "parse_frontmatter",
    "ContentProcessor",
    "Exporter",
    "needs_export",
    "WatchdogEventSource",
    "WatchLoop",
    "to_url",
]
