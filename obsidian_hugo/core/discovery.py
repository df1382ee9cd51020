"""Vault discovery module for finding notes and reading their frontmatter."""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from obsidian_hugo.core.models import ListValue, PropertyMap, PropertyValue, Scalar, get_scalar

FRONTMATTER_DELIMITER = '---'
PUBLISH_KEY = 'publish'
PUBLISH_TARGET = 'web'
NOTE_EXTENSION = '.md'
QUOTE_CHARS = '"\''


class VaultDiscovery:
    """Discovers Markdown notes in an Obsidian vault."""

    def __init__(self, vault_path: Path):
        """Initialize VaultDiscovery.

        Args:
            vault_path: Path to the Obsidian vault root
        """
        self.vault_path = Path(vault_path)

    def __iter__(self) -> Iterator[Path]:
        return self.iter_notes()

    def iter_notes(self) -> Iterator[Path]:
        """Walk the vault depth-first and yield notes.

        Entries whose name starts with a dot are skipped, as are their
        contents. Order follows the filesystem, it is not sorted. Each
        call starts a fresh walk.

        Yields:
            Note paths relative to the vault root
        """
        if not self.vault_path.is_dir():
            return
        yield from self._walk(Path(''))

    def _walk(self, sub_dir: Path) -> Iterator[Path]:
        with os.scandir(self.vault_path / sub_dir) as entries:
            children = list(entries)

        for entry in children:
            if is_hidden(entry.name):
                continue
            sub_path = sub_dir / entry.name
            if entry.is_dir():
                yield from self._walk(sub_path)
            elif entry.is_file() and is_note(sub_path):
                yield sub_path


def is_hidden(name: str) -> bool:
    return name.startswith('.')


def is_note(path: Path) -> bool:
    return Path(path).suffix == NOTE_EXTENSION


def is_publishable(props: PropertyMap) -> bool:
    """Check if a note should be exported.

    Only an exact scalar "publish: web" qualifies. Lists, other values
    and differently cased values do not.

    Args:
        props: Parsed frontmatter of the note

    Returns:
        True if the note is publishable
    """
    return get_scalar(props, PUBLISH_KEY) == PUBLISH_TARGET


def parse_frontmatter(lines: Sequence[str]) -> Tuple[Optional[PropertyMap], int]:
    """Parse the leading frontmatter block of a note.

    Supports "key: value", "key: [a, b]" and a "key:" line followed by
    "- item" lines. Anything else inside the block is ignored. A block
    that is never closed is still returned.

    Args:
        lines: Lines of the note without line terminators

    Returns:
        Tuple of (properties or None, index of the first body line). The
        properties are None when there is no block or it holds no keys.
    """
    index = 0
    while index < len(lines) and not lines[index].strip():
        index += 1

    if index >= len(lines) or lines[index].strip() != FRONTMATTER_DELIMITER:
        return None, index
    index += 1

    props: PropertyMap = {}
    list_key: Optional[str] = None
    while index < len(lines):
        line = lines[index]
        index += 1
        if line.strip() == FRONTMATTER_DELIMITER:
            break
        list_key = _parse_line(line, props, list_key)

    return (props or None), index


def _parse_line(line: str, props: PropertyMap, list_key: Optional[str]) -> Optional[str]:
    """Classify one frontmatter line and record its value.

    Args:
        line: The line to classify
        props: Properties parsed so far, updated in place
        list_key: Key of the list currently receiving "- item" lines

    Returns:
        The list key for the next line
    """
    if ':' in line:
        key, _, value = line.partition(':')
        key = key.strip()
        value = value.strip()
        if not key:
            return None
        if not value:
            props[key] = ListValue()
            return key
        props[key] = _parse_value(value)
        return None

    if list_key is None:
        return list_key

    prefix, dash, item = line.partition('-')
    item = item.strip()
    if dash and not prefix.strip() and item:
        current = props.get(list_key)
        if isinstance(current, ListValue):
            props[list_key] = current.append(item)
    return list_key


def _parse_value(value: str) -> PropertyValue:
    """Parse an inline value, "[a, b]" becomes a list.

    Brackets inside the list, or an unbalanced quote, make the value a
    plain scalar.
    """
    if not (value.startswith('[') and value.endswith(']')):
        return Scalar(value)

    inner = value[1:-1]
    if '[' in inner or ']' in inner or any(inner.count(q) % 2 for q in QUOTE_CHARS):
        return Scalar(value)

    items: List[str] = []
    for raw in inner.split(','):
        item = raw.strip().strip(QUOTE_CHARS)
        if item:
            items.append(item)
    return ListValue(tuple(items))
